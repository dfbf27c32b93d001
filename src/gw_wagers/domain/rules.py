"""Setup checks run before a wager joins the collection.

Each check raises InvalidWagerError / PlayerNotFoundError; evaluation code
assumes wagers that passed them.
"""

from collections.abc import Container, Sequence

from src.gw_common.errors import InvalidWagerError, PlayerNotFoundError
from src.gw_common.money import validate_stake
from src.gw_wagers.domain.models import (
    AlabamaBet,
    CircusBet,
    DoDaBet,
    FourBallMatchBet,
    IndividualMatchBet,
    PuttingLedgerBet,
    SkinsBet,
    Wager,
)

MIN_POOL_PLAYERS = 2
FOUR_BALL_TEAM_SIZE = 2


def check_stakes(**stakes: float) -> None:
    for name, amount in stakes.items():
        try:
            validate_stake(amount, name)
        except ValueError as exc:
            raise InvalidWagerError(str(exc)) from exc


def check_distinct(player_ids: Sequence[str], what: str) -> None:
    if len(set(player_ids)) != len(player_ids):
        raise InvalidWagerError(f"{what} lists the same player twice")


def check_roster(player_ids: Sequence[str], roster: Container[str]) -> None:
    for player_id in player_ids:
        if player_id not in roster:
            raise PlayerNotFoundError(player_id)


def _check_individual(bet: IndividualMatchBet) -> None:
    if bet.player1_id == bet.player2_id:
        raise InvalidWagerError("an individual match needs two different players")
    check_stakes(per_hole_amount=bet.per_hole_amount, per_birdie_amount=bet.per_birdie_amount)


def _check_four_ball(bet: FourBallMatchBet) -> None:
    for team in (bet.team1, bet.team2):
        if len(team) != FOUR_BALL_TEAM_SIZE:
            raise InvalidWagerError(
                f"four-ball teams need {FOUR_BALL_TEAM_SIZE} players, got {len(team)}"
            )
    check_distinct(bet.participant_ids(), "four-ball match")
    check_stakes(per_hole_amount=bet.per_hole_amount, per_birdie_amount=bet.per_birdie_amount)


def _check_alabama(bet: AlabamaBet) -> None:
    if len(bet.teams) < 2 or any(not team for team in bet.teams):
        raise InvalidWagerError("Alabama needs at least two teams, none of them empty")
    if bet.swing_man_id is not None:
        index = bet.swing_man_team_index
        if index is None or not 0 <= index < len(bet.teams):
            raise InvalidWagerError(f"swing man team index {index} is not a team")
    if bet.counting_scores < 1:
        raise InvalidWagerError("counting_scores must be >= 1")
    check_distinct(bet.participant_ids(), "Alabama")
    check_stakes(
        front_nine_amount=bet.front_nine_amount,
        back_nine_amount=bet.back_nine_amount,
        low_ball_amount=bet.low_ball_amount,
        per_birdie_amount=bet.per_birdie_amount,
    )


def _check_pool(players: Sequence[str], amount: float, what: str) -> None:
    if len(set(players)) < MIN_POOL_PLAYERS:
        raise InvalidWagerError(f"{what} needs at least {MIN_POOL_PLAYERS} players")
    check_distinct(players, what)
    check_stakes(amount=amount)


def check_wager(wager: Wager, roster: Container[str]) -> None:
    """Raise if the wager cannot be settled as configured."""
    if isinstance(wager, IndividualMatchBet):
        _check_individual(wager)
    elif isinstance(wager, FourBallMatchBet):
        _check_four_ball(wager)
    elif isinstance(wager, AlabamaBet):
        _check_alabama(wager)
    elif isinstance(wager, DoDaBet):
        _check_pool(wager.players, wager.amount, "Do-Da")
    elif isinstance(wager, SkinsBet):
        _check_pool(wager.players, wager.amount, "skins")
    elif isinstance(wager, PuttingLedgerBet):
        _check_pool(wager.players, wager.amount, "putting ledger")
    elif isinstance(wager, CircusBet):
        check_stakes(amount=wager.amount)
    check_roster(wager.participant_ids(), roster)
