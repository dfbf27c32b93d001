"""Wager dispatcher — maps a wager variant to its format's settlement function.

`player_amounts` turns every format into the same shape (player id -> signed
amount) so the aggregator can sum wagers without knowing their rules.
"""

from src.gw_course.domain.models import TeeBox
from src.gw_scoring.domain.scores import ScoreTable
from src.gw_wagers.domain.formats.alabama import settle_alabama
from src.gw_wagers.domain.formats.do_da import settle_do_da
from src.gw_wagers.domain.formats.four_ball import settle_four_ball
from src.gw_wagers.domain.formats.individual import settle_individual_match
from src.gw_wagers.domain.formats.putting import putting_totals
from src.gw_wagers.domain.formats.skins import settle_skins
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


def individual_amounts(
    bet: IndividualMatchBet, scores: ScoreTable, tee_box: TeeBox
) -> dict[str, float]:
    winnings = settle_individual_match(bet, scores, tee_box).total
    return {bet.player1_id: winnings, bet.player2_id: -winnings}


def four_ball_amounts(
    bet: FourBallMatchBet, scores: ScoreTable, tee_box: TeeBox
) -> dict[str, float]:
    """Each partner carries half of the team result."""
    share = settle_four_ball(bet, scores, tee_box).total / 2
    amounts: dict[str, float] = {}
    for player_id in bet.team1:
        amounts[player_id] = amounts.get(player_id, 0.0) + share
    for player_id in bet.team2:
        amounts[player_id] = amounts.get(player_id, 0.0) - share
    return amounts


def player_amounts(wager: Wager, scores: ScoreTable, tee_box: TeeBox) -> dict[str, float]:
    """Evaluate one score-derived wager. Pure: same inputs, same amounts."""
    if isinstance(wager, IndividualMatchBet):
        return individual_amounts(wager, scores, tee_box)
    if isinstance(wager, FourBallMatchBet):
        return four_ball_amounts(wager, scores, tee_box)
    if isinstance(wager, AlabamaBet):
        return settle_alabama(wager, scores, tee_box)
    if isinstance(wager, DoDaBet):
        return settle_do_da(wager, scores).amounts
    if isinstance(wager, SkinsBet):
        return settle_skins(wager, scores, tee_box).amounts
    return side_bet_amounts(wager)


def side_bet_amounts(wager: Wager) -> dict[str, float]:
    """Side games keep their own running state and never read the score table."""
    if isinstance(wager, PuttingLedgerBet):
        return putting_totals(wager)
    if isinstance(wager, CircusBet):
        # rules not defined yet, settles flat
        return {player_id: 0.0 for player_id in wager.players}
    raise TypeError(f"{type(wager).__name__} is settled from scores, not as a side bet")
