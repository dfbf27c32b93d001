"""Do-Da's: chip-in side pool paid on every hole made in exactly two strokes."""

from dataclasses import dataclass

from src.gw_common.money import split_evenly
from src.gw_scoring.domain.scores import ScoreTable, player_strokes
from src.gw_wagers.domain.models import DoDaBet

DO_DA_STROKES = 2


@dataclass(frozen=True)
class DoDaResult:
    amounts: dict[str, float]
    do_das: dict[str, int]
    value_per_do_da: float
    unclaimed_pot: float    # pool mode with no Do-Da: entries are held, not paid out

    @property
    def total_do_das(self) -> int:
        return sum(self.do_das.values())


def count_do_das(scores: ScoreTable, player_id: str) -> int:
    return sum(1 for strokes in player_strokes(scores, player_id) if strokes == DO_DA_STROKES)


def settle_do_da(bet: DoDaBet, scores: ScoreTable) -> DoDaResult:
    players = list(dict.fromkeys(bet.players))
    do_das = {player_id: count_do_das(scores, player_id) for player_id in players}
    total = sum(do_das.values())
    field_size = len(players)

    if bet.is_pool:
        pot = bet.amount * field_size
        value = split_evenly(pot, total)
        amounts = {
            player_id: -bet.amount + value * count for player_id, count in do_das.items()
        }
        return DoDaResult(
            amounts=amounts,
            do_das=do_das,
            value_per_do_da=value,
            unclaimed_pot=pot if total == 0 else 0.0,
        )

    # Per Do-Da: the maker collects the stake from each of the other players.
    # Net for a player = stake * (field * own - total).
    amounts = {
        player_id: bet.amount * (field_size * count - total)
        for player_id, count in do_das.items()
    }
    return DoDaResult(
        amounts=amounts,
        do_das=do_das,
        value_per_do_da=bet.amount * (field_size - 1),
        unclaimed_pot=0.0,
    )
