"""Skins: one pot, split by the number of holes won outright.

A hole only counts once every player has a score on it; an "X" plays as
par+4. A tie for low on a hole means no skin. If nobody wins a skin the
entries are handed back so the game always nets to zero.
"""

from dataclasses import dataclass

from src.gw_common.money import split_evenly
from src.gw_course.domain.models import HOLES_PER_ROUND, TeeBox
from src.gw_scoring.domain.scores import ScoreTable, player_card, skins_strokes
from src.gw_wagers.domain.models import SkinsBet


@dataclass(frozen=True)
class SkinsResult:
    amounts: dict[str, float]
    winners_by_hole: dict[int, str]   # hole number -> player id
    value_per_skin: float

    def holes_won(self, player_id: str) -> list[int]:
        return sorted(hole for hole, winner in self.winners_by_hole.items() if winner == player_id)


def hole_winner(hole_scores: dict[str, int]) -> str | None:
    """Sole owner of the strict low score, or None on a tie."""
    low = min(hole_scores.values())
    leaders = [player_id for player_id, strokes in hole_scores.items() if strokes == low]
    return leaders[0] if len(leaders) == 1 else None


def settle_skins(bet: SkinsBet, scores: ScoreTable, tee_box: TeeBox) -> SkinsResult:
    players = list(dict.fromkeys(bet.players))
    cards = {player_id: player_card(scores, player_id) for player_id in players}

    winners_by_hole: dict[int, str] = {}
    for index in range(HOLES_PER_ROUND):
        par = tee_box.par(index)
        hole_scores: dict[str, int] = {}
        for player_id, card in cards.items():
            strokes = skins_strokes(card[index], par)
            if strokes is not None:
                hole_scores[player_id] = strokes
        if not players or len(hole_scores) != len(players):
            continue
        winner = hole_winner(hole_scores)
        if winner is not None:
            winners_by_hole[index + 1] = winner

    if not winners_by_hole:
        return SkinsResult(
            amounts={player_id: 0.0 for player_id in players},
            winners_by_hole={},
            value_per_skin=0.0,
        )

    pot = bet.amount * len(players)
    value = split_evenly(pot, len(winners_by_hole))
    amounts = {player_id: -bet.amount for player_id in players}
    for winner in winners_by_hole.values():
        amounts[winner] += value
    return SkinsResult(amounts=amounts, winners_by_hole=winners_by_hole, value_per_skin=value)
