"""Four-ball (better ball) match between two teams of two.

Positive amounts favor team 1. The press flag is carried on the wager but
never changes the result; the nines are simply added together.
"""

from dataclasses import dataclass

from src.gw_course.domain.models import HOLES_PER_NINE, HOLES_PER_ROUND, TeeBox
from src.gw_scoring.domain.scores import ScoreTable, is_birdie, player_strokes
from src.gw_wagers.domain.formats.individual import hole_amount
from src.gw_wagers.domain.models import FourBallMatchBet


@dataclass(frozen=True)
class FourBallResult:
    front: float
    back: float
    birdie_amount: float
    team1_birdies: int
    team2_birdies: int

    @property
    def total(self) -> float:
        return self.front + self.back + self.birdie_amount


def best_ball(strokes: list[int | None]) -> int | None:
    present = [s for s in strokes if s is not None]
    return min(present) if present else None


def team_best_balls(scores: ScoreTable, team: list[str]) -> list[int | None]:
    cards = [player_strokes(scores, player_id) for player_id in team]
    return [best_ball([card[i] for card in cards]) for i in range(HOLES_PER_ROUND)]


def settle_four_ball(bet: FourBallMatchBet, scores: ScoreTable, tee_box: TeeBox) -> FourBallResult:
    team1_best = team_best_balls(scores, bet.team1)
    team2_best = team_best_balls(scores, bet.team2)

    front = 0.0
    back = 0.0
    birdies1 = 0
    birdies2 = 0
    for index in range(HOLES_PER_ROUND):
        best1, best2 = team1_best[index], team2_best[index]
        if best1 is None or best2 is None:
            continue
        amount = hole_amount(best1, best2, bet.per_hole_amount)
        if index < HOLES_PER_NINE:
            front += amount
        else:
            back += amount
        birdies1 += is_birdie(best1, tee_box, index)
        birdies2 += is_birdie(best2, tee_box, index)

    return FourBallResult(
        front=front,
        back=back,
        birdie_amount=(birdies1 - birdies2) * bet.per_birdie_amount,
        team1_birdies=birdies1,
        team2_birdies=birdies2,
    )
