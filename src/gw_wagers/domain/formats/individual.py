"""Individual match: hole-by-hole match play with birdie bonus and 9/18 press.

Each nine is settled on its first eight holes; the ninth (hole 9 / hole 18)
is only the press hole. Positive amounts favor player 1.
"""

from dataclasses import dataclass

from src.gw_course.domain.models import TeeBox
from src.gw_scoring.domain.scores import ScoreTable, is_birdie, player_strokes
from src.gw_wagers.domain.models import IndividualMatchBet

# (first settled hole index, press hole index) per nine
FRONT_NINE = (0, 8)
BACK_NINE = (9, 17)


@dataclass(frozen=True)
class NineResult:
    holes_amount: float    # per-hole wins/losses before birdies
    birdie_amount: float
    before_press: float    # holes + birdies through the eighth hole
    total: float           # after the press hole is applied


@dataclass(frozen=True)
class IndividualMatchResult:
    front: NineResult
    back: NineResult

    @property
    def total(self) -> float:
        return self.front.total + self.back.total


def hole_amount(score1: int, score2: int, stake: float) -> float:
    """Stake to player 1 for a lower score, from player 1 for a higher one."""
    if score1 < score2:
        return stake
    if score1 > score2:
        return -stake
    return 0.0


def apply_press(subtotal: float, score1: int | None, score2: int | None) -> float:
    """Double (player 1 wins) or zero (player 2 wins) a nine's subtotal; tie keeps it."""
    if score1 is None or score2 is None:
        return subtotal
    if score1 < score2:
        return subtotal * 2
    if score1 > score2:
        return 0.0
    return subtotal


def _settle_nine(
    bet: IndividualMatchBet,
    strokes1: list[int | None],
    strokes2: list[int | None],
    tee_box: TeeBox,
    nine: tuple[int, int],
) -> NineResult:
    start, press_index = nine
    holes_amount = 0.0
    birdies1 = 0
    birdies2 = 0
    for index in range(start, press_index):
        score1, score2 = strokes1[index], strokes2[index]
        if score1 is None or score2 is None:
            continue
        holes_amount += hole_amount(score1, score2, bet.per_hole_amount)
        birdies1 += is_birdie(score1, tee_box, index)
        birdies2 += is_birdie(score2, tee_box, index)

    birdie_amount = (birdies1 - birdies2) * bet.per_birdie_amount
    before_press = holes_amount + birdie_amount
    total = before_press
    if bet.press_on_9_and_18:
        total = apply_press(before_press, strokes1[press_index], strokes2[press_index])
    return NineResult(
        holes_amount=holes_amount,
        birdie_amount=birdie_amount,
        before_press=before_press,
        total=total,
    )


def settle_individual_match(
    bet: IndividualMatchBet, scores: ScoreTable, tee_box: TeeBox
) -> IndividualMatchResult:
    strokes1 = player_strokes(scores, bet.player1_id)
    strokes2 = player_strokes(scores, bet.player2_id)
    return IndividualMatchResult(
        front=_settle_nine(bet, strokes1, strokes2, tee_box, FRONT_NINE),
        back=_settle_nine(bet, strokes1, strokes2, tee_box, BACK_NINE),
    )
