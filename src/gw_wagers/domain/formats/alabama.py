"""Alabama: every team plays every other team, nine by nine.

Per pairwise comparison, from the point of view of one team:
  front / back  lower sum of per-hole best scores wins the nine's stake
  low ball      per nine, the team with FEWER holes carrying any score wins
  birdies       (own - other) best-ball birdies over 18 holes x birdie stake

Holes with no score for a team add nothing to its nine total.

The low-ball leg counts holes-with-data rather than comparing scores. That
is how existing rounds were settled and it is kept for compatibility; see
DESIGN.md before changing it.

Uneven teams: every member of the smaller team moves the stake scaled by
larger/smaller, win or lose, while the larger team moves face value. Each
comparison therefore nets to zero across both rosters.
"""

from dataclasses import dataclass

from src.gw_course.domain.models import HOLES_PER_NINE, HOLES_PER_ROUND, TeeBox
from src.gw_scoring.domain.scores import ScoreTable, is_birdie
from src.gw_wagers.domain.formats.four_ball import team_best_balls
from src.gw_wagers.domain.models import AlabamaBet


@dataclass(frozen=True)
class TeamCard:
    """Per-team figures used by every comparison that team takes part in."""

    size: int
    front_total: int
    back_total: int
    front_holes_played: int
    back_holes_played: int
    birdies: int


@dataclass(frozen=True)
class AlabamaTeamResult:
    """One team's per-member result against one other team."""

    front: float
    back: float
    low_ball_front: float
    low_ball_back: float
    birdies: float

    @property
    def total(self) -> float:
        return self.front + self.back + self.low_ball_front + self.low_ball_back + self.birdies


def size_factor(own_size: int, other_size: int) -> float:
    """Per-member multiplier: the smaller side covers the larger side's stake."""
    if own_size < other_size:
        return other_size / own_size
    return 1.0


def lower_wins(own: int, other: int, stake: float, factor: float) -> float:
    if own < other:
        return stake * factor
    if own > other:
        return -stake * factor
    return 0.0


def build_team_card(
    bet: AlabamaBet, team_index: int, scores: ScoreTable, tee_box: TeeBox
) -> TeamCard:
    members = bet.team_members(team_index)
    best = team_best_balls(scores, members)

    front_total = back_total = 0
    front_played = back_played = 0
    birdies = 0
    for index in range(HOLES_PER_ROUND):
        strokes = best[index]
        if strokes is None:
            continue
        if index < HOLES_PER_NINE:
            front_total += strokes
            front_played += 1
        else:
            back_total += strokes
            back_played += 1
        birdies += is_birdie(strokes, tee_box, index)

    return TeamCard(
        size=len(members),
        front_total=front_total,
        back_total=back_total,
        front_holes_played=front_played,
        back_holes_played=back_played,
        birdies=birdies,
    )


def compare_teams(bet: AlabamaBet, own: TeamCard, other: TeamCard) -> AlabamaTeamResult:
    factor = size_factor(own.size, other.size)
    return AlabamaTeamResult(
        front=lower_wins(own.front_total, other.front_total, bet.front_nine_amount, factor),
        back=lower_wins(own.back_total, other.back_total, bet.back_nine_amount, factor),
        low_ball_front=lower_wins(
            own.front_holes_played, other.front_holes_played, bet.low_ball_amount, factor
        ),
        low_ball_back=lower_wins(
            own.back_holes_played, other.back_holes_played, bet.low_ball_amount, factor
        ),
        birdies=(own.birdies - other.birdies) * bet.per_birdie_amount * factor,
    )


def calculate_team_results(
    bet: AlabamaBet,
    player_team_index: int,
    other_team_index: int,
    scores: ScoreTable,
    tee_box: TeeBox,
) -> AlabamaTeamResult:
    own = build_team_card(bet, player_team_index, scores, tee_box)
    other = build_team_card(bet, other_team_index, scores, tee_box)
    return compare_teams(bet, own, other)


def team_totals(bet: AlabamaBet, scores: ScoreTable, tee_box: TeeBox) -> list[float]:
    """Per-member amount for every team, summed over all of its comparisons."""
    cards = [build_team_card(bet, i, scores, tee_box) for i in range(len(bet.teams))]
    totals = []
    for team_index, own in enumerate(cards):
        totals.append(sum(
            compare_teams(bet, own, other).total
            for other_index, other in enumerate(cards)
            if other_index != team_index
        ))
    return totals


def settle_alabama(bet: AlabamaBet, scores: ScoreTable, tee_box: TeeBox) -> dict[str, float]:
    """Player id -> amount. Every member (and the attached swing man) gets the team total."""
    winnings: dict[str, float] = {}
    for team_index, total in enumerate(team_totals(bet, scores, tee_box)):
        for player_id in bet.team_members(team_index):
            winnings[player_id] = winnings.get(player_id, 0.0) + total
    return winnings
