"""Domain models for gw_wagers — pure dataclasses, no evaluation logic.

Every wager variant carries a `kind` literal so the collection can be stored
and restored as one tagged union (see `Wager`). Evaluation lives in
`gw_wagers.domain.formats` and is dispatched by `gw_wagers.domain.service`.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar, Literal, Union

from src.gw_common.enums import PuttingState
from src.gw_course.domain.models import TeeBox
from src.gw_scoring.domain.scores import ScoreTable


def new_wager_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True, eq=False)
class Player:
    id: str
    first_name: str
    last_name: str
    nickname: str | None = None

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Player) and other.id == self.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def scorecard_name(self) -> str:
        if self.nickname:
            return f'"{self.nickname}"'
        return self.first_name[:8].upper()

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass
class RoundSnapshot:
    """Scores and tee box frozen onto a wager when the round is posted."""

    scores: ScoreTable
    tee_box: TeeBox
    posted_at: datetime | None = None


@dataclass(kw_only=True)
class WagerBase:
    id: str = field(default_factory=new_wager_id)
    snapshot: RoundSnapshot | None = None

    # Alabama/Do-Da/Skins only count once the round is posted.
    requires_posting: ClassVar[bool] = False
    # Side bets are reported apart from "the sheet".
    is_side_bet: ClassVar[bool] = False
    # Putting/Circus are not derived from the score table and are never snapshotted.
    score_derived: ClassVar[bool] = True

    @property
    def is_posted(self) -> bool:
        return self.snapshot is not None

    def participant_ids(self) -> list[str]:
        raise NotImplementedError


@dataclass(kw_only=True)
class IndividualMatchBet(WagerBase):
    player1_id: str
    player2_id: str
    per_hole_amount: float
    per_birdie_amount: float = 0.0
    press_on_9_and_18: bool = False
    kind: Literal["INDIVIDUAL"] = "INDIVIDUAL"

    def participant_ids(self) -> list[str]:
        return [self.player1_id, self.player2_id]


@dataclass(kw_only=True)
class FourBallMatchBet(WagerBase):
    team1: list[str]  # two player ids
    team2: list[str]
    per_hole_amount: float
    per_birdie_amount: float = 0.0
    press_on_9_and_18: bool = False  # accepted but does not change the amount
    kind: Literal["FOUR_BALL"] = "FOUR_BALL"

    def participant_ids(self) -> list[str]:
        return [*self.team1, *self.team2]


@dataclass(kw_only=True)
class AlabamaBet(WagerBase):
    teams: list[list[str]]
    swing_man_id: str | None = None
    swing_man_team_index: int | None = None
    counting_scores: int = 1  # shown to players; settlement always counts the low ball
    front_nine_amount: float = 0.0
    back_nine_amount: float = 0.0
    low_ball_amount: float = 0.0
    per_birdie_amount: float = 0.0
    kind: Literal["ALABAMA"] = "ALABAMA"

    requires_posting: ClassVar[bool] = True

    def participant_ids(self) -> list[str]:
        ids = [player_id for team in self.teams for player_id in team]
        if self.swing_man_id is not None:
            ids.append(self.swing_man_id)
        return ids

    def team_members(self, team_index: int) -> list[str]:
        """Team roster for a comparison, swing man included when attached."""
        members = list(self.teams[team_index])
        if self.swing_man_id is not None and self.swing_man_team_index == team_index:
            members.append(self.swing_man_id)
        return members

    def team_index_of(self, player_id: str) -> int | None:
        for index, team in enumerate(self.teams):
            if player_id in team:
                return index
        if player_id == self.swing_man_id:
            return self.swing_man_team_index
        return None


@dataclass(kw_only=True)
class DoDaBet(WagerBase):
    is_pool: bool
    amount: float
    players: list[str]
    kind: Literal["DO_DA"] = "DO_DA"

    requires_posting: ClassVar[bool] = True

    def participant_ids(self) -> list[str]:
        return list(self.players)


@dataclass(kw_only=True)
class SkinsBet(WagerBase):
    amount: float
    players: list[str]
    kind: Literal["SKINS"] = "SKINS"

    requires_posting: ClassVar[bool] = True

    def participant_ids(self) -> list[str]:
        return list(self.players)


@dataclass(kw_only=True)
class PuttingLedgerBet(WagerBase):
    players: list[str]
    amount: float
    player_totals: dict[str, float] = field(default_factory=dict)
    state: PuttingState = PuttingState.IDLE
    kind: Literal["PUTTING"] = "PUTTING"

    is_side_bet: ClassVar[bool] = True
    score_derived: ClassVar[bool] = False

    def participant_ids(self) -> list[str]:
        return list(self.players)


@dataclass(kw_only=True)
class CircusBet(WagerBase):
    """Placeholder side game; settles to zero until its rules are defined."""

    players: list[str]
    amount: float = 0.0
    kind: Literal["CIRCUS"] = "CIRCUS"

    is_side_bet: ClassVar[bool] = True
    score_derived: ClassVar[bool] = False

    def participant_ids(self) -> list[str]:
        return list(self.players)


Wager = Union[
    IndividualMatchBet,
    FourBallMatchBet,
    AlabamaBet,
    DoDaBet,
    SkinsBet,
    PuttingLedgerBet,
    CircusBet,
]
