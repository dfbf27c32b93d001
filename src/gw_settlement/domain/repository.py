"""Repository Protocol — dependency inversion for testability.

Unit tests inject a mock that conforms to this Protocol.
Infrastructure layer provides the real implementation.
"""

from dataclasses import dataclass, field
from typing import Protocol

from src.gw_course.domain.models import TeeBox
from src.gw_scoring.domain.scores import ScoreTable
from src.gw_wagers.domain.models import Player, Wager


@dataclass
class RoundState:
    """Everything that survives a restart: cards, tee box, roster and wagers."""

    scores: ScoreTable = field(default_factory=dict)
    tee_box: TeeBox | None = None
    course_id: str | None = None
    players: list[Player] = field(default_factory=list)
    wagers: list[Wager] = field(default_factory=list)


class RoundRepositoryProtocol(Protocol):
    async def load_state(self) -> RoundState: ...

    async def save_state(self, state: RoundState) -> None: ...
