"""Domain models for gw_course: pure dataclasses, read-only reference data."""

from dataclasses import dataclass, field

from src.gw_common.errors import InvalidTeeBoxError, TeeBoxNotFoundError

HOLES_PER_ROUND = 18
HOLES_PER_NINE = 9


@dataclass(frozen=True)
class HoleInfo:
    number: int      # 1-18, playing order
    par: int
    yardage: int
    handicap: int    # stroke index, 1 = hardest


@dataclass(frozen=True)
class TeeBox:
    name: str
    rating: float
    slope: int
    holes: tuple[HoleInfo, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if len(self.holes) != HOLES_PER_ROUND:
            raise InvalidTeeBoxError(
                f"{self.name} has {len(self.holes)} holes, expected {HOLES_PER_ROUND}"
            )

    def par(self, hole_index: int) -> int:
        """Par for a zero-based hole index."""
        return self.holes[hole_index].par

    @property
    def total_par(self) -> int:
        return sum(h.par for h in self.holes)

    @property
    def total_yardage(self) -> int:
        return sum(h.yardage for h in self.holes)


@dataclass(frozen=True)
class GolfCourse:
    id: str
    name: str
    tee_boxes: tuple[TeeBox, ...]

    def tee_box(self, name: str) -> TeeBox:
        for tee in self.tee_boxes:
            if tee.name.lower() == name.lower():
                return tee
        raise TeeBoxNotFoundError(name)
