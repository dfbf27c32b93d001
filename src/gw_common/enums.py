"""Global enums — values are what gets written to the key-value store."""

from enum import Enum


class WagerKind(str, Enum):
    INDIVIDUAL = "INDIVIDUAL"
    FOUR_BALL = "FOUR_BALL"
    ALABAMA = "ALABAMA"
    DO_DA = "DO_DA"
    SKINS = "SKINS"
    PUTTING = "PUTTING"
    CIRCUS = "CIRCUS"


class PuttingState(str, Enum):
    """Putting ledger lifecycle: IDLE until the first outcome is recorded."""
    IDLE = "IDLE"
    SETTLED = "SETTLED"
