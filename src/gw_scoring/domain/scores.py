"""Score table model and token parsing.

A score table maps player id -> 18 raw tokens, index i == hole i+1:
  ""        unplayed
  "4"       strokes taken (non-negative integer)
  "X"       off the board; par+4 for skins, absent everywhere else
Anything else is malformed and reads as "no score"; partial and messy
cards are the steady state, so parsing never raises.
"""

import re
from collections.abc import Mapping, Sequence

from src.gw_common.errors import InvalidHoleError
from src.gw_course.domain.models import HOLES_PER_ROUND, TeeBox

ScoreTable = dict[str, list[str]]

OFF_THE_BOARD = "X"
OFF_THE_BOARD_PENALTY = 4  # strokes over par charged for an "X" in skins
EMPTY_CARD: tuple[str, ...] = ("",) * HOLES_PER_ROUND

_STROKES_RE = re.compile(r"[0-9]+")


def parse_strokes(token: str | None) -> int | None:
    """Strokes for a hole, or None when unplayed, off the board or malformed."""
    if token is None or not _STROKES_RE.fullmatch(token):
        return None
    return int(token)


def skins_strokes(token: str | None, par: int) -> int | None:
    """Like parse_strokes, but an off-the-board token counts as par+4."""
    if token == OFF_THE_BOARD:
        return par + OFF_THE_BOARD_PENALTY
    return parse_strokes(token)


def is_valid_token(token: str) -> bool:
    return token == "" or token == OFF_THE_BOARD or parse_strokes(token) is not None


def normalize_card(tokens: Sequence[str]) -> list[str]:
    """Pad with "" / truncate so a card always has exactly 18 entries."""
    card = [str(t) for t in tokens[:HOLES_PER_ROUND]]
    card.extend([""] * (HOLES_PER_ROUND - len(card)))
    return card


def player_card(scores: Mapping[str, Sequence[str]], player_id: str) -> list[str]:
    """A player's 18 tokens; a player with no entry reads as an all-empty card."""
    tokens = scores.get(player_id)
    if tokens is None:
        return list(EMPTY_CARD)
    return normalize_card(tokens)


def player_strokes(scores: Mapping[str, Sequence[str]], player_id: str) -> list[int | None]:
    return [parse_strokes(t) for t in player_card(scores, player_id)]


def hole_index(hole_number: int) -> int:
    """1-based hole number -> 0-based card index."""
    if not 1 <= hole_number <= HOLES_PER_ROUND:
        raise InvalidHoleError(hole_number)
    return hole_number - 1


def is_birdie(strokes: int | None, tee_box: TeeBox, index: int) -> bool:
    """Any score under par counts (eagles included)."""
    return strokes is not None and strokes < tee_box.par(index)


def copy_table(scores: Mapping[str, Sequence[str]]) -> ScoreTable:
    """Deep copy with every card normalized; used for snapshots and imports."""
    return {player_id: normalize_card(tokens) for player_id, tokens in scores.items()}
