"""Shareable score payload: one group's card handed to another device.

The payload is a compact JSON document (it is what ends up in the QR code):
  {"group_id": ..., "course_id": ..., "course_name": ..., "tee_box_name": ...,
   "timestamp": ..., "players": [{"player_id", "first_name", "last_name",
   "nickname", "scores"}]}
Decoding never raises; a payload that does not parse reads as None.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime

from pydantic import TypeAdapter, ValidationError

from src.gw_common.datetime_utils import utc_now

logger = logging.getLogger(__name__)


@dataclass
class SharedPlayerScores:
    player_id: str
    first_name: str
    last_name: str
    scores: list[str]
    nickname: str | None = None


@dataclass
class SharedScoreData:
    group_id: str
    course_id: str
    course_name: str
    tee_box_name: str
    players: list[SharedPlayerScores]
    timestamp: datetime = field(default_factory=utc_now)

    def score_table(self) -> dict[str, list[str]]:
        return {p.player_id: list(p.scores) for p in self.players}


_adapter = TypeAdapter(SharedScoreData)


def encode_shared(data: SharedScoreData) -> str:
    return _adapter.dump_json(data).decode()


def decode_shared(payload: str | bytes) -> SharedScoreData | None:
    try:
        return _adapter.validate_json(payload)
    except ValidationError as exc:
        logger.warning("Discarding unreadable score payload: %d errors", exc.error_count())
        return None
