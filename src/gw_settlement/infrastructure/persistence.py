"""RoundRepository — concrete implementation of RoundRepositoryProtocol.

Two fixed Redis keys (names from config.settings):
  SCORES_KEY  {"<player id>": ["4", "", "X", ...], ...}
  BETS_KEY    {"tee_box": {...} | null, "course_id": "..." | null,
              "players": [...], "wagers": [...]}

Wagers are stored as one tagged list, discriminated by `kind`. A key that is
missing or does not decode reads as empty state; the failure is logged and
never raised, so a corrupt store cannot block the round.
"""

import logging
from dataclasses import dataclass, field
from typing import Annotated

import redis.asyncio as aioredis
from pydantic import Field, TypeAdapter

from config.settings import settings
from src.gw_common.errors import AppError
from src.gw_common.redis_client import get_redis
from src.gw_course.domain.models import TeeBox
from src.gw_scoring.domain.scores import ScoreTable
from src.gw_settlement.domain.repository import RoundState
from src.gw_wagers.domain.models import Player, Wager

logger = logging.getLogger(__name__)


@dataclass
class BetsDocument:
    tee_box: TeeBox | None = None
    course_id: str | None = None
    players: list[Player] = field(default_factory=list)
    wagers: list[Annotated[Wager, Field(discriminator="kind")]] = field(default_factory=list)


_scores_adapter = TypeAdapter(ScoreTable)
_bets_adapter = TypeAdapter(BetsDocument)


def encode_scores(scores: ScoreTable) -> str:
    return _scores_adapter.dump_json(scores).decode()


def encode_bets(state: RoundState) -> str:
    document = BetsDocument(
        tee_box=state.tee_box,
        course_id=state.course_id,
        players=state.players,
        wagers=state.wagers,
    )
    return _bets_adapter.dump_json(document).decode()


def decode_scores(raw: str | bytes | None) -> ScoreTable:
    if raw is None:
        return {}
    try:
        return _scores_adapter.validate_json(raw)
    except ValueError:
        logger.warning("Stored score table could not be decoded; starting empty")
        return {}


def decode_bets(raw: str | bytes | None) -> BetsDocument:
    if raw is None:
        return BetsDocument()
    try:
        return _bets_adapter.validate_json(raw)
    except (ValueError, AppError):
        # AppError: a stored tee box that no longer has 18 holes
        logger.warning("Stored wager collection could not be decoded; starting empty")
        return BetsDocument()


class RoundRepository:
    def __init__(self, redis: aioredis.Redis | None = None) -> None:
        self._redis = redis

    async def _client(self) -> aioredis.Redis:
        if self._redis is None:
            self._redis = await get_redis()
        return self._redis

    async def load_state(self) -> RoundState:
        client = await self._client()
        raw_scores, raw_bets = await client.mget(settings.SCORES_KEY, settings.BETS_KEY)
        bets = decode_bets(raw_bets)
        return RoundState(
            scores=decode_scores(raw_scores),
            tee_box=bets.tee_box,
            course_id=bets.course_id,
            players=bets.players,
            wagers=bets.wagers,
        )

    async def save_state(self, state: RoundState) -> None:
        client = await self._client()
        await client.mset({
            settings.SCORES_KEY: encode_scores(state.scores),
            settings.BETS_KEY: encode_bets(state),
        })
        logger.debug("Saved %d cards and %d wagers", len(state.scores), len(state.wagers))
