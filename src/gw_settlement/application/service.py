"""SettlementService — owns the round's BetManager for this process.

The manager is loaded lazily from the repository on first use. Every call
runs under one asyncio.Lock; calls that change state save the whole round
before returning, so a restart resumes exactly where the last mutation left it.
"""

import asyncio
import logging

from config.settings import settings
from src.gw_common.errors import (
    PlayerNotFoundError,
    ScoreImportRejectedError,
    TeeBoxNotSelectedError,
)
from src.gw_common.money import round_amount
from src.gw_course.domain.catalog import get_course
from src.gw_scoring.domain.sharing import (
    SharedPlayerScores,
    SharedScoreData,
    decode_shared,
    encode_shared,
)
from src.gw_settlement.application.schemas import (
    AlabamaMatchupResponse,
    BalanceResponse,
    ImportScoresResponse,
    LineItemResponse,
    MergeGroupsResponse,
    PlayerResponse,
    PostRoundResponse,
    RoundResponse,
    ShareScoresResponse,
    SheetResponse,
    SheetRow,
)
from src.gw_settlement.domain.bet_manager import BetManager
from src.gw_settlement.domain.repository import RoundRepositoryProtocol, RoundState
from src.gw_settlement.infrastructure.persistence import RoundRepository
from src.gw_wagers.application.schemas import (
    PuttingOutcomeResponse,
    WagerListResponse,
    WagerResponse,
)
from src.gw_wagers.domain.models import Player, Wager
from src.gw_wagers.domain.rules import check_wager

logger = logging.getLogger(__name__)


class SettlementService:
    def __init__(self, repo: RoundRepositoryProtocol | None = None) -> None:
        self._repo: RoundRepositoryProtocol = repo or RoundRepository()
        self._manager: BetManager | None = None
        self._lock = asyncio.Lock()

    async def _load(self) -> BetManager:
        if self._manager is None:
            state = await self._repo.load_state()
            self._manager = BetManager(
                tee_box=state.tee_box,
                player_scores=state.scores,
                wagers=state.wagers,
                players=state.players,
                course_id=state.course_id,
            )
            logger.info(
                "Loaded round: %d cards, %d wagers, %d players",
                len(state.scores), len(state.wagers), len(state.players),
            )
        return self._manager

    async def _save(self, manager: BetManager) -> None:
        await self._repo.save_state(RoundState(
            scores=manager.player_scores,
            tee_box=manager.tee_box,
            course_id=manager.course_id,
            players=list(manager.players.values()),
            wagers=manager.wagers,
        ))

    @staticmethod
    def _round_view(manager: BetManager) -> RoundResponse:
        return RoundResponse(
            tee_box_name=manager.tee_box.name if manager.tee_box else None,
            scores={pid: list(card) for pid, card in manager.player_scores.items()},
            players=[PlayerResponse.from_domain(p) for p in manager.all_players()],
        )

    @staticmethod
    def _course_id(manager: BetManager) -> str:
        return manager.course_id or settings.DEFAULT_COURSE_ID

    @staticmethod
    def _require_player(manager: BetManager, player_id: str) -> None:
        if player_id not in manager.players:
            raise PlayerNotFoundError(player_id)

    # ------------------------------------------------------------------
    # Round
    # ------------------------------------------------------------------

    async def get_round(self) -> RoundResponse:
        async with self._lock:
            manager = await self._load()
            return self._round_view(manager)

    async def select_tee_box(self, tee_box_name: str, course_id: str | None = None) -> RoundResponse:
        course = get_course(course_id or settings.DEFAULT_COURSE_ID)
        tee_box = course.tee_box(tee_box_name)
        async with self._lock:
            manager = await self._load()
            manager.select_tee_box(tee_box, course.id)
            await self._save(manager)
            return self._round_view(manager)

    async def register_player(self, player: Player) -> PlayerResponse:
        async with self._lock:
            manager = await self._load()
            manager.register_player(player)
            await self._save(manager)
        return PlayerResponse.from_domain(player)

    async def set_scores(self, player_id: str, tokens: list[str]) -> RoundResponse:
        async with self._lock:
            manager = await self._load()
            self._require_player(manager, player_id)
            manager.set_scores(player_id, tokens)
            await self._save(manager)
            return self._round_view(manager)

    async def set_hole_score(self, player_id: str, hole_number: int, token: str) -> RoundResponse:
        async with self._lock:
            manager = await self._load()
            self._require_player(manager, player_id)
            manager.set_hole_score(player_id, hole_number, token)
            await self._save(manager)
            return self._round_view(manager)

    async def post_round(self) -> PostRoundResponse:
        async with self._lock:
            manager = await self._load()
            posted = manager.post_round()
            await self._save(manager)
        return PostRoundResponse(wagers_affected=posted)

    async def unpost_round(self) -> PostRoundResponse:
        async with self._lock:
            manager = await self._load()
            cleared = manager.unpost_round()
            await self._save(manager)
        return PostRoundResponse(wagers_affected=cleared)

    async def share_scores(self, group_id: str) -> ShareScoresResponse:
        """The live round as a shareable payload for another group to import."""
        async with self._lock:
            manager = await self._load()
            if manager.tee_box is None:
                raise TeeBoxNotSelectedError()
            course = get_course(self._course_id(manager))
            players = []
            for player_id, card in manager.player_scores.items():
                player = manager.players.get(player_id)
                players.append(SharedPlayerScores(
                    player_id=player_id,
                    first_name=player.first_name if player else player_id,
                    last_name=player.last_name if player else "",
                    nickname=player.nickname if player else None,
                    scores=list(card),
                ))
            data = SharedScoreData(
                group_id=group_id,
                course_id=course.id,
                course_name=course.name,
                tee_box_name=manager.tee_box.name,
                players=players,
            )
        return ShareScoresResponse(payload=encode_shared(data))

    async def import_scores(self, payload: str) -> ImportScoresResponse:
        shared = decode_shared(payload)
        if shared is None:
            raise ScoreImportRejectedError("payload is not a shared score card")
        async with self._lock:
            manager = await self._load()
            if manager.tee_box is None:
                raise TeeBoxNotSelectedError()
            if not manager.import_scores(shared, self._course_id(manager), manager.tee_box):
                raise ScoreImportRejectedError(
                    f"card was played on {shared.course_id}/{shared.tee_box_name}"
                )
            await self._save(manager)
        return ImportScoresResponse(accepted=True, players_imported=len(shared.players))

    async def update_group_scores(self, group_index: int, scores: dict[str, list[str]]) -> None:
        # group cards are staging data; only the merged live table is persisted
        async with self._lock:
            manager = await self._load()
            manager.update_group_scores(scores, group_index)

    async def merge_group_scores(self) -> MergeGroupsResponse:
        async with self._lock:
            manager = await self._load()
            merged = manager.merge_group_scores()
            await self._save(manager)
        return MergeGroupsResponse(cards_merged=merged)

    # ------------------------------------------------------------------
    # Wagers
    # ------------------------------------------------------------------

    async def create_wager(self, wager: Wager) -> WagerResponse:
        async with self._lock:
            manager = await self._load()
            check_wager(wager, manager.players)
            manager.add_wager(wager)
            await self._save(manager)
        return WagerResponse.from_domain(wager)

    async def list_wagers(self) -> WagerListResponse:
        async with self._lock:
            manager = await self._load()
            return WagerListResponse(items=[WagerResponse.from_domain(w) for w in manager.wagers])

    async def remove_wager(self, wager_id: str) -> WagerResponse:
        async with self._lock:
            manager = await self._load()
            wager = manager.remove_wager(wager_id)
            await self._save(manager)
        return WagerResponse.from_domain(wager)

    async def clear_all_bets(self) -> None:
        async with self._lock:
            manager = await self._load()
            manager.clear_all_bets()
            await self._save(manager)

    async def record_putting_outcome(
        self, bet_id: str, winners: list[str], amount: float | None = None
    ) -> PuttingOutcomeResponse:
        async with self._lock:
            manager = await self._load()
            deltas = manager.record_putting_outcome(bet_id, winners, amount)
            totals = manager.wager_amounts(manager.get_wager(bet_id))
            await self._save(manager)
        return PuttingOutcomeResponse(
            bet_id=bet_id,
            deltas={pid: round_amount(v) for pid, v in deltas.items()},
            totals={pid: round_amount(v) for pid, v in totals.items()},
        )

    # ------------------------------------------------------------------
    # Players and the sheet
    # ------------------------------------------------------------------

    async def list_players(self) -> list[PlayerResponse]:
        async with self._lock:
            manager = await self._load()
            return [PlayerResponse.from_domain(p) for p in manager.all_players()]

    async def player_balance(self, player_id: str) -> BalanceResponse:
        async with self._lock:
            manager = await self._load()
            if player_id not in {p.id for p in manager.all_players()}:
                raise PlayerNotFoundError(player_id)
            return BalanceResponse(
                player_id=player_id,
                total_winnings=manager.total_winnings(player_id),
                round_winnings=manager.round_winnings(player_id),
                side_bet_winnings=manager.side_bet_winnings(player_id),
                breakdown=[
                    LineItemResponse.from_domain(item)
                    for item in manager.bet_breakdown(player_id)
                ],
            )

    async def alabama_matchups(self, bet_id: str, player_id: str) -> list[AlabamaMatchupResponse]:
        async with self._lock:
            manager = await self._load()
            results = manager.alabama_matchups(bet_id, player_id)
        return [
            AlabamaMatchupResponse(
                other_team_index=index,
                front=round_amount(r.front),
                back=round_amount(r.back),
                low_ball_front=round_amount(r.low_ball_front),
                low_ball_back=round_amount(r.low_ball_back),
                birdies=round_amount(r.birdies),
                total=round_amount(r.total),
            )
            for index, r in results.items()
        ]

    async def sheet(self) -> SheetResponse:
        async with self._lock:
            manager = await self._load()
            rows = [
                SheetRow(
                    player=PlayerResponse.from_domain(p),
                    total_winnings=manager.total_winnings(p.id),
                    side_bet_winnings=manager.side_bet_winnings(p.id),
                )
                for p in manager.all_players()
            ]
            return SheetResponse(
                tee_box_name=manager.tee_box.name if manager.tee_box else None,
                rows=rows,
                violations=manager.verify_conservation(),
            )


_service = SettlementService()


def get_settlement_service() -> SettlementService:
    """FastAPI dependency; tests override it with a service over a fake repository."""
    return _service
