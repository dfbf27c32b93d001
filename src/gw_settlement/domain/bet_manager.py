"""BetManager — the round's wager collection and its balances.

Holds the live score table, the selected tee box, the player roster and every
wager. Evaluation is synchronous and pure per wager; the only mutations are
the explicit ones below (scores, roster, wagers, posting, putting outcomes).

Posting policy:
  Individual / Four-Ball  snapshot when posted, otherwise live table + tee box
                          (nothing until a tee box is selected)
  Alabama / Do-Da / Skins snapshot only; unposted wagers contribute 0
  Putting / Circus        never snapshotted, settled from their own state

Balances are summed in full precision and rounded once per player.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from src.gw_common.datetime_utils import utc_now
from src.gw_common.enums import WagerKind
from src.gw_common.errors import (
    InvalidGroupError,
    InvalidWagerError,
    TeeBoxNotSelectedError,
    WagerNotFoundError,
)
from src.gw_common.money import round_amount
from src.gw_course.domain.models import TeeBox
from src.gw_scoring.domain.scores import (
    ScoreTable,
    copy_table,
    hole_index,
    normalize_card,
    player_card,
)
from src.gw_scoring.domain.sharing import SharedScoreData
from src.gw_settlement.domain.invariants import verify_zero_sum
from src.gw_wagers.domain.formats.alabama import AlabamaTeamResult, calculate_team_results
from src.gw_wagers.domain.formats.do_da import settle_do_da
from src.gw_wagers.domain.formats.putting import record_outcome
from src.gw_wagers.domain.models import (
    AlabamaBet,
    DoDaBet,
    FourBallMatchBet,
    IndividualMatchBet,
    Player,
    PuttingLedgerBet,
    RoundSnapshot,
    SkinsBet,
    Wager,
)
from src.gw_wagers.domain.service import player_amounts, side_bet_amounts

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BetLineItem:
    wager_id: str
    kind: WagerKind
    amount: float
    posted: bool
    side_bet: bool


class BetManager:
    def __init__(
        self,
        tee_box: TeeBox | None = None,
        player_scores: ScoreTable | None = None,
        wagers: Iterable[Wager] | None = None,
        players: Iterable[Player] | None = None,
        course_id: str | None = None,
    ) -> None:
        self.tee_box = tee_box
        self.course_id = course_id
        self.player_scores: ScoreTable = copy_table(player_scores or {})
        self.wagers: list[Wager] = list(wagers or [])
        self.players: dict[str, Player] = {p.id: p for p in players or []}
        self.group_scores: dict[int, ScoreTable] = {}

    # ------------------------------------------------------------------
    # Wager collection
    # ------------------------------------------------------------------

    def add_wager(self, wager: Wager) -> Wager:
        self.wagers.append(wager)
        logger.info("Added %s wager %s", wager.kind, wager.id)
        return wager

    def get_wager(self, wager_id: str) -> Wager:
        for wager in self.wagers:
            if wager.id == wager_id:
                return wager
        raise WagerNotFoundError(wager_id)

    def remove_wager(self, wager_id: str) -> Wager:
        wager = self.get_wager(wager_id)
        self.wagers.remove(wager)
        logger.info("Removed %s wager %s", wager.kind, wager.id)
        return wager

    def clear_all_bets(self) -> None:
        """Start over: no wagers, no scores, no tee box. The roster survives."""
        self.wagers.clear()
        self.player_scores = {}
        self.group_scores = {}
        self.tee_box = None
        self.course_id = None
        logger.info("Cleared all bets and scores")

    @property
    def individual_bets(self) -> list[IndividualMatchBet]:
        return [w for w in self.wagers if isinstance(w, IndividualMatchBet)]

    @property
    def four_ball_bets(self) -> list[FourBallMatchBet]:
        return [w for w in self.wagers if isinstance(w, FourBallMatchBet)]

    @property
    def skins_bets(self) -> list[SkinsBet]:
        return [w for w in self.wagers if isinstance(w, SkinsBet)]

    # ------------------------------------------------------------------
    # Roster, tee box and scores
    # ------------------------------------------------------------------

    def register_player(self, player: Player) -> Player:
        self.players[player.id] = player
        return player

    def select_tee_box(self, tee_box: TeeBox, course_id: str | None = None) -> None:
        self.tee_box = tee_box
        self.course_id = course_id
        logger.info("Selected tee box %s", tee_box.name)

    def set_scores(self, player_id: str, tokens: Sequence[str]) -> list[str]:
        card = normalize_card(tokens)
        self.player_scores[player_id] = card
        return card

    def set_hole_score(self, player_id: str, hole_number: int, token: str) -> list[str]:
        index = hole_index(hole_number)
        card = player_card(self.player_scores, player_id)
        card[index] = token
        self.player_scores[player_id] = card
        return card

    def import_scores(self, shared: SharedScoreData, course_id: str, tee_box: TeeBox) -> bool:
        """Merge another group's card. Rejected when played on another course or tee."""
        if shared.course_id != course_id or shared.tee_box_name != tee_box.name:
            logger.warning(
                "Rejected score import from group %s: %s/%s does not match %s/%s",
                shared.group_id, shared.course_id, shared.tee_box_name, course_id, tee_box.name,
            )
            return False

        for entry in shared.players:
            if entry.player_id not in self.players:
                self.players[entry.player_id] = Player(
                    id=entry.player_id,
                    first_name=entry.first_name,
                    last_name=entry.last_name,
                    nickname=entry.nickname,
                )
            self.player_scores[entry.player_id] = normalize_card(entry.scores)
        logger.info("Imported %d cards from group %s", len(shared.players), shared.group_id)
        return True

    def update_group_scores(self, scores: ScoreTable, group_index: int) -> None:
        if group_index < 0:
            raise InvalidGroupError(group_index)
        self.group_scores[group_index] = copy_table(scores)

    def merge_group_scores(self) -> int:
        """Copy every group's cards into the live table in group order. Later groups win."""
        merged = 0
        for index in sorted(self.group_scores):
            for player_id, card in self.group_scores[index].items():
                self.player_scores[player_id] = list(card)
                merged += 1
        return merged

    # ------------------------------------------------------------------
    # Posting
    # ------------------------------------------------------------------

    def post_round(self) -> int:
        """Freeze the live table onto every score-derived wager. Returns how many were posted."""
        if self.tee_box is None:
            raise TeeBoxNotSelectedError()
        posted_at = utc_now()
        posted = 0
        for wager in self.wagers:
            if not wager.score_derived:
                continue
            wager.snapshot = RoundSnapshot(
                scores=copy_table(self.player_scores),
                tee_box=self.tee_box,
                posted_at=posted_at,
            )
            posted += 1
        logger.info("Posted round on %d wagers (tee box %s)", posted, self.tee_box.name)
        return posted

    def unpost_round(self) -> int:
        cleared = 0
        for wager in self.wagers:
            if wager.snapshot is not None:
                wager.snapshot = None
                cleared += 1
        logger.info("Unposted round on %d wagers", cleared)
        return cleared

    # ------------------------------------------------------------------
    # Putting
    # ------------------------------------------------------------------

    def record_putting_outcome(
        self, bet_id: str, winners: Sequence[str], amount: float | None = None
    ) -> dict[str, float]:
        wager = self.get_wager(bet_id)
        if not isinstance(wager, PuttingLedgerBet):
            raise InvalidWagerError(f"{bet_id} is a {wager.kind} wager, not a putting ledger")
        return record_outcome(wager, list(winners), amount)

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def is_evaluable(self, wager: Wager) -> bool:
        if not wager.score_derived or wager.snapshot is not None:
            return True
        return not wager.requires_posting and self.tee_box is not None

    def wager_amounts(self, wager: Wager) -> dict[str, float]:
        """Player id -> unrounded amount for one wager under the posting policy."""
        if not wager.score_derived:
            return side_bet_amounts(wager)
        if wager.snapshot is not None:
            return player_amounts(wager, wager.snapshot.scores, wager.snapshot.tee_box)
        if wager.requires_posting or self.tee_box is None:
            return {}
        return player_amounts(wager, self.player_scores, self.tee_box)

    def _sum_for(self, player_id: str, wagers: Iterable[Wager]) -> float:
        total = 0.0
        for wager in wagers:
            if player_id not in wager.participant_ids():
                continue
            total += self.wager_amounts(wager).get(player_id, 0.0)
        return round_amount(total)

    def total_winnings(self, player_id: str) -> float:
        """The sheet: every score-derived wager, rounded once."""
        return self._sum_for(player_id, (w for w in self.wagers if not w.is_side_bet))

    def round_winnings(self, player_id: str) -> float:
        """Live match view: individual and four-ball matches only."""
        return self._sum_for(player_id, [*self.individual_bets, *self.four_ball_bets])

    def side_bet_winnings(self, player_id: str) -> float:
        return self._sum_for(player_id, (w for w in self.wagers if w.is_side_bet))

    def bet_breakdown(self, player_id: str) -> list[BetLineItem]:
        items = []
        for wager in self.wagers:
            if player_id not in wager.participant_ids():
                continue
            items.append(BetLineItem(
                wager_id=wager.id,
                kind=WagerKind(wager.kind),
                amount=self.wager_amounts(wager).get(player_id, 0.0),
                posted=wager.is_posted,
                side_bet=wager.is_side_bet,
            ))
        return items

    def alabama_matchups(self, bet_id: str, player_id: str) -> dict[int, AlabamaTeamResult]:
        """Per-opponent-team results for the player's Alabama team (posted cards only)."""
        wager = self.get_wager(bet_id)
        if not isinstance(wager, AlabamaBet):
            raise InvalidWagerError(f"{bet_id} is a {wager.kind} wager, not Alabama")
        own_index = wager.team_index_of(player_id)
        if own_index is None or wager.snapshot is None:
            return {}
        snapshot = wager.snapshot
        return {
            other_index: calculate_team_results(
                wager, own_index, other_index, snapshot.scores, snapshot.tee_box
            )
            for other_index in range(len(wager.teams))
            if other_index != own_index
        }

    def all_players(self) -> list[Player]:
        """Roster plus every wager participant, sorted by first name."""
        players = dict(self.players)
        for wager in self.wagers:
            for player_id in wager.participant_ids():
                if player_id not in players:
                    players[player_id] = Player(id=player_id, first_name=player_id, last_name="")
        return sorted(players.values(), key=lambda p: (p.first_name.casefold(), p.id))

    def verify_conservation(self) -> list[str]:
        """Zero-sum check over every wager that can be evaluated right now."""
        violations: list[str] = []
        for wager in self.wagers:
            if not self.is_evaluable(wager):
                continue
            held = 0.0
            if isinstance(wager, DoDaBet) and wager.snapshot is not None:
                held = settle_do_da(wager, wager.snapshot.scores).unclaimed_pot
            violations.extend(
                verify_zero_sum(f"{wager.kind}:{wager.id}", self.wager_amounts(wager), held)
            )
        return violations
