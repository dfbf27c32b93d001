"""Tests for BetManager: posting policy, balances, rounding, round management."""

import pytest

from src.gw_common.enums import PuttingState, WagerKind
from src.gw_common.errors import (
    InvalidGroupError,
    InvalidWagerError,
    TeeBoxNotSelectedError,
    WagerNotFoundError,
)
from src.gw_course.domain.catalog import BAYOU_DESIARD, build_tee_box
from src.gw_scoring.domain.sharing import SharedPlayerScores, SharedScoreData
from src.gw_settlement.domain.bet_manager import BetManager
from src.gw_wagers.domain.models import (
    AlabamaBet,
    CircusBet,
    DoDaBet,
    IndividualMatchBet,
    Player,
    PuttingLedgerBet,
    SkinsBet,
)

TEE = build_tee_box("Test", 70.0, 113, (4,) * 18, (400,) * 18, tuple(range(1, 19)))


def _player(pid: str, first: str) -> Player:
    return Player(id=pid, first_name=first, last_name="Tester")


def _manager(**kwargs) -> BetManager:
    defaults = dict(
        tee_box=TEE,
        players=[_player("a", "Al"), _player("b", "Bo"), _player("c", "Cy")],
    )
    defaults.update(kwargs)
    return BetManager(**defaults)


def _seven_winner_scores() -> dict[str, list[str]]:
    """a takes one skin and one Do-Da, b takes six of each, c takes nothing."""
    scores = {pid: ["4"] * 18 for pid in ("a", "b", "c")}
    scores["a"][0] = "2"
    for index in range(1, 7):
        scores["b"][index] = "2"
    return scores


class TestWagerCollection:
    def test_add_get_remove(self) -> None:
        manager = _manager()
        bet = manager.add_wager(SkinsBet(amount=5, players=["a", "b"]))
        assert manager.get_wager(bet.id) is bet
        assert manager.skins_bets == [bet]
        manager.remove_wager(bet.id)
        assert manager.wagers == []

    def test_unknown_wager(self) -> None:
        with pytest.raises(WagerNotFoundError):
            _manager().remove_wager("missing")

    def test_clear_all_bets_keeps_roster(self) -> None:
        manager = _manager(player_scores={"a": ["4"] * 18})
        manager.add_wager(SkinsBet(amount=5, players=["a", "b"]))
        manager.clear_all_bets()
        assert manager.wagers == []
        assert manager.player_scores == {}
        assert manager.tee_box is None
        assert set(manager.players) == {"a", "b", "c"}


class TestPostingPolicy:
    def test_individual_reads_live_scores_until_posted(self) -> None:
        manager = _manager(player_scores={"a": ["3"] * 18, "b": ["4"] * 18})
        manager.add_wager(IndividualMatchBet(player1_id="a", player2_id="b", per_hole_amount=1))
        assert manager.total_winnings("a") == 16.0
        assert manager.round_winnings("a") == 16.0
        manager.set_hole_score("a", 1, "5")
        assert manager.total_winnings("a") == 14.0

    def test_posted_wager_ignores_later_edits(self) -> None:
        manager = _manager(player_scores={"a": ["3"] * 18, "b": ["4"] * 18})
        manager.add_wager(IndividualMatchBet(player1_id="a", player2_id="b", per_hole_amount=1))
        manager.post_round()
        manager.set_scores("a", ["5"] * 18)
        assert manager.total_winnings("a") == 16.0
        manager.unpost_round()
        assert manager.total_winnings("a") == -16.0

    def test_unposted_pool_games_contribute_nothing(self) -> None:
        manager = _manager(player_scores=_seven_winner_scores())
        manager.add_wager(SkinsBet(amount=10, players=["a", "b", "c"]))
        manager.add_wager(DoDaBet(is_pool=True, amount=10, players=["a", "b", "c"]))
        manager.add_wager(AlabamaBet(teams=[["a"], ["b"]], front_nine_amount=10))
        assert manager.total_winnings("c") == 0.0
        assert manager.verify_conservation() == []

    def test_live_match_without_tee_box_is_zero(self) -> None:
        manager = _manager(tee_box=None, player_scores={"a": ["3"] * 18, "b": ["4"] * 18})
        manager.add_wager(IndividualMatchBet(player1_id="a", player2_id="b", per_hole_amount=1))
        assert manager.total_winnings("a") == 0.0

    def test_posting_requires_tee_box(self) -> None:
        with pytest.raises(TeeBoxNotSelectedError):
            _manager(tee_box=None).post_round()

    def test_posting_skips_side_bets(self) -> None:
        manager = _manager()
        manager.add_wager(SkinsBet(amount=10, players=["a", "b"]))
        putting = manager.add_wager(PuttingLedgerBet(players=["a", "b"], amount=1))
        assert manager.post_round() == 1
        assert putting.snapshot is None

    def test_snapshots_do_not_share_the_table(self) -> None:
        manager = _manager(player_scores={"a": ["4"] * 18})
        first = manager.add_wager(SkinsBet(amount=10, players=["a", "b"]))
        second = manager.add_wager(SkinsBet(amount=10, players=["a", "c"]))
        manager.post_round()
        first.snapshot.scores["a"][0] = "1"
        assert second.snapshot.scores["a"][0] == "4"
        assert manager.player_scores["a"][0] == "4"


class TestBalances:
    def test_rounds_once_at_the_end(self) -> None:
        manager = _manager(player_scores=_seven_winner_scores())
        manager.add_wager(SkinsBet(amount=10, players=["a", "b", "c"]))
        manager.add_wager(DoDaBet(is_pool=True, amount=10, players=["a", "b", "c"]))
        manager.post_round()
        # -5.714285... twice: -11.43, not -5.71 + -5.71
        assert manager.total_winnings("a") == -11.43
        assert manager.total_winnings("b") == 31.43
        assert manager.total_winnings("c") == -20.0
        assert manager.verify_conservation() == []

    def test_balances_are_idempotent(self) -> None:
        manager = _manager(player_scores=_seven_winner_scores())
        manager.add_wager(SkinsBet(amount=10, players=["a", "b", "c"]))
        manager.post_round()
        assert manager.total_winnings("b") == manager.total_winnings("b")

    def test_do_da_without_do_das_holds_the_pot(self) -> None:
        manager = _manager(player_scores={pid: ["4"] * 18 for pid in ("a", "b", "c")})
        manager.add_wager(DoDaBet(is_pool=True, amount=10, players=["a", "b", "c"]))
        manager.post_round()
        assert [manager.total_winnings(pid) for pid in ("a", "b", "c")] == [-10.0] * 3
        assert manager.verify_conservation() == []

    def test_side_bets_are_reported_apart(self) -> None:
        manager = _manager()
        putting = manager.add_wager(PuttingLedgerBet(players=["a", "b", "c"], amount=1))
        manager.add_wager(CircusBet(players=["a", "b"]))
        manager.record_putting_outcome(putting.id, ["a"])
        assert manager.side_bet_winnings("a") == 2.0
        assert manager.total_winnings("a") == 0.0
        assert putting.state == PuttingState.SETTLED

    def test_putting_outcome_on_other_kind(self) -> None:
        manager = _manager()
        skins = manager.add_wager(SkinsBet(amount=10, players=["a", "b"]))
        with pytest.raises(InvalidWagerError):
            manager.record_putting_outcome(skins.id, ["a"])

    def test_breakdown_lists_each_wager(self) -> None:
        manager = _manager(player_scores={"a": ["3"] * 18, "b": ["4"] * 18})
        match = manager.add_wager(
            IndividualMatchBet(player1_id="a", player2_id="b", per_hole_amount=1)
        )
        manager.add_wager(SkinsBet(amount=10, players=["a", "b"]))
        manager.add_wager(SkinsBet(amount=10, players=["b", "c"]))
        items = manager.bet_breakdown("a")
        assert [i.kind for i in items] == [WagerKind.INDIVIDUAL, WagerKind.SKINS]
        assert items[0].wager_id == match.id
        assert items[0].amount == 16.0
        assert items[1].posted is False

    def test_alabama_matchups_need_posting(self) -> None:
        manager = _manager(player_scores={"a": ["4"] * 18, "b": ["5"] * 18})
        bet = manager.add_wager(AlabamaBet(teams=[["a"], ["b"]], front_nine_amount=10))
        assert manager.alabama_matchups(bet.id, "a") == {}
        manager.post_round()
        matchups = manager.alabama_matchups(bet.id, "a")
        assert list(matchups) == [1]
        assert matchups[1].front == 10.0


class TestRoster:
    def test_all_players_sorted_by_first_name(self) -> None:
        manager = _manager(players=[_player("z", "Zed"), _player("a", "Al")])
        manager.add_wager(SkinsBet(amount=1, players=["a", "m"]))
        assert [p.id for p in manager.all_players()] == ["a", "m", "z"]


class TestScoreSharing:
    def _shared(self, **kwargs) -> SharedScoreData:
        defaults = dict(
            group_id="2",
            course_id="bayou-desiard",
            course_name="Bayou DeSiard Country Club",
            tee_box_name="Blue",
            players=[
                SharedPlayerScores(
                    player_id="d", first_name="Di", last_name="Tester", scores=["5"] * 18
                ),
                SharedPlayerScores(
                    player_id="a", first_name="Al", last_name="Tester", scores=["3", "3"]
                ),
            ],
        )
        defaults.update(kwargs)
        return SharedScoreData(**defaults)

    def test_import_adds_players_and_cards(self) -> None:
        blue = BAYOU_DESIARD.tee_box("Blue")
        manager = _manager(tee_box=blue, player_scores={"a": ["4"] * 18})
        assert manager.import_scores(self._shared(), "bayou-desiard", blue) is True
        assert "d" in manager.players
        assert manager.player_scores["a"] == ["3", "3"] + [""] * 16

    def test_import_rejects_other_tee(self) -> None:
        blue = BAYOU_DESIARD.tee_box("Blue")
        manager = _manager(tee_box=blue)
        shared = self._shared(tee_box_name="Gold")
        assert manager.import_scores(shared, "bayou-desiard", blue) is False
        assert "d" not in manager.players

    def test_groups_merge_in_order(self) -> None:
        manager = _manager()
        manager.update_group_scores({"a": ["5"] * 18, "b": ["5"] * 18}, 1)
        manager.update_group_scores({"a": ["4"] * 18}, 0)
        assert manager.merge_group_scores() == 3
        assert manager.player_scores["a"] == ["5"] * 18
        assert manager.player_scores["b"] == ["5"] * 18

    def test_negative_group_index(self) -> None:
        with pytest.raises(InvalidGroupError):
            _manager().update_group_scores({}, -1)
