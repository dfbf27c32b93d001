"""Tests for gw_common.errors and gw_common.response."""

from src.gw_common.errors import (
    AppError,
    CourseNotFoundError,
    InvalidHoleError,
    InvalidOutcomeError,
    InvalidWagerError,
    PlayerNotFoundError,
    ScoreImportRejectedError,
    TeeBoxNotSelectedError,
    WagerNotFoundError,
)
from src.gw_common.response import ApiResponse, error_response, success_response


class TestAppError:
    def test_base_error(self) -> None:
        err = AppError(code=9002, message="Internal error")
        assert err.code == 9002
        assert err.message == "Internal error"
        assert err.http_status == 500

    def test_is_exception(self) -> None:
        assert isinstance(AppError(code=1001, message="test"), Exception)


class TestSpecificErrors:
    def test_course_not_found(self) -> None:
        err = CourseNotFoundError("augusta")
        assert err.code == 1001
        assert err.http_status == 404
        assert "augusta" in err.message

    def test_round_errors(self) -> None:
        assert TeeBoxNotSelectedError().code == 2001
        hole = InvalidHoleError(19)
        assert hole.code == 2002
        assert hole.http_status == 422
        assert "19" in hole.message
        assert ScoreImportRejectedError("other tee").http_status == 409

    def test_wager_errors(self) -> None:
        assert WagerNotFoundError("w1").http_status == 404
        assert InvalidWagerError("bad").code == 3002
        assert InvalidOutcomeError("bad").code == 3003

    def test_player_not_found(self) -> None:
        err = PlayerNotFoundError("p9")
        assert err.code == 4001
        assert isinstance(err, AppError)


class TestApiResponse:
    def test_success_response(self) -> None:
        resp = success_response({"total_winnings": 12.5})
        assert resp.code == 0
        assert resp.message == "success"
        assert resp.data == {"total_winnings": 12.5}
        assert resp.request_id.startswith("req_")

    def test_error_response(self) -> None:
        resp = error_response(3001, "Wager not found: w1")
        assert resp.code == 3001
        assert resp.data is None

    def test_serializes(self) -> None:
        dumped = ApiResponse().model_dump()
        assert set(dumped) == {"code", "message", "data", "timestamp", "request_id"}
