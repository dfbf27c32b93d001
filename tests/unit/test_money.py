"""Tests for gw_common.money."""

import pytest

from src.gw_common.money import round_amount, split_evenly, validate_stake


class TestRoundAmount:
    def test_rounds_to_cents(self) -> None:
        assert round_amount(-11.428571) == -11.43
        assert round_amount(31.428571) == 31.43

    def test_negative_zero_normalized(self) -> None:
        assert str(round_amount(-0.001)) == "0.0"


class TestValidateStake:
    def test_zero_allowed(self) -> None:
        validate_stake(0.0)

    def test_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="front_nine_amount"):
            validate_stake(-1.0, "front_nine_amount")


class TestSplitEvenly:
    def test_split(self) -> None:
        assert split_evenly(30.0, 3) == 10.0

    def test_no_parts(self) -> None:
        assert split_evenly(30.0, 0) == 0.0
