"""Amount helpers for wager settlement.

Stakes and balances are plain floats (dollars). Proportional payouts divide
pots by skin/Do-Da counts and team sizes, so intermediate values are kept at
full precision and rounded exactly once, when a ledger total is reported.
"""

SETTLEMENT_PLACES = 2


def round_amount(amount: float) -> float:
    """Round a final ledger total to cents: 11.428571 -> 11.43."""
    rounded = round(amount, SETTLEMENT_PLACES)
    # normalize -0.0 so serialized balances never read "-0.0"
    return rounded + 0.0


def validate_stake(amount: float, field_name: str = "amount") -> None:
    """Stakes may be zero (a free game) but never negative."""
    if amount < 0:
        raise ValueError(f"{field_name} must be >= 0, got {amount}")


def split_evenly(total: float, parts: int) -> float:
    """Value of one share when `total` is divided into `parts` shares (0 if none)."""
    if parts <= 0:
        return 0.0
    return total / parts
