"""Zero-sum checks over settled wagers.

For any wager whose stakes only move between its own players, the
amounts across all players sum to zero (within float tolerance). Do-Da pools
with no Do-Da hold the pot instead, so their unclaimed pot is added back.
"""

import logging
from collections.abc import Mapping

logger = logging.getLogger(__name__)

TOLERANCE = 1e-6


def verify_zero_sum(
    label: str,
    amounts: Mapping[str, float],
    held: float = 0.0,
) -> list[str]:
    """Return a list with one violation string if the wager does not net to zero."""
    violations: list[str] = []
    net = sum(amounts.values()) + held
    if abs(net) > TOLERANCE:
        msg = (
            f"zero-sum violated: {label} players({sum(amounts.values()):.6f}) + "
            f"held({held:.6f}) = {net:.6f} != 0"
        )
        violations.append(msg)
        logger.error(msg)
    return violations
