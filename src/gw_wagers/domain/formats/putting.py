"""Putting ledger: a running side game fed by recorded putt outcomes.

Nothing here reads the score table. Each recorded outcome is applied once;
recording the same outcome twice charges it twice.
"""

import logging

from src.gw_common.enums import PuttingState
from src.gw_common.errors import InvalidOutcomeError
from src.gw_wagers.domain.models import PuttingLedgerBet

logger = logging.getLogger(__name__)


def record_outcome(
    bet: PuttingLedgerBet,
    winners: list[str] | set[str],
    amount: float | None = None,
) -> dict[str, float]:
    """Apply one outcome to the running totals. Returns this outcome's deltas."""
    stake = bet.amount if amount is None else amount
    if stake < 0:
        raise InvalidOutcomeError(f"amount must be >= 0, got {stake}")

    players = list(dict.fromkeys(bet.players))
    winner_set = set(winners)
    strangers = winner_set.difference(players)
    if strangers:
        raise InvalidOutcomeError(f"not in this game: {', '.join(sorted(strangers))}")

    losers = len(players) - len(winner_set)
    deltas: dict[str, float] = {}
    for player_id in players:
        if player_id in winner_set:
            deltas[player_id] = stake * losers
        else:
            deltas[player_id] = -stake * len(winner_set)
        bet.player_totals[player_id] = bet.player_totals.get(player_id, 0.0) + deltas[player_id]

    bet.state = PuttingState.SETTLED
    logger.debug("Putting outcome on %s: winners=%s stake=%s", bet.id, sorted(winner_set), stake)
    return deltas


def putting_totals(bet: PuttingLedgerBet) -> dict[str, float]:
    return {player_id: bet.player_totals.get(player_id, 0.0) for player_id in bet.players}
