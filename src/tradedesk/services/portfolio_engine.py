"""Portfolio engine for deriving positions and realized P/L from the ledger."""

import logging
from decimal import Decimal
from typing import Iterable

from tradedesk.domain.models import TradeRecord, TradeSide
from tradedesk.domain.views import (
    Position,
    PortfolioSummary,
    OversellWarning,
    PortfolioSnapshot,
)
from tradedesk.services.ledger_service import LedgerService

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def _apply_buy(position: Position, trade: TradeRecord) -> None:
    position.total_cost += trade.quantity * trade.price
    position.quantity += trade.quantity
    position.average_cost = (
        position.total_cost / position.quantity if position.quantity > ZERO else ZERO
    )


def _apply_sell(position: Position, trade: TradeRecord) -> Decimal:
    """Apply a sell against the average cost; returns the quantity actually sold."""
    sell_qty = min(trade.quantity, position.quantity)
    cost_basis = sell_qty * position.average_cost
    position.realized_pl += sell_qty * trade.price - cost_basis
    position.quantity = max(ZERO, position.quantity - sell_qty)
    # Average cost is unchanged by a sell
    position.total_cost = position.quantity * position.average_cost
    return sell_qty


def replay_ledger(trades: Iterable[TradeRecord]) -> PortfolioSnapshot:
    """
    Fold the ledger, in order, into per-symbol positions.

    Sells larger than the held quantity are clamped to it and reported as
    OversellWarning; they never produce a negative position. The fold has
    no side effects besides logging.
    """
    positions: dict[str, Position] = {}
    oversells: list[OversellWarning] = []
    trade_count = 0

    for trade in trades:
        trade_count += 1
        position = positions.get(trade.symbol)
        if position is None:
            position = positions[trade.symbol] = Position(symbol=trade.symbol)

        if trade.side == TradeSide.BUY:
            _apply_buy(position, trade)
            continue

        held = position.quantity
        sold = _apply_sell(position, trade)
        if sold < trade.quantity:
            logger.warning(
                "Oversell clamped for %s (trade %s): requested %s, held %s",
                trade.symbol, trade.trade_id, trade.quantity, held,
            )
            oversells.append(
                OversellWarning(
                    trade_id=trade.trade_id,
                    symbol=trade.symbol,
                    requested=trade.quantity,
                    held=held,
                )
            )

    return PortfolioSnapshot(
        positions=positions,
        summary=summarize_positions(positions, trade_count=trade_count),
        oversells=oversells,
    )


def compute_positions(trades: Iterable[TradeRecord]) -> dict[str, Position]:
    """Return symbol -> Position for the ledger (closed positions included)."""
    return replay_ledger(trades).positions


def summarize_positions(
    positions: dict[str, Position],
    trade_count: int = 0,
) -> PortfolioSummary:
    """Aggregate invested cost, realized P/L and open position count."""
    summary = PortfolioSummary(total_trades=trade_count)
    for position in positions.values():
        summary.total_invested += position.total_cost
        summary.total_realized_pl += position.realized_pl
        if position.is_open:
            summary.active_positions += 1
    return summary


class PortfolioEngine:
    """
    Engine for computing portfolio state from the ledger.

    Holds no state of its own: every call replays the full ledger, so the
    result always matches the current ledger exactly.
    """

    def __init__(self, ledger_service: LedgerService):
        self._ledger = ledger_service

    def snapshot(self) -> PortfolioSnapshot:
        """Replay the current ledger."""
        return replay_ledger(self._ledger.list_trades())

    def get_positions(self, include_closed: bool = False) -> list[Position]:
        """Return positions sorted by symbol; flat positions only if include_closed."""
        positions = self.snapshot().positions
        return [
            positions[symbol]
            for symbol in sorted(positions)
            if include_closed or positions[symbol].is_open
        ]

    def summary(self) -> PortfolioSummary:
        """Return portfolio-level aggregates."""
        return self.snapshot().summary
