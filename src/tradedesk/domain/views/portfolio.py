"""View models for positions derived from the ledger."""

from dataclasses import dataclass, field
from decimal import Decimal

ZERO = Decimal("0")


@dataclass
class Position:
    """
    Derived holding for one symbol.

    IMPORTANT: Never persisted or edited directly; always rebuilt from the ledger.
    """

    symbol: str
    quantity: Decimal = field(default_factory=lambda: ZERO)
    average_cost: Decimal = field(default_factory=lambda: ZERO)
    total_cost: Decimal = field(default_factory=lambda: ZERO)
    realized_pl: Decimal = field(default_factory=lambda: ZERO)

    @property
    def is_open(self) -> bool:
        return self.quantity > ZERO


@dataclass
class PortfolioSummary:
    """Portfolio-level aggregates over all positions."""

    total_invested: Decimal = field(default_factory=lambda: ZERO)
    total_realized_pl: Decimal = field(default_factory=lambda: ZERO)
    active_positions: int = 0
    total_trades: int = 0


@dataclass(frozen=True)
class OversellWarning:
    """A sell that asked for more than was held and was clamped."""

    trade_id: str
    symbol: str
    requested: Decimal
    held: Decimal

    @property
    def excess(self) -> Decimal:
        return self.requested - self.held


@dataclass
class PortfolioSnapshot:
    """Result of replaying a ledger."""

    positions: dict[str, Position] = field(default_factory=dict)
    summary: PortfolioSummary = field(default_factory=PortfolioSummary)
    oversells: list[OversellWarning] = field(default_factory=list)
