"""Dashboard projections: transient, per-request read models.

Nothing here is persisted.  A summary and its detail list are built from
two independently fetched order snapshots and handed straight back to the
caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from sellerdash.domain.model.value_objects import Money


@dataclass(frozen=True)
class DashboardSummary:
    total_orders: int = 0
    paid_and_delivered_orders: int = 0
    pending_payment_orders: int = 0
    processing_orders: int = 0
    total_revenue: Money = field(default_factory=Money.zero)
    available_books: int = 0


@dataclass(frozen=True)
class BuyerView:
    id: str | None
    name: str


@dataclass(frozen=True)
class BookLineView:
    title: str
    quantity: int


@dataclass(frozen=True)
class PricingView:
    subtotal: Money
    delivery_fee: Money
    total: Money
    seller_earnings: Money  # this seller's share, never the order total


@dataclass(frozen=True)
class DashboardOrderView:
    """One order as seen by a single seller."""

    id: str
    buyer: BuyerView
    payment_status: str
    order_status: str
    pricing: PricingView
    shipping_address: dict | None
    books: list[BookLineView]
    created_at: datetime


@dataclass
class LedgerAnomalies:
    """Aggregate count of record anomalies absorbed during one build.

    Individual anomalies are never logged; only these totals are.
    """

    missing_shares: int = 0
    missing_books: int = 0
    missing_buyers: int = 0
    duplicate_orders: int = 0

    @property
    def total(self) -> int:
        return (
            self.missing_shares
            + self.missing_books
            + self.missing_buyers
            + self.duplicate_orders
        )
