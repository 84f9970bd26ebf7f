"""Domain service: Seller Ledger Aggregator.

Reduces orders from the shared multi-vendor ledger to one seller's view.
Two independent reductions run over two independently fetched snapshots:

- ``summarize`` walks the *summary set* and produces the counters.
- ``project`` walks the *detail set* (paid or pending only) and produces
  one ``DashboardOrderView`` per order, newest first.

Both reductions obtain the seller's earnings through ``earnings_for``, so
a paid order that shows up in both sets always carries the same figure.

Malformed orders never abort a reduction.  A missing breakdown entry counts
as zero earnings, a missing book reference as an empty title, and each such
anomaly is tallied in ``anomalies`` rather than raised or logged.
"""

from __future__ import annotations

from collections.abc import Iterable

from sellerdash.domain.model.dashboard import (
    BookLineView,
    BuyerView,
    DashboardOrderView,
    DashboardSummary,
    LedgerAnomalies,
    PricingView,
)
from sellerdash.domain.model.order import Order, OrderLineItem, OrderStatus
from sellerdash.domain.model.value_objects import Money


class SellerLedgerAggregator:

    def __init__(self, seller_id: str) -> None:
        self._seller_id = str(seller_id)
        self.anomalies = LedgerAnomalies()

    @property
    def seller_id(self) -> str:
        return self._seller_id

    # --- Shared helper --------------------------------------------------------

    def earnings_for(self, order: Order) -> Money:
        """The seller's own share of *order*; zero when no breakdown entry matches."""
        share = order.pricing.share_for(self._seller_id)
        if share is None:
            self.anomalies.missing_shares += 1
            return Money.zero()
        return share.total

    # --- Summary reduction ----------------------------------------------------

    def summarize(
        self, orders: Iterable[Order], available_books: int = 0
    ) -> DashboardSummary:
        """Count the summary set into payment/fulfilment buckets.

        Only paid orders add to ``total_orders`` and revenue, and a paid
        order lands in at most one of the delivered/processing buckets.
        Pending orders are counted separately.  Any other payment status
        contributes to nothing.
        """
        total_orders = 0
        delivered = 0
        pending = 0
        processing = 0
        revenue = Money.zero()

        for order in orders:
            if order.is_paid:
                total_orders += 1
                revenue = revenue + self.earnings_for(order)
                if order.order_status == OrderStatus.DELIVERED.value:
                    delivered += 1
                elif order.order_status == OrderStatus.PROCESSING.value:
                    processing += 1
            elif order.is_pending:
                pending += 1

        return DashboardSummary(
            total_orders=total_orders,
            paid_and_delivered_orders=delivered,
            pending_payment_orders=pending,
            processing_orders=processing,
            total_revenue=revenue,
            available_books=available_books,
        )

    # --- Detail projection ----------------------------------------------------

    def project(self, orders: Iterable[Order]) -> list[DashboardOrderView]:
        """Project the detail set to per-order views, newest first.

        An order id seen twice is kept once (first occurrence wins).  The
        sort is stable, so orders sharing a timestamp keep ledger order.
        """
        seen: set[str] = set()
        views: list[DashboardOrderView] = []

        for order in orders:
            key = str(order.id)
            if key in seen:
                self.anomalies.duplicate_orders += 1
                continue
            seen.add(key)
            views.append(self._to_view(order))

        views.sort(key=lambda view: view.created_at, reverse=True)
        return views

    # --- Mapping --------------------------------------------------------------

    def _to_view(self, order: Order) -> DashboardOrderView:
        pricing = order.pricing
        return DashboardOrderView(
            id=order.id,
            buyer=self._buyer_view(order),
            payment_status=order.payment_status,
            order_status=order.order_status,
            pricing=PricingView(
                subtotal=pricing.subtotal,
                delivery_fee=pricing.delivery_fee,
                total=pricing.total,
                seller_earnings=self.earnings_for(order),
            ),
            shipping_address=order.shipping_address,
            books=[
                self._book_line(item)
                for item in order.items_for_seller(self._seller_id)
            ],
            created_at=order.created_at,
        )

    def _buyer_view(self, order: Order) -> BuyerView:
        if order.buyer is None:
            self.anomalies.missing_buyers += 1
            return BuyerView(id=order.buyer_id, name="")
        return BuyerView(id=order.buyer.id, name=order.buyer.name)

    def _book_line(self, item: OrderLineItem) -> BookLineView:
        if item.book_title is None:
            self.anomalies.missing_books += 1
            return BookLineView(title="", quantity=item.quantity)
        return BookLineView(title=item.book_title, quantity=item.quantity)
