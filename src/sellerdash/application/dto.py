"""Data Transfer Objects: plain containers that cross layer boundaries.

``DashboardDTO.to_dict()`` produces the response document consumers
depend on; its camelCase field names (``totalOrders``,
``pricing.sellerEarnings``, ``books[].title`` ...) must not change.
"""

from __future__ import annotations

from dataclasses import dataclass

from sellerdash.domain.model.dashboard import (
    DashboardOrderView,
    DashboardSummary,
    LedgerAnomalies,
)
from sellerdash.domain.model.value_objects import DateWindow


@dataclass(frozen=True)
class DashboardDTO:
    """Output: the summary/detail pair for one seller and one window."""

    seller_id: str
    window: DateWindow
    summary: DashboardSummary
    orders: list[DashboardOrderView]
    anomalies: LedgerAnomalies

    def to_dict(self) -> dict:
        return {
            "summary": summary_to_dict(self.summary),
            "orders": [order_to_dict(order) for order in self.orders],
        }


def summary_to_dict(summary: DashboardSummary) -> dict:
    return {
        "totalOrders": summary.total_orders,
        "paidAndDeliveredOrders": summary.paid_and_delivered_orders,
        "pendingPaymentOrders": summary.pending_payment_orders,
        "processingOrders": summary.processing_orders,
        "totalRevenue": summary.total_revenue.as_number(),
        "availableBooks": summary.available_books,
    }


def order_to_dict(view: DashboardOrderView) -> dict:
    return {
        "_id": view.id,
        "buyer": {"_id": view.buyer.id, "name": view.buyer.name},
        "paymentStatus": view.payment_status,
        "orderStatus": view.order_status,
        "pricing": {
            "subtotal": view.pricing.subtotal.as_number(),
            "deliveryFee": view.pricing.delivery_fee.as_number(),
            "total": view.pricing.total.as_number(),
            "sellerEarnings": view.pricing.seller_earnings.as_number(),
        },
        "shippingAddress": view.shipping_address,
        "books": [
            {"title": line.title, "quantity": line.quantity} for line in view.books
        ],
        "createdAt": view.created_at.isoformat(),
    }
