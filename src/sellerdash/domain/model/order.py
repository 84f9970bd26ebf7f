"""Order entity as stored in the shared, multi-vendor ledger.

A single order row serves many sellers: its line items and its pricing
breakdown may each hold entries for several of them.  This package only
ever *reads* orders, so the entity carries no state transitions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from sellerdash.domain.model.user import User
from sellerdash.domain.model.value_objects import Money


class PaymentStatus(Enum):
    PAID = "paid"
    PENDING = "pending"
    FAILED = "failed"
    REFUNDED = "refunded"


class OrderStatus(Enum):
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELED = "canceled"


class RefundStatus(Enum):
    NONE = "none"
    PARTIAL = "partial"
    COMPLETED = "completed"


def same_id(left: object, right: object) -> bool:
    """Compare identifiers that may arrive as ints, strings or ObjectIds."""
    if left is None or right is None:
        return False
    return str(left) == str(right)


@dataclass(frozen=True)
class OrderLineItem:
    seller_id: str
    book_id: str | None
    quantity: int
    book_title: str | None = None  # resolved by the data store, if joined


@dataclass(frozen=True)
class SellerShare:
    """One seller's earnings from a multi-vendor order."""

    seller_id: str
    total: Money


@dataclass(frozen=True)
class Pricing:
    subtotal: Money
    delivery_fee: Money
    total: Money
    seller_breakdown: tuple[SellerShare, ...] = ()

    def share_for(self, seller_id: str) -> SellerShare | None:
        """Linear search of the breakdown; ``None`` when the seller has no entry."""
        for share in self.seller_breakdown:
            if same_id(share.seller_id, seller_id):
                return share
        return None


@dataclass(frozen=True)
class Order:
    """Read-only view of a ledger order.

    Status fields are kept as the raw strings found in the ledger so that
    values this package does not know about never break a read.  Compare
    them against the enums above.
    """

    id: str
    items: tuple[OrderLineItem, ...]
    pricing: Pricing
    payment_status: str
    order_status: str
    created_at: datetime
    refund_status: str = RefundStatus.NONE.value
    buyer_id: str | None = None
    buyer: User | None = None  # resolved by the data store, if joined
    shipping_address: dict | None = field(default=None, compare=False)

    @property
    def is_paid(self) -> bool:
        return self.payment_status == PaymentStatus.PAID.value

    @property
    def is_pending(self) -> bool:
        return self.payment_status == PaymentStatus.PENDING.value

    @property
    def is_canceled(self) -> bool:
        return self.order_status == OrderStatus.CANCELED.value

    @property
    def is_fully_refunded(self) -> bool:
        return self.refund_status == RefundStatus.COMPLETED.value

    def involves_seller(self, seller_id: str) -> bool:
        return any(same_id(item.seller_id, seller_id) for item in self.items)

    def items_for_seller(self, seller_id: str) -> list[OrderLineItem]:
        """Only the line items fulfilled by *seller_id*, in ledger order."""
        return [item for item in self.items if same_id(item.seller_id, seller_id)]
