"""JSON-file-backed implementation of OrderRepository.

Reads Mongo-style order documents::

    {"_id": ..., "user": <buyer id>, "items": [{"seller", "book", "quantity"}],
     "pricing": {"subtotal", "deliveryFee", "total",
                 "sellerBreakdown": [{"seller", "total"}]},
     "paymentStatus", "orderStatus", "refundStatus",
     "shippingAddress", "createdAt"}

The detail query resolves buyer names and book titles from the user and
book files, loading each file once per query.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from decimal import Decimal, InvalidOperation
from pathlib import Path

from sellerdash.domain.exceptions import DataStoreError, ValidationError
from sellerdash.domain.model.order import (
    Order,
    OrderLineItem,
    OrderStatus,
    PaymentStatus,
    Pricing,
    RefundStatus,
    SellerShare,
    same_id,
)
from sellerdash.domain.model.value_objects import DateWindow, Money
from sellerdash.domain.repository.order_repository import OrderRepository
from sellerdash.infrastructure.persistence.json_book_repository import (
    JsonBookRepository,
)
from sellerdash.infrastructure.persistence.json_store import (
    load_records,
    parse_timestamp,
)
from sellerdash.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)

logger = logging.getLogger(__name__)

DETAIL_PAYMENT_STATUSES = (PaymentStatus.PAID.value, PaymentStatus.PENDING.value)


class JsonOrderRepository(OrderRepository):

    def __init__(
        self,
        file_path: Path,
        book_repo: JsonBookRepository,
        user_repo: JsonUserRepository,
    ) -> None:
        self._file_path = file_path
        self._book_repo = book_repo
        self._user_repo = user_repo

    # --- OrderRepository interface --------------------------------------------

    def find_summary_orders(self, seller_id: str, window: DateWindow) -> list[Order]:
        return self._load(seller_id, window)

    def find_detail_orders(self, seller_id: str, window: DateWindow) -> list[Order]:
        orders = [
            order
            for order in self._load(seller_id, window)
            if order.payment_status in DETAIL_PAYMENT_STATUSES
        ]
        orders.sort(key=lambda order: order.created_at, reverse=True)
        return self._populate(orders)

    # --- Query predicates -----------------------------------------------------

    @staticmethod
    def _matches(raw: object, seller_id: str, window: DateWindow) -> bool:
        """Filter on the raw document, before anything is materialized.

        Records that cannot belong to this query (another seller's, canceled,
        fully refunded, outside the window, or without a usable
        ``createdAt``) are skipped without being parsed further.
        """
        if not isinstance(raw, dict):
            return False
        items = raw.get("items")
        if not isinstance(items, list) or not any(
            isinstance(i, dict) and same_id(i.get("seller"), seller_id)
            for i in items
        ):
            return False
        if raw.get("orderStatus") == OrderStatus.CANCELED.value:
            return False
        if raw.get("refundStatus") == RefundStatus.COMPLETED.value:
            return False
        created = raw.get("createdAt")
        if not isinstance(created, str):
            return False
        try:
            return window.contains(parse_timestamp(created))
        except ValueError:
            return False

    # --- Joins ----------------------------------------------------------------

    def _populate(self, orders: list[Order]) -> list[Order]:
        """Attach buyer and book titles, like a populate() on the store side."""
        if not orders:
            return orders
        books = self._book_repo.load_index()
        users = self._user_repo.load_index()

        populated: list[Order] = []
        for order in orders:
            items = tuple(
                replace(item, book_title=books[item.book_id].title)
                if item.book_id is not None and item.book_id in books
                else item
                for item in order.items
            )
            buyer = users.get(order.buyer_id) if order.buyer_id is not None else None
            populated.append(replace(order, items=items, buyer=buyer))
        return populated

    # --- Serialization --------------------------------------------------------

    def _load(self, seller_id: str, window: DateWindow) -> list[Order]:
        orders: list[Order] = []
        for raw in load_records(self._file_path):
            if not self._matches(raw, seller_id, window):
                continue
            try:
                orders.append(self._to_domain(raw))
            except (
                AttributeError,
                KeyError,
                TypeError,
                ValueError,
                ValidationError,
            ) as exc:
                order_id = raw.get("_id")
                logger.error(
                    "Malformed order record %r in %s: %s",
                    order_id,
                    self._file_path,
                    exc,
                )
                raise DataStoreError(
                    f"Malformed order record {order_id!r} in {self._file_path}: {exc}"
                ) from exc
        return orders

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        pricing = raw.get("pricing") or {}
        breakdown = pricing.get("sellerBreakdown") or []
        buyer_id = raw.get("user")
        return Order(
            id=str(raw["_id"]),
            items=tuple(
                OrderLineItem(
                    seller_id=str(i["seller"]),
                    book_id=str(i["book"]) if i.get("book") is not None else None,
                    quantity=_quantity(i.get("quantity")),
                )
                for i in raw.get("items") or []
            ),
            pricing=Pricing(
                subtotal=_amount(pricing.get("subtotal")),
                delivery_fee=_amount(pricing.get("deliveryFee")),
                total=_amount(pricing.get("total")),
                seller_breakdown=tuple(
                    SellerShare(
                        seller_id=str(s["seller"]),
                        total=_amount(s.get("total")),
                    )
                    for s in breakdown
                ),
            ),
            payment_status=raw.get("paymentStatus", ""),
            order_status=raw.get("orderStatus", ""),
            refund_status=raw.get("refundStatus", RefundStatus.NONE.value),
            buyer_id=str(buyer_id) if buyer_id is not None else None,
            shipping_address=raw.get("shippingAddress"),
            created_at=parse_timestamp(raw["createdAt"]),
        )


def _amount(value: object) -> Money:
    """A stored amount; null reads as zero and negative adjustments clamp to zero."""
    if not value:
        return Money.zero()
    try:
        amount = max(Decimal(str(value)), Decimal("0"))
    except InvalidOperation as exc:
        raise ValidationError(f"Invalid money amount: {value!r}") from exc
    return Money(amount)


def _quantity(value: object) -> int:
    """A stored line quantity; must be a whole number, null reads as zero."""
    if value is None:
        return 0
    if isinstance(value, bool):
        raise ValidationError(f"Invalid quantity: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ValidationError(f"Invalid quantity: {value!r}")
