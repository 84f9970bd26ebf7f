"""Abstract repository for ledger orders.

Defined in the domain layer so the domain never depends on
infrastructure.  Implementations must raise ``DataStoreError`` when the
store cannot be read; they must never return a partial result.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from sellerdash.domain.model.order import Order
from sellerdash.domain.model.value_objects import DateWindow


class OrderRepository(ABC):

    @abstractmethod
    def find_summary_orders(self, seller_id: str, window: DateWindow) -> list[Order]:
        """Orders the seller takes part in, created inside *window*.

        Canceled orders and orders whose refund is completed are excluded.
        """

    @abstractmethod
    def find_detail_orders(self, seller_id: str, window: DateWindow) -> list[Order]:
        """Same as ``find_summary_orders``, restricted to paid or pending orders.

        Buyer names and book titles must already be resolved on the
        returned orders.
        """
