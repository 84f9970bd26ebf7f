"""Book aggregate.

Books live independently of orders and belong to exactly one seller.
The dashboard only counts them and borrows their titles.
"""

from __future__ import annotations

from dataclasses import dataclass

from sellerdash.domain.model.value_objects import Money


@dataclass(frozen=True)
class Book:
    id: str
    title: str
    seller_id: str
    price: Money | None = None
