"""Fixtures that lay out a JSON data directory under ``tmp_path``."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


def write_json(path: Path, payload) -> None:
    path.write_text(json.dumps(payload), encoding="utf-8")


def order_doc(order_id: str, created: str, **overrides) -> dict:
    doc = {
        "_id": order_id,
        "user": "u1",
        "items": [{"seller": "s1", "book": "b1", "quantity": 1}],
        "pricing": {
            "subtotal": 20,
            "deliveryFee": 5,
            "total": 25,
            "sellerBreakdown": [{"seller": "s1", "total": 20}],
        },
        "paymentStatus": "paid",
        "orderStatus": "processing",
        "refundStatus": "none",
        "shippingAddress": {"city": "Springfield"},
        "createdAt": created,
    }
    doc.update(overrides)
    return doc


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    write_json(tmp_path / "users.json", [
        {"_id": "s1", "name": "Paper Lantern"},
        {"_id": "s2", "name": "Second Shelf"},
        {"_id": "u1", "name": "Alice"},
    ])
    write_json(tmp_path / "books.json", [
        {"_id": "b1", "title": "Dune", "seller": "s1", "price": "9.99"},
        {"_id": "b2", "title": "Ubik", "seller": "s1"},
        {"_id": "b3", "title": "Emma", "seller": "s2"},
    ])
    write_json(tmp_path / "orders.json", [
        order_doc(
            "o1", "2024-01-02T10:00:00Z",
            orderStatus="delivered",
            items=[
                {"seller": "s1", "book": "b1", "quantity": 1},
                {"seller": "s2", "book": "b3", "quantity": 4},
            ],
            pricing={
                "subtotal": 60, "deliveryFee": 5, "total": 65,
                "sellerBreakdown": [
                    {"seller": "s1", "total": 15},
                    {"seller": "s2", "total": 45},
                ],
            },
        ),
        order_doc("o2", "2024-01-04T08:00:00Z",
                  items=[{"seller": "s1", "book": "b2", "quantity": 2}],
                  pricing={"subtotal": 25, "deliveryFee": 5, "total": 30,
                           "sellerBreakdown": [{"seller": "s1", "total": 25}]}),
        order_doc("o3", "2024-01-05T23:00:00Z", paymentStatus="pending",
                  pricing={"subtotal": 10, "deliveryFee": 5, "total": 15}),
        order_doc("o4", "2024-01-06T00:00:01Z"),
        order_doc("o5", "2024-01-03T00:00:00Z", orderStatus="canceled"),
        order_doc("o6", "2024-01-03T00:00:00Z", refundStatus="completed"),
        order_doc("o7", "2024-01-03T00:00:00Z", paymentStatus="failed"),
        order_doc("o8", "2024-01-03T00:00:00Z", user="ghost",
                  items=[{"seller": "s1", "book": None, "quantity": 1}]),
    ])
    return tmp_path
