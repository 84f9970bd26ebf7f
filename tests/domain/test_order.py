"""Unit tests for the read-only ledger Order and its pricing breakdown."""

from sellerdash.domain.model.order import same_id
from sellerdash.domain.model.value_objects import Money
from tests.factories import item, make_order


class TestSameId:

    def test_int_and_string_match(self):
        assert same_id(42, "42")

    def test_none_never_matches(self):
        assert not same_id(None, None)
        assert not same_id("s1", None)


class TestShareFor:

    def test_finds_own_entry(self):
        order = make_order(shares={"A": "10", "B": "20"})
        assert order.pricing.share_for("B").total == Money.of("20")

    def test_missing_entry_is_none(self):
        order = make_order(shares={"A": "10"})
        assert order.pricing.share_for("C") is None

    def test_empty_breakdown_is_none(self):
        assert make_order(shares={}).pricing.share_for("A") is None


class TestSellerSlices:

    def test_items_for_seller_keeps_only_own_items(self):
        order = make_order(items=[item("A", "Dune"), item("B", "Emma"), item("A", "Ubik")])
        titles = [i.book_title for i in order.items_for_seller("A")]
        assert titles == ["Dune", "Ubik"]

    def test_involves_seller(self):
        order = make_order(items=[item("A"), item("B")])
        assert order.involves_seller("B")
        assert not order.involves_seller("C")

    def test_status_flags(self):
        order = make_order(payment="pending", status="canceled", refund="completed")
        assert order.is_pending
        assert not order.is_paid
        assert order.is_canceled
        assert order.is_fully_refunded
