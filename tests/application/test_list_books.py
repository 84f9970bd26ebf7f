"""Tests for the ListBooks query."""

from sellerdash.application.list_books import ListBooksHandler
from sellerdash.domain.model.book import Book
from sellerdash.domain.model.value_objects import Money
from tests.fakes import FakeBookRepository


def test_lists_only_sellers_books_sorted_by_title():
    repo = FakeBookRepository([
        Book(id="1", title="ubik", seller_id="S", price=Money.of("8")),
        Book(id="2", title="Dune", seller_id="S"),
        Book(id="3", title="Emma", seller_id="T"),
    ])
    lines = ListBooksHandler(repo).handle("S")
    assert [(l.title, l.price) for l in lines] == [("Dune", "-"), ("ubik", "$8.00")]


def test_empty_catalog():
    assert ListBooksHandler(FakeBookRepository()).handle("S") == []
