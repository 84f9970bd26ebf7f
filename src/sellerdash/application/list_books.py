"""Application service: List Seller Books use case (query)."""

from __future__ import annotations

from dataclasses import dataclass

from sellerdash.domain.repository.book_repository import BookRepository


@dataclass(frozen=True)
class BookLineDTO:
    id: str
    title: str
    price: str  # formatted, e.g. "$12.50"; "-" when unpriced


class ListBooksHandler:

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    def handle(self, seller_id: str) -> list[BookLineDTO]:
        books = self._book_repo.list_by_seller(seller_id)
        return [
            BookLineDTO(
                id=book.id,
                title=book.title,
                price=str(book.price) if book.price is not None else "-",
            )
            for book in sorted(books, key=lambda b: b.title.lower())
        ]
