"""JSON-file-backed implementation of BookRepository."""

from __future__ import annotations

from pathlib import Path

from sellerdash.domain.exceptions import DataStoreError, ValidationError
from sellerdash.domain.model.book import Book
from sellerdash.domain.model.order import same_id
from sellerdash.domain.model.value_objects import Money
from sellerdash.domain.repository.book_repository import BookRepository
from sellerdash.infrastructure.persistence.json_store import load_records


class JsonBookRepository(BookRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- BookRepository interface ---------------------------------------------

    def list_by_seller(self, seller_id: str) -> list[Book]:
        return [b for b in self._load() if same_id(b.seller_id, seller_id)]

    def count_by_seller(self, seller_id: str) -> int:
        return len(self.list_by_seller(seller_id))

    # --- Bulk access for joins ------------------------------------------------

    def load_index(self) -> dict[str, Book]:
        return {book.id: book for book in self._load()}

    # --- Serialization --------------------------------------------------------

    def _load(self) -> list[Book]:
        return [self._to_domain(raw) for raw in load_records(self._file_path)]

    def _to_domain(self, raw: dict) -> Book:
        try:
            price = raw.get("price")
            return Book(
                id=str(raw["_id"]),
                title=raw["title"],
                seller_id=str(raw["seller"]),
                price=Money.of(price) if price is not None else None,
            )
        except (AttributeError, KeyError, TypeError, ValidationError) as exc:
            raise DataStoreError(
                f"Malformed book record in {self._file_path}: {exc}"
            ) from exc
