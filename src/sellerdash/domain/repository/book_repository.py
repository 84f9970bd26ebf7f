"""Abstract repository for the Book catalog."""

from __future__ import annotations

from abc import ABC, abstractmethod

from sellerdash.domain.model.book import Book


class BookRepository(ABC):

    @abstractmethod
    def list_by_seller(self, seller_id: str) -> list[Book]:
        """Return every book the seller owns."""

    @abstractmethod
    def count_by_seller(self, seller_id: str) -> int:
        """Return how many books the seller owns."""
