"""Abstract repository for users (buyers and sellers alike)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from sellerdash.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_id(self, user_id: str) -> User | None:
        """Return a user by its ID, or None if not found."""
