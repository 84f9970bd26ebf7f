"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

from pathlib import Path

from sellerdash.domain.exceptions import DataStoreError
from sellerdash.domain.model.user import User
from sellerdash.domain.repository.user_repository import UserRepository
from sellerdash.infrastructure.persistence.json_store import load_records


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def get_by_id(self, user_id: str) -> User | None:
        return self.load_index().get(str(user_id))

    def load_index(self) -> dict[str, User]:
        index: dict[str, User] = {}
        for raw in load_records(self._file_path):
            try:
                user = User(id=str(raw["_id"]), name=raw.get("name", ""))
            except (AttributeError, KeyError, TypeError) as exc:
                raise DataStoreError(
                    f"Malformed user record in {self._file_path}: {exc}"
                ) from exc
            index[user.id] = user
        return index
