"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Configuration comes from the environment:

- ``SELLERDASH_DATA_DIR``: directory holding ``orders.json``,
  ``books.json`` and ``users.json`` (default: ``<repo root>/data``).
- ``SELLERDASH_LOG_LEVEL``: root log level for the CLI (default: WARNING).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from sellerdash.infrastructure.persistence.json_book_repository import (
    JsonBookRepository,
)
from sellerdash.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from sellerdash.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)

DATA_DIR_ENV = "SELLERDASH_DATA_DIR"
LOG_LEVEL_ENV = "SELLERDASH_LOG_LEVEL"

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def data_dir(override: str | Path | None = None) -> Path:
    if override:
        return Path(override)
    env = os.environ.get(DATA_DIR_ENV)
    return Path(env) if env else _DEFAULT_DATA_DIR


def configure_logging(level: str | int | None = None) -> None:
    """Install a stderr handler on the root logger.  CLI use only."""
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)


def book_repository(base: Path | None = None) -> JsonBookRepository:
    return JsonBookRepository(data_dir(base) / "books.json")


def user_repository(base: Path | None = None) -> JsonUserRepository:
    return JsonUserRepository(data_dir(base) / "users.json")


def order_repository(base: Path | None = None) -> JsonOrderRepository:
    return JsonOrderRepository(
        data_dir(base) / "orders.json",
        book_repo=book_repository(base),
        user_repo=user_repository(base),
    )
