"""Shared file helpers for the JSON-file-backed repositories.

Every read failure is turned into ``DataStoreError`` here so the
repositories never leak ``OSError`` or ``JSONDecodeError`` upward.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from sellerdash.domain.exceptions import DataStoreError

logger = logging.getLogger(__name__)


def load_records(file_path: Path) -> list[dict]:
    """Read a JSON array of documents.  A missing file is an empty collection."""
    if not file_path.exists():
        return []
    try:
        raw = json.loads(file_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.error("Cannot read data file %s: %s", file_path, exc)
        raise DataStoreError(f"Cannot read data file {file_path}: {exc}") from exc
    if not isinstance(raw, list):
        logger.error("Data file %s does not hold a JSON array", file_path)
        raise DataStoreError(f"Data file {file_path} must contain a JSON array")
    return raw


def parse_timestamp(value: str) -> datetime:
    """Parse a stored ISO 8601 timestamp; naive values are taken as UTC."""
    moment = datetime.fromisoformat(value)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment
