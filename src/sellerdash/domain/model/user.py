"""User reference: only the fields the dashboard shows about a buyer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    id: str
    name: str
