"""Domain service: Date Window Resolver.

Turns the optional ``start``/``end`` strings a caller supplies into a valid
``DateWindow``.  Invalid input never reaches the caller as an error: it is
logged and replaced by the default trailing window.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from sellerdash.domain.model.value_objects import DateWindow

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_DAYS = 30


def parse_or_default(
    raw: str | None, fallback: datetime | None = None
) -> datetime | None:
    """Parse an ISO 8601 date or timestamp; return *fallback* if that fails.

    Never raises.  Timestamps without an offset are taken as UTC.
    """
    if raw is None:
        return fallback
    text = raw.strip()
    if not text:
        return fallback
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return fallback
    return _as_utc(parsed)


def end_of_day(moment: datetime) -> datetime:
    """Last millisecond of *moment*'s calendar day, in its own timezone."""
    return moment.replace(hour=23, minute=59, second=59, microsecond=999000)


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


class DateWindowResolver:

    def __init__(self, default_days: int = DEFAULT_WINDOW_DAYS) -> None:
        self._default_days = default_days

    def default_window(self, now: datetime) -> DateWindow:
        now = _as_utc(now)
        return DateWindow(start=now - timedelta(days=self._default_days), end=now)

    def resolve(
        self,
        raw_start: str | None = None,
        raw_end: str | None = None,
        now: datetime | None = None,
    ) -> DateWindow:
        """Resolve the caller's range, falling back to the trailing default.

        An explicit range is honoured only if both bounds are present, both
        parse and ``start <= end``.  Its ``end`` is then widened to the end
        of that calendar day so the whole end date is included.
        """
        if now is None:
            now = datetime.now(timezone.utc)

        if not (raw_start and raw_end):
            return self.default_window(now)

        start = parse_or_default(raw_start)
        end = parse_or_default(raw_end)

        if start is None or end is None:
            logger.warning(
                "Invalid date range (start=%r, end=%r): unparsable date, "
                "using last %d days",
                raw_start,
                raw_end,
                self._default_days,
            )
            return self.default_window(now)

        if start > end:
            logger.warning(
                "Invalid date range (start=%r, end=%r): start is after end, "
                "using last %d days",
                raw_start,
                raw_end,
                self._default_days,
            )
            return self.default_window(now)

        return DateWindow(start=start, end=end_of_day(end))
