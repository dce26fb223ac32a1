"""
Time windows for period-over-period comparison.

All windows are half-open and anchored to UTC day boundaries regardless of
the caller's timezone.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Dict, Optional, Tuple

DAY = timedelta(days=1)


def _as_utc(moment: datetime) -> datetime:
    # Naive datetimes are taken to already be UTC
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def _isoformat(moment: datetime) -> str:
    return moment.strftime("%Y-%m-%dT%H:%M:%SZ")


def start_of_day(moment: datetime) -> datetime:
    """Truncate to the enclosing UTC midnight"""
    return _as_utc(moment).replace(hour=0, minute=0, second=0, microsecond=0)


@dataclass(frozen=True)
class TimeWindow:
    """``start <= created_at < end``; no upper bound when ``end`` is None"""

    start: datetime
    end: Optional[datetime] = None

    def contains(self, moment: datetime) -> bool:
        moment = _as_utc(moment)
        if moment < self.start:
            return False
        return self.end is None or moment < self.end

    def predicate(self, field: str = "created_at") -> Dict[str, Dict[str, str]]:
        """Render as a collection store ``where`` clause"""
        bounds = {"gte": _isoformat(self.start)}
        if self.end is not None:
            bounds["lt"] = _isoformat(self.end)
        return {field: bounds}


def compare_windows(now: Optional[datetime] = None) -> Tuple[TimeWindow, TimeWindow]:
    """
    Today and yesterday windows for a reference instant.

    Args:
        now: Reference instant; defaults to the current time

    Returns:
        (current, prior) where current is ``[today_start, ...)`` and prior is
        ``[yesterday_start, today_start)``
    """
    today_start = start_of_day(now or datetime.now(timezone.utc))
    yesterday_start = today_start - DAY
    return TimeWindow(start=today_start), TimeWindow(start=yesterday_start, end=today_start)


def trailing_days(days: int, now: Optional[datetime] = None) -> Tuple[date, date]:
    """Inclusive (start, end) calendar dates covering the last ``days`` days"""
    if days < 0:
        raise ValueError("days must be non-negative")
    end = _as_utc(now or datetime.now(timezone.utc))
    start = end - timedelta(days=days)
    return start.date(), end.date()
