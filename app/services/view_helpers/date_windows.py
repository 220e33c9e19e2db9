# /app/services/view_helpers/date_windows.py

"""
Date handling for the trend, calendar and "next/last" views.

Sheet dates are free text. Comparisons are always done on `YYYY-MM-DD`
strings, so cells are normalized first with `normalize_date`.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Callable, Dict, List, Optional, Sequence, TypeVar

import pandas as pd

from ...models.record_model import EventRecord
from .join_index import JoinIndex

T = TypeVar("T")

TREND_DAYS = 7
CALENDAR_WEEKS = 5


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def parse_date(cell: Optional[str]) -> Optional[date]:
    if not cell:
        return None
    parsed = pd.to_datetime(cell, errors="coerce")
    if pd.isna(parsed):
        return None
    return parsed.date()


def normalize_date(cell: Optional[str]) -> str:
    """ISO form of a date cell; unparsable cells are returned unchanged."""
    parsed = parse_date(cell)
    return parsed.isoformat() if parsed else (cell or "")


def trend_window(today: date, days: int = TREND_DAYS) -> List[date]:
    """The `days` calendar dates ending at `today`, oldest first."""
    return [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]


def short_label(day: date) -> str:
    return f"{day.month}/{day.day}"


def sort_by_date(items: Sequence[T], date_of: Callable[[T], Optional[str]], descending: bool = False) -> List[T]:
    """
    Stable sort on a date cell. Ties keep their original order and items
    whose date cannot be parsed go last in either direction.
    """
    dated = [(parse_date(date_of(item)), item) for item in items]
    known = [pair for pair in dated if pair[0] is not None]
    unknown = [item for parsed, item in dated if parsed is None]
    known.sort(key=lambda pair: pair[0], reverse=descending)
    return [item for _, item in known] + unknown


def sunday_on_or_before(day: date) -> date:
    # date.weekday() is Monday=0 ... Sunday=6
    return day - timedelta(days=(day.weekday() + 1) % 7)


def calendar_grid(today: date, events: Sequence[EventRecord]) -> List[List[Dict[str, object]]]:
    """5 Sunday-first weeks starting at the Sunday of the current week."""
    events_by_date = JoinIndex(events, lambda e: normalize_date(e.date))
    start = sunday_on_or_before(today)

    weeks = []
    for week in range(CALENDAR_WEEKS):
        days = []
        for weekday in range(7):
            current = start + timedelta(days=week * 7 + weekday)
            days.append({
                "date": current.day,
                "isCurrentMonth": current.month == today.month,
                "isToday": current == today,
                "events": [
                    {"id": e.id, "title": e.title, "type": e.type.lower(), "time": e.time}
                    for e in events_by_date.find_all(current.isoformat())
                ],
            })
        weeks.append(days)
    return weeks


# --- DEPENDENCY PROVIDER ---
def get_today() -> date:
    return utc_today()
