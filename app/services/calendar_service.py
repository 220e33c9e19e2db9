# /app/services/calendar_service.py

from datetime import date
from typing import Dict, Optional

from ..models.record_model import EVENTS
from .view_helpers.date_windows import calendar_grid, parse_date, sort_by_date, utc_today
from .view_helpers.table_fetch import fetch_tables

UPCOMING_LIMIT = 5


async def get_calendar_data(store, today: Optional[date] = None) -> Dict:
    """
    The month grid around today plus the next few events (today included).
    """
    (events,) = await fetch_tables(store, EVENTS)
    today = today or utc_today()

    ahead = [e for e in events if (parse_date(e.date) or date.min) >= today]
    upcoming = sort_by_date(ahead, lambda e: e.date)[:UPCOMING_LIMIT]

    return {
        "calendarData": calendar_grid(today, events),
        "upcomingEvents": [e.model_dump() for e in upcoming],
    }
