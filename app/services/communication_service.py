# /app/services/communication_service.py

from datetime import date
from typing import Dict, Optional

from ..models.record_model import COMMUNICATIONS, PARENTS
from .view_helpers import aggregation
from .view_helpers.date_windows import parse_date, utc_today
from .view_helpers.fallback_policy import FallbackPolicy
from .view_helpers.table_fetch import fetch_tables


def _in_month(cell: str, today: date) -> bool:
    logged = parse_date(cell)
    return logged is not None and (logged.year, logged.month) == (today.year, today.month)


async def get_communications_data(store, policy: FallbackPolicy, today: Optional[date] = None) -> Dict:
    communications, parents = await fetch_tables(store, COMMUNICATIONS, PARENTS)
    today = today or utc_today()

    return {
        "parentMeetings": aggregation.count_matching(
            communications, lambda c: c.type == "Meeting" and _in_month(c.date, today)
        ),
        "pendingResponses": aggregation.count_matching(communications, lambda c: c.status == "Pending"),
        "nextPTM": policy.next_ptm(),
        "communicationLogs": [c.model_dump() for c in communications],
        "parentDirectory": [p.model_dump() for p in parents],
    }
