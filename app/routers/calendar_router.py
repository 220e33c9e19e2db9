# /app/routers/calendar_router.py

"""
Date-driven views: the month calendar grid and the parent communications
page. Both take "today" from the `get_today` dependency so tests can pin it.
"""

from datetime import date

from fastapi import APIRouter, Depends, Response

from ..core.errors import endpoint_errors
from ..models.calendar_model import CalendarData, CommunicationsData
from ..services import calendar_service, communication_service
from ..services.sheets_service import SheetsTableStore, get_table_store
from ..services.view_helpers.date_windows import get_today
from ..services.view_helpers.fallback_policy import FallbackPolicy, get_fallback_policy

router = APIRouter()


@router.get("/calendar-data", response_model=CalendarData, summary="Get Calendar Grid and Upcoming Events")
async def get_calendar_data(
    store: SheetsTableStore = Depends(get_table_store),
    today: date = Depends(get_today),
):
    with endpoint_errors("Server error fetching calendar data"):
        return await calendar_service.get_calendar_data(store, today=today)


@router.get("/communications-data", response_model=CommunicationsData, summary="Get Parent Communications")
async def get_communications_data(
    response: Response,
    store: SheetsTableStore = Depends(get_table_store),
    policy: FallbackPolicy = Depends(get_fallback_policy),
    today: date = Depends(get_today),
):
    with endpoint_errors("Server error fetching communications data"):
        data = await communication_service.get_communications_data(store, policy, today=today)
    policy.annotate(response)
    return data
