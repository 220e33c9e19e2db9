# /app/routers/attendance_router.py

from datetime import date

from fastapi import APIRouter, Depends, Response

from ..core.errors import endpoint_errors
from ..models.attendance_model import AttendanceData
from ..services import attendance_service
from ..services.sheets_service import SheetsTableStore, get_table_store
from ..services.view_helpers.date_windows import get_today
from ..services.view_helpers.fallback_policy import FallbackPolicy, get_fallback_policy

router = APIRouter()


@router.get(
    "/attendance-data",
    response_model=AttendanceData,
    summary="Get Attendance Overview",
    description="Today's headcount, the 7-day trend, class comparison and per-student rollups.",
)
async def get_attendance_data(
    response: Response,
    store: SheetsTableStore = Depends(get_table_store),
    policy: FallbackPolicy = Depends(get_fallback_policy),
    today: date = Depends(get_today),
):
    with endpoint_errors("Server error fetching attendance data"):
        data = await attendance_service.get_attendance_data(store, policy, today=today)
    policy.annotate(response)
    return data
