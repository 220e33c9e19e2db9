# /app/routers/assessments_router.py

# --- Core FastAPI Imports ---
from fastapi import APIRouter, Depends, Response

# --- Application-specific Imports ---
from ..core.errors import endpoint_errors
from ..models.assessment_model import AssessmentsData
from ..services import assessment_service
from ..services.sheets_service import SheetsTableStore, get_table_store
from ..services.view_helpers.fallback_policy import FallbackPolicy, get_fallback_policy

# --- Router Initialization ---
router = APIRouter()


@router.get(
    "/assessments-data",
    response_model=AssessmentsData,
    summary="Get Assessments and Grades",
)
async def get_assessments_data(
    response: Response,
    store: SheetsTableStore = Depends(get_table_store),
    policy: FallbackPolicy = Depends(get_fallback_policy),
):
    """
    Joins every assessment with its grades to compute averages, the grade
    distribution and the performance trend.
    """
    with endpoint_errors("Server error fetching assessments data"):
        data = await assessment_service.get_assessments_data(store, policy)
    policy.annotate(response)
    return data
