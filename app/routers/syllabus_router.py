# /app/routers/syllabus_router.py

from fastapi import APIRouter, Depends, Response

from ..core.errors import endpoint_errors
from ..models.syllabus_model import SyllabusData
from ..services import syllabus_service
from ..services.sheets_service import SheetsTableStore, get_table_store
from ..services.view_helpers.fallback_policy import FallbackPolicy, get_fallback_policy

router = APIRouter()


@router.get("/syllabus-data", response_model=SyllabusData, summary="Get Syllabus Progress")
async def get_syllabus_data(
    response: Response,
    store: SheetsTableStore = Depends(get_table_store),
    policy: FallbackPolicy = Depends(get_fallback_policy),
):
    with endpoint_errors("Server error fetching syllabus data"):
        data = await syllabus_service.get_syllabus_data(store, policy)
    policy.annotate(response)
    return data
