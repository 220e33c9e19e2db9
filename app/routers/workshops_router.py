# /app/routers/workshops_router.py

from fastapi import APIRouter, Depends, Response

from ..core.errors import endpoint_errors
from ..models.workshop_model import WorkshopsData
from ..services import workshop_service
from ..services.sheets_service import SheetsTableStore, get_table_store
from ..services.view_helpers.fallback_policy import FallbackPolicy, get_fallback_policy

router = APIRouter()


@router.get("/workshops-data", response_model=WorkshopsData, summary="Get Workshops and Service Courses")
async def get_workshops_data(
    response: Response,
    store: SheetsTableStore = Depends(get_table_store),
    policy: FallbackPolicy = Depends(get_fallback_policy),
):
    with endpoint_errors("Server error fetching workshops data"):
        data = await workshop_service.get_workshops_data(store, policy)
    policy.annotate(response)
    return data
