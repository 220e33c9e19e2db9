# /app/routers/dashboard_router.py

# --- Core FastAPI Imports ---
from fastapi import APIRouter, Depends, Response

# --- Service and Model Imports ---
from ..core.errors import endpoint_errors
from ..services import dashboard_service
from ..services.sheets_service import SheetsTableStore, get_table_store
from ..services.view_helpers.fallback_policy import FallbackPolicy, get_fallback_policy
# The Pydantic models define the response shapes (the API contract).
from ..models.dashboard_model import CategoriesData, DashboardData

# --- APIRouter Instance ---
router = APIRouter()

# --- Endpoint Definitions ---
@router.get(
    "/dashboard-data",
    response_model=DashboardData,
    summary="Get Dashboard Summary",
    description="Retrieves headline counts and distributions for the Home Page dashboard.",
)
async def get_dashboard_data(
    response: Response,
    store: SheetsTableStore = Depends(get_table_store),
    policy: FallbackPolicy = Depends(get_fallback_policy),
):
    """
    The router stays thin: it injects the table store and the per-request
    fallback policy, delegates to the service layer, and reports any
    synthetic fields in the response headers.
    """
    with endpoint_errors("Server error fetching dashboard data"):
        data = await dashboard_service.get_summary_data(store=store, policy=policy)
    policy.annotate(response)
    return data


@router.get(
    "/categories-data",
    response_model=CategoriesData,
    summary="Get Category Breakdown",
    description="Caste and service category counts with a per-category gender and learner breakdown.",
)
async def get_categories_data(store: SheetsTableStore = Depends(get_table_store)):
    with endpoint_errors("Server error fetching categories data"):
        return await dashboard_service.get_categories_data(store=store)
