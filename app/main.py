# /app/main.py

# --- Core FastAPI Imports ---
import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# --- Application-specific Imports ---
from .core.config import ConfigurationError, get_cors_origins, get_log_level, load_settings
from .core.errors import (
    DashboardError,
    dashboard_error_handler,
    error_payload,
    request_validation_error_handler,
    unhandled_error_handler,
)
from .core.logging_config import setup_logging
from .routers import (
    assessments_router,
    attendance_router,
    auth_router,
    calendar_router,
    dashboard_router,
    students_router,
    syllabus_router,
    workshops_router,
)
from .services.sheets_service import SheetsTableStore

logger = logging.getLogger(__name__)


# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # This code runs ONCE when the application starts up.
    setup_logging(get_log_level())
    try:
        settings = load_settings()
        app.state.table_store = SheetsTableStore.from_settings(settings)
        logger.info("Table store ready for spreadsheet %s", settings.spreadsheet_id)
    except ConfigurationError as e:
        # Data endpoints answer 500 until the environment is fixed; /health reports 503.
        logger.error("Table store not configured: %s", e)
        app.state.table_store = None
    yield
    # This code runs ONCE when the application shuts down.
    app.state.table_store = None


# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="Teacher Dashboard API",
    description="Read-only view models over the school's Google Sheets workbook.",
    version="1.0.0",
    lifespan=lifespan,
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Synthetic-Fields"],
)

# --- Error Rendering ---
app.add_exception_handler(DashboardError, dashboard_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_error_handler)
app.add_exception_handler(Exception, unhandled_error_handler)

# --- API Router Inclusion ---
app.include_router(auth_router.router, prefix="/api", tags=["Auth"])
app.include_router(dashboard_router.router, prefix="/api", tags=["Dashboard"])
app.include_router(students_router.router, prefix="/api", tags=["Students"])
app.include_router(workshops_router.router, prefix="/api", tags=["Workshops"])
app.include_router(attendance_router.router, prefix="/api", tags=["Attendance"])
app.include_router(assessments_router.router, prefix="/api", tags=["Assessments"])
app.include_router(syllabus_router.router, prefix="/api", tags=["Syllabus"])
app.include_router(calendar_router.router, prefix="/api", tags=["Calendar"])


# --- Root / Health Check Endpoints ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple liveness check to confirm the API is online."""
    return {"status": "Teacher Dashboard API is running", "version": app.version}


@app.get("/health", tags=["Health Check"])
async def health(request: Request):
    """Confirms the spreadsheet is reachable with the configured credentials."""
    store = getattr(request.app.state, "table_store", None)
    if store is None:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=error_payload("The table store is not configured."),
        )
    try:
        sheet = await asyncio.to_thread(store.probe)
    except DashboardError as e:
        logger.error("Health probe failed: %s", e.message)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=error_payload("Failed to connect to Google Sheets"),
        )
    return {"status": "ok", "spreadsheet": sheet}
