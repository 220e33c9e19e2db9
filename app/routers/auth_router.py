# /app/routers/auth_router.py

"""
This module defines the login endpoint and the teacher profile lookup.

Login is a placeholder scheme: the returned token is not signed and no other
endpoint checks it yet.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, status

# --- Application-specific Imports ---
from ..core.errors import endpoint_errors
from ..models.auth_model import AuthRequest, AuthResponse, Teacher
from ..services import teacher_service
from ..services.sheets_service import SheetsTableStore, get_table_store

# --- Router Initialization ---
router = APIRouter()


@router.post(
    "/auth",
    response_model=AuthResponse,
    status_code=status.HTTP_200_OK,
    summary="Log In with an Employee ID",
    responses={400: {"description": "Employee ID missing"}, 401: {"description": "Unknown Employee ID"}},
)
async def login(
    payload: Optional[AuthRequest] = Body(None),
    store: SheetsTableStore = Depends(get_table_store),
):
    """
    Checks the employee ID against the Authentication sheet and, on success,
    hands back a placeholder token.
    """
    with endpoint_errors("Server error during authentication"):
        return await teacher_service.authenticate(store, payload.employeeId if payload else None)


@router.get(
    "/teacher-data",
    response_model=Teacher,
    summary="Get Teacher Profile",
    responses={404: {"description": "Teacher not found"}},
)
async def get_teacher_data(
    id: Optional[str] = None,
    store: SheetsTableStore = Depends(get_table_store),
):
    """
    Returns the teacher with the given employee ID, or the first teacher in
    the sheet when no ID is passed.
    """
    with endpoint_errors("Server error fetching teacher data"):
        return await teacher_service.get_teacher_data(store, employee_id=id)
