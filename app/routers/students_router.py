# /app/routers/students_router.py

from fastapi import APIRouter, Depends
from typing import List

from ..core.errors import endpoint_errors
from ..models import student_model
from ..services import student_service
from ..services.sheets_service import SheetsTableStore, get_table_store

router = APIRouter()

# --- ROSTER COLLECTION ENDPOINTS ---

@router.get("/enrollment-data", response_model=List[student_model.Student], summary="Get Enrollment Roster")
async def get_enrollment_data(store: SheetsTableStore = Depends(get_table_store)):
    with endpoint_errors("Server error fetching enrollment data"):
        return await student_service.get_enrollment_data(store)

@router.get("/performance-data", response_model=student_model.PerformanceData, summary="Get Bright Learners and Late Bloomers")
async def get_performance_data(store: SheetsTableStore = Depends(get_table_store)):
    with endpoint_errors("Server error fetching performance data"):
        return await student_service.get_performance_data(store)

@router.get("/discipline-data", response_model=List[student_model.DisciplineEntry], summary="Get Discipline Log")
async def get_discipline_data(store: SheetsTableStore = Depends(get_table_store)):
    with endpoint_errors("Server error fetching discipline data"):
        return await student_service.get_discipline_data(store)

@router.get("/achievements-data", response_model=List[student_model.Achievement], summary="Get Achievements Log")
async def get_achievements_data(store: SheetsTableStore = Depends(get_table_store)):
    with endpoint_errors("Server error fetching achievements data"):
        return await student_service.get_achievements_data(store)

# --- INDIVIDUAL STUDENT ENDPOINT ---

@router.get(
    "/student-details/{roll_no}",
    response_model=student_model.StudentDetails,
    summary="Get a Single Student with Full Details",
    responses={404: {"description": "Student not found"}},
)
async def get_student_details(roll_no: str, store: SheetsTableStore = Depends(get_table_store)):
    with endpoint_errors("Server error fetching student details"):
        return await student_service.get_student_details(store, roll_no=roll_no)
