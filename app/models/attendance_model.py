# /app/models/attendance_model.py

from pydantic import BaseModel, Field, ConfigDict
from typing import List


class TrendPoint(BaseModel):
    date: str = Field(..., description="Short 'M/D' label.", examples=["10/16"])
    percentage: int


class ClassAttendance(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    className: str = Field(..., alias="class")
    percentage: int


class StudentAttendance(BaseModel):
    rollNo: str
    name: str
    status: str = Field(..., description="Today's status for the student.")
    remarks: str
    totalPresent: int
    totalDays: int = Field(..., description="Distinct dates with at least one record.")
    percentage: int


class AttendanceData(BaseModel):
    """
    Defines the data contract for the Attendance page: today's headline, the
    7-day trend, a class comparison and the per-student rollup.
    """
    presentToday: int
    totalStudents: int
    weeklyAverage: int
    belowThreshold: int = Field(..., description="Students whose overall attendance is under 75%.")
    attendanceTrend: List[TrendPoint]
    classComparison: List[ClassAttendance]
    students: List[StudentAttendance]
