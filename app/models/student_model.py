# /app/models/student_model.py

# --- Core Imports ---
from pydantic import BaseModel, Field, ConfigDict
from typing import List

# --- Model Definitions ---

class Student(BaseModel):
    """
    A student as listed on the Enrollment page. Mirrors the Students sheet.
    """
    rollNo: str
    name: str
    gender: str
    category: str
    serviceCategory: str
    contact: str
    status: str = Field(default="Active", description="Enrollment status; blank cells read as 'Active'.")


class Learner(BaseModel):
    """
    A student singled out on the Performance page, joined to their roster row
    by roll number. Roster fields fall back to 'Unknown' when the roll number
    has no roster row.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    rollNo: str
    className: str = Field(..., alias="class")
    category: str
    serviceCategory: str
    strengths: List[str]
    weaknesses: List[str]


class PerformanceData(BaseModel):
    brightLearners: List[Learner]
    lateBoomers: List[Learner]


class DisciplineEntry(BaseModel):
    id: str
    date: str
    studentName: str
    rollNo: str
    description: str
    actionTaken: str


class Achievement(BaseModel):
    id: str
    date: str
    studentName: str
    title: str
    description: str


class DisciplineNote(BaseModel):
    id: str
    date: str
    incident: str
    action: str


class StudentDetails(BaseModel):
    """
    The merged view behind the student details drawer: roster row, performance
    report, discipline history and achievement titles.
    """
    model_config = ConfigDict(populate_by_name=True)

    rollNo: str
    name: str
    gender: str
    category: str
    serviceCategory: str
    contact: str
    className: str = Field(..., alias="class")
    performanceReport: str
    strengths: List[str]
    weaknesses: List[str]
    suggestions: List[str]
    disciplineRecords: List[DisciplineNote]
    achievements: List[str] = Field(..., description="Titles of achievements recorded under the student's name.")
