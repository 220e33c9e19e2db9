# /app/models/assessment_model.py

from pydantic import BaseModel, Field
from typing import List, Optional
from enum import Enum

# --- Core Enumerations ---
class AssessmentStatus(str, Enum):
    SCHEDULED = "Scheduled"
    COMPLETED = "Completed"

GRADES = ("A", "B", "C", "D", "F")


# --- API Contract Models ---

class NextAssessment(BaseModel):
    date: str
    name: str


class Assessment(BaseModel):
    id: str
    date: str
    title: str
    type: str
    maxScore: str
    average: Optional[int] = Field(None, description="Rounded mean grade percentage; null when ungraded.")
    status: str


class GradeBucket(BaseModel):
    grade: str
    count: int


class TrendEntry(BaseModel):
    assessment: str
    average: int


class AssessmentsData(BaseModel):
    nextAssessment: NextAssessment
    lastAssessmentAverage: int
    pendingGrades: int = Field(..., description="Completed assessments that have no average yet.")
    assessments: List[Assessment]
    gradeDistribution: List[GradeBucket]
    performanceTrend: List[TrendEntry]
