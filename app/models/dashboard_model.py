# /app/models/dashboard_model.py

# --- Core Imports ---
from pydantic import BaseModel, Field
from typing import List

# --- Fixed Label Sets ---
CASTE_CATEGORIES = ("General", "OBC", "SC", "ST", "Muslim")
SERVICE_CATEGORIES = ("1", "2", "3", "4", "5")
PERFORMANCE_RATINGS = ("Excellent", "Good", "Average", "Needs Improvement")

BRIGHT_LEARNER = "Bright Learner"
LATE_BLOOMER = "Late Bloomer"


# --- Model Definitions ---

class CategoryCount(BaseModel):
    category: str
    count: int


class NamedCount(BaseModel):
    name: str
    count: int


class DashboardData(BaseModel):
    """
    Defines the data contract for the Home Page dashboard: headline counts and
    the two distributions shown as charts.
    """

    totalStudents: int = Field(..., description="Number of data rows in the Students sheet.", examples=[42])
    boys: int = Field(..., examples=[22])
    girls: int = Field(..., examples=[20])
    brightLearners: int
    lateBoomers: int = Field(..., description="Students tagged 'Late Bloomer' in the Performance sheet.")
    workshopsCompleted: int
    pendingReports: int = Field(..., description="Placeholder; there is no reports sheet yet.")
    categories: List[CategoryCount] = Field(..., description="Students per caste category, fixed label set.")
    performance: List[NamedCount] = Field(..., description="Students per performance rating, fixed label set.")


class DetailedCategory(BaseModel):
    name: str
    total: int
    boys: int
    girls: int
    brightLearners: int
    lateBoomers: int


class CategoriesData(BaseModel):
    casteCategories: List[NamedCount]
    serviceCategories: List[CategoryCount]
    detailedCategories: List[DetailedCategory]
