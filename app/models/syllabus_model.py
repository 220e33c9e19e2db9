# /app/models/syllabus_model.py

from pydantic import BaseModel, Field
from typing import List, Optional


class Topic(BaseModel):
    id: str
    unit: str
    name: str
    expectedHours: str
    timeSpent: Optional[str] = None
    status: str
    startDate: Optional[str] = None
    completionDate: Optional[str] = None


class UnitCompletion(BaseModel):
    unit: str
    percentage: int


class TimeAllocation(BaseModel):
    topic: str = Field(..., description="Topic group; rows without one are grouped under 'Other'.")
    planned: int
    actual: int


class UpcomingTopic(BaseModel):
    id: str
    name: str
    unit: str
    plannedStart: str
    estimatedHours: str


class SyllabusData(BaseModel):
    """
    Defines the data contract for the Syllabus page. Units and topic groups
    are whatever values appear in the sheet.
    """
    completionPercentage: int
    completedUnits: int
    totalUnits: int
    remainingDays: int
    topics: List[Topic]
    unitCompletion: List[UnitCompletion]
    timeAllocation: List[TimeAllocation]
    upcomingTopics: List[UpcomingTopic]
