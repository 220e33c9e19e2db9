# /app/models/workshop_model.py

from pydantic import BaseModel, Field
from typing import List


class Session(BaseModel):
    date: str
    topic: str


class Program(BaseModel):
    """A workshop or in-service course with its parsed session schedule."""
    id: str
    title: str
    duration: str
    status: str
    participants: str = Field(..., description="'0' while Scheduled; otherwise an estimate.")
    sessions: List[Session]


class WorkshopsData(BaseModel):
    workshops: List[Program]
    serviceCourses: List[Program]
