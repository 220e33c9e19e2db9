# /app/models/calendar_model.py

from pydantic import BaseModel, Field
from typing import List, Optional


class CalendarEvent(BaseModel):
    id: str
    title: str
    type: str = Field(..., description="Lower-cased event type, used as a CSS modifier by the UI.")
    time: str


class CalendarDay(BaseModel):
    date: int = Field(..., description="Day of the month.")
    isCurrentMonth: bool
    isToday: bool
    events: List[CalendarEvent]


class Event(BaseModel):
    id: str
    date: str
    title: str
    type: str
    time: str
    description: str


class CalendarData(BaseModel):
    calendarData: List[List[CalendarDay]] = Field(..., description="5 Sunday-first weeks of 7 days.")
    upcomingEvents: List[Event]


# --- Communications ---

class CommunicationLog(BaseModel):
    id: str
    date: str
    student: str
    parent: str
    type: str
    subject: str
    status: str


class ParentContact(BaseModel):
    id: str
    student: str
    name: str
    relation: str
    phone: str
    email: str
    lastContact: Optional[str] = None


class MeetingSlot(BaseModel):
    date: str
    time: str
    day: str


class CommunicationsData(BaseModel):
    parentMeetings: int = Field(..., description="Logged meetings dated in the current month.")
    pendingResponses: int
    nextPTM: MeetingSlot
    communicationLogs: List[CommunicationLog]
    parentDirectory: List[ParentContact]
