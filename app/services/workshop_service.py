# /app/services/workshop_service.py

from typing import Dict

from ..models.record_model import SERVICE_COURSES, WORKSHOPS, ProgramRecord
from .view_helpers.fallback_policy import FallbackPolicy
from .view_helpers.table_fetch import fetch_tables

WORKSHOP_DEFAULT_TOPIC = "General Discussion"
COURSE_DEFAULT_TOPIC = "General Course Content"


def _sessions(program: ProgramRecord, default_topic: str):
    # Dates and topics are parallel comma-separated lists; the dates drive
    # the schedule and a missing topic gets the default.
    sessions = []
    for index, session_date in enumerate(program.sessionDates):
        topic = program.sessionTopics[index] if index < len(program.sessionTopics) else ""
        sessions.append({"date": session_date, "topic": topic or default_topic})
    return sessions


def _program_view(program: ProgramRecord, default_topic: str, policy: FallbackPolicy) -> Dict:
    return {
        "id": program.id,
        "title": program.title,
        "duration": program.duration,
        "status": program.status,
        # No attendance sheet exists for programs yet.
        "participants": "0" if program.status == "Scheduled" else policy.participants(),
        "sessions": _sessions(program, default_topic),
    }


async def get_workshops_data(store, policy: FallbackPolicy) -> Dict:
    workshops, courses = await fetch_tables(store, WORKSHOPS, SERVICE_COURSES)
    return {
        "workshops": [_program_view(w, WORKSHOP_DEFAULT_TOPIC, policy) for w in workshops],
        "serviceCourses": [_program_view(c, COURSE_DEFAULT_TOPIC, policy) for c in courses],
    }
