# /app/services/student_service.py

"""
This service module assembles every student-centred view: the enrollment
roster, the bright learner / late bloomer lists, the discipline and
achievement logs, and the merged student details page.

The Students sheet is the primary table. Other sheets are joined to it by
roll number (Performance.id, Discipline.rollNo) or, for achievements, by the
student's name, since that sheet has no roll number column.
"""

from typing import Dict, List, Optional

from ..core.errors import NotFoundError
from ..models.dashboard_model import BRIGHT_LEARNER, LATE_BLOOMER
from ..models.record_model import (
    ACHIEVEMENTS,
    DISCIPLINE,
    PERFORMANCE,
    STUDENT_PROFILES,
    STUDENTS,
    PerformanceRecord,
    StudentRecord,
)
from .view_helpers.join_index import JoinIndex, by_field
from .view_helpers.table_fetch import fetch_tables

UNKNOWN = "Unknown"


async def get_enrollment_data(store) -> List[Dict]:
    (students,) = await fetch_tables(store, STUDENTS)
    return [s.model_dump() for s in students]


def _roster_field(student: Optional[StudentRecord], field: str) -> str:
    value = getattr(student, field) if student is not None else ""
    return value or UNKNOWN


def _learner_view(performance: PerformanceRecord, roster: JoinIndex) -> Dict:
    student = roster.find_one(performance.id)
    return {
        "id": performance.id,
        "name": _roster_field(student, "name"),
        "rollNo": performance.id,
        # The roster has no class column; the dashboard has always shown the
        # caste category here.
        "class": _roster_field(student, "category"),
        "category": _roster_field(student, "category"),
        "serviceCategory": _roster_field(student, "serviceCategory"),
        "strengths": list(performance.strengths),
        "weaknesses": list(performance.weaknesses),
    }


async def get_performance_data(store) -> Dict:
    performance, students = await fetch_tables(store, PERFORMANCE, STUDENTS)
    roster = JoinIndex(students, by_field("rollNo"))

    return {
        "brightLearners": [_learner_view(p, roster) for p in performance if p.category == BRIGHT_LEARNER],
        "lateBoomers": [_learner_view(p, roster) for p in performance if p.category == LATE_BLOOMER],
    }


async def get_discipline_data(store) -> List[Dict]:
    (incidents,) = await fetch_tables(store, DISCIPLINE)
    return [
        {
            "id": d.id,
            "date": d.date,
            "studentName": d.studentName,
            "rollNo": d.rollNo,
            "description": d.description,
            "actionTaken": d.action,
        }
        for d in incidents
    ]


async def get_achievements_data(store) -> List[Dict]:
    (achievements,) = await fetch_tables(store, ACHIEVEMENTS)
    return [a.model_dump() for a in achievements]


async def get_student_details(store, roll_no: str) -> Dict:
    """
    Merges one student's roster row with their performance report, discipline
    incidents and achievement titles.

    Raises:
        NotFoundError: if no Students row has this roll number.
    """
    profiles, performance, incidents, achievements = await fetch_tables(
        store, STUDENT_PROFILES, PERFORMANCE, DISCIPLINE, ACHIEVEMENTS
    )

    student = JoinIndex(profiles, by_field("rollNo")).find_one(roll_no)
    if student is None:
        raise NotFoundError("Student not found")

    # A student without a Performance row gets the record defaults.
    report = JoinIndex(performance, by_field("id")).find_one(roll_no) or PerformanceRecord()
    student_incidents = JoinIndex(incidents, by_field("rollNo")).find_all(roll_no)
    student_achievements = JoinIndex(achievements, by_field("studentName")).find_all(student.name)

    return {
        "rollNo": student.rollNo,
        "name": student.name,
        "gender": student.gender,
        "category": student.category,
        "serviceCategory": student.serviceCategory,
        "contact": student.contact,
        "class": student.className,
        "performanceReport": report.report,
        "strengths": list(report.strengths),
        "weaknesses": list(report.weaknesses),
        "suggestions": list(report.suggestions),
        "disciplineRecords": [
            {"id": d.id, "date": d.date, "incident": d.description, "action": d.action}
            for d in student_incidents
        ],
        "achievements": [a.title for a in student_achievements],
    }
