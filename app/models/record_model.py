# /app/models/record_model.py

"""
Typed projections of the spreadsheet tables.

Each record model lists its fields in sheet column order; the field default is
what a missing or empty cell maps to. `List[str]` fields hold comma-joined
cells and are split by the row mapper. Records are built exclusively by
`view_helpers.row_mapping`.

The `TableSchema` constants at the bottom bind each record to the sheet and
column range it is read from.
"""

from dataclasses import dataclass
from typing import List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field


class SheetRecord(BaseModel):
    model_config = ConfigDict(frozen=True)


class AuthRecord(SheetRecord):
    id: str = ""
    token: str = ""


class TeacherRecord(SheetRecord):
    id: str = ""
    name: str = ""
    subject: str = ""
    className: str = ""
    department: str = "General"


class StudentRecord(SheetRecord):
    rollNo: str = ""
    name: str = ""
    gender: str = ""
    category: str = ""
    serviceCategory: str = ""
    contact: str = ""
    status: str = "Active"


class StudentProfileRecord(SheetRecord):
    """The Students sheet as read by the student details page, where the
    seventh column is shown as the student's class."""
    rollNo: str = ""
    name: str = ""
    gender: str = ""
    category: str = ""
    serviceCategory: str = ""
    contact: str = ""
    className: str = "X-A"


class PerformanceRecord(SheetRecord):
    id: str = ""
    rating: str = ""
    category: str = ""
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)
    report: str = "The student shows consistent effort in academics."


class ProgramRecord(SheetRecord):
    """A row of the Workshops or ServiceCourses sheet."""
    id: str = ""
    title: str = ""
    duration: str = ""
    status: str = ""
    sessionDates: List[str] = Field(default_factory=list)
    sessionTopics: List[str] = Field(default_factory=list)


class DisciplineRecord(SheetRecord):
    id: str = ""
    date: str = ""
    studentName: str = ""
    rollNo: str = ""
    description: str = ""
    action: str = "Verbal Warning"


class AchievementRecord(SheetRecord):
    id: str = ""
    date: str = ""
    studentName: str = ""
    title: str = ""
    description: str = ""


class AttendanceRecord(SheetRecord):
    id: str = ""
    date: str = ""
    studentId: str = ""
    status: str = ""
    remarks: str = ""


class AssessmentRecord(SheetRecord):
    id: str = ""
    date: str = ""
    title: str = ""
    type: str = ""
    maxScore: str = ""
    status: str = ""


class GradeRecord(SheetRecord):
    assessmentId: str = ""
    studentId: str = ""
    score: str = ""
    percentage: str = ""
    grade: str = ""


class SyllabusRecord(SheetRecord):
    id: str = ""
    unit: str = ""
    name: str = ""
    expectedHours: str = ""
    timeSpent: Optional[str] = None
    status: str = ""
    startDate: Optional[str] = None
    completionDate: Optional[str] = None
    topicGroup: str = "Other"


class EventRecord(SheetRecord):
    id: str = ""
    date: str = ""
    title: str = ""
    type: str = ""
    time: str = "All Day"
    description: str = ""


class CommunicationRecord(SheetRecord):
    id: str = ""
    date: str = ""
    student: str = ""
    parent: str = ""
    type: str = ""
    subject: str = ""
    status: str = ""


class ParentRecord(SheetRecord):
    id: str = ""
    student: str = ""
    name: str = ""
    relation: str = ""
    phone: str = ""
    email: str = ""
    lastContact: Optional[str] = None


@dataclass(frozen=True)
class TableSchema:
    sheet: str
    columns: str
    record: Type[SheetRecord]


AUTHENTICATION = TableSchema("Authentication", "A:B", AuthRecord)
TEACHERS = TableSchema("Teachers", "A:E", TeacherRecord)
STUDENTS = TableSchema("Students", "A:G", StudentRecord)
STUDENT_PROFILES = TableSchema("Students", "A:G", StudentProfileRecord)
PERFORMANCE = TableSchema("Performance", "A:H", PerformanceRecord)
WORKSHOPS = TableSchema("Workshops", "A:F", ProgramRecord)
SERVICE_COURSES = TableSchema("ServiceCourses", "A:F", ProgramRecord)
DISCIPLINE = TableSchema("Discipline", "A:F", DisciplineRecord)
ACHIEVEMENTS = TableSchema("Achievements", "A:E", AchievementRecord)
ATTENDANCE = TableSchema("Attendance", "A:G", AttendanceRecord)
ASSESSMENTS = TableSchema("Assessments", "A:G", AssessmentRecord)
GRADES = TableSchema("Grades", "A:E", GradeRecord)
SYLLABUS = TableSchema("Syllabus", "A:J", SyllabusRecord)
EVENTS = TableSchema("Events", "A:F", EventRecord)
COMMUNICATIONS = TableSchema("Communications", "A:G", CommunicationRecord)
PARENTS = TableSchema("Parents", "A:G", ParentRecord)
