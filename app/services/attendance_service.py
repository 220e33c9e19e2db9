# /app/services/attendance_service.py

"""
Builds the Attendance page from the Attendance and Students sheets.

Attendance rows are keyed by date (normalized to YYYY-MM-DD) and by student
roll number. Any day or student with no rows gets a value from the
FallbackPolicy rather than a blank.
"""

from datetime import date
from typing import Dict, List, Optional

from ..models.record_model import ATTENDANCE, STUDENTS, AttendanceRecord
from .view_helpers import aggregation
from .view_helpers.date_windows import normalize_date, short_label, trend_window, utc_today
from .view_helpers.fallback_policy import FallbackPolicy
from .view_helpers.join_index import JoinIndex, by_field
from .view_helpers.table_fetch import fetch_tables

PRESENT = "Present"
LOW_ATTENDANCE_THRESHOLD = 75
HOME_CLASS = "X-A"
COMPARISON_CLASSES = ("X-B", "X-C", "X-D")


def _is_present(record: AttendanceRecord) -> bool:
    return record.status == PRESENT


def _present_share(records: List[AttendanceRecord]) -> Optional[int]:
    # None when there is nothing to compute from; callers pick the fallback.
    return aggregation.percentage(aggregation.count_matching(records, _is_present), len(records), default=None)


async def get_attendance_data(store, policy: FallbackPolicy, today: Optional[date] = None) -> Dict:
    attendance, students = await fetch_tables(store, ATTENDANCE, STUDENTS)
    today = today or utc_today()

    by_date = JoinIndex(attendance, lambda a: normalize_date(a.date))
    todays_records = by_date.find_all(today.isoformat())

    window = trend_window(today)
    window_records = [a for day in window for a in by_date.find_all(day.isoformat())]
    weekly_average = _present_share(window_records)
    if weekly_average is None:
        weekly_average = policy.weekly_average()

    trend = []
    for day in window:
        day_share = _present_share(by_date.find_all(day.isoformat()))
        if day_share is None:
            day_share = policy.daily_attendance()
        trend.append({"date": short_label(day), "percentage": day_share})

    # Only the home class has a sheet; the others are placeholders.
    comparison = [{"class": HOME_CLASS, "percentage": weekly_average}]
    comparison += [
        {"class": name, "percentage": policy.daily_attendance("classComparison")} for name in COMPARISON_CLASSES
    ]

    by_student = JoinIndex(attendance, by_field("studentId"))
    today_by_student = JoinIndex(todays_records, by_field("studentId"))
    rollup = []
    for student in students:
        records = by_student.find_all(student.rollNo)
        total_days = len({normalize_date(a.date) for a in records})
        total_present = aggregation.count_matching(records, _is_present)
        share = aggregation.percentage(total_present, total_days, default=None)
        if share is None:
            share = policy.student_attendance_percentage()

        today_record = today_by_student.find_one(student.rollNo)
        rollup.append({
            "rollNo": student.rollNo,
            "name": student.name,
            "status": today_record.status if today_record else policy.student_status(),
            "remarks": today_record.remarks if today_record else "",
            "totalPresent": total_present,
            "totalDays": total_days,
            "percentage": share,
        })

    return {
        "presentToday": aggregation.count_matching(todays_records, _is_present),
        "totalStudents": len(students),
        "weeklyAverage": weekly_average,
        "belowThreshold": sum(1 for s in rollup if s["percentage"] < LOW_ATTENDANCE_THRESHOLD),
        "attendanceTrend": trend,
        "classComparison": comparison,
        "students": rollup,
    }
