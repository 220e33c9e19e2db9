# /app/services/view_helpers/fallback_policy.py

"""
Synthetic stand-ins for metrics that have no underlying rows.

The dashboard always renders a plausible number instead of a blank, so every
view service asks this policy rather than inventing values inline. Each
fallback has a fixed, named range or constant below. A policy instance is
created per request and remembers which output fields it had to fill in;
the routers report them in the `X-Synthetic-Fields` response header.
"""

import logging
import math
import random
from typing import Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

SYNTHETIC_HEADER = "X-Synthetic-Fields"

# Uniform integer bands, inclusive on both ends.
DAILY_ATTENDANCE_RANGE = (85, 94)
PARTICIPANT_RANGE = (15, 44)

WEEKLY_AVERAGE_ATTENDANCE = 90
STUDENT_ATTENDANCE_PERCENTAGE = 90
PRESENT_PROBABILITY = 0.85

# Multiplier applied to planned hours when no time was logged: [0.8, 1.2).
ACTUAL_HOURS_FACTOR = (0.8, 1.2)

GRADE_BUCKET_COUNTS: Dict[str, int] = {"A": 5, "B": 12, "C": 18, "D": 8, "F": 2}

NEXT_ASSESSMENT = {"date": "Apr 15", "name": "Unit Test 3"}
LAST_ASSESSMENT_AVERAGE = 76
PERFORMANCE_TREND_PADDING: List[Tuple[str, int]] = [
    ("Unit Test 1", 72),
    ("Mid Term", 76),
    ("Unit Test 2", 78),
    ("Assignment 3", 82),
]
PENDING_REPORTS = 3
REMAINING_TEACHING_DAYS = 45
NEXT_PTM = {"date": "Apr 20", "time": "09:00 AM", "day": "Saturday"}


class FallbackPolicy:
    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.synthetic_fields: List[str] = []

    def _mark(self, field: str):
        if field not in self.synthetic_fields:
            self.synthetic_fields.append(field)
            logger.debug("Using synthetic value for %s", field)

    def annotate(self, response) -> None:
        """Lists the synthetic fields in the response headers, if any."""
        if self.synthetic_fields:
            response.headers[SYNTHETIC_HEADER] = ",".join(self.synthetic_fields)

    def _band(self, bounds: Tuple[int, int]) -> int:
        low, high = bounds
        return self.rng.randint(low, high)

    # --- Attendance ---
    def daily_attendance(self, field: str = "attendanceTrend") -> int:
        self._mark(field)
        return self._band(DAILY_ATTENDANCE_RANGE)

    def weekly_average(self) -> int:
        self._mark("weeklyAverage")
        return WEEKLY_AVERAGE_ATTENDANCE

    def student_attendance_percentage(self) -> int:
        self._mark("students.percentage")
        return STUDENT_ATTENDANCE_PERCENTAGE

    def student_status(self) -> str:
        self._mark("students.status")
        return "Present" if self.rng.random() < PRESENT_PROBABILITY else "Absent"

    # --- Workshops ---
    def participants(self) -> str:
        self._mark("participants")
        return str(self._band(PARTICIPANT_RANGE))

    # --- Assessments ---
    def grade_bucket(self, grade: str) -> int:
        self._mark("gradeDistribution")
        return GRADE_BUCKET_COUNTS[grade]

    def next_assessment(self) -> Dict[str, str]:
        self._mark("nextAssessment")
        return dict(NEXT_ASSESSMENT)

    def last_assessment_average(self) -> int:
        self._mark("lastAssessmentAverage")
        return LAST_ASSESSMENT_AVERAGE

    def performance_trend_padding(self) -> List[Dict[str, object]]:
        self._mark("performanceTrend")
        return [{"assessment": name, "average": average} for name, average in PERFORMANCE_TREND_PADDING]

    # --- Syllabus ---
    def actual_hours(self, planned: int) -> int:
        self._mark("timeAllocation.actual")
        low, high = ACTUAL_HOURS_FACTOR
        return math.floor(planned * (low + self.rng.random() * (high - low)))

    def remaining_days(self) -> int:
        self._mark("remainingDays")
        return REMAINING_TEACHING_DAYS

    # --- Placeholders with no backing sheet ---
    def pending_reports(self) -> int:
        self._mark("pendingReports")
        return PENDING_REPORTS

    def next_ptm(self) -> Dict[str, str]:
        self._mark("nextPTM")
        return dict(NEXT_PTM)


# --- DEPENDENCY PROVIDER ---
def get_fallback_policy() -> FallbackPolicy:
    """A fresh policy per request."""
    return FallbackPolicy()
