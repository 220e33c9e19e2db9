# /app/services/assessment_service.py

"""
This module assembles the Assessments page: the assessment list with grade
averages, the next scheduled and last completed assessment, the grade
distribution and the performance trend.

Grades are joined to assessments by assessment ID. An assessment's average is
the rounded mean of its grade percentages; an average of 0 is treated the
same as "not graded" when picking completed assessments.
"""

from typing import Dict, List

from ..models.assessment_model import GRADES, AssessmentStatus
from ..models.record_model import ASSESSMENTS, GRADES as GRADES_TABLE
from .view_helpers import aggregation
from .view_helpers.date_windows import sort_by_date
from .view_helpers.fallback_policy import FallbackPolicy
from .view_helpers.join_index import JoinIndex, by_field
from .view_helpers.table_fetch import fetch_tables

TREND_LENGTH = 5
MIN_TREND_POINTS = 3


def _average(grades) -> int:
    total = sum(aggregation.parse_float(g.percentage) for g in grades)
    return aggregation.round_half_up(total / len(grades))


def _assessment_rows(assessments, grades) -> List[Dict]:
    grades_by_assessment = JoinIndex(grades, by_field("assessmentId"))
    rows = []
    for a in assessments:
        matched = grades_by_assessment.find_all(a.id)
        rows.append({
            "id": a.id,
            "date": a.date,
            "title": a.title,
            "type": a.type,
            "maxScore": a.maxScore,
            "average": _average(matched) if matched else None,
            "status": a.status,
        })
    return sort_by_date(rows, lambda r: r["date"])


async def get_assessments_data(store, policy: FallbackPolicy) -> Dict:
    assessments, grades = await fetch_tables(store, ASSESSMENTS, GRADES_TABLE)
    rows = _assessment_rows(assessments, grades)

    scheduled = [r for r in rows if r["status"] == AssessmentStatus.SCHEDULED.value]
    if scheduled:
        next_assessment = {"date": scheduled[0]["date"], "name": scheduled[0]["title"]}
    else:
        next_assessment = policy.next_assessment()

    completed = [r for r in rows if r["status"] == AssessmentStatus.COMPLETED.value and r["average"]]
    latest = sort_by_date(completed, lambda r: r["date"], descending=True)
    last_average = latest[0]["average"] if latest else policy.last_assessment_average()

    pending_grades = sum(
        1 for r in rows if r["status"] == AssessmentStatus.COMPLETED.value and not r["average"]
    )

    distribution = aggregation.count_fixed(grades, lambda g: g.grade, GRADES, label_key="grade")
    for bucket in distribution:
        if bucket["count"] == 0:
            bucket["count"] = policy.grade_bucket(bucket["grade"])

    trend = [{"assessment": r["title"], "average": r["average"]} for r in completed[:TREND_LENGTH]]
    if len(trend) < MIN_TREND_POINTS:
        trend.extend(policy.performance_trend_padding())

    return {
        "nextAssessment": next_assessment,
        "lastAssessmentAverage": last_average,
        "pendingGrades": pending_grades,
        "assessments": rows,
        "gradeDistribution": distribution,
        "performanceTrend": trend,
    }
