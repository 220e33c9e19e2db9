# /app/services/dashboard_service.py

# --- Core Imports ---
from typing import Dict

from ..models.dashboard_model import (
    BRIGHT_LEARNER,
    CASTE_CATEGORIES,
    LATE_BLOOMER,
    PERFORMANCE_RATINGS,
    SERVICE_CATEGORIES,
)
from ..models.record_model import PERFORMANCE, STUDENTS, WORKSHOPS
from .view_helpers import aggregation
from .view_helpers.fallback_policy import FallbackPolicy
from .view_helpers.join_index import JoinIndex, by_field
from .view_helpers.table_fetch import fetch_tables


def _is_boy(student) -> bool:
    return student.gender == "Male"


def _is_girl(student) -> bool:
    return student.gender == "Female"


def _is_bright(performance) -> bool:
    return performance.category == BRIGHT_LEARNER


def _is_late_bloomer(performance) -> bool:
    return performance.category == LATE_BLOOMER


# --- Core Public Functions ---

async def get_summary_data(store, policy: FallbackPolicy) -> Dict:
    """
    Calculates the Home Page statistics from the Students, Performance and
    Workshops sheets.

    Args:
        store: The table store, provided by dependency injection.
        policy: Supplies the placeholder for counts that have no sheet.

    Returns:
        A dict matching `DashboardData`.
    """
    students, performance, workshops = await fetch_tables(store, STUDENTS, PERFORMANCE, WORKSHOPS)

    return {
        "totalStudents": len(students),
        "boys": aggregation.count_matching(students, _is_boy),
        "girls": aggregation.count_matching(students, _is_girl),
        "brightLearners": aggregation.count_matching(performance, _is_bright),
        "lateBoomers": aggregation.count_matching(performance, _is_late_bloomer),
        "workshopsCompleted": aggregation.count_matching(workshops, lambda w: w.status == "Completed"),
        "pendingReports": policy.pending_reports(),
        "categories": aggregation.count_fixed(
            students, lambda s: s.category, CASTE_CATEGORIES, label_key="category"
        ),
        "performance": aggregation.count_fixed(
            performance, lambda p: p.rating, PERFORMANCE_RATINGS, label_key="name"
        ),
    }


async def get_categories_data(store) -> Dict:
    """
    Caste and service category counts, plus a per-caste breakdown that joins
    each student to their Performance row by roll number.
    """
    students, performance = await fetch_tables(store, STUDENTS, PERFORMANCE)

    detailed = aggregation.cross_table_breakdown(
        students,
        CASTE_CATEGORIES,
        category_of=lambda s: s.category,
        member_counts={"boys": _is_boy, "girls": _is_girl},
        index=JoinIndex(performance, by_field("id")),
        key_of=lambda s: s.rollNo,
        joined_counts={"brightLearners": _is_bright, "lateBoomers": _is_late_bloomer},
    )

    return {
        "casteCategories": aggregation.count_fixed(students, lambda s: s.category, CASTE_CATEGORIES),
        "serviceCategories": aggregation.count_fixed(
            students, lambda s: s.serviceCategory, SERVICE_CATEGORIES, label_key="category"
        ),
        "detailedCategories": detailed,
    }
