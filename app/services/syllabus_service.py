# /app/services/syllabus_service.py

from typing import Dict

from ..models.record_model import SYLLABUS
from .view_helpers import aggregation
from .view_helpers.date_windows import sort_by_date
from .view_helpers.fallback_policy import FallbackPolicy
from .view_helpers.join_index import JoinIndex, by_field
from .view_helpers.table_fetch import fetch_tables

COMPLETED = "Completed"
PENDING = "Pending"
UPCOMING_LIMIT = 5


def _is_completed(topic) -> bool:
    return topic.status == COMPLETED


async def get_syllabus_data(store, policy: FallbackPolicy) -> Dict:
    """
    Syllabus coverage by unit and by topic group. Units and topic groups are
    the distinct values found in the sheet, in order of first appearance.
    """
    (topics,) = await fetch_tables(store, SYLLABUS)

    units = aggregation.distinct_values(topics, lambda t: t.unit)
    completed_topics = [t for t in topics if _is_completed(t)]
    completed_units = aggregation.distinct_values(completed_topics, lambda t: t.unit)

    topics_by_unit = JoinIndex(topics, by_field("unit"))
    unit_completion = []
    for unit in units:
        unit_topics = topics_by_unit.find_all(unit)
        unit_completion.append({
            "unit": unit,
            "percentage": aggregation.percentage(
                aggregation.count_matching(unit_topics, _is_completed), len(unit_topics), default=0
            ),
        })

    allocation = []
    grouped = aggregation.sum_by_group(
        topics,
        lambda t: t.topicGroup,
        planned=lambda t: aggregation.parse_int(t.expectedHours),
        actual=lambda t: aggregation.parse_int(t.timeSpent),
    )
    for group, hours in grouped:
        actual = hours["actual"] or policy.actual_hours(hours["planned"])
        allocation.append({"topic": group, "planned": hours["planned"], "actual": actual})

    pending = sort_by_date([t for t in topics if t.status == PENDING], lambda t: t.startDate)
    upcoming = [
        {
            "id": t.id,
            "name": t.name,
            "unit": t.unit,
            "plannedStart": t.startDate or "Next Week",
            "estimatedHours": t.expectedHours,
        }
        for t in pending[:UPCOMING_LIMIT]
    ]

    return {
        # An empty syllabus reads as 0% complete.
        "completionPercentage": aggregation.percentage(len(completed_topics), len(topics), default=0),
        "completedUnits": len(completed_units),
        "totalUnits": len(units),
        "remainingDays": policy.remaining_days(),
        "topics": [
            {
                "id": t.id,
                "unit": t.unit,
                "name": t.name,
                "expectedHours": t.expectedHours,
                "timeSpent": t.timeSpent,
                "status": t.status,
                "startDate": t.startDate,
                "completionDate": t.completionDate,
            }
            for t in topics
        ],
        "unitCompletion": unit_completion,
        "timeAllocation": allocation,
        "upcomingTopics": upcoming,
    }
