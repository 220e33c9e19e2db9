# /tests/test_aggregation.py

import pytest

from app.models.record_model import PerformanceRecord, StudentRecord
from app.services.view_helpers import aggregation
from app.services.view_helpers.join_index import JoinIndex, by_field


@pytest.fixture
def students():
    return [
        StudentRecord(rollNo="1", gender="Male", category="OBC"),
        StudentRecord(rollNo="2", gender="Female", category="SC"),
        StudentRecord(rollNo="3", gender="Female", category="OBC"),
        StudentRecord(rollNo="4", gender="Male", category="Unlisted"),
    ]


def test_percentage_rounds_half_up_and_uses_default_for_zero_denominator():
    assert aggregation.percentage(1, 8, default=None) == 13  # 12.5
    assert aggregation.percentage(2, 3, default=None) == 67
    assert aggregation.percentage(0, 0, default=None) is None
    assert aggregation.percentage(0, 0, default=0) == 0


def test_parse_helpers_read_leading_numbers():
    assert aggregation.parse_int("12h") == 12
    assert aggregation.parse_int("") == 0
    assert aggregation.parse_int(None) == 0
    assert aggregation.parse_float("87.5%") == 87.5
    assert aggregation.parse_float("n/a") == 0.0
    assert aggregation.parse_float("1e400") == 0.0


def test_count_fixed_reports_every_label_and_drops_unknown_values(students):
    """
    GIVEN: Students whose categories include one value outside the label set.
    WHEN:  A fixed-set count is taken.
    THEN:  Every label appears in order and the counts sum to less than the total.
    """
    counts = aggregation.count_fixed(students, lambda s: s.category, ("General", "OBC", "SC"))

    assert counts == [
        {"name": "General", "count": 0},
        {"name": "OBC", "count": 2},
        {"name": "SC", "count": 1},
    ]
    assert sum(c["count"] for c in counts) <= len(students)


def test_count_dynamic_reports_exactly_the_values_present(students):
    counts = aggregation.count_dynamic(students, lambda s: s.category, label_key="category")

    assert [c["category"] for c in counts] == ["OBC", "SC", "Unlisted"]
    assert sum(c["count"] for c in counts) == len(students)


def test_sum_by_group_keeps_first_occurrence_order():
    rows = [("Theory", 4, 3), ("Lab", 2, 0), ("Theory", 6, 5)]

    grouped = aggregation.sum_by_group(
        rows, lambda r: r[0], planned=lambda r: r[1], actual=lambda r: r[2]
    )

    assert grouped == [("Theory", {"planned": 10, "actual": 8}), ("Lab", {"planned": 2, "actual": 0})]
    assert aggregation.sum_by_group([], lambda r: r[0], planned=lambda r: r[1]) == []


def test_cross_table_breakdown_counts_joined_rows(students):
    performance = [
        PerformanceRecord(id="1", category="Bright Learner"),
        PerformanceRecord(id="3", category="Late Bloomer"),
    ]

    breakdown = aggregation.cross_table_breakdown(
        students,
        ("OBC", "SC"),
        category_of=lambda s: s.category,
        member_counts={"boys": lambda s: s.gender == "Male"},
        index=JoinIndex(performance, by_field("id")),
        key_of=lambda s: s.rollNo,
        joined_counts={"brightLearners": lambda p: p.category == "Bright Learner"},
    )

    assert breakdown == [
        {"name": "OBC", "total": 2, "boys": 1, "brightLearners": 1},
        {"name": "SC", "total": 1, "boys": 0, "brightLearners": 0},
    ]


def test_join_index_returns_first_match_and_all_matches_in_row_order():
    records = [
        StudentRecord(rollNo="7", name="first"),
        StudentRecord(rollNo="8", name="other"),
        StudentRecord(rollNo="7", name="second"),
    ]
    index = JoinIndex(records, by_field("rollNo"))

    assert index.find_one("7").name == "first"
    assert [r.name for r in index.find_all("7")] == ["first", "second"]
    assert index.find_one("missing") is None
    assert index.find_all("missing") == []
