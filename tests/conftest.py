# /tests/conftest.py

import random
from unittest.mock import MagicMock

import pytest

from app.services.view_helpers.fallback_policy import FallbackPolicy


def make_store(tables):
    """
    A MagicMock table store whose `get_rows(sheet, columns)` returns the raw
    rows for `sheet` from the given dict (header row included), or [] for any
    sheet not listed.
    """
    store = MagicMock()
    store.get_rows.side_effect = lambda sheet, columns: tables.get(sheet, [])
    return store


@pytest.fixture
def policy():
    """A fallback policy with a seeded RNG so synthetic values are repeatable."""
    return FallbackPolicy(random.Random(0))


@pytest.fixture
def students_rows():
    """The Students sheet: header plus four students, one with a short row."""
    return [
        ["Roll No", "Name", "Gender", "Category", "Service Category", "Contact", "Status"],
        ["101", "Asha", "Female", "OBC", "1", "9990001111", "Active"],
        ["102", "Ravi", "Male", "SC", "2", "9990002222", "Active"],
        ["103", "Meera", "Female", "General", "1", "9990003333", "Transferred"],
        ["104", "Kiran", "Male", "OBC"],
    ]


@pytest.fixture
def performance_rows():
    """The Performance sheet, keyed by roll number in column A."""
    return [
        ["Roll No", "Rating", "Category", "Strengths", "Weaknesses", "Suggestions", "Report"],
        ["101", "Excellent", "Bright Learner", "Focus, Speed", "Grammar", "Read daily", "Top of the class."],
        ["102", "Average", "Late Bloomer", "Art", "Math, Science", "", ""],
        ["999", "Good", "Bright Learner", "Logic", "", "", ""],
    ]
