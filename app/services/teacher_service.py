# /app/services/teacher_service.py

"""
Employee login and the teacher profile shown in the dashboard header.

Login is a placeholder: an employee ID found in the Authentication sheet gets
an unsigned, time-stamped token that nothing else verifies yet.
"""

import time
import logging
from typing import Dict, Optional

from ..core.errors import AuthenticationError, NotFoundError, ValidationError
from ..models.record_model import AUTHENTICATION, TEACHERS, TeacherRecord
from .view_helpers.join_index import JoinIndex, by_field
from .view_helpers.table_fetch import fetch_tables

logger = logging.getLogger(__name__)


async def authenticate(store, employee_id: Optional[str]) -> Dict:
    if not employee_id:
        raise ValidationError("Employee ID is required")

    (accounts,) = await fetch_tables(store, AUTHENTICATION)
    if JoinIndex(accounts, by_field("id")).find_one(employee_id) is None:
        logger.info("Rejected login for unknown employee ID %r", employee_id)
        raise AuthenticationError("Invalid Employee ID")

    return {
        "success": True,
        "message": "Authentication successful",
        "token": f"sample-token-{int(time.time() * 1000)}",
    }


def _teacher_view(teacher: TeacherRecord) -> Dict:
    return {
        "id": teacher.id,
        "name": teacher.name,
        "subject": teacher.subject,
        "class": teacher.className,
        "department": teacher.department,
    }


async def get_teacher_data(store, employee_id: Optional[str] = None) -> Dict:
    """
    Returns the teacher with `employee_id`, or the first teacher in the sheet
    when no ID is given (used by the demo login).
    """
    (teachers,) = await fetch_tables(store, TEACHERS)

    if employee_id:
        teacher = JoinIndex(teachers, by_field("id")).find_one(employee_id)
        if teacher is None:
            raise NotFoundError("Teacher not found")
        return _teacher_view(teacher)

    if not teachers:
        raise LookupError("The Teachers sheet has no data rows.")
    return _teacher_view(teachers[0])
