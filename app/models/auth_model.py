# /app/models/auth_model.py

from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Any, Optional


class AuthRequest(BaseModel):
    # Optional so a missing ID reaches the service and gets the 400 message
    # the login form expects, rather than a 422.
    employeeId: Optional[str] = Field(None, description="The teacher's employee ID.")

    @field_validator('employeeId', mode='before')
    @classmethod
    def employee_id_as_text(cls, v: Any) -> Optional[str]:
        # Sheet IDs are text; a numeric ID from the form is looked up as text,
        # anything else counts as missing.
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return None


class AuthResponse(BaseModel):
    success: bool
    message: str
    token: str = Field(..., description="Placeholder session token; not verified anywhere yet.")


class Teacher(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    subject: str
    className: str = Field(..., alias="class")
    department: str
