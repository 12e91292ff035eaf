"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ============================================================
# STUDENT REQUEST SCHEMAS
# ============================================================

class StudentCreate(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    student_id: str = Field(..., min_length=1, max_length=64)
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    date_of_birth: date
    email: str = Field(..., min_length=1)
    enrollment_date: date
    courses: Optional[List[str]] = None

    @field_validator("student_id", mode="before")
    @classmethod
    def student_id_present(cls, value):
        # 0 and false count as absent, like an empty string
        if not value:
            raise ValueError("student_id is required")
        return value

class StudentUpdate(BaseModel):
    """Full replacement of the mutable fields. Omitted fields are stored as NULL."""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    date_of_birth: Optional[date] = None
    email: Optional[str] = None
    enrollment_date: Optional[date] = None
    courses: Optional[List[str]] = None


# ============================================================
# STUDENT RESPONSE SCHEMAS
# ============================================================

class StudentRecord(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    student_id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    date_of_birth: Optional[date] = None
    email: Optional[str] = None
    enrollment_date: Optional[date] = None
    courses: Optional[List[str]] = None

class StudentEnvelope(BaseModel):
    message: str
    student: StudentRecord


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class ErrorResponse(BaseModel):
    error: str
