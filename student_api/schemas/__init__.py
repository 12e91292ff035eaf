"""
Schemas module - Request/Response schemas for API endpoints.

The API contract is kept separate from the store's row dicts:
- Request schemas (what the API accepts)
- Response schemas (what the API returns)
"""

from student_api.schemas.schemas import (
    StudentCreate,
    StudentUpdate,
    StudentRecord,
    StudentEnvelope,
    ErrorResponse,
)

__all__ = [
    "StudentCreate",
    "StudentUpdate",
    "StudentRecord",
    "StudentEnvelope",
    "ErrorResponse",
]
