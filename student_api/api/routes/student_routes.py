"""
Student Routes

POST /students - Create a student
GET /students - List all students
GET /students/{student_id} - Get one student
PUT /students/{student_id} - Replace a student's mutable fields
DELETE /students/{student_id} - Delete a student
"""

from typing import List, Optional

from fastapi import APIRouter, Depends

from student_api.api.deps import get_store
from student_api.core.errors import StudentNotFound, store_fault
from student_api.db.student_store import StudentStore
from student_api.schemas.schemas import (
    StudentCreate, StudentUpdate, StudentRecord, StudentEnvelope, ErrorResponse
)

router = APIRouter(prefix="/students", tags=["Students"])

ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post("", response_model=StudentEnvelope, status_code=201, responses=ERRORS)
def create_student(data: StudentCreate, store: StudentStore = Depends(get_store)):
    """Create a student. All fields except courses are required."""
    with store_fault("Failed to create student"):
        row = store.create(data.model_dump())

    return {"message": "Student created successfully", "student": row}


@router.get("", response_model=List[StudentRecord], responses=ERRORS)
def list_students(store: StudentStore = Depends(get_store)):
    """All students, in whatever order the database returns them."""
    with store_fault("Failed to fetch students"):
        return store.list_all()


@router.get("/{student_id}", response_model=StudentRecord, responses=ERRORS)
def get_student(student_id: str, store: StudentStore = Depends(get_store)):
    with store_fault("Failed to fetch student"):
        row = store.get(student_id)

    if row is None:
        raise StudentNotFound()
    return row


@router.put("/{student_id}", response_model=StudentEnvelope, responses=ERRORS)
def update_student(
    student_id: str,
    data: Optional[StudentUpdate] = None,
    store: StudentStore = Depends(get_store)
):
    """
    Replace a student's mutable fields.

    This is not a patch: every field left out of the body is cleared.
    student_id is taken from the path and never changes.
    """
    payload = (data or StudentUpdate()).model_dump()
    with store_fault("Failed to update student"):
        row = store.update(student_id, payload)

    if row is None:
        raise StudentNotFound()
    return {"message": "Student updated successfully", "student": row}


@router.delete("/{student_id}", response_model=StudentEnvelope, responses=ERRORS)
def delete_student(student_id: str, store: StudentStore = Depends(get_store)):
    with store_fault("Failed to delete student"):
        row = store.delete(student_id)

    if row is None:
        raise StudentNotFound()
    return {"message": "Student deleted successfully", "student": row}
