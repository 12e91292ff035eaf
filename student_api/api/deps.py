from fastapi import Request

from student_api.db.student_store import StudentStore


def get_store(request: Request) -> StudentStore:
    """
    Dependency - the store built at startup.

    Usage:
        @router.get("/students")
        def list_students(store: StudentStore = Depends(get_store)):
            ...
    """
    return request.app.state.store
