"""
Student Store - the only component that talks to the database.

One StudentStore is built at startup and handed to every request handler.
Each method runs exactly one parameterized statement in its own session
and returns plain dicts (or None when no row matched).
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from sqlalchemy import Date, bindparam, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from student_api.db.postgres import ping_database
from student_api.db.tables import CoursesType, metadata

logger = logging.getLogger(__name__)

Row = Dict[str, Any]

MUTABLE_FIELDS = (
    "first_name",
    "last_name",
    "date_of_birth",
    "email",
    "enrollment_date",
    "courses",
)

# Typed binds: courses serialized to JSON, dates passed as dates
_BINDS = (
    bindparam("date_of_birth", type_=Date),
    bindparam("enrollment_date", type_=Date),
    bindparam("courses", type_=CoursesType),
)

# Typed result columns: courses always comes back structured
_RESULT_TYPES = {
    "date_of_birth": Date,
    "enrollment_date": Date,
    "courses": CoursesType,
}


def _returning(sql: str, *binds):
    return text(sql).bindparams(*binds).columns(**_RESULT_TYPES)


INSERT_STUDENT = _returning("""
    INSERT INTO students (student_id, first_name, last_name, date_of_birth, email, enrollment_date, courses)
    VALUES (:student_id, :first_name, :last_name, :date_of_birth, :email, :enrollment_date, :courses)
    RETURNING *
""", *_BINDS)

SELECT_STUDENTS = _returning("SELECT * FROM students")

SELECT_STUDENT = _returning("SELECT * FROM students WHERE student_id = :student_id")

UPDATE_STUDENT = _returning("""
    UPDATE students
    SET first_name = :first_name, last_name = :last_name, date_of_birth = :date_of_birth,
        email = :email, enrollment_date = :enrollment_date, courses = :courses
    WHERE student_id = :student_id
    RETURNING *
""", *_BINDS)

DELETE_STUDENT = _returning("DELETE FROM students WHERE student_id = :student_id RETURNING *")


class StudentStore:
    """Parameterized CRUD over the students table."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self._session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    @contextmanager
    def session(self):
        """
        Context manager for database sessions.
        Usage:
            with store.session() as db:
                db.execute(text("SELECT * FROM students"))
        """
        session: Session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def _fetch_one(self, statement, params: Row) -> Optional[Row]:
        with self.session() as db:
            row = db.execute(statement, params).mappings().first()
            return dict(row) if row is not None else None

    def create(self, data: Row) -> Row:
        """Insert a student and return the stored row."""
        params = {"student_id": data["student_id"]}
        params.update({field: data.get(field) for field in MUTABLE_FIELDS})
        row = self._fetch_one(INSERT_STUDENT, params)
        logger.info("Created student %s", row["student_id"])
        return row

    def list_all(self) -> List[Row]:
        with self.session() as db:
            return [dict(row) for row in db.execute(SELECT_STUDENTS).mappings().all()]

    def get(self, student_id: str) -> Optional[Row]:
        return self._fetch_one(SELECT_STUDENT, {"student_id": student_id})

    def update(self, student_id: str, data: Row) -> Optional[Row]:
        """Overwrite every mutable column. Missing keys are written as NULL."""
        params = {field: data.get(field) for field in MUTABLE_FIELDS}
        params["student_id"] = student_id
        return self._fetch_one(UPDATE_STUDENT, params)

    def delete(self, student_id: str) -> Optional[Row]:
        return self._fetch_one(DELETE_STUDENT, {"student_id": student_id})

    def create_tables(self) -> None:
        metadata.create_all(self.engine)
        logger.info("students table ready")

    def ping(self) -> bool:
        return ping_database(self.engine)

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Connection pool disposed")
