"""
Database module - PostgreSQL engine and the student store.
"""
from student_api.db.postgres import create_store_engine, ping_database
from student_api.db.student_store import StudentStore
from student_api.db.tables import metadata, students

__all__ = [
    "create_store_engine",
    "ping_database",
    "StudentStore",
    "metadata",
    "students",
]
