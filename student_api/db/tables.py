"""
Table definitions. Used for CREATE TABLE only; queries are plain SQL.
"""

from sqlalchemy import JSON, Column, Date, MetaData, String, Table
from sqlalchemy.dialects.postgresql import JSONB

metadata = MetaData()

# JSON everywhere, JSONB on PostgreSQL. None is stored as SQL NULL, not 'null'.
CoursesType = JSON(none_as_null=True).with_variant(JSONB(none_as_null=True), "postgresql")

students = Table(
    "students",
    metadata,
    Column("student_id", String(64), primary_key=True),
    Column("first_name", String(100)),
    Column("last_name", String(100)),
    Column("date_of_birth", Date),
    Column("email", String(255)),
    Column("enrollment_date", Date),
    Column("courses", CoursesType),
)
