"""
Student Management API
A small CRUD service over a single PostgreSQL table of students.

Architecture:
- FastAPI: HTTP routing and request validation
- SQLAlchemy: pooled PostgreSQL access with parameterized SQL
"""

__version__ = "1.0.0"
