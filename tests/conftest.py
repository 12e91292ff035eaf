from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from student_api.core.config import Settings
from student_api.db.student_store import StudentStore
from student_api.main import create_app


def _sqlite_engine() -> Engine:
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, create_tables=False)


@pytest.fixture
def store() -> Iterator[StudentStore]:
    store = StudentStore(_sqlite_engine())
    store.create_tables()
    yield store
    store.dispose()


@pytest.fixture
def broken_store() -> Iterator[StudentStore]:
    """A store whose table was never created: every statement fails."""
    store = StudentStore(_sqlite_engine())
    yield store
    store.dispose()


@pytest.fixture
def client(settings: Settings, store: StudentStore) -> TestClient:
    return TestClient(create_app(settings=settings, store=store))


@pytest.fixture
def broken_client(settings: Settings, broken_store: StudentStore) -> TestClient:
    return TestClient(create_app(settings=settings, store=broken_store))


@pytest.fixture
def ada() -> dict:
    return {
        "student_id": "S1",
        "first_name": "Ada",
        "last_name": "Lovelace",
        "date_of_birth": "1815-12-10",
        "email": "ada@x.com",
        "enrollment_date": "2024-01-01",
        "courses": ["CS101"],
    }
