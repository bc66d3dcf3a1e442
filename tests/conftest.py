"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory Redis, record store, service, API client, CSV upload files
Dependencies: pytest, fakeredis, fastapi
System role: Test infrastructure and fixture management
"""

import tempfile
from pathlib import Path
from unittest.mock import AsyncMock, patch

import fakeredis
import pytest
from fastapi.testclient import TestClient

from student_records.application.services import StudentService
from student_records.boundary.kv import StudentStore


@pytest.fixture
def fake_redis():
    """
    Create an isolated in-memory Redis client.

    Returns:
        FakeAsyncRedis: Client bound to a private fake server
    """
    return fakeredis.FakeAsyncRedis(server=fakeredis.FakeServer(), decode_responses=True)


@pytest.fixture
def student_store(fake_redis) -> StudentStore:
    """Provide StudentStore over the in-memory Redis."""
    return StudentStore(fake_redis)


@pytest.fixture
def student_service(student_store) -> StudentService:
    """Provide StudentService over the in-memory store."""
    return StudentService(store=student_store)


@pytest.fixture
def app_factory(fake_redis):
    """
    Build the FastAPI app with the startup connection patched to the fake.

    Yields:
        Callable[[], FastAPI]: Application factory
    """
    from student_records.api.main import create_app

    with patch(
        "student_records.api.main.connect_redis",
        AsyncMock(return_value=fake_redis),
    ):
        yield create_app


@pytest.fixture
def client(app_factory):
    """
    Create a TestClient with the lifespan running.

    Yields:
        TestClient: Client sharing one event loop for the whole test
    """
    with TestClient(app_factory()) as test_client:
        yield test_client


@pytest.fixture
def sample_student() -> dict:
    """Provide a complete create payload."""
    return {
        "id": "s1",
        "name": "Ann",
        "course": "CS",
        "age": "20",
        "address": "X",
        "year_level": "2",
        "college": "Eng",
        "hobbies": "chess",
    }


@pytest.fixture
def csv_file():
    """
    Create temporary CSV files for upload tests.

    Yields:
        Callable[[str], Path]: Writes the given text to a new file and returns its path
    """
    temp_dir = Path(tempfile.mkdtemp(prefix="students_test_"))
    counter = iter(range(1_000_000))

    def _write(content: str, encoding: str = "utf-8") -> Path:
        path = temp_dir / f"upload_{next(counter)}.csv"
        path.write_bytes(content.encode(encoding))
        return path

    yield _write

    # Cleanup
    import shutil
    shutil.rmtree(temp_dir, ignore_errors=True)
