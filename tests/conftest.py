import os
from collections.abc import Iterator
from typing import Any

import pytest
from fastapi.testclient import TestClient

# Environment read by api.dependencies
os.environ.setdefault("OPENWEATHER_API_KEY", "test-key")

from api.dependencies import get_environmental_repository  # noqa: E402
from api.main import app  # noqa: E402


class FakeRepository:
    """Records every saved item instead of writing to a database."""

    def __init__(self) -> None:
        self.saved: list[Any] = []

    async def save(self, record: Any) -> Any:
        self.saved.append(record)
        return record


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def environmental_repository() -> FakeRepository:
    return FakeRepository()


@pytest.fixture
def client(environmental_repository: FakeRepository) -> Iterator[TestClient]:
    app.dependency_overrides[get_environmental_repository] = lambda: environmental_repository
    # Not used as a context manager so the lifespan (database connection) never runs
    yield TestClient(app)
    app.dependency_overrides.clear()
