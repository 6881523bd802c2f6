"""Pytest configuration and fixtures for taskdesk.

Env is set before app.main is imported so Settings validation passes.
HTTP tests run against app.main:app with the Firestore client dependency
replaced by the in-memory fake from tests.fakes.
"""

import os
from collections.abc import Callable
from datetime import timedelta

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.api.dependencies import get_document_client  # noqa: E402
from app.application.use_cases.tasks import TaskService  # noqa: E402
from app.infrastructure.firebase.repositories import (  # noqa: E402
    FirestoreTaskRepository,
    FirestoreTeamRepository,
    FirestoreUserRepository,
)
from app.main import app  # noqa: E402
from tests.auth import issue_token  # noqa: E402
from tests.fakes import FakeFirestoreClient  # noqa: E402


@pytest.fixture
def store() -> FakeFirestoreClient:
    """Empty in-memory document store."""
    return FakeFirestoreClient()


@pytest.fixture
def task_service(store: FakeFirestoreClient) -> TaskService:
    """TaskService over the real Firestore repositories backed by the fake store."""
    return TaskService(
        task_repo=FirestoreTaskRepository(store),
        team_repo=FirestoreTeamRepository(store),
        user_repo=FirestoreUserRepository(store),
    )


@pytest.fixture
async def client(store: FakeFirestoreClient) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) using the fake store.

    raise_app_exceptions=False so unhandled errors surface as the 500 response
    the exception handler builds.
    """
    app.dependency_overrides[get_document_client] = lambda: store
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> Callable[[str], dict[str, str]]:
    """Return a factory: user id -> Authorization header with a valid bearer token."""

    def _headers(user_id: str, expires_delta: timedelta = timedelta(hours=1)) -> dict[str, str]:
        token = issue_token({"sub": user_id}, expires_delta)
        return {"Authorization": f"Bearer {token}"}

    return _headers
