"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the acting user, the document store client,
repositories, and the task service. Routes depend only on these
dependencies, not on infrastructure directly.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.application.dtos.user import AuthenticatedUser
from app.application.use_cases.tasks import TaskService
from app.domain.exceptions import AuthenticationException, StoreUnavailableException
from app.infrastructure.firebase import get_firestore_client
from app.infrastructure.firebase._rest_client import FirestoreRESTClient
from app.infrastructure.firebase.repositories import (
    FirestoreTaskRepository,
    FirestoreTeamRepository,
    FirestoreUserRepository,
)
from app.infrastructure.security.jwt import decode_access_token

_http_bearer = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> AuthenticatedUser:
    """Return the acting user from the bearer JWT (sub claim); raise 401 if missing or invalid."""
    if not credentials:
        raise AuthenticationException()
    return AuthenticatedUser(id=decode_access_token(credentials.credentials))


def get_document_client() -> FirestoreRESTClient:
    """Firestore client initialised at startup; 503 when credentials are not configured."""
    client = get_firestore_client()
    if client is None:
        raise StoreUnavailableException()
    return client


def get_task_service(
    client: Annotated[FirestoreRESTClient, Depends(get_document_client)],
) -> TaskService:
    """Task service over Firestore repositories (composition root)."""
    return TaskService(
        task_repo=FirestoreTaskRepository(client),
        team_repo=FirestoreTeamRepository(client),
        user_repo=FirestoreUserRepository(client),
    )


CurrentUser = Annotated[AuthenticatedUser, Depends(get_current_user)]
TaskServiceDep = Annotated[TaskService, Depends(get_task_service)]
