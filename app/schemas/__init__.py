"""API request/response schemas (pydantic)."""

from app.schemas.health import HealthResponse
from app.schemas.task import (
    MessageResponse,
    TaskCreateRequest,
    TaskOwnerResponse,
    TaskResponse,
    TaskStatusRequest,
    TaskUpdateRequest,
    TeamTaskCreateRequest,
    TeamTaskResponse,
)

__all__ = [
    "HealthResponse",
    "MessageResponse",
    "TaskCreateRequest",
    "TaskOwnerResponse",
    "TaskResponse",
    "TaskStatusRequest",
    "TaskUpdateRequest",
    "TeamTaskCreateRequest",
    "TeamTaskResponse",
]
