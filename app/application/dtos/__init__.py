"""Application DTOs (read-models and inputs passed between layers)."""

from app.application.dtos.task import (
    TaskCreate,
    TaskOwner,
    TaskResult,
    TaskUpdate,
    TeamTaskResult,
)
from app.application.dtos.team import TeamResult
from app.application.dtos.user import AuthenticatedUser

__all__ = [
    "AuthenticatedUser",
    "TaskCreate",
    "TaskOwner",
    "TaskResult",
    "TaskUpdate",
    "TeamResult",
    "TeamTaskResult",
]
