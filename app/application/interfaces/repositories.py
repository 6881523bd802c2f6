"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Protocol

from app.domain.enums import TaskSort

if TYPE_CHECKING:
    from app.application.dtos.task import TaskResult, TaskUpdate
    from app.application.dtos.team import TeamResult


# Task repository interface
class ITaskRepository(Protocol):
    """Protocol for task repository (DIP)."""

    async def create(self, data: dict[str, Any]) -> TaskResult:
        """Persist a new task; assigns id and created_at."""

    async def get_by_id(self, task_id: str) -> TaskResult | None:
        """Return task by ID."""

    async def list_by_user(
        self, user_id: str, sort_by: TaskSort | None = None
    ) -> list[TaskResult]:
        """Return all tasks owned by user, ordered by sort_by (natural order when None)."""

    async def list_by_team(self, team_id: str) -> list[TaskResult]:
        """Return all tasks belonging to team in natural order."""

    async def update_fields(self, task_id: str, update: TaskUpdate) -> TaskResult | None:
        """Write only the supplied fields; return updated task or None if it does not exist."""

    async def delete(self, task_id: str) -> None:
        """Remove the task permanently."""


# Team repository interface
class ITeamRepository(Protocol):
    """Protocol for team lookups (membership)."""

    async def get_by_id(self, team_id: str) -> TeamResult | None:
        """Return team by ID."""


# User repository interface
class IUserRepository(Protocol):
    """Protocol for user lookups (username expansion)."""

    async def get_usernames(self, user_ids: Iterable[str]) -> dict[str, str | None]:
        """Return username per user id; unknown users map to None."""
