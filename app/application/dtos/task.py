"""DTOs for task use cases (no dependency on the document store)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

# Fields a client may change through the full update route.
UPDATABLE_TASK_FIELDS = ("title", "description", "due_date", "priority", "completed")


@dataclass(frozen=True)
class TaskResult:
    """Task read-model (result of create, get, list, update)."""

    id: str
    title: str
    user: str
    created_at: datetime | None = None
    description: str | None = None
    due_date: datetime | None = None
    priority: int | None = None
    completed: bool = False
    workspace: str | None = None
    team: str | None = None


@dataclass(frozen=True)
class TaskCreate:
    """Fields accepted when creating a task (owner and team are resolved by the service)."""

    title: str | None
    description: str | None = None
    due_date: datetime | None = None
    priority: int | None = None


@dataclass(frozen=True)
class TaskUpdate:
    """Explicit partial update: only keys present in ``fields`` are written.

    Omitted keys are left unchanged in the store; a key present with value
    None clears that field.
    """

    fields: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        unknown = set(self.fields) - set(UPDATABLE_TASK_FIELDS)
        if unknown:
            raise ValueError(f"Fields not updatable: {sorted(unknown)}")

    def is_empty(self) -> bool:
        return not self.fields


@dataclass(frozen=True)
class TaskOwner:
    """Expanded task owner (team listings show who created each task)."""

    id: str
    username: str | None


@dataclass(frozen=True)
class TeamTaskResult:
    """Task with its owner expanded to include the username."""

    task: TaskResult
    owner: TaskOwner
