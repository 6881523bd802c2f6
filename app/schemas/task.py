"""Task API schemas. JSON uses camelCase (dueDate, createdAt)."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.application.dtos.task import TaskCreate, TaskUpdate, TeamTaskResult


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class TaskCreateRequest(_CamelModel):
    """Body for POST /tasks. workspace is "personal" or "team"; team is required for "team"."""

    title: str | None = None
    description: str | None = None
    due_date: datetime | None = None
    priority: int | None = None
    workspace: str | None = None
    team: str | None = None

    def to_task_create(self) -> TaskCreate:
        return TaskCreate(
            title=self.title,
            description=self.description,
            due_date=self.due_date,
            priority=self.priority,
        )


class TeamTaskCreateRequest(_CamelModel):
    """Body for POST /tasks/{team_id}."""

    title: str | None = None
    description: str | None = None
    due_date: datetime | None = None
    priority: int | None = None

    def to_task_create(self) -> TaskCreate:
        return TaskCreate(
            title=self.title,
            description=self.description,
            due_date=self.due_date,
            priority=self.priority,
        )


class TaskUpdateRequest(_CamelModel):
    """Body for PUT /tasks/{task_id} (partial). Only fields present in the JSON are written."""

    title: str | None = None
    description: str | None = None
    due_date: datetime | None = None
    priority: int | None = None
    completed: bool | None = None

    def to_task_update(self) -> TaskUpdate:
        # model_fields_set holds only keys the client actually sent.
        return TaskUpdate(
            fields={name: getattr(self, name) for name in self.model_fields_set}
        )


class TaskStatusRequest(_CamelModel):
    """Body for PUT /tasks/{task_id}/status."""

    completed: bool | None = None


class TaskResponse(_CamelModel):
    """Task as returned by the API."""

    id: str
    title: str
    description: str | None = None
    due_date: datetime | None = None
    priority: int | None = None
    completed: bool = False
    workspace: str | None = None
    user: str
    team: str | None = None
    created_at: datetime | None = None


class TaskOwnerResponse(_CamelModel):
    """Task owner expanded to its username (team listings)."""

    id: str
    username: str | None = None


class TeamTaskResponse(TaskResponse):
    """Task in a team listing; user is expanded to {id, username}."""

    user: TaskOwnerResponse  # type: ignore[assignment]

    @classmethod
    def from_result(cls, result: TeamTaskResult) -> "TeamTaskResponse":
        t = result.task
        return cls(
            id=t.id,
            title=t.title,
            description=t.description,
            due_date=t.due_date,
            priority=t.priority,
            completed=t.completed,
            workspace=t.workspace,
            user=TaskOwnerResponse(id=result.owner.id, username=result.owner.username),
            team=t.team,
            created_at=t.created_at,
        )


class MessageResponse(BaseModel):
    """Confirmation body (e.g. after delete)."""

    msg: str
