"""Task API: thin routes delegating to TaskService.

Route table (prefix /tasks). Paths sharing the /{id} shape are told apart by
method: PUT and DELETE take a task id, GET and POST take a team id.

    GET    /                   personal tasks (sortBy=priority|dateAdded)
    POST   /                   create personal or team task
    PUT    /{task_id}          update own task (partial)
    DELETE /{task_id}          delete own task
    POST   /{team_id}          create task in team (members only)
    GET    /{team_id}          list team tasks (members only)
    PUT    /{task_id}/status   set completed (no ownership check)
"""

from typing import Annotated

from fastapi import APIRouter, Query

from app.api.dependencies import CurrentUser, TaskServiceDep
from app.schemas.task import (
    MessageResponse,
    TaskCreateRequest,
    TaskResponse,
    TaskStatusRequest,
    TaskUpdateRequest,
    TeamTaskCreateRequest,
    TeamTaskResponse,
)

router = APIRouter()


@router.get("", response_model=list[TaskResponse])
async def list_personal_tasks(
    current_user: CurrentUser,
    service: TaskServiceDep,
    sort_by: Annotated[str | None, Query(alias="sortBy")] = None,
):
    """List all tasks of the acting user. Unknown sortBy values keep insertion order."""
    tasks = await service.list_personal_tasks(current_user, sort_by)
    return [TaskResponse.model_validate(t) for t in tasks]


@router.post("", response_model=TaskResponse)
async def create_task(
    body: TaskCreateRequest,
    current_user: CurrentUser,
    service: TaskServiceDep,
):
    """Create a task in the personal or team workspace."""
    created = await service.create_task(
        current_user,
        body.to_task_create(),
        workspace=body.workspace,
        team=body.team,
    )
    return TaskResponse.model_validate(created)


@router.put("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: str,
    body: TaskUpdateRequest,
    current_user: CurrentUser,
    service: TaskServiceDep,
):
    """Update a task owned by the acting user. Fields omitted from the body are unchanged."""
    updated = await service.update_task(current_user, task_id, body.to_task_update())
    return TaskResponse.model_validate(updated)


@router.delete("/{task_id}", response_model=MessageResponse)
async def delete_task(
    task_id: str,
    current_user: CurrentUser,
    service: TaskServiceDep,
):
    """Delete a task owned by the acting user."""
    await service.delete_task(current_user, task_id)
    return MessageResponse(msg="Task removed")


@router.post("/{team_id}", response_model=TaskResponse)
async def create_team_task(
    team_id: str,
    body: TeamTaskCreateRequest,
    current_user: CurrentUser,
    service: TaskServiceDep,
):
    """Create a task within a team the acting user belongs to."""
    created = await service.create_team_task(current_user, team_id, body.to_task_create())
    return TaskResponse.model_validate(created)


@router.get("/{team_id}", response_model=list[TeamTaskResponse])
async def list_team_tasks(
    team_id: str,
    current_user: CurrentUser,
    service: TaskServiceDep,
):
    """List a team's tasks with each owner's username."""
    results = await service.list_team_tasks(current_user, team_id)
    return [TeamTaskResponse.from_result(r) for r in results]


@router.put("/{task_id}/status", response_model=TaskResponse)
async def update_task_status(
    task_id: str,
    current_user: CurrentUser,
    service: TaskServiceDep,
    body: TaskStatusRequest | None = None,
):
    """Set the completed flag of a task. Any authenticated user may call this.

    Without a body (or without completed) nothing is written and the task is returned.
    """
    updated = await service.update_task_status(task_id, body.completed if body else None)
    return TaskResponse.model_validate(updated)
