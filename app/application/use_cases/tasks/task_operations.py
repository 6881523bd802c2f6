"""Task operations: personal and team-scoped CRUD with ownership and membership checks.

Every operation is at most a lookup followed by one mutation; failures of the
document store propagate unchanged and are turned into a generic 500 by the
exception handlers.
"""

from __future__ import annotations

import logging

from app.application.dtos.task import (
    TaskCreate,
    TaskOwner,
    TaskResult,
    TaskUpdate,
    TeamTaskResult,
)
from app.application.dtos.team import TeamResult
from app.application.dtos.user import AuthenticatedUser
from app.application.interfaces.repositories import (
    ITaskRepository,
    ITeamRepository,
    IUserRepository,
)
from app.domain.enums import TaskSort, Workspace
from app.domain.exceptions import (
    NotAuthorizedException,
    ResourceNotFoundException,
    ValidationException,
)

logger = logging.getLogger(__name__)


def _require_title(title: str | None) -> str:
    if title is None or not title.strip():
        raise ValidationException("Title is required", field="title")
    return title


class TaskService:
    """Create, list, update and delete tasks for the acting user or one of their teams."""

    def __init__(
        self,
        task_repo: ITaskRepository,
        team_repo: ITeamRepository,
        user_repo: IUserRepository,
    ) -> None:
        self.task_repo = task_repo
        self.team_repo = team_repo
        self.user_repo = user_repo

    async def list_personal_tasks(
        self, user: AuthenticatedUser, sort_by: str | None = None
    ) -> list[TaskResult]:
        """Return every task owned by user.

        sort_by "priority" orders by priority descending, "dateAdded" by
        creation time descending; anything else keeps insertion order.
        """
        return await self.task_repo.list_by_user(user.id, TaskSort.parse(sort_by))

    async def create_task(
        self,
        user: AuthenticatedUser,
        data: TaskCreate,
        workspace: str | None,
        team: str | None = None,
    ) -> TaskResult:
        """Create a personal or team task from the generic route.

        The team branch only requires a team id; it does not check that the
        team exists or that user belongs to it (create_team_task does).
        """
        if workspace == Workspace.PERSONAL.value:
            team_id = None
        elif workspace == Workspace.TEAM.value:
            if not team:
                raise ValidationException(
                    "Team ID is required for team workspace", field="team"
                )
            team_id = team
        else:
            raise ValidationException("Invalid workspace", field="workspace")

        record = {
            "title": _require_title(data.title),
            "description": data.description,
            "due_date": data.due_date,
            "priority": data.priority,
            "completed": False,
            "workspace": workspace,
            "user": user.id,
            "team": team_id,
        }
        created = await self.task_repo.create(record)
        logger.info("Task %s created by user %s (workspace=%s)", created.id, user.id, workspace)
        return created

    async def _get_team_for_member(
        self, user: AuthenticatedUser, team_id: str, action: str
    ) -> TeamResult:
        team = await self.team_repo.get_by_id(team_id)
        if team is None:
            raise ResourceNotFoundException("Team", team_id)
        if not team.has_member(user.id):
            raise NotAuthorizedException(
                f"Not authorized to {action} tasks within this team",
                resource="team",
                resource_id=team_id,
            )
        return team

    async def create_team_task(
        self, user: AuthenticatedUser, team_id: str, data: TaskCreate
    ) -> TaskResult:
        """Create a task inside team_id. Team must exist and user must be a member.

        No workspace value is stored for tasks created this way.
        """
        await self._get_team_for_member(user, team_id, "create")
        record = {
            "title": _require_title(data.title),
            "description": data.description,
            "due_date": data.due_date,
            "priority": data.priority,
            "completed": False,
            "workspace": None,
            "user": user.id,
            "team": team_id,
        }
        created = await self.task_repo.create(record)
        logger.info("Task %s created in team %s by user %s", created.id, team_id, user.id)
        return created

    async def list_team_tasks(
        self, user: AuthenticatedUser, team_id: str
    ) -> list[TeamTaskResult]:
        """Return the team's tasks with each owner expanded to its username."""
        await self._get_team_for_member(user, team_id, "view")
        tasks = await self.task_repo.list_by_team(team_id)
        usernames = await self.user_repo.get_usernames({t.user for t in tasks})
        return [
            TeamTaskResult(task=t, owner=TaskOwner(id=t.user, username=usernames.get(t.user)))
            for t in tasks
        ]

    async def _get_owned_task(self, user: AuthenticatedUser, task_id: str) -> TaskResult:
        task = await self.task_repo.get_by_id(task_id)
        if task is None:
            raise ResourceNotFoundException("Task", task_id)
        if task.user != user.id:
            raise NotAuthorizedException(resource="task", resource_id=task_id)
        return task

    async def update_task(
        self, user: AuthenticatedUser, task_id: str, update: TaskUpdate
    ) -> TaskResult:
        """Merge the supplied fields into a task owned by user; omitted fields are unchanged."""
        task = await self._get_owned_task(user, task_id)
        if "title" in update.fields:
            _require_title(update.fields["title"])
        if update.is_empty():
            return task
        updated = await self.task_repo.update_fields(task_id, update)
        if updated is None:
            # Deleted between the ownership check and the write.
            raise ResourceNotFoundException("Task", task_id)
        return updated

    async def update_task_status(self, task_id: str, completed: bool | None) -> TaskResult:
        """Set the completed flag of any task by id.

        There is no ownership check: any authenticated caller may change the
        status of any task. Kept for parity with the existing clients. A
        missing completed value writes nothing and returns the stored task.
        """
        if completed is None:
            task = await self.task_repo.get_by_id(task_id)
            if task is None:
                raise ResourceNotFoundException("Task", task_id)
            return task
        updated = await self.task_repo.update_fields(
            task_id, TaskUpdate(fields={"completed": completed})
        )
        if updated is None:
            raise ResourceNotFoundException("Task", task_id)
        return updated

    async def delete_task(self, user: AuthenticatedUser, task_id: str) -> None:
        """Permanently remove a task owned by user."""
        await self._get_owned_task(user, task_id)
        await self.task_repo.delete(task_id)
        logger.info("Task %s deleted by user %s", task_id, user.id)
