"""Unit tests for TaskService (ownership, membership, workspace rules, ordering)."""

from datetime import UTC, datetime, timedelta

import httpx
import pytest

from app.application.dtos.task import TaskCreate, TaskUpdate
from app.application.dtos.user import AuthenticatedUser
from app.application.use_cases.tasks import TaskService
from app.domain.exceptions import (
    NotAuthorizedException,
    ResourceNotFoundException,
    ValidationException,
)
from tests.fakes import FakeFirestoreClient

ALICE = AuthenticatedUser(id="alice")
BOB = AuthenticatedUser(id="bob")
T0 = datetime(2024, 1, 1, tzinfo=UTC)


def _seed_personal(store: FakeFirestoreClient, owner: str, priorities: list[int]) -> None:
    for i, p in enumerate(priorities):
        store.add_task(f"t{i}", title=f"task {i}", priority=p, user=owner, created_at=T0 + timedelta(minutes=i))


class TestListPersonalTasks:
    async def test_only_own_tasks(self, task_service: TaskService, store: FakeFirestoreClient) -> None:
        _seed_personal(store, "alice", [1])
        store.add_task("b1", user="bob", created_at=T0)
        tasks = await task_service.list_personal_tasks(ALICE)
        assert [t.id for t in tasks] == ["t0"]
        assert await task_service.list_personal_tasks(AuthenticatedUser(id="carol")) == []

    async def test_sort_by_priority_descending(self, task_service: TaskService, store: FakeFirestoreClient) -> None:
        _seed_personal(store, "alice", [1, 5, 3])
        tasks = await task_service.list_personal_tasks(ALICE, "priority")
        assert [t.priority for t in tasks] == [5, 3, 1]

    async def test_sort_by_date_added_newest_first(self, task_service: TaskService, store: FakeFirestoreClient) -> None:
        _seed_personal(store, "alice", [1, 5, 3])
        tasks = await task_service.list_personal_tasks(ALICE, "dateAdded")
        assert [t.id for t in tasks] == ["t2", "t1", "t0"]

    @pytest.mark.parametrize("sort_by", [None, "title", ""])
    async def test_default_keeps_insertion_order(
        self, task_service: TaskService, store: FakeFirestoreClient, sort_by: str | None
    ) -> None:
        _seed_personal(store, "alice", [1, 5, 3])
        tasks = await task_service.list_personal_tasks(ALICE, sort_by)
        assert [t.priority for t in tasks] == [1, 5, 3]


class TestCreateTask:
    async def test_personal_task(self, task_service: TaskService, store: FakeFirestoreClient) -> None:
        due = datetime(2030, 5, 1, 12, 0, tzinfo=UTC)
        created = await task_service.create_task(
            ALICE, TaskCreate(title="Write report", description="Q2", due_date=due, priority=2), "personal"
        )
        assert created.id
        assert created.user == "alice"
        assert created.workspace == "personal"
        assert created.team is None
        assert created.completed is False
        assert created.created_at is not None
        stored = store.task(created.id)
        assert stored["title"] == "Write report"
        assert stored["due_date"] == due

    async def test_personal_ignores_team_field(self, task_service: TaskService, store: FakeFirestoreClient) -> None:
        created = await task_service.create_task(ALICE, TaskCreate(title="x"), "personal", team="team-1")
        assert created.team is None

    async def test_team_workspace_requires_team(self, task_service: TaskService) -> None:
        with pytest.raises(ValidationException, match="Team ID is required"):
            await task_service.create_task(ALICE, TaskCreate(title="x"), "team")

    async def test_team_workspace_skips_membership_check(self, task_service: TaskService) -> None:
        """The generic route does not look the team up (unlike create_team_task)."""
        created = await task_service.create_task(ALICE, TaskCreate(title="x"), "team", team="ghost-team")
        assert created.team == "ghost-team"
        assert created.workspace == "team"

    @pytest.mark.parametrize("workspace", ["bogus", None, "Personal"])
    async def test_invalid_workspace(self, task_service: TaskService, store: FakeFirestoreClient, workspace) -> None:
        with pytest.raises(ValidationException, match="Invalid workspace"):
            await task_service.create_task(ALICE, TaskCreate(title="x"), workspace)
        assert store.data.get("tasks") is None

    async def test_missing_title(self, task_service: TaskService) -> None:
        with pytest.raises(ValidationException, match="Title is required"):
            await task_service.create_task(ALICE, TaskCreate(title="  "), "personal")


class TestTeamTasks:
    async def test_create_team_task_as_member(self, task_service: TaskService, store: FakeFirestoreClient) -> None:
        store.add_team("team-1", ["alice", "bob"])
        created = await task_service.create_team_task(ALICE, "team-1", TaskCreate(title="Plan sprint"))
        assert created.team == "team-1"
        assert created.user == "alice"
        assert created.workspace is None

    async def test_create_team_task_unknown_team(self, task_service: TaskService) -> None:
        with pytest.raises(ResourceNotFoundException) as exc_info:
            await task_service.create_team_task(ALICE, "nope", TaskCreate(title="x"))
        assert exc_info.value.message == "Team not found"

    async def test_create_team_task_non_member(self, task_service: TaskService, store: FakeFirestoreClient) -> None:
        store.add_team("team-1", ["bob"])
        with pytest.raises(NotAuthorizedException, match="create tasks within this team"):
            await task_service.create_team_task(ALICE, "team-1", TaskCreate(title="x"))
        assert store.data.get("tasks") is None

    async def test_list_team_tasks_expands_usernames(self, task_service: TaskService, store: FakeFirestoreClient) -> None:
        store.add_team("team-1", ["alice", "bob"])
        store.add_user("alice", "alice_w")
        store.add_user("bob", "bobby")
        store.add_task("a", user="alice", team="team-1", created_at=T0)
        store.add_task("b", user="bob", team="team-1", created_at=T0 + timedelta(seconds=1))
        store.add_task("c", user="bob", team="team-2", created_at=T0)
        results = await task_service.list_team_tasks(ALICE, "team-1")
        assert [r.task.id for r in results] == ["a", "b"]
        assert [r.owner.username for r in results] == ["alice_w", "bobby"]

    async def test_list_team_tasks_unknown_owner(self, task_service: TaskService, store: FakeFirestoreClient) -> None:
        store.add_team("team-1", ["alice"])
        store.add_task("a", user="deleted-user", team="team-1", created_at=T0)
        results = await task_service.list_team_tasks(ALICE, "team-1")
        assert results[0].owner.id == "deleted-user"
        assert results[0].owner.username is None

    async def test_list_team_tasks_non_member(self, task_service: TaskService, store: FakeFirestoreClient) -> None:
        store.add_team("team-1", ["bob"])
        with pytest.raises(NotAuthorizedException, match="view tasks within this team"):
            await task_service.list_team_tasks(ALICE, "team-1")


class TestUpdateAndDelete:
    async def test_update_merges_supplied_fields_only(self, task_service: TaskService, store: FakeFirestoreClient) -> None:
        store.add_task("t1", title="Old", description="keep me", priority=1, user="alice", created_at=T0)
        updated = await task_service.update_task(ALICE, "t1", TaskUpdate(fields={"title": "New", "completed": True}))
        assert updated.title == "New"
        assert updated.completed is True
        assert updated.description == "keep me"
        assert updated.priority == 1
        assert updated.created_at == T0
        assert store.updates == [("tasks", "t1", {"title": "New", "completed": True})]

    async def test_missing_created_at_is_not_filled_in(
        self, task_service: TaskService, store: FakeFirestoreClient
    ) -> None:
        store.add_task("t1", user="alice")
        first = await task_service.update_task_status("t1", None)
        second = await task_service.update_task_status("t1", True)
        assert first.created_at is None
        assert second.created_at is None
        assert "created_at" not in store.task("t1")

    async def test_update_explicit_null_clears(self, task_service: TaskService, store: FakeFirestoreClient) -> None:
        store.add_task("t1", description="old", user="alice", created_at=T0)
        updated = await task_service.update_task(ALICE, "t1", TaskUpdate(fields={"description": None}))
        assert updated.description is None

    async def test_update_empty_is_noop(self, task_service: TaskService, store: FakeFirestoreClient) -> None:
        store.add_task("t1", user="alice", created_at=T0)
        result = await task_service.update_task(ALICE, "t1", TaskUpdate())
        assert result.id == "t1"
        assert store.updates == []

    async def test_update_not_owner(self, task_service: TaskService, store: FakeFirestoreClient) -> None:
        store.add_task("t1", title="Old", user="alice", created_at=T0)
        with pytest.raises(NotAuthorizedException):
            await task_service.update_task(BOB, "t1", TaskUpdate(fields={"title": "Hacked"}))
        assert store.task("t1")["title"] == "Old"

    async def test_update_missing(self, task_service: TaskService) -> None:
        with pytest.raises(ResourceNotFoundException, match="Task not found"):
            await task_service.update_task(ALICE, "missing", TaskUpdate(fields={"title": "x"}))

    async def test_update_rejects_blank_title(self, task_service: TaskService, store: FakeFirestoreClient) -> None:
        store.add_task("t1", user="alice", created_at=T0)
        with pytest.raises(ValidationException):
            await task_service.update_task(ALICE, "t1", TaskUpdate(fields={"title": ""}))

    def test_task_update_rejects_unknown_fields(self) -> None:
        with pytest.raises(ValueError, match="not updatable"):
            TaskUpdate(fields={"user": "bob"})

    async def test_status_update_ignores_ownership(self, task_service: TaskService, store: FakeFirestoreClient) -> None:
        store.add_task("t1", user="alice", created_at=T0)
        updated = await task_service.update_task_status("t1", True)
        assert updated.completed is True
        assert store.task("t1")["completed"] is True

    async def test_status_update_missing(self, task_service: TaskService) -> None:
        with pytest.raises(ResourceNotFoundException):
            await task_service.update_task_status("missing", True)

    async def test_status_update_without_value_writes_nothing(
        self, task_service: TaskService, store: FakeFirestoreClient
    ) -> None:
        store.add_task("t1", user="alice", completed=True, created_at=T0)
        result = await task_service.update_task_status("t1", None)
        assert result.completed is True
        assert store.updates == []

    async def test_delete_owner(self, task_service: TaskService, store: FakeFirestoreClient) -> None:
        store.add_task("t1", user="alice", created_at=T0)
        await task_service.delete_task(ALICE, "t1")
        assert store.task("t1") is None

    async def test_delete_not_owner(self, task_service: TaskService, store: FakeFirestoreClient) -> None:
        store.add_task("t1", user="alice", created_at=T0)
        with pytest.raises(NotAuthorizedException):
            await task_service.delete_task(BOB, "t1")
        assert store.task("t1") is not None

    async def test_delete_missing(self, task_service: TaskService) -> None:
        with pytest.raises(ResourceNotFoundException, match="Task not found"):
            await task_service.delete_task(ALICE, "missing")


async def test_store_errors_propagate(task_service: TaskService, store: FakeFirestoreClient) -> None:
    """Storage failures are not translated by the service."""
    store.fail = True
    with pytest.raises(httpx.ConnectError):
        await task_service.list_personal_tasks(ALICE)
