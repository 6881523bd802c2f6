"""Firestore-backed task repository (implements ITaskRepository)."""

from __future__ import annotations

from typing import Any

from app.application.dtos.task import TaskResult, TaskUpdate
from app.domain.enums import TaskSort
from app.infrastructure.firebase._rest_client import (
    ASCENDING,
    DESCENDING,
    FirestoreRESTClient,
)
from app.infrastructure.firebase.collections import COLLECTION_TASKS
from app.shared.utils.datetime import ensure_utc, utc_now
from app.shared.utils.generators import generate_cuid

# Firestore's implicit order is by document id, which is not insertion order
# for cuid ids, so natural order is created_at ascending.
_ORDERING: dict[TaskSort | None, tuple[str, str]] = {
    None: ("created_at", ASCENDING),
    TaskSort.PRIORITY: ("priority", DESCENDING),
    TaskSort.DATE_ADDED: ("created_at", DESCENDING),
}


def _to_result(doc_id: str, data: dict[str, Any]) -> TaskResult:
    return TaskResult(
        id=doc_id,
        title=data.get("title", ""),
        description=data.get("description"),
        due_date=ensure_utc(data.get("due_date")),
        priority=data.get("priority"),
        completed=bool(data.get("completed", False)),
        workspace=data.get("workspace"),
        user=data.get("user", ""),
        team=data.get("team"),
        created_at=ensure_utc(data.get("created_at")),
    )


class FirestoreTaskRepository:
    """Task repository using Firestore (collection "tasks")."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._coll = client.collection(COLLECTION_TASKS)

    async def create(self, data: dict[str, Any]) -> TaskResult:
        """Persist a new task under a fresh cuid; stamps created_at."""
        task_id = generate_cuid()
        record = {**data, "created_at": utc_now()}
        await self._coll.create(task_id, record)
        return _to_result(task_id, record)

    async def get_by_id(self, task_id: str) -> TaskResult | None:
        """Return task by ID."""
        doc = await self._coll.document(task_id).get()
        if not doc:
            return None
        return _to_result(doc.id, doc.to_dict())

    async def _list_where(
        self, field: str, value: str, sort_by: TaskSort | None = None
    ) -> list[TaskResult]:
        order_field, direction = _ORDERING[sort_by]
        q = self._coll.where(field, "==", value).order_by(order_field, direction)
        return [_to_result(snapshot.id, snapshot.to_dict()) async for snapshot in q.stream()]

    async def list_by_user(
        self, user_id: str, sort_by: TaskSort | None = None
    ) -> list[TaskResult]:
        """Return all tasks owned by user (no pagination)."""
        return await self._list_where("user", user_id, sort_by)

    async def list_by_team(self, team_id: str) -> list[TaskResult]:
        """Return all tasks of team in insertion order (no pagination)."""
        return await self._list_where("team", team_id)

    async def update_fields(self, task_id: str, update: TaskUpdate) -> TaskResult | None:
        """Write only update.fields; return the task after the write or None if missing."""
        doc = await self._coll.document(task_id).update(dict(update.fields))
        if not doc:
            return None
        return _to_result(doc.id, doc.to_dict())

    async def delete(self, task_id: str) -> None:
        """Remove the task document."""
        await self._coll.document(task_id).delete()
