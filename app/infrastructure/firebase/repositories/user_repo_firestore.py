"""Firestore-backed user lookup (implements IUserRepository)."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable

from app.infrastructure.firebase._rest_client import FirestoreRESTClient
from app.infrastructure.firebase.collections import COLLECTION_USERS


class FirestoreUserRepository:
    """Reads usernames for task owner expansion. Users are managed elsewhere."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._coll = client.collection(COLLECTION_USERS)

    async def get_username(self, user_id: str) -> str | None:
        """Return username for user_id, or None if the user does not exist."""
        doc = await self._coll.document(user_id).get()
        if not doc:
            return None
        return doc.to_dict().get("username")

    async def get_usernames(self, user_ids: Iterable[str]) -> dict[str, str | None]:
        """Return username per distinct user id (fetched concurrently)."""
        ids = sorted(set(user_ids))
        names = await asyncio.gather(*(self.get_username(i) for i in ids))
        return dict(zip(ids, names))
