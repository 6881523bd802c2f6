"""Firestore-backed team lookup (implements ITeamRepository)."""

from __future__ import annotations

from app.application.dtos.team import TeamResult
from app.infrastructure.firebase._rest_client import FirestoreRESTClient
from app.infrastructure.firebase.collections import COLLECTION_TEAMS


class FirestoreTeamRepository:
    """Read-only access to teams; members is a list of user ids."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._coll = client.collection(COLLECTION_TEAMS)

    async def get_by_id(self, team_id: str) -> TeamResult | None:
        """Return team by ID."""
        doc = await self._coll.document(team_id).get()
        if not doc:
            return None
        data = doc.to_dict()
        return TeamResult(
            id=doc.id,
            name=data.get("name"),
            members=frozenset(str(m) for m in data.get("members") or []),
        )
