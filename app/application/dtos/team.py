"""DTOs for team lookups (read-only from the task service's perspective)."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TeamResult:
    """Team read-model: identifier and member user ids."""

    id: str
    name: str | None = None
    members: frozenset[str] = field(default_factory=frozenset)

    def has_member(self, user_id: str) -> bool:
        """Return True if user_id is in the member set."""
        return user_id in self.members
