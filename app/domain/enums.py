"""Domain enumerations for the TaskDesk application.

Enums represent fixed sets of domain values (e.g. task workspace).
"""

from enum import Enum


class Workspace(str, Enum):
    """Whether a task belongs to an individual or a team context."""

    PERSONAL = "personal"
    TEAM = "team"


class TaskSort(str, Enum):
    """Orderings accepted by the personal task listing (sortBy query parameter)."""

    PRIORITY = "priority"
    DATE_ADDED = "dateAdded"

    @classmethod
    def parse(cls, raw: str | None) -> "TaskSort | None":
        """Return the matching ordering, or None for absent/unknown values (natural order)."""
        if raw is None:
            return None
        try:
            return cls(raw)
        except ValueError:
            return None
