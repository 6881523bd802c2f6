"""Application layer: DTOs, repository interfaces, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (Firestore repositories).
"""

from app.application.interfaces import (
    ITaskRepository,
    ITeamRepository,
    IUserRepository,
)
from app.application.use_cases import TaskService

__all__ = [
    "ITaskRepository",
    "ITeamRepository",
    "IUserRepository",
    "TaskService",
]
