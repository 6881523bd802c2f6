"""Application use cases."""

from app.application.use_cases.tasks import TaskService

__all__ = ["TaskService"]
