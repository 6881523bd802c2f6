"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import TaskSort, Workspace
from app.domain.exceptions import (
    AuthenticationException,
    NotAuthorizedException,
    ResourceNotFoundException,
    StoreUnavailableException,
    TaskDeskException,
    ValidationException,
)

__all__ = [
    # Enums
    "TaskSort",
    "Workspace",
    # Exceptions
    "AuthenticationException",
    "NotAuthorizedException",
    "ResourceNotFoundException",
    "StoreUnavailableException",
    "TaskDeskException",
    "ValidationException",
]
