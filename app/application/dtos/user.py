"""DTOs for user identities (no dependency on the document store)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AuthenticatedUser:
    """Acting user resolved by the auth gate. Only the identifier is consumed."""

    id: str
