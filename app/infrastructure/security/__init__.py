"""Security: bearer token verification."""

from app.infrastructure.security.jwt import decode_access_token

__all__ = ["decode_access_token"]
