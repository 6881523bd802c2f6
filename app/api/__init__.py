"""HTTP API: routers, endpoints, and dependency wiring."""

from app.api.router import api_router

__all__ = ["api_router"]
