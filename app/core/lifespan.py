"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py;
no business logic here, only wiring of infrastructure (logging,
Firestore client).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings
from app.core.logging import setup_logging
from app.infrastructure.firebase import close_firebase, init_firebase

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: logging, Firestore client. Shutdown: Firestore HTTP pool close.
    """
    setup_logging()
    settings = get_settings()

    # ---- Startup ----
    app.state.firestore_ready = init_firebase()
    logger.info(
        "%s %s started (firestore=%s)",
        settings.app_name,
        settings.app_version,
        "ready" if app.state.firestore_ready else "unavailable",
    )

    yield

    # ---- Shutdown ----
    await close_firebase()
