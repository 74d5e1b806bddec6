"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring. The Firestore client and the
token verifier are built once here and kept on app.state; request
dependencies read them from there.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings
from app.infrastructure.firebase import FirebaseTokenVerifier, create_firestore_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit close the Firestore HTTP client."""
    settings = get_settings()

    # ---- Startup ----
    firestore = create_firestore_client(settings)
    app.state.firestore = firestore
    project_id = settings.firebase_project_id or (
        firestore.project_id if firestore is not None else None
    )
    app.state.token_verifier = FirebaseTokenVerifier(project_id)
    if firestore is not None:
        logger.info("Firestore client ready for project %s", firestore.project_id)

    yield

    # ---- Shutdown ----
    if getattr(app.state, "firestore", None) is not None:
        await app.state.firestore.aclose()
        app.state.firestore = None
        logger.info("Firestore client closed")
