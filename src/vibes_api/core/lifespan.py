from __future__ import annotations

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI

from vibes_api.core.config import get_settings
from vibes_api.db.session import close_db, init_db
from vibes_api.integrations.escrow import EscrowClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = getattr(app.state, "settings", None) or get_settings()
    logger.info("Application starting (environment=%s)", settings.environment)
    init_db(app, settings)
    app.state.escrow_client = EscrowClient.from_settings(settings)
    if not app.state.escrow_client.has_credentials:
        logger.warning("Escrow API credentials are not configured; escrow routes will fail")
    yield
    await app.state.escrow_client.aclose()
    close_db(app)
    logger.info("Application shutting down")
