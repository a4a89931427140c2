from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = app.state.settings
    try:
        settings.data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning("Unable to create data directory '%s': %s", settings.data_dir, exc)
    await app.state.assistant.load()
    logger.info("Stores loaded from '%s'", settings.data_dir)
    # every mutation is already saved, nothing to flush on shutdown
    yield
