"""FastAPI application entry point."""
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.routers import health, tags
from core.config import get_settings
from db.session import engine


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """Configure logging on startup and release the connection pool on shutdown."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Tag catalog API starting")
    yield
    await engine.dispose()
    logger.info("Tag catalog API stopped")


app = FastAPI(
    title="Tag Catalog API",
    description="Read-only tag catalog with per-tag question counts.",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(tags.router)
