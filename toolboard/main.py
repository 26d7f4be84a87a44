"""FastAPI application entrypoint."""
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI

from toolboard.routers import health, tools, analytics, favorites, comparison, status, export
from toolboard.services.catalog import catalog
from toolboard.settings import settings
from toolboard.startup import load_catalog, run_startup_validation
from toolboard.middleware import RequestLoggingMiddleware, setup_logging

# Configure logging before anything else
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan with startup validation.

    Validates settings and the database before accepting traffic, then
    loads the tools feed.
    """
    logger.info(f"Starting application in {settings.ENV} environment")

    try:
        run_startup_validation()
    except Exception as e:
        logger.error(f"Startup validation failed: {e}")
        logger.error("Application will not start")
        raise

    if settings.FEED_LOAD_ON_STARTUP:
        await load_catalog(catalog)

    yield

    await catalog.stop_status_check()
    logger.info("Shutting down application")


app = FastAPI(
    title="AI Tools Analytics",
    description="Analytics, trending and discovery over a feed of AI tools",
    version="0.1.0",
    lifespan=lifespan
)

app.add_middleware(RequestLoggingMiddleware)

app.include_router(health.router)
app.include_router(tools.router)
app.include_router(analytics.router)
app.include_router(favorites.router)
app.include_router(comparison.router)
app.include_router(status.router)
app.include_router(export.router)
