"""Application startup validation and initialization."""
import asyncio
import logging

from sqlalchemy import text

from toolboard.settings import settings
from toolboard.db import Base, engine
from toolboard.services.catalog import CatalogState
from toolboard.services.feed import FeedError, fetch_tools
from toolboard.services.status_probe import StatusProbe, check_statuses

logger = logging.getLogger(__name__)


def validate_settings() -> None:
    """
    Validate all required settings at startup.

    Raises:
        ValueError: If required settings are missing or invalid
    """
    logger.info(f"Validating settings for ENV={settings.ENV}")
    settings.validate_required_for_env()
    logger.info("✓ Settings validation passed")


def init_database() -> None:
    """
    Check the database connection and create missing tables.

    Raises:
        Exception: If the database is unreachable
    """
    logger.info("Validating database connection...")

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("✓ Database connection successful")

        # Registers the models on Base.metadata
        import toolboard.models  # noqa: F401
        Base.metadata.create_all(bind=engine)
        logger.info(f"✓ Tables ready: {', '.join(Base.metadata.tables)}")

    except Exception as e:
        logger.error(f"✗ Database validation failed: {e}")
        raise


def run_startup_validation() -> None:
    """
    Run all startup validations.

    Fails fast with clear error messages if any validation fails.
    """
    logger.info("=" * 60)
    logger.info("Starting application startup validation")
    logger.info("=" * 60)

    try:
        validate_settings()
        init_database()

        logger.info("=" * 60)
        logger.info("✓ All startup validations passed")
        logger.info("=" * 60)

    except Exception as e:
        logger.error("=" * 60)
        logger.error("✗ Startup validation failed")
        logger.error("=" * 60)
        logger.error(f"Error: {e}")
        logger.error("")
        logger.error("Application will not start until this is resolved.")
        raise


async def refresh_statuses(catalog: CatalogState, probe: StatusProbe) -> None:
    """Probe every tool in the catalog and store the results."""
    statuses = await check_statuses(
        catalog.tools, probe, concurrency=settings.STATUS_PROBE_CONCURRENCY
    )
    catalog.update_statuses(statuses)


def schedule_status_check(
    catalog: CatalogState,
    probe: StatusProbe | None = None
) -> asyncio.Task | None:
    """
    Start a background status check for the current collection.

    Returns:
        The running task, or None when probing is disabled
    """
    if not settings.STATUS_PROBE_ENABLED:
        return None

    probe = probe or StatusProbe(timeout=settings.STATUS_PROBE_TIMEOUT)
    return catalog.start_status_check(refresh_statuses(catalog, probe))


async def load_catalog(catalog: CatalogState) -> asyncio.Task | None:
    """
    Initial feed load.

    A feed failure does not stop the application: the catalog stays
    empty, /ready reports the error and /api/refresh can retry.

    Returns:
        The background status check task, if one was started
    """
    try:
        await catalog.refresh(
            lambda: fetch_tools(settings.TOOLS_FEED_URL, timeout=settings.FEED_TIMEOUT)
        )
    except FeedError:
        logger.warning("Starting with an empty catalog; POST /api/refresh to retry")
        return None

    return schedule_status_check(catalog)
