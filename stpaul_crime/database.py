"""Database setup with SQLAlchemy async on SQLite."""

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from stpaul_crime.config import Settings

REQUIRED_TABLES = ("Codes", "Incidents", "Neighborhoods")


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """Build the process-wide async engine."""
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
    )


async def init_db(engine: AsyncEngine) -> None:
    """Create any missing tables."""
    # Register models on Base.metadata
    import stpaul_crime.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def check_db_ready(engine: AsyncEngine) -> None:
    """
    Verify database connectivity and expected schema.

    Raises RuntimeError naming any required table that is missing.
    """
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))

        result = await conn.execute(
            text("SELECT name FROM sqlite_master WHERE type = 'table'")
        )
        existing = {row[0] for row in result.all()}

    missing = [name for name in REQUIRED_TABLES if name not in existing]
    if missing:
        raise RuntimeError(
            f"Database schema is missing tables: {', '.join(missing)} "
            "(set INIT_DB_ON_STARTUP=true or load the dataset)."
        )
