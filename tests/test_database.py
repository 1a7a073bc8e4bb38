"""Tests for database setup helpers."""

import pytest
from sqlalchemy.ext.asyncio import create_async_engine

from stpaul_crime.config import Settings
from stpaul_crime.database import check_db_ready, create_engine_from_settings, init_db


class TestDatabaseSetup:
    """Tests for schema creation and readiness checks."""

    @pytest.mark.asyncio
    async def test_check_db_ready_reports_missing_tables(self, tmp_path):
        engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'empty.sqlite3'}")
        try:
            with pytest.raises(RuntimeError, match="Codes, Incidents, Neighborhoods"):
                await check_db_ready(engine)
        finally:
            await engine.dispose()

    @pytest.mark.asyncio
    async def test_init_db_creates_schema(self, test_settings: Settings):
        engine = create_engine_from_settings(test_settings)
        try:
            await init_db(engine)
            await check_db_ready(engine)
        finally:
            await engine.dispose()
