"""Pytest fixtures for St. Paul crime API tests."""

import os
from collections.abc import AsyncGenerator

# Mutation tests share one client address; keep the limiter out of the way.
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from stpaul_crime.config import Settings
from stpaul_crime.database import init_db
from stpaul_crime.main import app
from stpaul_crime.services.store import CrimeStore, get_store

SAMPLE_CODES = [
    (110, "Murder, Non Negligent Manslaughter"),
    (300, "Robbery"),
    (600, "Theft"),
    (700, "Auto Theft"),
    (1400, "Vandalism"),
]

SAMPLE_NEIGHBORHOODS = [
    (1, "Conway/Battlecreek/Highwood"),
    (2, "Greater East Side"),
    (3, "West Side"),
]

SAMPLE_INCIDENTS = [
    {
        "case_number": "24000001",
        "date_time": "2024-01-05T08:15:00",
        "code": 600,
        "incident": "Theft",
        "police_grid": 87,
        "neighborhood_number": 1,
        "block": "1XX MARYLAND AVE",
    },
    {
        "case_number": "24000002",
        "date_time": "2024-01-15T22:40:00",
        "code": 700,
        "incident": "Auto Theft",
        "police_grid": 95,
        "neighborhood_number": 2,
        "block": "4XX PAYNE AVE",
    },
    {
        "case_number": "24000003",
        "date_time": "2024-01-31T23:59:00",
        "code": 300,
        "incident": "Robbery",
        "police_grid": 87,
        "neighborhood_number": 3,
        "block": "2XX CESAR CHAVEZ ST",
    },
    {
        "case_number": "24000004",
        "date_time": "2024-02-01T00:05:00",
        "code": 1400,
        "incident": "Vandalism",
        "police_grid": 120,
        "neighborhood_number": 1,
        "block": "17XX WHITE BEAR AVE",
    },
]


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Test settings pointing at a throwaway SQLite file."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'stpaul_crime.sqlite3'}",
        rate_limit_enabled=False,
    )


@pytest_asyncio.fixture
async def async_engine(test_settings: Settings) -> AsyncGenerator[AsyncEngine, None]:
    """Create async engine with the schema in place."""
    engine = create_async_engine(test_settings.database_url, echo=False)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def seeded_engine(async_engine: AsyncEngine) -> AsyncEngine:
    """Engine whose database holds the sample codes, neighborhoods and incidents."""
    async with async_engine.begin() as conn:
        for code, incident_type in SAMPLE_CODES:
            await conn.execute(
                text("INSERT INTO Codes (code, incident_type) VALUES (:code, :incident_type)"),
                {"code": code, "incident_type": incident_type},
            )
        for number, name in SAMPLE_NEIGHBORHOODS:
            await conn.execute(
                text(
                    "INSERT INTO Neighborhoods (neighborhood_number, neighborhood_name) "
                    "VALUES (:number, :name)"
                ),
                {"number": number, "name": name},
            )
        for incident in SAMPLE_INCIDENTS:
            await conn.execute(
                text("""
                    INSERT INTO Incidents (
                        case_number, date_time, code, incident,
                        police_grid, neighborhood_number, block
                    ) VALUES (
                        :case_number, :date_time, :code, :incident,
                        :police_grid, :neighborhood_number, :block
                    )
                """),
                incident,
            )
    return async_engine


@pytest.fixture
def store(seeded_engine: AsyncEngine) -> CrimeStore:
    """Store backed by the seeded test database."""
    return CrimeStore(seeded_engine)


@pytest_asyncio.fixture
async def client(store: CrimeStore) -> AsyncGenerator[AsyncClient, None]:
    """Create test HTTP client with store override."""
    app.dependency_overrides[get_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()
