"""Health and readiness endpoints."""

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from stpaul_crime.services.store import CrimeStore, StoreError, get_store

router = APIRouter(tags=["health"])


class TableStatus(BaseModel):
    """Status of a table."""

    record_count: int
    date_range: list[str] | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    codes: TableStatus
    neighborhoods: TableStatus
    incidents: TableStatus


async def _count(store: CrimeStore, table: str) -> int:
    rows = await store.fetch_all(f"SELECT COUNT(*) AS n FROM {table}")
    if isinstance(rows, StoreError):
        raise HTTPException(status_code=503, detail="Database unavailable")
    return rows[0]["n"] or 0


@router.get("/health", response_model=HealthResponse)
async def health_check(
    store: Annotated[CrimeStore, Depends(get_store)],
) -> HealthResponse:
    """
    Health check endpoint with dataset status.

    Returns record counts for each table and the span of incident dates.
    """
    date_rows = await store.fetch_all(
        "SELECT MIN(date(date_time)) AS oldest, MAX(date(date_time)) AS newest FROM Incidents"
    )
    if isinstance(date_rows, StoreError):
        raise HTTPException(status_code=503, detail="Database unavailable")

    oldest = date_rows[0]["oldest"]
    newest = date_rows[0]["newest"]
    date_range = [oldest, newest] if oldest and newest else None

    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(UTC),
        codes=TableStatus(record_count=await _count(store, "Codes")),
        neighborhoods=TableStatus(record_count=await _count(store, "Neighborhoods")),
        incidents=TableStatus(
            record_count=await _count(store, "Incidents"),
            date_range=date_range,
        ),
    )


@router.get("/ready")
async def readiness_check() -> dict:
    """Simple readiness probe for container orchestration."""
    return {"status": "ready"}


@router.get("/live")
async def liveness_check() -> dict:
    """Simple liveness probe for container orchestration."""
    return {"status": "alive"}
