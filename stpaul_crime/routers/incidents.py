"""API routes for crime incidents."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import PlainTextResponse

from stpaul_crime.limiter import limiter, mutation_rate_limit
from stpaul_crime.schemas.incident import IncidentCreate, IncidentDelete, IncidentOut
from stpaul_crime.services.incident_query import (
    FilterError,
    IncidentFilters,
    build_incident_query,
)
from stpaul_crime.services.store import CrimeStore, StoreError, get_store

logger = logging.getLogger(__name__)
router = APIRouter(tags=["incidents"])

CASE_LOOKUP_SQL = "SELECT case_number FROM Incidents WHERE case_number = ?"


@router.get("/incidents", response_model=list[IncidentOut])
async def list_incidents(
    store: Annotated[CrimeStore, Depends(get_store)],
    start_date: str | None = Query(None, description="Earliest incident date (YYYY-MM-DD)"),
    end_date: str | None = Query(None, description="Latest incident date (YYYY-MM-DD)"),
    code: str | None = Query(None, description="Comma-separated incident codes"),
    grid: str | None = Query(None, description="Comma-separated police grids"),
    neighborhood: str | None = Query(None, description="Comma-separated neighborhood numbers"),
    limit: str | None = Query(None, description="Maximum rows (default 1000)"),
):
    """
    List incidents, newest first.

    Date bounds are inclusive. List filters ignore tokens that are not
    integers, and a limit that is missing or not positive falls back to 1000.
    """
    filters = IncidentFilters(
        start_date=start_date,
        end_date=end_date,
        code=code,
        grid=grid,
        neighborhood=neighborhood,
        limit=limit,
    )
    logger.debug(f"List incidents: {filters.model_dump(exclude_none=True)}")

    query = build_incident_query(filters)
    if isinstance(query, FilterError):
        return PlainTextResponse(query.message, status_code=400)

    rows = await store.fetch_all(query.sql, query.params)
    if isinstance(rows, StoreError):
        return PlainTextResponse("database error", status_code=500)

    return rows


@router.put("/new-incident", response_class=PlainTextResponse)
@limiter.limit(mutation_rate_limit)
async def create_incident(
    request: Request,
    payload: IncidentCreate,
    store: Annotated[CrimeStore, Depends(get_store)],
) -> PlainTextResponse:
    """Insert a new incident; the case number must not already exist."""
    logger.debug(f"Create incident: {payload.model_dump(mode='json')}")

    existing = await store.fetch_all(CASE_LOOKUP_SQL, [payload.case_number])
    if isinstance(existing, StoreError):
        return PlainTextResponse("error", status_code=500)
    if existing:
        return PlainTextResponse("error: case number already exists", status_code=409)

    inserted = await store.execute(
        "INSERT INTO Incidents (case_number, date_time, code, incident, "
        "police_grid, neighborhood_number, block) VALUES (?, ?, ?, ?, ?, ?, ?)",
        [
            payload.case_number,
            payload.date_time,
            payload.code,
            payload.incident,
            payload.police_grid,
            payload.neighborhood_number,
            payload.block,
        ],
    )
    if isinstance(inserted, StoreError):
        return PlainTextResponse("error", status_code=500)

    logger.info(f"Created incident {payload.case_number}")
    return PlainTextResponse("OK")


@router.delete("/remove-incident", response_class=PlainTextResponse)
@limiter.limit(mutation_rate_limit)
async def remove_incident(
    request: Request,
    store: Annotated[CrimeStore, Depends(get_store)],
    payload: IncidentDelete | None = None,
) -> PlainTextResponse:
    """
    Delete an incident by case number.

    The existence check and the delete run as separate statements, so two
    concurrent deletes of the same case can both pass the check.
    """
    case_number = payload.case_number if payload else None
    logger.debug(f"Remove incident: case_number={case_number!r}")

    if not case_number:
        return PlainTextResponse("error: no case number", status_code=400)

    existing = await store.fetch_all(CASE_LOOKUP_SQL, [case_number])
    if isinstance(existing, StoreError):
        return PlainTextResponse("error", status_code=500)
    if not existing:
        return PlainTextResponse("error: case number does not exist", status_code=404)

    deleted = await store.execute("DELETE FROM Incidents WHERE case_number = ?", [case_number])
    if isinstance(deleted, StoreError):
        return PlainTextResponse("error", status_code=500)

    logger.info(f"Removed incident {case_number}")
    return PlainTextResponse("success")
