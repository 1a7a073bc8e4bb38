"""API routes for neighborhoods."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from stpaul_crime.schemas.neighborhood import NeighborhoodOut
from stpaul_crime.services.parsing import parse_int_list
from stpaul_crime.services.store import CrimeStore, StoreError, get_store

logger = logging.getLogger(__name__)
router = APIRouter(tags=["neighborhoods"])


@router.get("/neighborhoods", response_model=list[NeighborhoodOut])
async def list_neighborhoods(
    store: Annotated[CrimeStore, Depends(get_store)],
    id: str | None = Query(None, description="Comma-separated neighborhood numbers"),
):
    """List neighborhoods, ascending by neighborhood number."""
    logger.debug(f"List neighborhoods: id={id!r}")

    sql = "SELECT neighborhood_number, neighborhood_name FROM Neighborhoods"
    ids = parse_int_list(id)
    if ids:
        sql += f" WHERE neighborhood_number IN ({','.join('?' * len(ids))})"
    sql += " ORDER BY neighborhood_number ASC"

    rows = await store.fetch_all(sql, ids)
    if isinstance(rows, StoreError):
        return PlainTextResponse("database error", status_code=500)

    return [
        NeighborhoodOut(id=row["neighborhood_number"], name=row["neighborhood_name"])
        for row in rows
    ]
