"""API routes for incident codes."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from stpaul_crime.schemas.code import CodeOut
from stpaul_crime.services.parsing import parse_int_list
from stpaul_crime.services.store import CrimeStore, StoreError, get_store

logger = logging.getLogger(__name__)
router = APIRouter(tags=["codes"])


@router.get("/codes", response_model=list[CodeOut])
async def list_codes(
    store: Annotated[CrimeStore, Depends(get_store)],
    code: str | None = Query(None, description="Comma-separated codes, e.g. 110,700"),
):
    """List incident codes, ascending by code."""
    logger.debug(f"List codes: code={code!r}")

    sql = "SELECT code, incident_type FROM Codes"
    codes = parse_int_list(code)
    if codes:
        sql += f" WHERE code IN ({','.join('?' * len(codes))})"
    sql += " ORDER BY code ASC"

    rows = await store.fetch_all(sql, codes)
    if isinstance(rows, StoreError):
        return PlainTextResponse("database error", status_code=500)

    return [CodeOut(code=row["code"], type=row["incident_type"]) for row in rows]
