"""Data-access store for the crime database."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoreError:
    """A failed store operation."""

    operation: str
    message: str


class CrimeStore:
    """
    Runs parameterized queries against the crime database.

    Queries use qmark ("?") placeholders with positional parameters and are
    passed straight to the driver. Failures are returned as StoreError
    values instead of being raised, so callers decide the response.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    async def fetch_all(
        self, sql: str, params: Sequence[Any] = ()
    ) -> list[dict[str, Any]] | StoreError:
        """Run a read query and return its rows as dicts."""
        try:
            async with self.engine.connect() as conn:
                result = await conn.exec_driver_sql(sql, tuple(params))
                return [dict(row) for row in result.mappings().all()]
        except SQLAlchemyError as e:
            logger.error(f"Read query failed: {e}")
            return StoreError(operation="read", message=str(e))

    async def execute(self, sql: str, params: Sequence[Any] = ()) -> int | StoreError:
        """Run a write query in its own transaction and return the affected row count."""
        try:
            async with self.engine.begin() as conn:
                result = await conn.exec_driver_sql(sql, tuple(params))
                return result.rowcount
        except SQLAlchemyError as e:
            logger.error(f"Write query failed: {e}")
            return StoreError(operation="write", message=str(e))

    async def dispose(self) -> None:
        """Release pooled connections."""
        await self.engine.dispose()


def get_store(request: Request) -> CrimeStore:
    """Dependency to get the application's store."""
    return request.app.state.store
