"""Pydantic schemas for incidents."""

import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from stpaul_crime.services.parsing import SQLITE_INT_MAX, SQLITE_INT_MIN

SqliteInt = Annotated[int, Field(ge=SQLITE_INT_MIN, le=SQLITE_INT_MAX)]


class IncidentOut(BaseModel):
    """Incident row as returned by the listing query."""

    model_config = ConfigDict(from_attributes=True)

    case_number: str
    date: str | None = None
    time: str | None = None
    code: int | None = None
    incident: str | None = None
    police_grid: int | None = None
    neighborhood_number: int | None = None
    block: str | None = None


class IncidentCreate(BaseModel):
    """Payload for creating an incident."""

    model_config = ConfigDict(str_strip_whitespace=True)

    case_number: str = Field(..., min_length=1, max_length=20)
    date: datetime.date
    time: datetime.time
    code: SqliteInt
    incident: str
    police_grid: SqliteInt
    neighborhood_number: SqliteInt
    block: str

    @property
    def date_time(self) -> str:
        """Combined ISO timestamp as stored in Incidents.date_time."""
        return f"{self.date.isoformat()}T{self.time.replace(microsecond=0).isoformat()}"


class IncidentDelete(BaseModel):
    """Payload for deleting an incident."""

    model_config = ConfigDict(str_strip_whitespace=True)

    case_number: str | None = None
