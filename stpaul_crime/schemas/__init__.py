"""Pydantic schemas for API request/response validation."""

from stpaul_crime.schemas.code import CodeOut
from stpaul_crime.schemas.incident import IncidentCreate, IncidentDelete, IncidentOut
from stpaul_crime.schemas.neighborhood import NeighborhoodOut

__all__ = [
    "CodeOut",
    "IncidentCreate",
    "IncidentDelete",
    "IncidentOut",
    "NeighborhoodOut",
]
