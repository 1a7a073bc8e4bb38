"""Business logic services."""

from stpaul_crime.services.incident_query import (
    FilterError,
    IncidentFilters,
    IncidentQuery,
    build_incident_query,
)
from stpaul_crime.services.store import CrimeStore, StoreError

__all__ = [
    "CrimeStore",
    "FilterError",
    "IncidentFilters",
    "IncidentQuery",
    "StoreError",
    "build_incident_query",
]
