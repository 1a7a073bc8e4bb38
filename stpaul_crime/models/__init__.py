"""Database models."""

from stpaul_crime.models.code import Code
from stpaul_crime.models.incident import Incident
from stpaul_crime.models.neighborhood import Neighborhood

__all__ = [
    "Code",
    "Incident",
    "Neighborhood",
]
