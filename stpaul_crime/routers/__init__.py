"""API routers."""

from stpaul_crime.routers.codes import router as codes_router
from stpaul_crime.routers.health import router as health_router
from stpaul_crime.routers.incidents import router as incidents_router
from stpaul_crime.routers.neighborhoods import router as neighborhoods_router

__all__ = ["codes_router", "health_router", "incidents_router", "neighborhoods_router"]
