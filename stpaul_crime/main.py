"""FastAPI application for the St. Paul crime API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from stpaul_crime.config import get_settings
from stpaul_crime.database import check_db_ready, create_engine_from_settings, init_db
from stpaul_crime.limiter import limiter
from stpaul_crime.routers import (
    codes_router,
    health_router,
    incidents_router,
    neighborhoods_router,
)
from stpaul_crime.services.store import CrimeStore

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management."""
    logger.info("Starting St. Paul crime API...")

    engine = create_engine_from_settings(settings)
    if settings.init_db_on_startup:
        await init_db(engine)

    # Verify database is ready
    try:
        await check_db_ready(engine)
        logger.info(f"Now connected to {engine.url.database}")
    except Exception as e:
        logger.error(f"Database not ready: {e}")
        await engine.dispose()
        raise

    app.state.store = CrimeStore(engine)

    yield

    # Shutdown
    await app.state.store.dispose()
    logger.info("St. Paul crime API shut down")


# Create FastAPI app
app = FastAPI(
    title="St. Paul Crime API",
    description="Query and manage St. Paul crime incidents",
    version="0.1.0",
    lifespan=lifespan,
)

# Add rate limiter
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed requests as a plain-text 400."""
    fields = sorted(
        {".".join(str(part) for part in err["loc"][1:]) or "body" for err in exc.errors()}
    )
    logger.info(f"Rejected {request.method} {request.url.path}: invalid {', '.join(fields)}")
    return PlainTextResponse(f"error: invalid {', '.join(fields)}", status_code=400)


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle unhandled exceptions."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


# Include routers
app.include_router(health_router)
app.include_router(codes_router, prefix=settings.api_prefix)
app.include_router(neighborhoods_router, prefix=settings.api_prefix)
app.include_router(incidents_router, prefix=settings.api_prefix)


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "St. Paul Crime API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "stpaul_crime.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
