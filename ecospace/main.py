"""FastAPI application entrypoint — lifespan, routers, middleware."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from ecospace.config import get_settings
from ecospace.database import engine
from ecospace.error_handlers import register_error_handlers
from ecospace.middleware.logging import RequestLoggingMiddleware, configure_structured_logging
from ecospace.routes import diseases, growth_stages, pathogen_types, pest_types, pests, plants, soils
from ecospace.services.catalog_service import get_catalog_engine

logger = logging.getLogger("ecospace")

SERVICE_NAME = "ecospace"
SERVICE_VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application startup / shutdown lifecycle.

    Startup:
      1. Initialize structured logging
      2. Build the catalog engine (fails fast on a misconfigured entity)
      3. Verify database connectivity

    Shutdown:
      1. Dispose SQLAlchemy engine
    """
    configure_structured_logging()
    settings = get_settings()
    logger.info(
        "Ecospace starting",
        extra={"log_level": settings.log_level, "api_prefix": settings.api_prefix},
    )

    try:
        catalog = get_catalog_engine()
        app.state.catalog_kinds = catalog.kinds()
        async with engine.connect() as connection:
            await connection.execute(text("SELECT 1"))
    except Exception as exc:
        logger.exception("startup failure", extra={"error": str(exc)})
        raise

    yield

    logger.info("Ecospace shutting down")
    await engine.dispose()


app = FastAPI(
    title="Ecospace Catalog API",
    description=(
        "Horticultural reference catalog — plants, soils, growth stages, "
        "pests and diseases with uniform pagination, filtering and "
        "cross-field validation."
    ),
    version=SERVICE_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── Middleware ──────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

# ── Error handlers ──────────────────────────────────────────────────────────
register_error_handlers(app)


# ── Health check ────────────────────────────────────────────────────────────
@app.get("/health", tags=["system"])
async def health_check() -> dict[str, str]:
    """Basic health check — verifies the API process is alive."""
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    }


async def _run_readiness_checks(app: FastAPI) -> dict[str, dict[str, Any]]:
    checks: dict[str, dict[str, Any]] = {}
    try:
        async with engine.connect() as connection:
            await connection.execute(text("SELECT 1"))
        checks["database"] = {"ok": True, "message": "ok"}
    except Exception as exc:
        logger.warning("readiness check failed", extra={"check": "database", "error": str(exc)})
        checks["database"] = {"ok": False, "message": "database unavailable"}
    catalog_ready = bool(getattr(app.state, "catalog_kinds", ()))
    checks["catalog"] = {"ok": catalog_ready, "message": "ok" if catalog_ready else "engine not built"}
    return checks


@app.get("/health/ready", tags=["system"])
async def readiness_check() -> Any:
    """Readiness check — database reachable and catalog engine built."""
    checks = await _run_readiness_checks(app)
    ready = all(check["ok"] for check in checks.values())
    body = {"status": "ok" if ready else "degraded", "checks": checks}
    if not ready:
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=body)
    return body


# ── Router registration ────────────────────────────────────────────────────
_API_PREFIX = get_settings().api_prefix
app.include_router(plants.router, prefix=_API_PREFIX)
app.include_router(soils.router, prefix=_API_PREFIX)
app.include_router(growth_stages.router, prefix=_API_PREFIX)
app.include_router(pest_types.router, prefix=_API_PREFIX)
app.include_router(pathogen_types.router, prefix=_API_PREFIX)
app.include_router(pests.router, prefix=_API_PREFIX)
app.include_router(diseases.router, prefix=_API_PREFIX)
