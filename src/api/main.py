"""
FastAPI Application Entry Point.

This module creates and configures the FastAPI application instance.
It handles:
1. Application initialization
2. Router registration
3. Middleware configuration (audit and security headers)
4. Exception handlers mapping errors to the JSON error envelope
5. Startup/shutdown of the database pools

Run with: uvicorn src.api.main:app --reload
"""
from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pymongo.errors import PyMongoError
from sqlalchemy.exc import SQLAlchemyError

from src.api.routes import (
    admin_router,
    ai_router,
    chat_router,
    connection_router,
    employees_router,
    fleet_router,
    geo_router,
    health_router,
    odometer_router,
    planning_router,
    saved_routes_router,
    tours_router,
)
from src.core.audit import AuditMiddleware, SecurityHeadersMiddleware
from src.core.config import get_settings
from src.core.exceptions import DatabaseError, FleetAPIException
from src.core.logging_config import get_logger, setup_logging
from src.database.connection import reset_database
from src.database.mongo import reset_mongo


# Initialize logging before anything else
settings = get_settings()
setup_logging(settings.log_level, Path(settings.log_dir))
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    - Startup: optionally create the relational tables
    - Shutdown: close the document-store clients and the SQL pool
    """
    logger.info(f"Starting {settings.app_name} in {settings.app_env} mode")
    logger.info(f"LLM Model: {settings.llm_model} (fallback: {settings.llm_model_fallback})")
    logger.info(f"Audit Logging: {settings.enable_audit_logging}")

    if settings.auto_init_db:
        from src.database.init_db import init_sql_tables
        try:
            init_sql_tables()
            logger.info("Checked/Initialized relational tables.")
        except Exception as e:
            logger.error(f"Failed to auto-init tables: {e}")

    yield  # Application runs here

    logger.info(f"Shutting down {settings.app_name}")
    reset_mongo()
    reset_database()


app = FastAPI(
    title="Fleet & Tour Management API",
    description="""
    Backend for fleet operations and tour bookings.

    ## Features

    - **Fleet**: vehicles, trips, saved routes, odometer review
    - **Employees**: records, profiles, expense claims
    - **Tours**: tours, destinations, participant registration, route plans
    - **AI helpers**: trip planning, geocoding, receipt parsing, transliteration
    - **Geo**: distances, nearest airports, flight paths

    Every response uses the envelope `{success, data, message, count}`;
    errors use `{success: false, error, code, details}`.
    """,
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ============================================================
# Middleware Configuration (Order matters!)
# ============================================================

app.add_middleware(SecurityHeadersMiddleware)

if settings.enable_audit_logging:
    app.add_middleware(AuditMiddleware)
    logger.info("Audit logging middleware enabled")

if settings.is_development():
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    logger.warning("CORS configured for development (all origins allowed)")


# ============================================================
# Exception Handlers
# ============================================================

@app.exception_handler(FleetAPIException)
async def fleet_exception_handler(request: Request, exc: FleetAPIException):
    """Handle all application exceptions."""
    if exc.status_code >= 500:
        logger.error(f"{exc.error_code} on {request.method} {request.url.path}: {exc.message} ({exc.details})")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


@app.exception_handler(PyMongoError)
@app.exception_handler(SQLAlchemyError)
async def store_exception_handler(request: Request, exc: Exception):
    """Driver failures from either store become a database_error."""
    error = DatabaseError(details=str(exc) if settings.is_development() else None)
    logger.error(f"Store failure on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=error.status_code,
        content=error.to_dict()
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """
    Turn request validation failures into 400s.

    Missing fields are listed by name; any other problem is summarized
    from the first error.
    """
    errors = exc.errors()
    missing = [
        str(error["loc"][-1])
        for error in errors
        if error.get("type") == "missing" and error.get("loc")
    ]

    if missing:
        message = f"Missing required fields: {', '.join(missing)}"
    elif errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query"))
        message = f"Invalid request: {location + ': ' if location else ''}{first.get('msg', 'invalid value')}"
    else:
        message = "Invalid request"

    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "error": message,
            "code": "validation_error",
            "details": None,
        }
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Handle uncaught exceptions globally.

    Detailed error information is only included in development mode.
    """
    logger.exception(f"Unhandled exception: {exc}")

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "An unexpected error occurred",
            "code": "internal_error",
            "details": str(exc) if settings.is_development() else None,
            "timestamp": datetime.utcnow().isoformat()
        }
    )


# ============================================================
# Routers
# ============================================================

app.include_router(health_router)
app.include_router(fleet_router)
app.include_router(admin_router)
app.include_router(connection_router)
app.include_router(saved_routes_router)
app.include_router(employees_router)
app.include_router(odometer_router)
app.include_router(tours_router)
app.include_router(planning_router)
app.include_router(ai_router)
app.include_router(chat_router)
app.include_router(geo_router)

# Odometer photos are served back under the URL stored in photoUrl
app.mount("/uploads", StaticFiles(directory=settings.upload_dir, check_dir=False), name="uploads")


@app.get("/", include_in_schema=False)
async def root():
    return {
        "message": "Fleet & Tour Management API",
        "version": "0.1.0",
        "documentation": "/docs",
        "health": "/health"
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development()
    )
