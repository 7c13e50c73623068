"""
Health Check Routes - System health and monitoring endpoints.

These endpoints are used for:
1. Load balancer health checks
2. Container liveness/readiness checks
3. Quick system status verification
"""
from datetime import datetime

from fastapi import APIRouter, Depends, Response

from src.core.logging_config import get_logger
from src.database.connection import DatabaseConnection, get_database
from src.database.mongo import MongoConnection, get_mongo
from src.models.common import HealthResponse

logger = get_logger(__name__)

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)

APP_VERSION = "0.1.0"


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check endpoint",
    description="Returns 200 OK while the process is up. No dependency is contacted.",
)
async def health_check() -> HealthResponse:
    logger.debug("Health check requested")

    return HealthResponse(
        status="healthy",
        version=APP_VERSION,
        timestamp=datetime.utcnow()
    )


@router.get(
    "/ready",
    response_model=HealthResponse,
    summary="Readiness check endpoint",
    description="""
    Verifies the service can reach its stores:
    - Relational database (`SELECT 1`)
    - Admin and employee document databases

    Answers 503 when any of them is unreachable.
    """,
)
def readiness_check(
    response: Response,
    db: DatabaseConnection = Depends(get_database),
    mongo: MongoConnection = Depends(get_mongo),
) -> HealthResponse:
    logger.debug("Readiness check requested")

    report = mongo.ping()
    checks = {
        "database": db.check_connection(),
        "adminDb": report["adminDb"]["connected"],
        "employeeDb": report["employeeDb"]["connected"],
    }
    ready = all(checks.values())
    if not ready:
        logger.warning(f"Readiness check failed: {checks}")
        response.status_code = 503

    return HealthResponse(
        status="ready" if ready else "degraded",
        version=APP_VERSION,
        timestamp=datetime.utcnow(),
        checks=checks,
    )
