"""
Health Check Routes - System health endpoint.

Used for load balancer health checks, container liveness probes
and quick status verification.
"""
from datetime import datetime

from fastapi import APIRouter, Depends

from people_api import __version__
from people_api.core.logging_config import get_logger
from people_api.models.person import HealthResponse
from people_api.store import PersonStore, get_person_store

logger = get_logger(__name__)

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check endpoint",
    description="Returns 200 OK with the number of stored people if the service is up."
)
async def health_check(store: PersonStore = Depends(get_person_store)) -> HealthResponse:
    logger.debug("Health check requested")

    return HealthResponse(
        status="healthy",
        version=__version__,
        record_count=len(store),
        timestamp=datetime.utcnow()
    )
