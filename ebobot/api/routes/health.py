"""Health check and metrics endpoints."""

from datetime import UTC, datetime

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from ebobot import __version__
from ebobot.api.dependencies import SettingsDep, StateStoreDep
from ebobot.api.models.health import ComponentHealth, HealthResponse
from ebobot.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(store: StateStoreDep) -> HealthResponse:
    """Report service health and the state store backend in use."""
    logger.debug("health_check_request")
    component = ComponentHealth(
        name="state_store",
        status="healthy",
        message=type(store).__name__,
    )
    return HealthResponse(
        status="healthy",
        version=__version__,
        components=[component],
        timestamp=datetime.now(UTC),
    )


@router.get("/metrics")
async def get_metrics(settings: SettingsDep) -> Response:
    """Prometheus metrics in text format."""
    if not settings.observability.metrics.enabled:
        return Response(status_code=404)

    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST,
    )
