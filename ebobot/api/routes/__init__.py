"""API route registration."""

from fastapi import FastAPI

from ebobot.observability.logging import get_logger

logger = get_logger(__name__)


def register_routes(app: FastAPI) -> None:
    """Register all routes with the FastAPI application."""
    from ebobot.api.routes.health import router as health_router
    from ebobot.api.routes.messages import router as messages_router

    app.include_router(messages_router, tags=["Messages"])
    app.include_router(health_router, tags=["Health"])

    logger.info("routes_registered")
