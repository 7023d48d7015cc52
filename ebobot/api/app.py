"""FastAPI application factory.

Creates the application with CORS, exception handlers and routes.
Run with: uvicorn ebobot.api.app:create_app --factory
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ebobot import __version__
from ebobot.api.dependencies import get_settings
from ebobot.api.models.errors import ErrorBody, ErrorCode, ErrorDetail, ErrorResponse
from ebobot.api.routes import register_routes
from ebobot.conversation.models import Activity
from ebobot.errors import (
    ConversationBusyError,
    EboBotError,
    InvalidActivityError,
    StateAccessError,
)
from ebobot.observability.logging import get_logger, setup_logging

logger = get_logger(__name__)

# First matching error class decides the response
ERROR_STATUS: list[tuple[type[EboBotError], int, ErrorCode]] = [
    (InvalidActivityError, 400, ErrorCode.INVALID_REQUEST),
    (ConversationBusyError, 409, ErrorCode.CONVERSATION_BUSY),
    (StateAccessError, 503, ErrorCode.STATE_UNAVAILABLE),
]


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Sets up logging from settings, CORS, the global exception handlers
    and all routes.
    """
    settings = get_settings()
    log_config = settings.observability.logging
    setup_logging(
        level=log_config.level,
        format=log_config.format,
        redact_pii=log_config.redact_pii,
    )

    app = FastAPI(
        title="EboBot",
        description="Single-turn conversational activity handler",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)
    register_routes(app)

    logger.info(
        "app_created",
        debug=settings.debug,
        state_backend=settings.storage.state.backend,
        mutex_backend=settings.storage.mutex.backend,
    )

    return app


def _error_response(
    status_code: int,
    body: ErrorBody,
    activities: list[Activity] | None = None,
) -> JSONResponse:
    response = ErrorResponse(error=body, activities=activities or None)
    return JSONResponse(
        status_code=status_code,
        content=response.model_dump(mode="json", by_alias=True, exclude_none=True),
    )


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(EboBotError)
    async def ebobot_error_handler(request: Request, exc: EboBotError) -> JSONResponse:
        """Handle EboBotError and its subclasses."""
        for error_type, status_code, code in ERROR_STATUS:
            if isinstance(exc, error_type):
                break
        else:
            status_code, code = 500, ErrorCode.INTERNAL_ERROR

        logger.warning(
            "api_error",
            error_code=code.value,
            message=exc.message,
            path=request.url.path,
            activities_delivered=len(exc.delivered),
        )
        return _error_response(
            status_code,
            ErrorBody(code=code, message=exc.message),
            exc.delivered,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed activities."""
        logger.warning("validation_error", errors=exc.errors(), path=request.url.path)

        details = [
            ErrorDetail(
                field=".".join(str(loc) for loc in error["loc"]),
                message=error["msg"],
            )
            for error in exc.errors()
        ]
        return _error_response(
            400,
            ErrorBody(
                code=ErrorCode.INVALID_REQUEST,
                message="Request validation failed",
                details=details,
            ),
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unexpected_error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
        )
        return _error_response(
            500,
            ErrorBody(
                code=ErrorCode.INTERNAL_ERROR,
                message="An unexpected error occurred",
            ),
        )
