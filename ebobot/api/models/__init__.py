"""API request/response models."""

from ebobot.api.models.errors import ErrorBody, ErrorCode, ErrorDetail, ErrorResponse
from ebobot.api.models.health import ComponentHealth, HealthResponse
from ebobot.api.models.turn import TurnResponse

__all__ = [
    "ComponentHealth",
    "ErrorBody",
    "ErrorCode",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    "TurnResponse",
]
