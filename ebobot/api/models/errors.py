"""Error response models for consistent API error handling."""

from enum import Enum

from pydantic import BaseModel

from ebobot.conversation.models import Activity


class ErrorCode(str, Enum):
    """Machine-readable error codes for API responses."""

    INVALID_REQUEST = "INVALID_REQUEST"
    """Request validation failed or the activity cannot be processed."""

    CONVERSATION_BUSY = "CONVERSATION_BUSY"
    """Another turn for the same conversation is in progress."""

    STATE_UNAVAILABLE = "STATE_UNAVAILABLE"
    """The conversation state store failed; the turn was aborted."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    """An unexpected internal error occurred."""


class ErrorDetail(BaseModel):
    """Field-level detail for validation failures."""

    field: str | None = None
    message: str


class ErrorBody(BaseModel):
    """Error body content for API error responses."""

    code: ErrorCode
    message: str
    details: list[ErrorDetail] | None = None


class ErrorResponse(BaseModel):
    """Standard error response format.

    When a turn fails after some replies were already produced, those
    replies are returned in `activities` next to the error.

    Example:
        {
            "error": {
                "code": "CONVERSATION_BUSY",
                "message": "Conversation is busy: emulator/conversations/abc"
            }
        }
    """

    error: ErrorBody
    activities: list[Activity] | None = None
