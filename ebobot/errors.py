"""Error hierarchy for EboBot.

Store implementations wrap backend-specific failures in StateAccessError
so the dispatcher and the HTTP layer only deal with one failure type.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ebobot.conversation.models import Activity


class EboBotError(Exception):
    """Base exception for all EboBot errors."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        # Replies already sent when a turn failed part way through
        self.delivered: "list[Activity]" = []


class ConstructionError(EboBotError):
    """Raised when a required collaborator is missing at startup."""

    pass


class StateAccessError(EboBotError):
    """Raised when a state store read or write fails mid-turn.

    Examples:
        - Redis server unavailable
        - Stored record fails validation
        - Network errors during commit
    """

    pass


class ConversationBusyError(EboBotError):
    """Raised when another turn holds the conversation lock."""

    def __init__(self, conversation_key: str) -> None:
        super().__init__(f"Conversation is busy: {conversation_key}")
        self.conversation_key = conversation_key


class InvalidActivityError(EboBotError):
    """Raised when an activity lacks the fields needed to process it."""

    pass
