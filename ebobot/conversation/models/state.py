"""Per-conversation state records and their key."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


class ConversationKey(BaseModel):
    """Uniquely identifies a conversation; scopes all state records."""

    model_config = ConfigDict(frozen=True)

    channel_id: str = Field(..., description="Channel the conversation lives on")
    conversation_id: str = Field(..., description="Channel-specific conversation id")

    def __str__(self) -> str:
        return f"{self.channel_id}/conversations/{self.conversation_id}"


class StateRecord(BaseModel):
    """Base class for a record kind stored per conversation.

    Each subclass names its own storage slot through `state_name`, so
    record kinds are read and committed independently.
    """

    model_config = ConfigDict(validate_assignment=True)

    state_name: ClassVar[str]


class WelcomeState(StateRecord):
    """Whether the user has been welcomed in this conversation."""

    state_name: ClassVar[str] = "welcome"

    welcomed: bool = Field(default=False, description="Welcome transition happened")


class CounterState(StateRecord):
    """Number of post-welcome message turns in this conversation."""

    state_name: ClassVar[str] = "counter"

    turn_count: int = Field(default=0, ge=0, description="Monotonic turn counter")
