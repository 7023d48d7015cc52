"""Conversation domain models.

Contains all Pydantic models for conversation traffic and state:
- Activities and their parts, in Bot Framework wire format
- ConversationKey scoping state
- State records (welcome flag, turn counter)
"""

from ebobot.conversation.models.activity import (
    Activity,
    Attachment,
    CardAction,
    ChannelAccount,
    ConversationAccount,
    SuggestedActions,
)
from ebobot.conversation.models.enums import ActionType, ActivityType
from ebobot.conversation.models.state import (
    ConversationKey,
    CounterState,
    StateRecord,
    WelcomeState,
)

__all__ = [
    # Enums
    "ActionType",
    "ActivityType",
    # Activity models
    "Activity",
    "Attachment",
    "CardAction",
    "ChannelAccount",
    "ConversationAccount",
    "SuggestedActions",
    # State models
    "ConversationKey",
    "CounterState",
    "StateRecord",
    "WelcomeState",
]
