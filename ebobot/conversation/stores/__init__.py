"""Conversation state store backends."""

from ebobot.conversation.store import ConversationStateStore
from ebobot.conversation.stores.inmemory import InMemoryConversationStateStore
from ebobot.conversation.stores.redis import RedisConversationStateStore

__all__ = [
    "ConversationStateStore",
    "InMemoryConversationStateStore",
    "RedisConversationStateStore",
]
