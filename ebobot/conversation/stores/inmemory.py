"""In-memory implementation of ConversationStateStore."""

import copy
from typing import Any

from ebobot.conversation.models import ConversationKey
from ebobot.conversation.store import ConversationStateStore


class InMemoryConversationStateStore(ConversationStateStore):
    """In-memory implementation of ConversationStateStore for testing and development.

    State lives in process memory and is lost on restart.
    Not suitable for multi-process deployments.
    """

    def __init__(self) -> None:
        super().__init__()
        self._records: dict[ConversationKey, dict[str, dict[str, Any]]] = {}

    async def _load(self, key: ConversationKey, state_name: str) -> dict[str, Any] | None:
        data = self._records.get(key, {}).get(state_name)
        return copy.deepcopy(data) if data is not None else None

    async def _persist(self, key: ConversationKey, payload: dict[str, dict[str, Any]]) -> None:
        self._records.setdefault(key, {}).update(copy.deepcopy(payload))

    async def _delete(self, key: ConversationKey) -> bool:
        return self._records.pop(key, None) is not None

    def clear(self) -> None:
        """Clear all records (test utility)."""
        self._records.clear()
        self._staged.clear()
