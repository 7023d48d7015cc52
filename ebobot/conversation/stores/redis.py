"""Redis implementation of ConversationStateStore.

Each conversation is one hash; every record kind is a field holding the
record as JSON.

Key structure:
- {prefix}:{channel_id}/conversations/{conversation_id}
"""

import json
from typing import Any

import redis.asyncio as redis

from ebobot.config.models.storage import StateStoreConfig
from ebobot.conversation.models import ConversationKey
from ebobot.conversation.store import ConversationStateStore
from ebobot.errors import StateAccessError
from ebobot.observability.logging import get_logger

logger = get_logger(__name__)


class RedisConversationStateStore(ConversationStateStore):
    """Redis-backed conversation state.

    Commits write all staged fields in one MULTI/EXEC pipeline and
    refresh the key TTL when one is configured.
    """

    def __init__(
        self,
        client: redis.Redis,
        config: StateStoreConfig | None = None,
    ) -> None:
        """Initialize Redis state store.

        Args:
            client: Redis client instance
            config: State store configuration (uses defaults if not provided)
        """
        super().__init__()
        self._client = client
        self._config = config or StateStoreConfig(backend="redis")
        self._prefix = self._config.key_prefix

    def _key(self, key: ConversationKey) -> str:
        return f"{self._prefix}:{key}"

    async def _load(self, key: ConversationKey, state_name: str) -> dict[str, Any] | None:
        try:
            data = await self._client.hget(self._key(key), state_name)
        except redis.RedisError as e:
            logger.error(
                "redis_state_get_error",
                conversation_key=str(key),
                state=state_name,
                error=str(e),
            )
            raise StateAccessError(f"Failed to get {state_name} state: {e}", cause=e) from e

        if data is None:
            return None

        if isinstance(data, bytes):
            data = data.decode()
        try:
            return json.loads(data)
        except json.JSONDecodeError as e:
            raise StateAccessError(
                f"Corrupted {state_name} state for {key}", cause=e
            ) from e

    async def _persist(self, key: ConversationKey, payload: dict[str, dict[str, Any]]) -> None:
        redis_key = self._key(key)
        mapping = {name: json.dumps(data) for name, data in payload.items()}
        try:
            async with self._client.pipeline(transaction=True) as pipe:
                pipe.hset(redis_key, mapping=mapping)
                if self._config.ttl_seconds:
                    pipe.expire(redis_key, self._config.ttl_seconds)
                await pipe.execute()
        except redis.RedisError as e:
            logger.error(
                "redis_state_commit_error",
                conversation_key=str(key),
                states=sorted(mapping),
                error=str(e),
            )
            raise StateAccessError(f"Failed to commit state: {e}", cause=e) from e

    async def _delete(self, key: ConversationKey) -> bool:
        try:
            return await self._client.delete(self._key(key)) > 0
        except redis.RedisError as e:
            raise StateAccessError(f"Failed to delete state: {e}", cause=e) from e
