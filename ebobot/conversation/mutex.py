"""Per-conversation mutual exclusion.

Ensures at most one turn runs per ConversationKey at a time, which keeps
the welcome transition at-most-once and the turn counter free of lost
updates when a channel delivers activities concurrently.
"""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import AsyncGenerator
from contextlib import AbstractAsyncContextManager, asynccontextmanager

from redis.asyncio import Redis
from redis.exceptions import LockError

from ebobot.observability.logging import get_logger

logger = get_logger(__name__)


class ConversationMutex(ABC):
    """Abstract lock keyed by conversation."""

    @abstractmethod
    def acquire(
        self,
        conversation_key: str,
        blocking_timeout: float | None = None,
    ) -> AbstractAsyncContextManager[bool]:
        """Acquire exclusive access to a conversation.

        Yields True if the lock was acquired, False if timed out.

        Usage:
            async with mutex.acquire("emulator/conversations/abc") as acquired:
                if acquired:
                    # Safe to process
        """
        pass


class InMemoryConversationMutex(ConversationMutex):
    """asyncio.Lock per conversation, for single-process deployments.

    Locks are dropped from the registry once nobody holds or waits on them.
    """

    def __init__(self, blocking_timeout: float = 5.0) -> None:
        self._blocking_timeout = blocking_timeout
        self._locks: dict[str, asyncio.Lock] = {}
        self._users: dict[str, int] = {}

    @asynccontextmanager
    async def acquire(
        self,
        conversation_key: str,
        blocking_timeout: float | None = None,
    ) -> AsyncGenerator[bool, None]:
        timeout = (
            self._blocking_timeout if blocking_timeout is None else blocking_timeout
        )
        lock = self._locks.setdefault(conversation_key, asyncio.Lock())
        self._users[conversation_key] = self._users.get(conversation_key, 0) + 1

        acquired = False
        try:
            if timeout <= 0:
                # Single attempt; wait_for(..., 0) can give up on a free lock
                acquired = not lock.locked() and await lock.acquire()
            else:
                try:
                    await asyncio.wait_for(lock.acquire(), timeout)
                    acquired = True
                except TimeoutError:
                    pass
            if not acquired:
                logger.warning(
                    "conversation_lock_timeout",
                    conversation_key=conversation_key,
                    timeout=timeout,
                )
            yield acquired
        finally:
            if acquired:
                lock.release()
            self._users[conversation_key] -= 1
            if self._users[conversation_key] == 0:
                del self._users[conversation_key]
                del self._locks[conversation_key]


class RedisConversationMutex(ConversationMutex):
    """Redis-backed distributed lock for multi-process deployments.

    Lock key format: convlock:{conversation_key}
    """

    def __init__(
        self,
        redis: Redis,
        lock_timeout: int = 30,
        blocking_timeout: float = 5.0,
    ):
        """Initialize conversation mutex.

        Args:
            redis: Redis client instance
            lock_timeout: How long lock is held before auto-release (seconds)
            blocking_timeout: How long to wait when trying to acquire (seconds)
        """
        self._redis = redis
        self._lock_timeout = lock_timeout
        self._blocking_timeout = blocking_timeout

    def _key(self, conversation_key: str) -> str:
        return f"convlock:{conversation_key}"

    @asynccontextmanager
    async def acquire(
        self,
        conversation_key: str,
        blocking_timeout: float | None = None,
    ) -> AsyncGenerator[bool, None]:
        timeout = (
            self._blocking_timeout if blocking_timeout is None else blocking_timeout
        )

        lock = self._redis.lock(
            self._key(conversation_key),
            timeout=self._lock_timeout,
            blocking_timeout=timeout,
        )

        acquired = await lock.acquire()
        try:
            yield acquired
        finally:
            if acquired:
                try:
                    await lock.release()
                except LockError as e:
                    # Lock expired before the turn finished
                    logger.warning(
                        "conversation_lock_release_failed",
                        conversation_key=conversation_key,
                        error=str(e),
                    )
