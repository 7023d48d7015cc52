"""Dependency injection for API routes.

Provides FastAPI dependencies for the state store, the conversation mutex
and the turn runner. Backends are chosen from settings; every dependency
can be overridden for testing via app.dependency_overrides.
"""

from functools import lru_cache
from typing import Annotated

import redis.asyncio as redis
from fastapi import Depends

from ebobot.bot import TurnDispatcher, TurnRunner
from ebobot.config.loader import load_config
from ebobot.config.settings import Settings, set_toml_config
from ebobot.conversation.mutex import (
    ConversationMutex,
    InMemoryConversationMutex,
    RedisConversationMutex,
)
from ebobot.conversation.store import ConversationStateStore
from ebobot.conversation.stores import (
    InMemoryConversationStateStore,
    RedisConversationStateStore,
)
from ebobot.observability.logging import get_logger

logger = get_logger(__name__)

# Created once and shared across requests
_redis_client: redis.Redis | None = None
_state_store: ConversationStateStore | None = None
_mutex: ConversationMutex | None = None


@lru_cache
def get_settings() -> Settings:
    """Get application settings.

    Falls back to defaults when no config file is found.
    """
    try:
        set_toml_config(load_config())
    except FileNotFoundError:
        logger.warning("config_file_not_found", msg="Using default configuration")
        set_toml_config({})

    return Settings()


def get_redis_client(settings: Settings) -> redis.Redis:
    """Get the shared Redis client, creating it on first use."""
    global _redis_client
    if _redis_client is None:
        url = settings.storage.state.redis_url
        _redis_client = redis.from_url(url, decode_responses=True)
        logger.info("redis_client_created", url=url.split("@")[-1])
    return _redis_client


async def get_state_store() -> ConversationStateStore:
    """Get the ConversationStateStore configured in settings."""
    global _state_store
    if _state_store is None:
        settings = get_settings()
        config = settings.storage.state
        if config.backend == "redis":
            _state_store = RedisConversationStateStore(
                get_redis_client(settings), config
            )
        else:
            _state_store = InMemoryConversationStateStore()
        logger.info("state_store_initialized", store_type=config.backend)
    return _state_store


async def get_mutex() -> ConversationMutex:
    """Get the ConversationMutex configured in settings."""
    global _mutex
    if _mutex is None:
        settings = get_settings()
        config = settings.storage.mutex
        if config.backend == "redis":
            _mutex = RedisConversationMutex(
                get_redis_client(settings),
                lock_timeout=config.lock_timeout,
                blocking_timeout=config.blocking_timeout,
            )
        else:
            _mutex = InMemoryConversationMutex(blocking_timeout=config.blocking_timeout)
        logger.info("conversation_mutex_initialized", mutex_type=config.backend)
    return _mutex


async def get_turn_runner(
    store: Annotated[ConversationStateStore, Depends(get_state_store)],
    mutex: Annotated[ConversationMutex, Depends(get_mutex)],
) -> TurnRunner:
    """Build a runner over the shared store and mutex.

    Dispatcher and runner hold no cross-turn state, so one per request.
    """
    dispatcher = TurnDispatcher(store, get_settings().bot)
    return TurnRunner(dispatcher, mutex)


async def reset_dependencies() -> None:
    """Drop shared instances (test utility)."""
    global _redis_client, _state_store, _mutex
    if _redis_client is not None:
        await _redis_client.aclose()
    _redis_client = None
    _state_store = None
    _mutex = None
    get_settings.cache_clear()


SettingsDep = Annotated[Settings, Depends(get_settings)]
StateStoreDep = Annotated[ConversationStateStore, Depends(get_state_store)]
TurnRunnerDep = Annotated[TurnRunner, Depends(get_turn_runner)]
