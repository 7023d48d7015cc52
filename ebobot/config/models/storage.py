"""Storage backend configuration models."""

from typing import Literal

from pydantic import BaseModel, Field

BackendType = Literal["inmemory", "redis"]


class StateStoreConfig(BaseModel):
    """Conversation state store backend."""

    backend: BackendType = Field(default="inmemory", description="Backend type")
    redis_url: str = Field(
        default="redis://localhost:6379",
        description="Redis connection URL",
    )
    key_prefix: str = Field(default="convstate", description="Redis key prefix")
    ttl_seconds: int | None = Field(
        default=None,
        gt=0,
        description="Expire idle conversation state after this many seconds",
    )


class MutexConfig(BaseModel):
    """Per-conversation lock backend."""

    backend: BackendType = Field(default="inmemory", description="Backend type")
    lock_timeout: int = Field(
        default=30,
        gt=0,
        description="Seconds a lock is held before auto-release",
    )
    blocking_timeout: float = Field(
        default=5.0,
        gt=0,
        description="Seconds to wait for a busy conversation",
    )


class StorageConfig(BaseModel):
    """Storage configuration for state and locking."""

    state: StateStoreConfig = Field(
        default_factory=StateStoreConfig,
        description="State store settings",
    )
    mutex: MutexConfig = Field(
        default_factory=MutexConfig,
        description="Conversation mutex settings",
    )
