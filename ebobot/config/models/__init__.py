"""Configuration models for all EboBot sections."""

from ebobot.config.models.api import APIConfig
from ebobot.config.models.bot import BotConfig
from ebobot.config.models.observability import (
    LoggingConfig,
    MetricsConfig,
    ObservabilityConfig,
)
from ebobot.config.models.storage import MutexConfig, StateStoreConfig, StorageConfig

__all__ = [
    "APIConfig",
    "BotConfig",
    "LoggingConfig",
    "MetricsConfig",
    "MutexConfig",
    "ObservabilityConfig",
    "StateStoreConfig",
    "StorageConfig",
]
