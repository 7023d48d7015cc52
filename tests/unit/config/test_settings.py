"""Unit tests for Settings class and get_settings function."""

from collections.abc import Generator
from pathlib import Path

import pytest
from pydantic import ValidationError

from ebobot.config import get_settings, reload_settings
from ebobot.config.models.bot import DEFAULT_IMAGE_URL, BotConfig
from ebobot.config.settings import Settings, set_toml_config


@pytest.fixture(autouse=True)
def empty_toml_config() -> Generator[None, None, None]:
    """Keep TOML values from other tests out of Settings()."""
    set_toml_config({})
    yield
    set_toml_config({})


@pytest.fixture
def configured(test_config_dir: Path, mock_toml_files, monkeypatch: pytest.MonkeyPatch):
    """Point the loader at a temporary config directory."""
    monkeypatch.setenv("EBOBOT_CONFIG_DIR", str(test_config_dir))
    monkeypatch.setenv("EBOBOT_ENV", "test")
    return mock_toml_files


class TestSettings:
    """Tests for Settings model defaults."""

    def test_default_values(self) -> None:
        settings = Settings()
        assert settings.app_name == "ebobot"
        assert settings.debug is False

    def test_storage_defaults(self) -> None:
        settings = Settings()
        assert settings.storage.state.backend == "inmemory"
        assert settings.storage.state.ttl_seconds is None
        assert settings.storage.mutex.backend == "inmemory"
        assert settings.storage.mutex.blocking_timeout == 5.0

    def test_bot_defaults(self) -> None:
        bot = Settings().bot
        assert bot.image_url == DEFAULT_IMAGE_URL
        assert bot.image_name == "imageName"
        assert bot.image_content_type == "image/png"
        assert bot.card_choices == ["Red", "Yellow", "Blue"]

    def test_observability_defaults(self) -> None:
        settings = Settings()
        assert settings.observability.logging.level == "INFO"
        assert settings.observability.logging.redact_pii is True
        assert settings.observability.metrics.enabled is True

    def test_card_choices_required(self) -> None:
        with pytest.raises(ValidationError):
            BotConfig(card_choices=[])

    def test_cors_origins_from_string(self) -> None:
        settings = Settings(api={"cors_origins": "http://a, http://b"})
        assert settings.api.cors_origins == ["http://a", "http://b"]


class TestGetSettings:
    """Tests for get_settings function."""

    def test_loads_toml(self, configured) -> None:
        configured({"default.toml": "app_name = 'test'\n[storage.state]\nbackend = 'redis'"})

        settings = get_settings()

        assert settings.app_name == "test"
        assert settings.storage.state.backend == "redis"

    def test_environment_file_overrides_default(self, configured) -> None:
        configured({
            "default.toml": "[observability.logging]\nlevel = 'INFO'",
            "test.toml": "[observability.logging]\nlevel = 'DEBUG'",
        })

        assert get_settings().observability.logging.level == "DEBUG"

    def test_env_var_overrides_toml(self, configured, env_override) -> None:
        configured({"default.toml": "[storage.mutex]\nlock_timeout = 30"})

        with env_override({"EBOBOT_STORAGE__MUTEX__LOCK_TIMEOUT": "90"}):
            settings = get_settings()

        assert settings.storage.mutex.lock_timeout == 90

    def test_settings_cached(self, configured) -> None:
        configured({"default.toml": "app_name = 'test'"})

        assert get_settings() is get_settings()

    def test_reload_settings(self, configured, test_config_dir: Path) -> None:
        configured({"default.toml": "app_name = 'first'"})
        assert get_settings().app_name == "first"

        (test_config_dir / "default.toml").write_text("app_name = 'second'")

        assert reload_settings().app_name == "second"
