"""Unit tests for TOML configuration loader."""

import tomllib
from pathlib import Path

import pytest

from ebobot.config.loader import (
    deep_merge,
    get_config_dir,
    get_environment,
    load_config,
    load_toml,
)


class TestDeepMerge:
    """Tests for deep_merge function."""

    def test_merge_flat_dicts(self) -> None:
        result = deep_merge({"a": 1, "b": 2}, {"b": 3, "c": 4})
        assert result == {"a": 1, "b": 3, "c": 4}

    def test_merge_nested_dicts(self) -> None:
        base = {"storage": {"state": {"backend": "inmemory", "key_prefix": "x"}}}
        override = {"storage": {"state": {"backend": "redis"}}}

        result = deep_merge(base, override)

        assert result == {"storage": {"state": {"backend": "redis", "key_prefix": "x"}}}

    def test_override_replaces_non_dict(self) -> None:
        assert deep_merge({"a": {"x": 1}}, {"a": "replaced"}) == {"a": "replaced"}

    def test_base_unmodified(self) -> None:
        base = {"a": 1}
        deep_merge(base, {"b": 2})
        assert base == {"a": 1}


class TestLoadToml:
    """Tests for load_toml function."""

    def test_load_valid_toml(self, tmp_path: Path) -> None:
        toml_file = tmp_path / "test.toml"
        toml_file.write_text('[bot]\ncard_prompt = "Pick"\ncard_choices = ["A"]')

        assert load_toml(toml_file) == {"bot": {"card_prompt": "Pick", "card_choices": ["A"]}}

    def test_load_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_toml(tmp_path / "nonexistent.toml")

    def test_load_invalid_toml_raises(self, tmp_path: Path) -> None:
        invalid_file = tmp_path / "invalid.toml"
        invalid_file.write_text("invalid = [unclosed")

        with pytest.raises(tomllib.TOMLDecodeError):
            load_toml(invalid_file)


class TestGetEnvironment:
    """Tests for get_environment function."""

    def test_returns_env_var_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EBOBOT_ENV", "production")
        assert get_environment() == "production"

    def test_defaults_to_development(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("EBOBOT_ENV", raising=False)
        assert get_environment() == "development"


class TestGetConfigDir:
    """Tests for get_config_dir function."""

    def test_uses_env_var_when_set(
        self, test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("EBOBOT_CONFIG_DIR", str(test_config_dir))
        assert get_config_dir() == test_config_dir

    def test_raises_for_missing_env_dir(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("EBOBOT_CONFIG_DIR", str(tmp_path / "missing"))

        with pytest.raises(FileNotFoundError):
            get_config_dir()

    def test_finds_config_in_parent(
        self, test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        nested = test_config_dir.parent / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.delenv("EBOBOT_CONFIG_DIR", raising=False)
        monkeypatch.chdir(nested)

        assert get_config_dir() == test_config_dir


class TestLoadConfig:
    """Tests for load_config function."""

    def test_loads_default_config(
        self, test_config_dir: Path, mock_toml_files, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        mock_toml_files({"default.toml": "app_name = 'test'\ndebug = false"})
        monkeypatch.setenv("EBOBOT_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("EBOBOT_ENV", "nonexistent")

        assert load_config() == {"app_name": "test", "debug": False}

    def test_merges_environment_config(
        self, test_config_dir: Path, mock_toml_files, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        mock_toml_files({
            "default.toml": "app_name = 'test'\ndebug = false",
            "development.toml": "debug = true",
        })
        monkeypatch.setenv("EBOBOT_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("EBOBOT_ENV", "development")

        assert load_config() == {"app_name": "test", "debug": True}

    def test_missing_default_raises(
        self, test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("EBOBOT_CONFIG_DIR", str(test_config_dir))

        with pytest.raises(FileNotFoundError, match="default.toml"):
            load_config()
