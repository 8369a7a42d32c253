"""Unit tests for TOML configuration loader."""

import tomllib
from pathlib import Path

import pytest

from formcore.config.loader import (
    DEFAULT_CONFIG_DIR,
    deep_merge,
    get_config_dir,
    get_environment,
    load_config,
    load_toml,
)


class TestDeepMerge:
    """Tests for deep_merge function."""

    def test_merge_flat_dicts(self) -> None:
        """Flat dictionaries are merged correctly."""
        base = {"a": 1, "b": 2}
        override = {"b": 3, "c": 4}
        assert deep_merge(base, override) == {"a": 1, "b": 3, "c": 4}

    def test_merge_nested_dicts(self) -> None:
        """Nested dictionaries are merged recursively."""
        base = {"forms": {"payment": {"x": 1, "y": 2}}}
        override = {"forms": {"payment": {"y": 20}}}
        assert deep_merge(base, override) == {"forms": {"payment": {"x": 1, "y": 20}}}

    def test_override_replaces_non_dict(self) -> None:
        """Non-dict values in override replace base values."""
        assert deep_merge({"a": {"x": 1}}, {"a": "replaced"}) == {"a": "replaced"}

    def test_base_unmodified(self) -> None:
        """Original base dictionary is not modified."""
        base = {"a": 1}
        deep_merge(base, {"b": 2})
        assert base == {"a": 1}


class TestLoadToml:
    """Tests for load_toml function."""

    def test_load_valid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "test.toml"
        path.write_text('app_name = "test"\n[forms.payment]\nrevalidate_on_change = false\n')
        result = load_toml(path)
        assert result == {"app_name": "test", "forms": {"payment": {"revalidate_on_change": False}}}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_toml(tmp_path / "missing.toml")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text("this is = = not toml")
        with pytest.raises(tomllib.TOMLDecodeError):
            load_toml(path)


class TestEnvironment:
    """Tests for environment and directory resolution."""

    def test_default_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("FORMCORE_ENV", raising=False)
        assert get_environment() == "development"

    def test_environment_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FORMCORE_ENV", "test")
        assert get_environment() == "test"

    def test_config_dir_override(
        self, test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FORMCORE_CONFIG_DIR", str(test_config_dir))
        assert get_config_dir() == test_config_dir

    def test_config_dir_override_missing(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FORMCORE_CONFIG_DIR", str(tmp_path / "nope"))
        with pytest.raises(FileNotFoundError):
            get_config_dir()


class TestLoadConfig:
    """Tests for load_config function."""

    def test_environment_file_merged(
        self, test_config_dir: Path, mock_toml_files, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        mock_toml_files({
            "default.toml": "debug = false\n[observability.logging]\nlevel = \"INFO\"\n",
            "test.toml": "[observability.logging]\nlevel = \"WARNING\"\n",
        })
        monkeypatch.setenv("FORMCORE_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("FORMCORE_ENV", "test")

        config = load_config()
        assert config == {"debug": False, "observability": {"logging": {"level": "WARNING"}}}

    def test_empty_directory_gives_empty_config(
        self, test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FORMCORE_CONFIG_DIR", str(test_config_dir))
        assert load_config() == {}

    def test_default_directory_beside_package(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("FORMCORE_CONFIG_DIR", raising=False)
        assert get_config_dir() == DEFAULT_CONFIG_DIR
