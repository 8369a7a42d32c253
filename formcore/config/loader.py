"""TOML configuration loader with deep merge support."""

import os
import tomllib
from pathlib import Path
from typing import Any

DEFAULT_CONFIG_DIR = Path(__file__).resolve().parents[2] / "config"


def get_config_dir() -> Path:
    """Configuration directory: FORMCORE_CONFIG_DIR, or config/ beside the package."""
    override = os.environ.get("FORMCORE_CONFIG_DIR")
    if not override:
        return DEFAULT_CONFIG_DIR

    path = Path(override)
    if not path.is_dir():
        raise FileNotFoundError(f"Config directory not found: {override}")
    return path


def get_environment() -> str:
    return os.environ.get("FORMCORE_ENV", "development")


def load_toml(file_path: Path) -> dict[str, Any]:
    """Parse one TOML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    with file_path.open("rb") as f:
        return tomllib.load(f)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge ``override`` into a copy of ``base``, recursing into nested tables."""
    result = base.copy()
    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config() -> dict[str, Any]:
    """Merge config/default.toml with config/{FORMCORE_ENV}.toml.

    Both files are optional; model defaults apply to anything they omit.
    """
    config_dir = get_config_dir()
    config: dict[str, Any] = {}
    for filename in ("default.toml", f"{get_environment()}.toml"):
        path = config_dir / filename
        if path.exists():
            config = deep_merge(config, load_toml(path))
    return config
