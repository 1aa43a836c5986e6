"""YAML config lookup and a lazily loaded process-wide config holder."""

import os
from pathlib import Path
from typing import Callable, Generic, TypeVar

import yaml

T = TypeVar("T")

DEFAULT_CONFIG_NAME = "prod"


def find_config_path(config_dir: Path, config_name: str | None = None, env_var: str | None = None) -> Path:
    """Return <config_dir>/<name>.yaml.

    The name comes from config_name, then env_var, then "prod". Raises
    FileNotFoundError if the file is missing.
    """
    name = config_name or (os.environ.get(env_var) if env_var else None) or DEFAULT_CONFIG_NAME
    path = config_dir / f"{name}.yaml"
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")
    return path


def load_yaml(path: Path) -> dict:
    """Read a YAML mapping; an empty file reads as {}."""
    data = yaml.safe_load(path.read_text())
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return data


class ConfigSingleton(Generic[T]):
    """Holds one config object, built by loader on first get()."""

    def __init__(self, loader: Callable[[], T] | None = None):
        self._config: T | None = None
        self._loader = loader

    def get(self) -> T:
        if self._config is None:
            if self._loader is None:
                raise RuntimeError("No config loaded and no loader set")
            self._config = self._loader()
        return self._config

    def set(self, config: T) -> None:
        self._config = config

    def reset(self) -> None:
        self._config = None
