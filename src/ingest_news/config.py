"""Configuration loader for news ingestion and the API."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from common.config import ConfigSingleton, find_config_path, load_yaml

CONFIG_ENV_VAR = "NEWS_INGEST_CONFIG"
CONFIG_DIR = Path(os.environ.get("NEWS_INGEST_CONFIG_DIR", Path(__file__).resolve().parents[2] / "configs"))


@dataclass
class ProviderConfig:
    api_url: str = "https://map.juniormininghub.com/api/newsArticlesAll"
    base_url: str = "https://map.juniormininghub.com"
    request_timeout: int = 30

    def logo_url(self, company_id) -> str:
        return f"{self.base_url.rstrip('/')}/company_logo/{company_id}"


@dataclass
class PaginationConfig:
    max_pages: int = 500


@dataclass
class StorageConfig:
    backend: str = "postgres"  # "postgres" or "memory"


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8000


@dataclass
class Config:
    provider: ProviderConfig = field(default_factory=ProviderConfig)
    pagination: PaginationConfig = field(default_factory=PaginationConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    server: ServerConfig = field(default_factory=ServerConfig)


def load_config(config_name: str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        config_name: Name of config file (without .yaml extension).
                    If None, uses NEWS_INGEST_CONFIG env var or "prod".

    Returns:
        Loaded Config object
    """
    config_path = find_config_path(CONFIG_DIR, config_name, env_var=CONFIG_ENV_VAR)
    return _parse_config(load_yaml(config_path))


def _parse_config(data: dict) -> Config:
    """Parse config dictionary into Config object."""
    defaults = ProviderConfig()
    provider_raw = data.get("provider", {})
    provider = ProviderConfig(
        api_url=provider_raw.get("api_url", defaults.api_url),
        base_url=provider_raw.get("base_url", defaults.base_url),
        request_timeout=int(provider_raw.get("request_timeout", defaults.request_timeout)),
    )

    max_pages = int(data.get("pagination", {}).get("max_pages", 500))
    if max_pages < 1:
        raise ValueError(f"pagination.max_pages must be >= 1, got {max_pages}")

    backend = data.get("storage", {}).get("backend", "postgres")
    if backend not in ("postgres", "memory"):
        raise ValueError(f"Unknown storage backend: {backend}")

    server = ServerConfig(
        host=data.get("server", {}).get("host", "0.0.0.0"),
        port=int(data.get("server", {}).get("port", 8000)),
    )

    return Config(
        provider=provider,
        pagination=PaginationConfig(max_pages=max_pages),
        storage=StorageConfig(backend=backend),
        server=server,
    )


# Global config instance (loaded on first access)
_manager: ConfigSingleton[Config] = ConfigSingleton(load_config)
get_config = _manager.get
set_config = _manager.set
reset_config = _manager.reset
