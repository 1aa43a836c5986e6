"""Tests for ingest_news.config module."""

from unittest.mock import patch

import pytest

from ingest_news.config import (
    Config,
    ProviderConfig,
    _parse_config,
    get_config,
    load_config,
    reset_config,
    set_config,
)


class TestParseConfig:
    def test_empty_uses_defaults(self) -> None:
        config = _parse_config({})
        assert config.provider.api_url == "https://map.juniormininghub.com/api/newsArticlesAll"
        assert config.provider.base_url == "https://map.juniormininghub.com"
        assert config.pagination.max_pages == 500
        assert config.storage.backend == "postgres"
        assert config.server.port == 8000

    def test_overrides(self) -> None:
        config = _parse_config({
            "provider": {"api_url": "https://p.test/api", "base_url": "https://p.test", "request_timeout": 5},
            "pagination": {"max_pages": 10},
            "storage": {"backend": "memory"},
            "server": {"host": "127.0.0.1", "port": 9000},
        })
        assert config.provider.api_url == "https://p.test/api"
        assert config.provider.request_timeout == 5
        assert config.pagination.max_pages == 10
        assert config.storage.backend == "memory"
        assert config.server.host == "127.0.0.1"
        assert config.server.port == 9000

    def test_unknown_backend_raises(self) -> None:
        with pytest.raises(ValueError):
            _parse_config({"storage": {"backend": "mongo"}})

    def test_non_positive_max_pages_raises(self) -> None:
        with pytest.raises(ValueError):
            _parse_config({"pagination": {"max_pages": 0}})


class TestProviderConfig:
    def test_logo_url(self) -> None:
        provider = ProviderConfig(base_url="https://p.test/")
        assert provider.logo_url(42) == "https://p.test/company_logo/42"


class TestLoadConfig:
    def test_loads_from_config_dir(self, tmp_path) -> None:
        (tmp_path / "unit.yaml").write_text("storage:\n  backend: memory\n")
        with patch("ingest_news.config.CONFIG_DIR", tmp_path):
            config = load_config("unit")
        assert config.storage.backend == "memory"

    def test_env_var_selects_config(self, tmp_path, monkeypatch) -> None:
        (tmp_path / "from_env.yaml").write_text("pagination:\n  max_pages: 7\n")
        monkeypatch.setenv("NEWS_INGEST_CONFIG", "from_env")
        with patch("ingest_news.config.CONFIG_DIR", tmp_path):
            config = load_config()
        assert config.pagination.max_pages == 7

    def test_shipped_configs_parse(self) -> None:
        assert load_config("prod").storage.backend == "postgres"
        assert load_config("local").storage.backend == "memory"


class TestGlobalConfig:
    def test_set_get_reset(self) -> None:
        config = Config()
        set_config(config)
        try:
            assert get_config() is config
        finally:
            reset_config()
