from datetime import date

from mediagraph.common.settings import APIConfig, Settings, get_settings


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    cfg = Settings(_env_file=None)
    assert cfg.app_name == "mediagraph"
    assert cfg.api.prefix == "/api"
    assert cfg.catalog.popular_default_limit == 10
    assert cfg.catalog.synopsis_max_length == 200
    assert cfg.catalog.earliest_release_date == date(1895, 12, 28)


def test_settings_read_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    cfg = Settings(_env_file=None)
    assert cfg.app_env == "production"
    assert cfg.is_development is False
    assert cfg.log_level == "DEBUG"


def test_api_config_splits_csv():
    api = APIConfig(cors_allow_origins="http://a, http://b", cors_allow_methods="GET,PUT")
    assert api.cors_allow_origins == ["http://a", "http://b"]
    assert api.cors_allow_methods == ["GET", "PUT"]


def test_get_settings_is_cached():
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
