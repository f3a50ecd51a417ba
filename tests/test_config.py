import pytest

from app.config import DEFAULT_REGION, get_app_config


def test_defaults(monkeypatch, fresh_config):
    for name in ("SERVICE_REGION", "SERVER_HOST", "SERVER_PORT"):
        monkeypatch.delenv(name, raising=False)

    config = get_app_config()

    assert config.region == DEFAULT_REGION == "ap-northeast-1"
    assert config.host == "0.0.0.0"
    assert config.port == 8123


def test_config_is_cached(fresh_config):
    assert get_app_config() is get_app_config()


def test_environment_overrides(monkeypatch, fresh_config):
    monkeypatch.setenv("SERVICE_REGION", "  us-west-2 ")
    monkeypatch.setenv("SERVER_HOST", "127.0.0.1")
    monkeypatch.setenv("SERVER_PORT", "9000")

    config = get_app_config()

    assert config.region == "us-west-2"
    assert config.host == "127.0.0.1"
    assert config.port == 9000


def test_blank_region_falls_back_to_default(monkeypatch, fresh_config):
    monkeypatch.setenv("SERVICE_REGION", "   ")
    assert get_app_config().region == DEFAULT_REGION


def test_invalid_port_raises(monkeypatch, fresh_config):
    monkeypatch.setenv("SERVER_PORT", "not-a-port")
    with pytest.raises(ValueError):
        get_app_config()
