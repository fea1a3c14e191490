"""Unit tests for configuration."""

from src.config import Settings


def test_default_settings(monkeypatch):
    """Test that default settings are loaded correctly."""
    monkeypatch.delenv("UV_FILTER_CATALOG_PATH", raising=False)
    settings = Settings(_env_file=None)

    assert settings.app_name == "SunscreenSanitizer"
    assert settings.debug is False
    assert settings.log_level == "INFO"
    assert settings.uv_filter_catalog_path is None
    assert settings.sunscreens_data_path == "data/sunscreens.json"


def test_custom_settings(monkeypatch):
    """Test that custom settings can be loaded from environment."""
    monkeypatch.setenv("APP_NAME", "TestApp")
    monkeypatch.setenv("DEBUG", "True")
    monkeypatch.setenv("UV_FILTER_CATALOG_PATH", "/tmp/filters.yaml")

    settings = Settings()

    assert settings.app_name == "TestApp"
    assert settings.debug is True
    assert settings.uv_filter_catalog_path == "/tmp/filters.yaml"
