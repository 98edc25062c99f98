"""Configuration tests."""

import pytest

from pagecraft.core import Settings, get_settings


@pytest.mark.unit
def test_settings_defaults(monkeypatch):
    """Test default settings load correctly."""
    monkeypatch.delenv("PAGECRAFT_LOG_LEVEL", raising=False)
    settings = Settings()

    assert settings.document_key == "web-editor-components"
    assert settings.templates_key == "web-editor-templates"
    assert settings.default_output_type == "tailwind"
    assert settings.history_limit == 0
    assert settings.json_indent == 2
    assert settings.log_level == "INFO"
    assert settings.enable_cache is True


@pytest.mark.unit
def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("PAGECRAFT_HISTORY_LIMIT", "50")
    monkeypatch.setenv("PAGECRAFT_DEFAULT_OUTPUT_TYPE", "css-classes")

    settings = Settings()
    assert settings.history_limit == 50
    assert settings.default_output_type == "css-classes"


@pytest.mark.unit
def test_settings_validation():
    """Test settings validation."""
    with pytest.raises(Exception):
        Settings(history_limit=-1)

    with pytest.raises(Exception):
        Settings(cache_size=0)

    with pytest.raises(Exception):
        Settings(json_indent=20)


@pytest.mark.unit
def test_get_settings_cached():
    assert get_settings() is get_settings()
