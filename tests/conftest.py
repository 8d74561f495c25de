import pytest


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("JSON_LOGS", "false")
    monkeypatch.setenv("ENABLE_METRICS", "false")
    monkeypatch.delenv("METRICS_TEXTFILE", raising=False)
    monkeypatch.setenv("CHECK_FRACTIONS", "true")
    monkeypatch.setenv("USE_MESSAGE_KEYS", "false")
    monkeypatch.delenv("DEFAULT_MIN_VALUE", raising=False)
    monkeypatch.delenv("DEFAULT_MAX_VALUE", raising=False)
    monkeypatch.delenv("DEFAULT_MIN_DECIMAL_PLACES", raising=False)
    monkeypatch.delenv("DEFAULT_MAX_DECIMAL_PLACES", raising=False)
    monkeypatch.delenv("DEFAULT_MAX_FRACTIONAL_PLACES", raising=False)

    from decimal_validator.shared.config import get_settings

    get_settings.cache_clear()
