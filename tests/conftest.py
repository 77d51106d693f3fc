import pytest


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("JSON_LOGS", "false")
    monkeypatch.setenv("CLI_INDENT", "2")

    from decimal_matcher.shared.config import get_settings

    get_settings.cache_clear()
