import pytest
from pydantic import ValidationError

from emergency_fund.core.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("FETCH_RATES_ON_STARTUP", raising=False)
    s = Settings(_env_file=None)
    assert s.quote_url("bolsa") == "https://dolarapi.com/v1/dolares/bolsa"
    assert s.http_timeout_seconds == 5.0
    assert s.fetch_rates_on_startup is True


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("QUOTES_API_BASE_URL", "http://localhost:8080/dolares")
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "1.5")
    monkeypatch.setenv("FETCH_RATES_ON_STARTUP", "false")
    s = Settings(_env_file=None)
    assert s.quote_url("blue") == "http://localhost:8080/dolares/blue"
    assert s.http_timeout_seconds == 1.5
    assert s.fetch_rates_on_startup is False


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(http_timeout_seconds=0, _env_file=None)
