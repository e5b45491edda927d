import asyncio
import os

import pytest
from fastapi.testclient import TestClient

# Importing emergency_fund.main builds a module-level app; keep it offline.
os.environ.setdefault("FETCH_RATES_ON_STARTUP", "false")

from emergency_fund.core.config import Settings  # noqa: E402
from emergency_fund.main import create_app  # noqa: E402
from emergency_fund.models.constants import QuoteName  # noqa: E402
from emergency_fund.services.rates.base import QuoteSource, RateFetchError  # noqa: E402


class FakeQuoteSource(QuoteSource):
    """Serves fixed sell prices; quotes listed in `failing` raise."""

    def __init__(self, prices=None, failing=()):
        self.prices = dict(prices or {})
        self.failing = set(failing)
        self.calls = []

    def get_sell_price(self, quote: QuoteName) -> float:
        self.calls.append(quote)
        if quote in self.failing:
            raise RateFetchError(f"{quote.value}: boom")
        return self.prices[quote]


LIVE_LIKE_PRICES = {
    QuoteName.BLUE: 1200.0,
    QuoteName.OFFICIAL: 1000.0,
    QuoteName.MEP: 500.0,
}


@pytest.fixture
def fake_source():
    return FakeQuoteSource(LIVE_LIKE_PRICES)


@pytest.fixture
def settings():
    return Settings(debug=False, fetch_rates_on_startup=False, _env_file=None)


@pytest.fixture
def client(settings, fake_source):
    app = create_app(settings_override=settings, quote_source=fake_source)
    assert asyncio.run(app.state.rate_provider.load())
    with TestClient(app) as c:
        yield c


@pytest.fixture
def cold_client(settings, fake_source):
    """Client whose rates were never fetched (all zero)."""
    app = create_app(settings_override=settings, quote_source=fake_source)
    with TestClient(app) as c:
        yield c
