from __future__ import annotations

"""Concrete quote source backed by the public dolarapi.com service."""
import logging
from typing import Callable

from pydantic import ValidationError

from emergency_fund.core.config import Settings
from emergency_fund.models.constants import QuoteName, QUOTE_SLUGS
from emergency_fund.models.rates import DolarQuote
from emergency_fund.services.http_client import HttpError
from emergency_fund.services import http_client
from .base import QuoteSource, RateFetchError

logger = logging.getLogger("emergency_fund.rates.source")


class DolarApiQuoteSource(QuoteSource):
    def __init__(self, url_for: Callable[[str], str], timeout: float = 5.0):
        self._url_for = url_for
        self._timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "DolarApiQuoteSource":
        return cls(settings.quote_url, timeout=settings.http_timeout_seconds)

    def url(self, quote: QuoteName) -> str:
        return self._url_for(QUOTE_SLUGS[quote])

    def get_sell_price(self, quote: QuoteName) -> float:  # type: ignore[override]
        url = self.url(quote)
        logger.debug("fetching quote %s from %s", quote.value, url)
        try:
            body = http_client.get_json(url, timeout=self._timeout)
        except HttpError as e:
            raise RateFetchError(f"{quote.value}: {e}") from e
        if not isinstance(body, dict):
            raise RateFetchError(f"{quote.value}: expected JSON object from {url}")
        try:
            parsed = DolarQuote.model_validate(body)
        except ValidationError as e:
            raise RateFetchError(f"{quote.value}: unusable quote body: {e}") from e
        return parsed.venta
