from __future__ import annotations

"""Rate provider: scatter-gather the three quotes, publish one snapshot.

Design:
    - Each quote lookup is a blocking call on the injected QuoteSource; the
      three run concurrently in worker threads and are always joined, so a
      slow failure never leaves a lookup racing a later publish.
    - Results are collected in a local dict. Only when all three succeeded is
      a new RateSnapshot built and assigned to `_snapshot` in one statement,
      so readers see either the old snapshot or the new one, never a mix.
    - No retries, no periodic refresh. `load()` is the fire-and-forget entry
      point used at startup; it logs failures instead of raising them.
"""
import asyncio
import logging
from typing import Dict, List, Optional

from emergency_fund.models.constants import QuoteName
from emergency_fund.models.rates import RateSnapshot
from .base import QuoteSource, RateFetchError

logger = logging.getLogger("emergency_fund.rates")


class RateProvider:
    def __init__(self, source: QuoteSource):
        self._source = source
        self._snapshot = RateSnapshot()
        self._loaded = False
        self._last_error: Optional[str] = None

    @property
    def snapshot(self) -> RateSnapshot:
        return self._snapshot

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def last_error(self) -> Optional[str]:
        return self._last_error

    async def _fetch_one(self, quote: QuoteName) -> float:
        return await asyncio.to_thread(self._source.get_sell_price, quote)

    async def fetch_rates(self) -> RateSnapshot:
        quotes = list(QuoteName)
        outcomes = await asyncio.gather(
            *(self._fetch_one(q) for q in quotes), return_exceptions=True
        )
        prices: Dict[QuoteName, float] = {}
        failures: List[str] = []
        for quote, outcome in zip(quotes, outcomes):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                failures.append(f"{quote.value}: {outcome}")
            else:
                prices[quote] = outcome
        if failures:
            raise RateFetchError("; ".join(failures))
        try:
            snapshot = RateSnapshot.from_prices(prices)
        except ValueError as e:
            raise RateFetchError(str(e)) from e
        self._snapshot = snapshot
        self._loaded = True
        self._last_error = None
        return snapshot

    async def load(self) -> bool:
        try:
            snapshot = await self.fetch_rates()
        except RateFetchError as e:
            self._last_error = str(e)
            logger.warning(
                "rate fetch failed, keeping previous snapshot: %s", e, exc_info=e
            )
            return False
        logger.info(
            "rates loaded blue=%s oficial=%s mep=%s",
            snapshot.blue,
            snapshot.oficial,
            snapshot.mep,
        )
        return True
