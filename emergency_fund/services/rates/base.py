from __future__ import annotations

"""Quote source abstraction.

A source answers one blocking question: the sell price for a quote. The
RateProvider fans the three lookups out and publishes them together.
"""
from abc import ABC, abstractmethod

from emergency_fund.models.constants import QuoteName


class RateFetchError(Exception):
    """A quote could not be retrieved or its body could not be understood."""


class QuoteSource(ABC):
    @abstractmethod
    def get_sell_price(self, quote: QuoteName) -> float:
        """Return local currency per 1 unit of foreign currency for `quote`."""
        raise NotImplementedError
