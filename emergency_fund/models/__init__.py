"""Pydantic domain models for the emergency fund calculator."""

from .constants import (
    QuoteName,
    DEFAULT_QUOTE,
    QUOTE_LABELS,
    QUOTE_SLUGS,
    QUOTE_ORDER,
)  # re-export
from .rates import DolarQuote, RateSnapshot
from .calculation import CalculationInput, CalculationResult

__all__ = [
    "QuoteName",
    "DEFAULT_QUOTE",
    "QUOTE_LABELS",
    "QUOTE_SLUGS",
    "QUOTE_ORDER",
    "DolarQuote",
    "RateSnapshot",
    "CalculationInput",
    "CalculationResult",
]
