from __future__ import annotations
import math
from typing import Dict
from pydantic import BaseModel, ConfigDict, Field, field_validator
from .constants import QuoteName, QUOTE_LABELS


class DolarQuote(BaseModel):
    """One quote object as returned by the remote service.

    Only the sell price matters; everything else in the body is ignored.
    """

    model_config = ConfigDict(extra="ignore")

    venta: float = Field(..., ge=0)

    @field_validator("venta")
    @classmethod
    def finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("sell price must be finite")
        return v


class RateSnapshot(BaseModel):
    """Sell price (local currency per unit of foreign currency) per quote.

    Immutable: a refresh builds a new snapshot and swaps it in whole.
    """

    model_config = ConfigDict(frozen=True)

    blue: float = Field(0.0, ge=0)
    oficial: float = Field(0.0, ge=0)
    mep: float = Field(0.0, ge=0)

    @classmethod
    def from_prices(cls, prices: Dict[QuoteName, float]) -> "RateSnapshot":
        missing = [q.value for q in QuoteName if q not in prices]
        if missing:
            raise ValueError(f"snapshot missing quotes: {missing}")
        return cls(**{q.value: prices[q] for q in QuoteName})

    def rate_for(self, quote: QuoteName) -> float:
        return getattr(self, QuoteName(quote).value)

    def as_dict(self) -> Dict[str, Dict[str, str | float]]:
        return {
            q.value: {"label": QUOTE_LABELS[q], "venta": self.rate_for(q)}
            for q in QuoteName
        }
