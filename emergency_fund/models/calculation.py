from __future__ import annotations
from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict
from .constants import QuoteName, DEFAULT_QUOTE, QUOTE_LABELS
from emergency_fund.services.money import format2

NotReadyReason = Literal["invalid_input", "rate_unavailable"]


class CalculationInput(BaseModel):
    """Form fields as typed by the user; numbers stay text until calculation."""

    income: str = ""
    months: str = ""
    quote: QuoteName = DEFAULT_QUOTE

    @property
    def quote_label(self) -> str:
        return QUOTE_LABELS[self.quote]


class CalculationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_ready: bool
    converted_income: Optional[float] = None
    emergency_fund: Optional[float] = None
    rate: Optional[float] = None
    quote: Optional[QuoteName] = None
    reason: Optional[NotReadyReason] = None

    @classmethod
    def not_ready(cls, reason: Optional[NotReadyReason] = None) -> "CalculationResult":
        return cls(is_ready=False, reason=reason)

    @property
    def converted_income_text(self) -> str:
        if not self.is_ready or self.converted_income is None:
            return ""
        return format2(self.converted_income)

    @property
    def emergency_fund_text(self) -> str:
        if not self.is_ready or self.emergency_fund is None:
            return ""
        return format2(self.emergency_fund)
