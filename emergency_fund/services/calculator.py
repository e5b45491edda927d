from __future__ import annotations

"""Emergency fund calculation.

Pure functions: the same input and snapshot always give the same result.
Invalid numbers and missing rates are reported through a not-ready result,
never raised.
"""
import math
from typing import Optional

from emergency_fund.models.calculation import CalculationInput, CalculationResult
from emergency_fund.models.rates import RateSnapshot
from .money import round2, MAX_ROUNDABLE


def parse_number(text: Optional[str]) -> Optional[float]:
    if text is None:
        return None
    text = text.strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def calculate(inputs: CalculationInput, rates: RateSnapshot) -> CalculationResult:
    income = parse_number(inputs.income)
    months = parse_number(inputs.months)
    if income is None or months is None:
        return CalculationResult.not_ready("invalid_input")

    rate = rates.rate_for(inputs.quote)
    if not rate > 0:
        return CalculationResult.not_ready("rate_unavailable")

    converted = income / rate
    fund = converted * months
    # Amounts past MAX_ROUNDABLE cannot be quantized to cents
    if not (abs(converted) < MAX_ROUNDABLE and abs(fund) < MAX_ROUNDABLE):
        return CalculationResult.not_ready("invalid_input")
    return CalculationResult(
        is_ready=True,
        converted_income=round2(converted),
        emergency_fund=round2(fund),
        rate=rate,
        quote=inputs.quote,
    )
