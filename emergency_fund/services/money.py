"""Money / rounding helpers.

Centralized so the calculator, templates and API responses use identical
rounding semantics.
"""

from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP

# Default decimal context keeps 28 digits; two of them go to the cents
MAX_ROUNDABLE = 1e26


def round2(value: float) -> float:
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def format2(value: float) -> str:
    return f"{round2(value):.2f}"
