from __future__ import annotations

"""Session state for the emergency fund form.

The controller owns the input record, the result currently on display and
the `calculated` flag. Rates are read from the RateProvider handle at the
moment a calculation runs. Observers are notified after every mutation.
"""
import logging
from typing import Callable, List

from emergency_fund.models.calculation import CalculationInput, CalculationResult
from emergency_fund.models.constants import QuoteName
from emergency_fund.models.rates import RateSnapshot
from emergency_fund.services.rates.rate_provider import RateProvider
from .calculator import calculate

logger = logging.getLogger("emergency_fund.controller")

Observer = Callable[["FundController"], None]

EDITABLE_FIELDS = ("income", "months")


class FundController:
    def __init__(self, rate_provider: RateProvider):
        self._rates = rate_provider
        self.inputs = CalculationInput()
        self.result = CalculationResult.not_ready()
        self.calculated = False
        self._observers: List[Observer] = []

    # Observers ------------------------------------------------
    def subscribe(self, callback: Observer) -> None:
        if callback not in self._observers:
            self._observers.append(callback)

    def unsubscribe(self, callback: Observer) -> None:
        if callback in self._observers:
            self._observers.remove(callback)

    def _notify(self) -> None:
        for cb in list(self._observers):
            cb(self)

    # Queries --------------------------------------------------
    @property
    def snapshot(self) -> RateSnapshot:
        return self._rates.snapshot

    @property
    def can_submit(self) -> bool:
        return bool(self.inputs.income) and bool(self.inputs.months)

    def summary_message(self) -> str:
        if not self.calculated or not self.result.is_ready:
            return ""
        return (
            f"Necesitás ahorrar ${self.result.emergency_fund_text} para tener "
            f"un fondo de emergencia de {self.inputs.months} meses."
        )

    # Mutations ------------------------------------------------
    def update_field(self, name: str, value: str) -> None:
        """Record a keystroke-level edit; numeric edits never recalculate."""
        if name not in EDITABLE_FIELDS:
            raise ValueError(f"unknown field '{name}'")
        self.inputs = self.inputs.model_copy(update={name: value})
        self._notify()

    def select_quote(self, quote: QuoteName | str) -> CalculationResult:
        quote = QuoteName(quote)
        self.inputs = self.inputs.model_copy(update={"quote": quote})
        if self.calculated:
            return self.submit()
        self._notify()
        return self.result

    def submit(self) -> CalculationResult:
        """Explicit trigger (Calculate button or Enter on a field).

        A not-ready outcome leaves the displayed result untouched.
        """
        outcome = calculate(self.inputs, self._rates.snapshot)
        if outcome.is_ready:
            self.result = outcome
            self.calculated = True
            logger.debug(
                "calculated quote=%s rate=%s fund=%s",
                self.inputs.quote.value,
                outcome.rate,
                outcome.emergency_fund_text,
                extra={"quote": self.inputs.quote.value, "rate": outcome.rate},
            )
        else:
            logger.debug(
                "calculation not ready: %s",
                outcome.reason,
                extra={"quote": self.inputs.quote.value, "reason": outcome.reason},
            )
        self._notify()
        return outcome

    def clear(self) -> None:
        self.inputs = CalculationInput()
        self.result = CalculationResult.not_ready()
        self.calculated = False
        self._notify()

    def state(self) -> dict:
        return {
            "input": self.inputs.model_dump(mode="json"),
            "result": self.result.model_dump(mode="json"),
            "display": {
                "quote_label": self.inputs.quote_label,
                "converted_income": self.result.converted_income_text,
                "emergency_fund": self.result.emergency_fund_text,
            },
            "calculated": self.calculated,
            "can_submit": self.can_submit,
            "message": self.summary_message(),
        }

