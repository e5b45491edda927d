import asyncio
import json
import os
import sys

"""Manual smoke check against the live quote service.

Fetches the three quotes once, then runs the 100000 pesos / 6 months example
against each of them. Needs network access; not part of the test suite.
"""


def run():
    from emergency_fund.core.config import get_settings
    from emergency_fund.models.calculation import CalculationInput
    from emergency_fund.models.constants import QuoteName
    from emergency_fund.services.calculator import calculate
    from emergency_fund.services.rates.providers import DolarApiQuoteSource
    from emergency_fund.services.rates.rate_provider import RateProvider

    settings = get_settings()
    provider = RateProvider(DolarApiQuoteSource.from_settings(settings))
    ok = asyncio.run(provider.load())
    out = {"loaded": ok, "error": provider.last_error, "quotes": provider.snapshot.as_dict()}
    out["examples"] = {
        q.value: calculate(
            CalculationInput(income="100000", months="6", quote=q), provider.snapshot
        ).model_dump(mode="json")
        for q in QuoteName
    }
    print(json.dumps(out, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    sys.path.append(os.getcwd())
    run()
