from __future__ import annotations

from fastapi import APIRouter, Depends

from emergency_fund.services.rates.rate_provider import RateProvider
from .deps import get_rate_provider

"""Rates router: read-only view of the published snapshot.

The snapshot is fetched once at startup; there is no refresh endpoint.
"""

router = APIRouter(prefix="/rates", tags=["rates"])


@router.get("", summary="Current exchange rate snapshot")
async def get_rates(provider: RateProvider = Depends(get_rate_provider)):
    return {
        "loaded": provider.loaded,
        "last_error": provider.last_error,
        "quotes": provider.snapshot.as_dict(),
    }
