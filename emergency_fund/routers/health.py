from fastapi import APIRouter, Depends

from emergency_fund.services.rates.rate_provider import RateProvider
from .deps import get_rate_provider

router = APIRouter(tags=["health"])


@router.get("/health", summary="Liveness probe")
async def health(provider: RateProvider = Depends(get_rate_provider)):
    return {"status": "ok", "rates_loaded": provider.loaded}
