from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from emergency_fund.models.calculation import CalculationInput, CalculationResult
from emergency_fund.models.constants import QuoteName
from emergency_fund.services.calculator import calculate
from emergency_fund.services.fund_controller import FundController
from emergency_fund.services.rates.rate_provider import RateProvider
from .deps import get_controller, get_rate_provider

router = APIRouter(prefix="/fund", tags=["fund"])


class FieldEditIn(BaseModel):
    income: Optional[str] = Field(None, description="Monthly income in pesos, as typed")
    months: Optional[str] = Field(None, description="Number of months, as typed")


class QuoteSelectIn(BaseModel):
    quote: QuoteName


@router.get("", summary="Current form state")
async def get_state(controller: FundController = Depends(get_controller)):
    return controller.state()


@router.put("/input", summary="Edit income and/or months (no recalculation)")
async def edit_input(
    payload: FieldEditIn, controller: FundController = Depends(get_controller)
):
    edits = payload.model_dump(exclude_none=True)
    if not edits:
        raise HTTPException(status_code=400, detail="no fields to update")
    for name, value in edits.items():
        try:
            controller.update_field(name, value)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e)) from e
    return controller.state()


@router.put("/quote", summary="Select quote; recalculates if already calculated")
async def select_quote(
    payload: QuoteSelectIn, controller: FundController = Depends(get_controller)
):
    controller.select_quote(payload.quote)
    return controller.state()


@router.post("/calculate", summary="Explicit calculate trigger")
async def calculate_now(controller: FundController = Depends(get_controller)):
    outcome = controller.submit()
    state = controller.state()
    state["last_outcome"] = outcome.model_dump(mode="json")
    return state


@router.post("/clear", summary="Reset the form")
async def clear(controller: FundController = Depends(get_controller)):
    controller.clear()
    return controller.state()


@router.post(
    "/compute",
    response_model=CalculationResult,
    summary="Stateless calculation against the current snapshot",
)
async def compute(
    payload: CalculationInput, provider: RateProvider = Depends(get_rate_provider)
):
    return calculate(payload, provider.snapshot)
