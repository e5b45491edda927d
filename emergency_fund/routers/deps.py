from fastapi import Request

from emergency_fund.services.fund_controller import FundController
from emergency_fund.services.rates.rate_provider import RateProvider


def get_rate_provider(request: Request) -> RateProvider:
    return request.app.state.rate_provider


def get_controller(request: Request) -> FundController:
    return request.app.state.controller
