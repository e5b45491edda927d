import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import get_settings, Settings
from .core.logging import init_logging, request_context_middleware
from .core import errors
from .routers import health, rates, fund, ui
from .services.fund_controller import FundController
from .services.rates.base import QuoteSource
from .services.rates.providers import DolarApiQuoteSource
from .services.rates.rate_provider import RateProvider

logger = logging.getLogger("emergency_fund")


def create_app(
    settings_override: Settings | None = None,
    quote_source: QuoteSource | None = None,
) -> FastAPI:
    """Application factory.

    settings_override: pass an already constructed Settings instance for tests
    to isolate environment. Falls back to cached get_settings().
    quote_source: replaces the live dolarapi.com source (tests inject fakes).
    """
    settings = settings_override or get_settings()
    # Initialize logging early
    init_logging(debug=settings.debug)

    source = quote_source or DolarApiQuoteSource.from_settings(settings)
    rate_provider = RateProvider(source)
    controller = FundController(rate_provider)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        task = None
        if settings.fetch_rates_on_startup:
            # Fire-and-forget: the form is usable with zero rates meanwhile
            task = asyncio.create_task(rate_provider.load())
        yield
        if task is not None and not task.done():
            await task

    app = FastAPI(
        title=settings.app_name,
        debug=settings.debug,
        version=settings.version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.rate_provider = rate_provider
    app.state.controller = controller

    # Middleware (request id / structured logging)
    app.middleware("http")(request_context_middleware)

    # Error handlers
    app.add_exception_handler(StarletteHTTPException, errors.http_error_handler)
    app.add_exception_handler(RequestValidationError, errors.validation_error_handler)
    app.add_exception_handler(Exception, errors.server_error_handler)

    # Routers
    app.include_router(health.router)
    app.include_router(rates.router)
    app.include_router(fund.router)
    app.include_router(ui.router)

    @app.get("/")
    async def root():
        return {"message": settings.app_name, "version": settings.version}

    logger.debug("application created")
    return app


app = create_app()
