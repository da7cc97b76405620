"""FastAPI application entry point."""

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from tradedesk import __version__
from tradedesk.app_context import get_app_context
from tradedesk.config.settings import get_settings
from tradedesk.config.logging_config import setup_logging
from tradedesk.api.routers import (
    trades_router,
    portfolio_router,
    market_router,
    watchlist_router,
)
from tradedesk.core.exceptions import AppError, NotFoundError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    setup_logging()
    get_app_context().initialize()
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Local trade journal with position accounting and cached market data",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(trades_router)
app.include_router(portfolio_router)
app.include_router(market_router)
app.include_router(watchlist_router)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    """Handler for missing resources."""
    return JSONResponse(
        status_code=404,
        content={"error": exc.code, "message": exc.message},
    )


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=400,
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": __version__,
        "docs": "/docs",
    }


def run() -> None:
    """Start the API server; port comes from TRADEDESK_PORT."""
    import uvicorn

    port = int(os.environ.get("TRADEDESK_PORT", "8001"))
    uvicorn.run(app, host="127.0.0.1", port=port)
