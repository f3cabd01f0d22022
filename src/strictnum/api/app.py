"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from strictnum.api.routes import health, numbers
from strictnum.core.config import AppSettings
from strictnum.core.exceptions import NumberFormatError
from strictnum.core.logging import configure_logging
from strictnum.models.numbers import NumberErrorResponse
from strictnum.services.format_number import NumberFormatter
from strictnum.services.txt import create_text_service

logger = logging.getLogger(__name__)


async def number_format_error_handler(request: Request, exc: NumberFormatError) -> JSONResponse:
    """Return rejected numbers as 422 with the stable kind and localized message."""
    logger.info(
        "Number rejected",
        extra={"context": {"path": request.url.path, "kind": exc.kind.value, "key": exc.key}},
    )
    body = NumberErrorResponse(error=exc.kind.value, key=exc.key, message=exc.message)
    return JSONResponse(status_code=422, content=body.model_dump())


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Initialize and tear down application resources."""
        resolved = settings if settings is not None else AppSettings()
        configure_logging(resolved.log)
        text = create_text_service(resolved)
        app.state.settings = resolved
        app.state.text = text
        app.state.formatter = NumberFormatter(text)
        yield

    app = FastAPI(
        title="strictnum",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.add_exception_handler(NumberFormatError, number_format_error_handler)
    app.include_router(health.router)
    app.include_router(numbers.router, prefix="/numbers")
    return app
