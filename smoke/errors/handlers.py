"""
Exception handlers for the smoke test.

This module defines handlers that turn application exceptions into
consistent error responses for the HTTP app, and into a single diagnostic
line for the command line.
"""

import json
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .exceptions import BaseAppException, ConfigurationError

logger = logging.getLogger(__name__)


def render_cli_error(exc: BaseAppException) -> str:
    """
    Format an application exception as the last line printed before exit.

    Configuration errors name the missing settings; backend errors carry the
    error payload returned by the client.
    """
    if isinstance(exc, ConfigurationError):
        missing = exc.details.get("missing")
        if missing:
            return f"{exc.message} (missing: {', '.join(missing)})"
        if exc.details:
            return f"{exc.message}: {json.dumps(exc.details, default=str)}"
        return exc.message
    return f"{exc.message}: {json.dumps(exc.details, default=str)}"


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application
    """

    @app.exception_handler(BaseAppException)
    async def handle_base_app_exception(
        request: Request, exc: BaseAppException
    ) -> JSONResponse:
        """Handle BaseAppException and its subclasses."""
        logger.error(
            f"{request.method} {request.url.path} failed: {render_cli_error(exc)}"
        )

        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": True,
                "message": exc.message,
                "details": exc.details,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unhandled_exception(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle all unhandled exceptions."""
        logger.exception(f"{request.method} {request.url.path} failed unexpectedly")

        return JSONResponse(
            status_code=500,
            content={
                "error": True,
                "message": "Internal server error",
                "details": {"type": str(type(exc).__name__), "info": str(exc)},
            },
        )
