"""
Exception handlers for FastAPI applications built on backend-domain.

Domain errors are rendered with ``create_error_response`` and the status
code from the HTTP status mapper. Unexpected exceptions become a 500 whose
message is hidden in production.
"""
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
import logging

from ..config.settings import get_settings
from ..core.exceptions import BackendDomainError, create_error_response, get_http_status_code

logger = logging.getLogger(__name__)


class ExceptionHandlerRegistry:
    """Installs the domain error handlers on an application."""

    def __init__(self, is_production: bool = True):
        self.is_production = is_production

    def register_handlers(self, app: FastAPI) -> None:
        """Register exception handlers for the application.

        Args:
            app: FastAPI application instance
        """
        @app.exception_handler(BackendDomainError)
        async def domain_exception_handler(request: Request, exc: BackendDomainError):
            """Handle backend-domain exceptions."""
            status_code = get_http_status_code(exc)
            if status_code >= 500:
                logger.error(f"{exc.__class__.__name__} on {request.url.path}: {exc.message}")
            else:
                logger.info(f"{exc.__class__.__name__} on {request.url.path}: {exc.message}")
            return JSONResponse(status_code=status_code, content=create_error_response(exc))

        @app.exception_handler(Exception)
        async def general_exception_handler(request: Request, exc: Exception):
            """Handle unexpected exceptions."""
            logger.error(f"Unhandled exception: {exc}", exc_info=True)

            message = "An unexpected error occurred" if self.is_production else str(exc)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "error": {
                        "code": "INTERNAL_ERROR",
                        "message": message,
                        "details": {},
                        "type": exc.__class__.__name__,
                    }
                },
            )


def register_exception_handlers(app: FastAPI, is_production: Optional[bool] = None) -> None:
    """
    Register exception handlers for a FastAPI application.

    Args:
        app: FastAPI application instance
        is_production: Hide unexpected error messages; defaults to the
            environment in DomainSettings
    """
    if is_production is None:
        is_production = get_settings().is_production
    ExceptionHandlerRegistry(is_production).register_handlers(app)
