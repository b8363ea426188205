"""Error Handlers — global exception handlers for the catalog API.

Invariants:
    - CatalogError → its http_status with {"message": ...} (plus problems)
    - RequestValidationError → 400 {"message": "malformed request"}
    - Exception (catch-all) → 500 {"message": "internal error"}, never leaks details
    - 5xx outcomes are logged at ERROR where they arise (route or session
      manager), never again here

Design Decisions:
    - Three-layer handler: domain (CatalogError), parsing (Pydantic), catch-all
    - Extracted from main.py to keep the app module wiring-only
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from album_catalog.core.errors import CatalogError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_catalog_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_catalog_error_handler(app: FastAPI) -> None:
    """Register catalog domain/infrastructure error handler."""

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        """Handle all catalog errors."""
        logger.debug(
            f"CatalogError: {exc}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
                "operation": getattr(exc, "operation", None),
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic request parsing error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle unparseable request input."""
        logger.debug(
            f"Malformed request on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "malformed request"},
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}",
            extra={"error": str(exc), "path": request.url.path},
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "internal error"},
        )
