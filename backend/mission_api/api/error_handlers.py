"""Error Handlers: global exception handlers for the Mission Control API.

Invariants:
    - ApiError → its own status with {"error": message}
    - RequestValidationError → 500 {"error": "Validation failed: ..."}, logged as invalid_input
    - HTTPException (unknown route, wrong method) → its status with {"error": detail}
    - Exception (catch-all) → 500, never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from mission_api.core.classify_error import GENERIC_INTERNAL_MESSAGE
from mission_api.core.errors import ApiError, ErrorCategory

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_api_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        """Render classified controller failures."""
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors as InvalidInput."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={
                "path": request.url.path,
                "error_code": ErrorCategory.INVALID_INPUT.value,
            },
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": build_validation_message(exc.errors())},
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": GENERIC_INTERNAL_MESSAGE},
        )


def build_validation_message(errors: list[dict]) -> str:
    """Flatten Pydantic errors into one line, e.g. "Validation failed: name: Field required"."""
    details = []
    for e in errors:
        loc = [str(part) for part in e.get("loc", ()) if part != "body"]
        field = ".".join(loc)
        details.append(f"{field}: {e['msg']}" if field else e["msg"])
    return "Validation failed: " + "; ".join(details)
