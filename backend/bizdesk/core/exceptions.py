"""
Application exceptions and the global exception handlers that serialize them.

Services raise the typed exceptions below; the handlers turn them into the
``{"error": {...}}`` JSON body with a status code matching their class:
validation (400), not found (404), conflict (409), infrastructure (500).
"""

import logging
import traceback
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from bizdesk.core.config import settings


logger = logging.getLogger(__name__)


class AppException(Exception):
    """Base application exception."""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: Optional[int] = None, details: Any = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ValidationError(AppException):
    """Bad input that passed schema validation but breaks a business rule."""
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppException):
    """Requested entity does not exist."""
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str, entity_id: Any):
        super().__init__(f"{entity} not found", details={"id": entity_id})
        self.entity = entity
        self.entity_id = entity_id


class ConflictError(AppException):
    """Write rejected by a uniqueness or referential constraint."""
    status_code = status.HTTP_409_CONFLICT


class InfrastructureError(AppException):
    """Database or other backing service failure."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def _driver_error_details(exc: SQLAlchemyError) -> dict:
    """Pull SQLSTATE / driver error codes out of a wrapped DBAPI error."""
    orig = getattr(exc, "orig", None)
    return {
        "driver_error": type(orig).__name__ if orig is not None else None,
        "sqlstate": getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None),
        "driver_code": getattr(orig, "sqlite_errorname", None) or (getattr(orig, "args", None) or [None])[0],
    }


def _error_body(message: str, path: str, details: Any = None, **extra: Any) -> dict:
    error = {"message": message, "details": details, "path": path}
    error.update(extra)
    return {"error": error}


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle custom application exceptions."""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        f"Application exception: {exc.message}",
        extra={
            "status_code": exc.status_code,
            "path": request.url.path,
            "details": exc.details,
        },
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.message, request.url.path, exc.details),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions."""
    logger.warning(
        f"HTTP exception: {exc.detail}",
        extra={
            "status_code": exc.status_code,
            "path": request.url.path,
        },
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.detail, request.url.path, status_code=exc.status_code),
    )


def _serialize_validation_errors(errors: list) -> list:
    """Convert validation errors to JSON-serializable format."""
    serialized = []
    for error in errors:
        serialized_error = {}
        for key, value in error.items():
            if key == "ctx" and isinstance(value, dict):
                serialized_error[key] = {
                    ctx_key: str(ctx_value) if isinstance(ctx_value, Exception) else ctx_value
                    for ctx_key, ctx_value in value.items()
                }
            elif isinstance(value, Exception):
                serialized_error[key] = str(value)
            else:
                serialized_error[key] = value
        serialized.append(serialized_error)
    return serialized


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request validation errors."""
    serialized_errors = _serialize_validation_errors(exc.errors())

    logger.warning(
        f"Validation error: {serialized_errors}",
        extra={
            "path": request.url.path,
            "errors": serialized_errors,
        },
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=_error_body("Validation error", request.url.path, serialized_errors),
    )


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Constraint violations (duplicate email, dangling foreign key) are conflicts."""
    driver_details = _driver_error_details(exc)
    logger.warning(
        "Integrity error",
        extra={"path": request.url.path, **driver_details, "statement": exc.statement},
    )

    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content=_error_body(
            "Request conflicts with existing data",
            request.url.path,
            {"sqlstate": driver_details["sqlstate"]},
        ),
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Any other database failure is an infrastructure error."""
    logger.error(
        f"Database error: {exc}",
        extra={"path": request.url.path, **_driver_error_details(exc)},
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("Database error", request.url.path),
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(
        f"Unhandled exception: {str(exc)}",
        extra={
            "path": request.url.path,
            "exception_type": type(exc).__name__,
        },
    )

    extra = {}
    if settings.is_development:
        extra["stack"] = traceback.format_exception(type(exc), exc, exc.__traceback__)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("Internal server error", request.url.path, **extra),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)
