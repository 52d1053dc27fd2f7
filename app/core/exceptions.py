# app/core/exceptions.py
"""
Domain errors raised by the service layer.

Each error carries the HTTP status it maps to; ``register_exception_handlers``
turns them into ``{"detail": ..., "code": ...}`` responses.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class AppError(Exception):
    code = "internal_failure"
    status_code = 500
    default_detail = "Internal server error"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class InvalidCredentials(AppError):
    code = "invalid_credentials"
    status_code = 401
    default_detail = "Incorrect username or password"


class Unauthenticated(AppError):
    code = "unauthenticated"
    status_code = 401
    default_detail = "Not authenticated"


class Forbidden(AppError):
    code = "forbidden"
    status_code = 403
    default_detail = "Not allowed"


class AccountDisabled(Forbidden):
    code = "account_disabled"
    default_detail = "Account has been disabled"


class NotFound(AppError):
    code = "not_found"
    status_code = 404
    default_detail = "Not found"


class Conflict(AppError):
    code = "conflict"
    status_code = 409
    default_detail = "Conflict"


class UsernameTaken(Conflict):
    code = "username_taken"
    default_detail = "Username already exists"


class InvalidInput(AppError):
    code = "invalid_input"
    status_code = 422
    default_detail = "Invalid input"


class InternalFailure(AppError):
    pass


def _app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    headers = None
    if exc.status_code == 401:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "code": exc.code},
        headers=headers,
    )


def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=InvalidInput.status_code,
        content={"detail": jsonable_encoder(exc.errors()), "code": InvalidInput.code},
    )


def _database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return _app_error_handler(request, InternalFailure())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, _app_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, _database_error_handler)
