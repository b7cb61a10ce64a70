"""API error taxonomy and the handlers that render it as JSON."""
import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

class ApiError(HTTPException):
    """Base for errors with a fixed status and a user-facing message."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Erro interno do servidor"

    def __init__(self, message: Optional[str] = None):
        super().__init__(status_code=self.status_code, detail=message or self.message)


class ValidationError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Dados inválidos"


class Conflict(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "E-mail ou nome de usuário já está em uso"


class InvalidCredentials(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Credenciais inválidas"


class Unauthenticated(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Token de acesso necessário"


class Forbidden(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Acesso negado"


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Recurso não encontrado"


class InternalError(ApiError):
    """Unexpected or database failure; the body never carries details."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Erro interno do servidor"


class InvalidToken(Exception):
    """Raised by the token service; the auth guard turns it into ``Forbidden``."""


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Schema failures at the boundary become a 400 with per-field details."""
    details = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
            "message": error.get("msg", ""),
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": ValidationError.message, "details": details},
    )


async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=InternalError.status_code,
        content={"error": InternalError.message},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=InternalError.status_code,
        content={"error": InternalError.message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
