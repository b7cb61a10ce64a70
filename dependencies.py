"""
FastAPI dependencies shared across routes.

Everything here reads from ``app.state``, which the app factory fills
with the settings, database, token service and auth service for the process.
"""
from typing import Generator, Optional

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from errors import Forbidden, InvalidToken, Unauthenticated
from services.auth import AuthService
from services.security import TokenService
from settings import Settings


def get_db(request: Request) -> Generator[Session, None, None]:
    """Database session dependency."""
    yield from request.app.state.database.get_db()


def get_settings_dep(request: Request) -> Settings:
    return request.app.state.settings


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_current_user_id(
    authorization: Optional[str] = Header(None, alias="Authorization"),
    tokens: TokenService = Depends(get_token_service),
) -> int:
    """
    Auth guard for protected routes.

    The token is whatever follows the scheme in the ``Authorization``
    header. No token gives 401; a token that fails verification gives 403,
    whatever the scheme. Returns the authenticated user id without touching
    the database.
    """
    _, _, token = (authorization or "").strip().partition(" ")
    token = token.strip()
    if not token:
        raise Unauthenticated()

    try:
        return tokens.verify(token)
    except InvalidToken:
        raise Forbidden("Token inválido")
