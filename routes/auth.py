"""Registration and login endpoints."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from dependencies import get_auth_service, get_db
from schemas import AuthResponse, LoginRequest, RegisterRequest, UserPublic
from services.auth import AuthService

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: RegisterRequest,
    db: Session = Depends(get_db),
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Register a new user and return a token for it."""
    user, token = auth_service.register(db, user_data)

    return AuthResponse(
        message="Usuário criado com sucesso",
        token=token,
        user=UserPublic.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db),
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Login with email and password."""
    user, token = auth_service.authenticate(db, credentials.email, credentials.password)

    return AuthResponse(
        message="Login realizado com sucesso",
        token=token,
        user=UserPublic.model_validate(user),
    )
