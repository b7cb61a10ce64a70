"""Authentication schemas for requests and responses."""
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from .common import CamelModel


class RegisterRequest(CamelModel):
    """Schema for account registration."""
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    username: str = Field(..., min_length=3, max_length=50)
    birth_date: date
    password: str = Field(..., min_length=6, max_length=128)


class LoginRequest(CamelModel):
    """Schema for login. The email is not format-checked so every failure looks the same."""
    email: str
    password: str


class UserPublic(CamelModel):
    """Public projection of a user returned with a token."""
    id: int
    first_name: str
    last_name: str
    email: str
    username: str
    created_at: Optional[datetime] = None


class UserProfile(UserPublic):
    """Public projection of a user including profile fields."""
    birth_date: date
    bio: Optional[str] = None
    avatar_url: Optional[str] = None


class AuthResponse(CamelModel):
    message: str
    token: str
    user: UserPublic


class TokenPayload(BaseModel):
    """Schema for JWT token payload."""
    sub: str  # subject (user id)
    exp: int  # expiration time
    iat: int  # issued at
    type: str  # token type
