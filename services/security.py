"""Password hashing and JWT token handling."""
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import ValidationError as PayloadError

from errors import InvalidToken
from schemas.auth import TokenPayload

BCRYPT_ROUNDS = 10
ACCESS_TOKEN_TYPE = "access"


class PasswordHasher:
    """Salted bcrypt hashing with a fixed work factor."""

    def __init__(self, rounds: int = BCRYPT_ROUNDS):
        self.pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        """Hash a password."""
        return self.pwd_context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash. Unreadable hashes never match."""
        try:
            return self.pwd_context.verify(plain_password, hashed_password)
        except (ValueError, TypeError):
            return False

    def dummy_verify(self) -> None:
        """Spend the time of a real verification when there is no hash to check."""
        self.pwd_context.dummy_verify()


class TokenService:
    """Issues and verifies signed, time-limited bearer tokens."""

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_hours: int = 24):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_delta = timedelta(hours=expire_hours)

    def issue(self, user_id: int, expires_delta: Optional[timedelta] = None) -> str:
        """Create a JWT access token for ``user_id``."""
        now = datetime.now(timezone.utc)
        to_encode = {
            "sub": str(user_id),
            "exp": now + (expires_delta if expires_delta is not None else self.expire_delta),
            "iat": now,
            "type": ACCESS_TOKEN_TYPE,
        }
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> int:
        """
        Decode and validate a token, returning the user id it was issued for.

        Raises ``InvalidToken`` for a bad signature, a malformed or expired
        token, or claims that do not describe an access token.
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
            token_payload = TokenPayload(**payload)
        except (JWTError, PayloadError) as e:
            raise InvalidToken(str(e)) from e

        if token_payload.type != ACCESS_TOKEN_TYPE:
            raise InvalidToken("not an access token")

        try:
            return int(token_payload.sub)
        except ValueError as e:
            raise InvalidToken("subject is not a user id") from e
