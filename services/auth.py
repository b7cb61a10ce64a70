"""Authentication service for registration and login."""
from datetime import date
from typing import Optional, Tuple
import logging

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from errors import Conflict, InvalidCredentials
from models.users import User
from schemas.auth import RegisterRequest
from services.security import PasswordHasher, TokenService
from services.validation import ensure_minimum_age

logger = logging.getLogger(__name__)


class AuthService:
    """Service class for authentication operations."""

    def __init__(self, hasher: PasswordHasher, tokens: TokenService):
        self.hasher = hasher
        self.tokens = tokens

    @staticmethod
    def get_user_by_email(db: Session, email: str) -> Optional[User]:
        """Get a user by email, ignoring case."""
        return db.query(User).filter(func.lower(User.email) == email.lower()).first()

    @staticmethod
    def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
        """Get a user by ID."""
        return db.query(User).filter(User.id == user_id).first()

    @staticmethod
    def find_conflicting_user(db: Session, email: str, username: str) -> Optional[User]:
        """Get a user already holding this email or username, ignoring case."""
        return db.query(User).filter(
            or_(
                func.lower(User.email) == email.lower(),
                func.lower(User.username) == username.lower(),
            )
        ).first()

    def register(self, db: Session, user_data: RegisterRequest, today: Optional[date] = None) -> Tuple[User, str]:
        """Create a new user and issue its first token."""
        if self.find_conflicting_user(db, user_data.email, user_data.username):
            logger.info("Registration rejected: email or username already in use")
            raise Conflict()

        ensure_minimum_age(user_data.birth_date, today)

        db_user = User(
            first_name=user_data.first_name,
            last_name=user_data.last_name,
            email=user_data.email.lower(),
            username=user_data.username,
            birth_date=user_data.birth_date,
            password=self.hasher.hash(user_data.password),
        )

        db.add(db_user)
        try:
            db.commit()
        except IntegrityError:
            # lost a race against a concurrent registration
            db.rollback()
            logger.info("Registration rejected by unique constraint")
            raise Conflict()
        except SQLAlchemyError:
            db.rollback()
            raise
        db.refresh(db_user)

        token = self.tokens.issue(db_user.id)
        logger.info(f"Registered user {db_user.username} ({db_user.id})")
        return db_user, token

    def authenticate(self, db: Session, email: str, password: str) -> Tuple[User, str]:
        """
        Check an email/password pair and issue a token.

        Unknown email and wrong password raise the same ``InvalidCredentials``
        so callers cannot tell which accounts exist.
        """
        user = self.get_user_by_email(db, email)
        if user is None:
            self.hasher.dummy_verify()
            logger.info("Login failed")
            raise InvalidCredentials()
        if not self.hasher.verify(password, user.password):
            logger.info("Login failed")
            raise InvalidCredentials()

        token = self.tokens.issue(user.id)
        logger.info(f"Login: {user.username} ({user.id})")
        return user, token
