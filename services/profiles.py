"""Profile service for reading and editing user profiles."""
from typing import Optional
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.users import User
from schemas.profile import ProfileUpdate

logger = logging.getLogger(__name__)


class ProfileService:
    """Service class for profile operations."""

    @staticmethod
    def get_profile(db: Session, user_id: int) -> Optional[User]:
        return db.query(User).filter(User.id == user_id).first()

    @staticmethod
    def update_profile(db: Session, user_id: int, profile_update: ProfileUpdate) -> Optional[User]:
        """Overwrite bio and avatar. Every other column is left alone."""
        user = db.query(User).filter(User.id == user_id).first()

        if not user:
            return None

        user.bio = profile_update.bio
        user.avatar_url = profile_update.avatar_url

        try:
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise
        db.refresh(user)

        return user
