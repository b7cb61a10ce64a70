"""User model for authentication and profiles."""
from sqlalchemy import Column, Integer, String, Date, DateTime, Text, Index, func
from sqlalchemy.ext.declarative import declarative_base

Base = declarative_base()


class User(Base):
    """
    SQLAlchemy model for users.

    Stores identity, credentials (bcrypt hash only) and the editable
    profile fields (bio and avatar).
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    username = Column(String(50), unique=True, nullable=False, index=True)
    birth_date = Column(Date, nullable=False)
    password = Column(String(255), nullable=False)
    bio = Column(Text, nullable=True)
    avatar_url = Column(String(500), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # usernames keep the casing they were typed with but are unique ignoring it
    __table_args__ = (
        Index("uq_users_username_lower", func.lower(username), unique=True),
    )
