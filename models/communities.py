"""Community and membership models."""
from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey, func

from .users import Base


class Community(Base):
    """
    SQLAlchemy model for communities.

    Member and topic counts are computed at query time, never stored.
    """
    __tablename__ = "communities"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class CommunityMember(Base):
    __tablename__ = "community_members"

    community_id = Column(Integer, ForeignKey("communities.id"), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), primary_key=True)
    joined_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
