"""Forum topic model."""
from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey, func

from .users import Base


class Topic(Base):
    """A forum topic inside a community."""
    __tablename__ = "topics"

    id = Column(Integer, primary_key=True, index=True)
    community_id = Column(Integer, ForeignKey("communities.id"), nullable=False, index=True)
    author_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
