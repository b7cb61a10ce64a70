"""Direct message ("recado") model."""
from sqlalchemy import Column, Integer, DateTime, Text, ForeignKey, func

from .users import Base


class Message(Base):
    """A message left by one user for another. Never edited after insert."""
    __tablename__ = "messages"

    id = Column(Integer, primary_key=True, index=True)
    sender_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    receiver_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
