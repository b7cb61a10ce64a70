"""Pydantic schemas for direct messages."""
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .common import CamelModel


class MessageCreate(CamelModel):
    receiver_id: int
    content: str = Field(..., min_length=1, max_length=5000)


class MessageResponse(CamelModel):
    """A message with the sender's display fields."""
    id: int
    sender_id: int
    receiver_id: int
    content: str
    created_at: datetime
    sender_first_name: Optional[str] = None
    sender_last_name: Optional[str] = None
    sender_username: Optional[str] = None
    sender_avatar: Optional[str] = None


class MessageListResponse(CamelModel):
    messages: List[MessageResponse]


class MessageCreatedResponse(CamelModel):
    message: MessageResponse
