"""Pydantic schemas for forum topics and replies."""
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .common import CamelModel


class TopicCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1, max_length=10000)


class TopicResponse(CamelModel):
    id: int
    community_id: int
    author_id: int
    title: str
    content: str
    created_at: datetime
    author_username: Optional[str] = None
    author_avatar: Optional[str] = None
    reply_count: int = 0


class TopicListResponse(CamelModel):
    topics: List[TopicResponse]


class TopicCreatedResponse(CamelModel):
    message: str
    topic: TopicResponse


class ReplyCreate(CamelModel):
    content: str = Field(..., min_length=1, max_length=10000)


class ReplyResponse(CamelModel):
    id: int
    topic_id: int
    author_id: int
    content: str
    created_at: datetime
    author_username: Optional[str] = None
    author_avatar: Optional[str] = None


class ReplyListResponse(CamelModel):
    replies: List[ReplyResponse]


class ReplyCreatedResponse(CamelModel):
    message: str
    reply: ReplyResponse
