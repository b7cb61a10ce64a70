"""Pydantic schemas for communities."""
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .common import CamelModel


class CommunityCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=2000)


class CommunityResponse(CamelModel):
    """A community with its creator's username and derived counts."""
    id: int
    name: str
    description: Optional[str] = None
    created_by: int
    created_at: datetime
    creator_username: Optional[str] = None
    member_count: int = 0
    topic_count: int = 0


class CommunityListResponse(CamelModel):
    communities: List[CommunityResponse]


class CommunityCreatedResponse(CamelModel):
    message: str
    community: CommunityResponse
