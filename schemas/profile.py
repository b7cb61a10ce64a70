"""Profile schemas."""
from typing import Optional

from pydantic import Field

from .auth import UserProfile
from .common import CamelModel


class ProfileUpdate(CamelModel):
    """Full overwrite of the editable profile fields; omitted fields become null."""
    bio: Optional[str] = Field(default=None, max_length=1000)
    avatar_url: Optional[str] = Field(default=None, max_length=500)


class ProfileResponse(CamelModel):
    user: UserProfile


class ProfileUpdateResponse(CamelModel):
    message: str
    user: UserProfile
