from .auth import RegisterRequest, LoginRequest, UserPublic, UserProfile, AuthResponse, TokenPayload
from .profile import ProfileUpdate, ProfileResponse, ProfileUpdateResponse
from .messages import MessageCreate, MessageResponse, MessageListResponse, MessageCreatedResponse
from .communities import CommunityCreate, CommunityResponse, CommunityListResponse, CommunityCreatedResponse
from .topics import (
    TopicCreate, TopicResponse, TopicListResponse, TopicCreatedResponse,
    ReplyCreate, ReplyResponse, ReplyListResponse, ReplyCreatedResponse
)

__all__ = ["RegisterRequest", "LoginRequest", "UserPublic", "UserProfile", "AuthResponse", "TokenPayload",
           "ProfileUpdate", "ProfileResponse", "ProfileUpdateResponse",
           "MessageCreate", "MessageResponse", "MessageListResponse", "MessageCreatedResponse",
           "CommunityCreate", "CommunityResponse", "CommunityListResponse", "CommunityCreatedResponse",
           "TopicCreate", "TopicResponse", "TopicListResponse", "TopicCreatedResponse",
           "ReplyCreate", "ReplyResponse", "ReplyListResponse", "ReplyCreatedResponse"]
