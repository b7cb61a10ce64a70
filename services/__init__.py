from .security import PasswordHasher, TokenService
from .auth import AuthService
from .profiles import ProfileService
from .messages import MessageService
from .communities import CommunityService
from .topics import TopicService, ReplyService

__all__ = ["PasswordHasher", "TokenService", "AuthService", "ProfileService",
           "MessageService", "CommunityService", "TopicService", "ReplyService"]
