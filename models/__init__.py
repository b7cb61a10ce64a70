from .users import User, Base
from .messages import Message
from .communities import Community, CommunityMember
from .topics import Topic
from .replies import Reply

__all__ = ["User", "Message", "Community", "CommunityMember", "Topic", "Reply", "Base"]
