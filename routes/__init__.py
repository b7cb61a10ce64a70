from . import auth, profile, messages, communities, topics, health

__all__ = ["auth", "profile", "messages", "communities", "topics", "health"]
