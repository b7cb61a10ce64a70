"""Topic and reply services for community forums."""
from typing import List, Optional
import logging

from sqlalchemy import asc, desc, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from errors import NotFound
from models.replies import Reply
from models.topics import Topic
from models.users import User
from schemas.topics import TopicCreate
from services.communities import CommunityService

logger = logging.getLogger(__name__)


def _topics_query(db: Session):
    reply_count = select(func.count(Reply.id)).where(
        Reply.topic_id == Topic.id
    ).correlate(Topic).scalar_subquery()

    return db.query(Topic, User, reply_count.label("reply_count")).join(
        User, Topic.author_id == User.id
    )


def _topic_row(topic: Topic, author: Optional[User], reply_count: int) -> dict:
    return {
        "id": topic.id,
        "community_id": topic.community_id,
        "author_id": topic.author_id,
        "title": topic.title,
        "content": topic.content,
        "created_at": topic.created_at,
        "author_username": author.username if author else None,
        "author_avatar": author.avatar_url if author else None,
        "reply_count": reply_count or 0,
    }


def _reply_row(reply: Reply, author: Optional[User]) -> dict:
    return {
        "id": reply.id,
        "topic_id": reply.topic_id,
        "author_id": reply.author_id,
        "content": reply.content,
        "created_at": reply.created_at,
        "author_username": author.username if author else None,
        "author_avatar": author.avatar_url if author else None,
    }


def _commit(db: Session) -> None:
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise


class TopicService:
    """Service class for forum topics."""

    @staticmethod
    def list_topics(db: Session, community_id: int) -> List[dict]:
        """Topics of a community, newest first, with reply counts."""
        rows = _topics_query(db).filter(
            Topic.community_id == community_id
        ).order_by(
            desc(Topic.created_at), desc(Topic.id)
        ).all()
        return [_topic_row(*row) for row in rows]

    @staticmethod
    def create_topic(db: Session, community_id: int, author_id: int, topic_data: TopicCreate) -> dict:
        if not CommunityService.exists(db, community_id):
            raise NotFound("Comunidade não encontrada")

        db_topic = Topic(
            community_id=community_id,
            author_id=author_id,
            title=topic_data.title,
            content=topic_data.content,
        )
        db.add(db_topic)
        _commit(db)
        db.refresh(db_topic)

        author = db.query(User).filter(User.id == author_id).first()
        logger.info(f"Topic {db_topic.id} created in community {community_id}")
        return _topic_row(db_topic, author, 0)


class ReplyService:
    """Service class for topic replies."""

    @staticmethod
    def list_replies(db: Session, topic_id: int) -> List[dict]:
        """Replies to a topic, oldest first."""
        rows = db.query(Reply, User).join(
            User, Reply.author_id == User.id
        ).filter(
            Reply.topic_id == topic_id
        ).order_by(
            asc(Reply.created_at), asc(Reply.id)
        ).all()
        return [_reply_row(reply, author) for reply, author in rows]

    @staticmethod
    def create_reply(db: Session, topic_id: int, author_id: int, content: str) -> dict:
        topic = db.query(Topic.id).filter(Topic.id == topic_id).first()
        if topic is None:
            raise NotFound("Tópico não encontrado")

        db_reply = Reply(topic_id=topic_id, author_id=author_id, content=content)
        db.add(db_reply)
        _commit(db)
        db.refresh(db_reply)

        author = db.query(User).filter(User.id == author_id).first()
        logger.info(f"Reply {db_reply.id} added to topic {topic_id}")
        return _reply_row(db_reply, author)
