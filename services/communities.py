"""Community service: listing with derived counts and transactional creation."""
from typing import List, Optional
import logging

from sqlalchemy import desc, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.communities import Community, CommunityMember
from models.topics import Topic
from models.users import User
from schemas.communities import CommunityCreate

logger = logging.getLogger(__name__)


def _communities_query(db: Session):
    member_count = select(func.count(CommunityMember.user_id)).where(
        CommunityMember.community_id == Community.id
    ).correlate(Community).scalar_subquery()

    topic_count = select(func.count(Topic.id)).where(
        Topic.community_id == Community.id
    ).correlate(Community).scalar_subquery()

    return db.query(
        Community,
        User.username.label("creator_username"),
        member_count.label("member_count"),
        topic_count.label("topic_count"),
    ).outerjoin(User, Community.created_by == User.id)


def _community_row(community: Community, creator_username: Optional[str], member_count: int, topic_count: int) -> dict:
    return {
        "id": community.id,
        "name": community.name,
        "description": community.description,
        "created_by": community.created_by,
        "created_at": community.created_at,
        "creator_username": creator_username,
        "member_count": member_count or 0,
        "topic_count": topic_count or 0,
    }


class CommunityService:
    """Service class for community operations."""

    @staticmethod
    def exists(db: Session, community_id: int) -> bool:
        return db.query(Community.id).filter(Community.id == community_id).first() is not None

    @staticmethod
    def get_community(db: Session, community_id: int) -> Optional[dict]:
        row = _communities_query(db).filter(Community.id == community_id).first()
        if row is None:
            return None
        return _community_row(*row)

    @staticmethod
    def list_communities(db: Session) -> List[dict]:
        """All communities, newest first, with member and topic counts."""
        rows = _communities_query(db).order_by(
            desc(Community.created_at), desc(Community.id)
        ).all()
        return [_community_row(*row) for row in rows]

    @staticmethod
    def create_community(db: Session, user_id: int, community_data: CommunityCreate) -> dict:
        """
        Create a community and join its creator to it.

        Both inserts commit together or not at all.
        """
        db_community = Community(
            name=community_data.name,
            description=community_data.description,
            created_by=user_id,
        )

        try:
            db.add(db_community)
            db.flush()
            db.add(CommunityMember(community_id=db_community.id, user_id=user_id))
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.error(f"Community creation by user {user_id} rolled back")
            raise

        logger.info(f"Community {db_community.id} created by user {user_id}")
        return CommunityService.get_community(db, db_community.id)
