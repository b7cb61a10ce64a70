"""Community and community topic endpoints."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from dependencies import get_current_user_id, get_db
from schemas import (
    CommunityCreate, CommunityCreatedResponse, CommunityListResponse,
    TopicCreate, TopicCreatedResponse, TopicListResponse
)
from services.communities import CommunityService
from services.topics import TopicService

router = APIRouter()


@router.get("", response_model=CommunityListResponse)
def list_communities(
    current_user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> dict:
    """List communities with member and topic counts."""
    return {"communities": CommunityService.list_communities(db)}


@router.post("", response_model=CommunityCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_community(
    community: CommunityCreate,
    current_user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> dict:
    """Create a community; the caller becomes its first member."""
    created = CommunityService.create_community(db, current_user_id, community)
    return {"message": "Comunidade criada com sucesso", "community": created}


@router.get("/{community_id}/topics", response_model=TopicListResponse)
def list_topics(
    community_id: int,
    current_user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> dict:
    return {"topics": TopicService.list_topics(db, community_id)}


@router.post("/{community_id}/topics", response_model=TopicCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_topic(
    community_id: int,
    topic: TopicCreate,
    current_user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> dict:
    created = TopicService.create_topic(db, community_id, current_user_id, topic)
    return {"message": "Tópico criado com sucesso", "topic": created}
