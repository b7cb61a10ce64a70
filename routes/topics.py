"""Topic reply endpoints."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from dependencies import get_current_user_id, get_db
from schemas import ReplyCreate, ReplyCreatedResponse, ReplyListResponse
from services.topics import ReplyService

router = APIRouter()


@router.get("/{topic_id}/replies", response_model=ReplyListResponse)
def list_replies(
    topic_id: int,
    current_user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> dict:
    """Replies to a topic, oldest first."""
    return {"replies": ReplyService.list_replies(db, topic_id)}


@router.post("/{topic_id}/replies", response_model=ReplyCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_reply(
    topic_id: int,
    reply: ReplyCreate,
    current_user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> dict:
    created = ReplyService.create_reply(db, topic_id, current_user_id, reply.content)
    return {"message": "Resposta enviada com sucesso", "reply": created}
