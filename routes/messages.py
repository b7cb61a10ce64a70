"""Direct message endpoints."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from dependencies import get_current_user_id, get_db
from schemas import MessageCreate, MessageCreatedResponse, MessageListResponse
from services.messages import MessageService

router = APIRouter()


@router.get("/{user_id}", response_model=MessageListResponse)
def list_messages(
    user_id: int,
    current_user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> dict:
    """Messages received by ``user_id``, newest first."""
    return {"messages": MessageService.list_received(db, user_id)}


@router.post("", response_model=MessageCreatedResponse, status_code=status.HTTP_201_CREATED)
def send_message(
    message: MessageCreate,
    current_user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> dict:
    """Send a message from the caller to ``receiverId``."""
    created = MessageService.send(
        db=db,
        sender_id=current_user_id,
        receiver_id=message.receiver_id,
        content=message.content,
    )
    return {"message": created}
