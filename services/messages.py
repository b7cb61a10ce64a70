"""Message service for direct messages between users."""
from typing import List, Optional
import logging

from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from errors import NotFound
from models.messages import Message
from models.users import User

logger = logging.getLogger(__name__)


def _message_row(message: Message, sender: Optional[User]) -> dict:
    return {
        "id": message.id,
        "sender_id": message.sender_id,
        "receiver_id": message.receiver_id,
        "content": message.content,
        "created_at": message.created_at,
        "sender_first_name": sender.first_name if sender else None,
        "sender_last_name": sender.last_name if sender else None,
        "sender_username": sender.username if sender else None,
        "sender_avatar": sender.avatar_url if sender else None,
    }


class MessageService:
    """Service class for message operations."""

    @staticmethod
    def list_received(db: Session, user_id: int) -> List[dict]:
        """Messages received by a user, newest first."""
        rows = db.query(Message, User).join(
            User, Message.sender_id == User.id
        ).filter(
            Message.receiver_id == user_id
        ).order_by(
            desc(Message.created_at), desc(Message.id)
        ).all()

        return [_message_row(message, sender) for message, sender in rows]

    @staticmethod
    def send(db: Session, sender_id: int, receiver_id: int, content: str) -> dict:
        """Store a message from ``sender_id`` to ``receiver_id``."""
        receiver = db.query(User).filter(User.id == receiver_id).first()
        if not receiver:
            raise NotFound("Usuário não encontrado")

        db_message = Message(
            sender_id=sender_id,
            receiver_id=receiver_id,
            content=content,
        )

        db.add(db_message)
        try:
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise
        db.refresh(db_message)

        sender = db.query(User).filter(User.id == sender_id).first()
        logger.info(f"Message {db_message.id} sent from {sender_id} to {receiver_id}")
        return _message_row(db_message, sender)
