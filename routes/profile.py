"""Profile endpoints."""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from dependencies import get_current_user_id, get_db
from errors import Forbidden, NotFound
from schemas import ProfileResponse, ProfileUpdate, ProfileUpdateResponse, UserProfile
from services.profiles import ProfileService
from services.validation import ensure_owner

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{user_id}", response_model=ProfileResponse)
def get_profile(
    user_id: int,
    current_user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> ProfileResponse:
    """Any authenticated user may read any profile."""
    user = ProfileService.get_profile(db, user_id)

    if not user:
        raise NotFound("Usuário não encontrado")

    return ProfileResponse(user=UserProfile.model_validate(user))


@router.put("/{user_id}", response_model=ProfileUpdateResponse)
def update_profile(
    user_id: int,
    profile_update: ProfileUpdate,
    current_user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> ProfileUpdateResponse:
    """Overwrite the caller's own bio and avatar."""
    try:
        ensure_owner(current_user_id, user_id)
    except Forbidden:
        logger.warning(f"User {current_user_id} tried to edit profile {user_id}")
        raise

    user = ProfileService.update_profile(db, user_id, profile_update)

    if not user:
        raise NotFound("Usuário não encontrado")

    return ProfileUpdateResponse(
        message="Perfil atualizado com sucesso",
        user=UserProfile.model_validate(user),
    )
