import logging
from typing import Optional

from sqlalchemy.orm import Session

from ..core.utils import utcnow
from ..database import transaction
from ..schemas.user import UserProfile, UserUpdateRequest
from .ownership import require_user

logger = logging.getLogger(__name__)


def normalize_identifier(value: Optional[str]) -> str:
    """Usernames and emails are compared and stored lowercase-trimmed."""
    return (value or "").strip().lower()


def to_profile(user) -> UserProfile:
    return UserProfile.model_validate(user)


def get_profile(db: Session, user_id: int) -> UserProfile:
    return to_profile(require_user(db, user_id))


def update_profile(db: Session, user_id: int, data: UserUpdateRequest) -> UserProfile:
    with transaction(db):
        user = require_user(db, user_id)
        if "display_name" in data.model_fields_set:
            name = (data.display_name or "").strip()
            user.display_name = name or user.username
            user.updated_at = utcnow()
    db.refresh(user)
    return to_profile(user)


def delete_user(db: Session, user_id: int) -> None:
    """Remove the account together with every work, session and review it owns."""
    with transaction(db):
        user = require_user(db, user_id)
        db.delete(user)
    logger.info("User deleted: %s", user_id)
