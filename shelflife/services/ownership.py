from typing import Optional, Type, TypeVar

from sqlalchemy.orm import Session

from ..core.errors import NotFound
from ..models import User

T = TypeVar("T")

# widest INTEGER primary key any supported backend stores
MAX_ID = 2**63 - 1


def storable_id(entity_id: Optional[int]) -> bool:
    return entity_id is not None and 1 <= entity_id <= MAX_ID


def find_owned(db: Session, model: Type[T], user_id: int, entity_id: Optional[int], label: str) -> T:
    """Load ``model`` by id, but only if it belongs to ``user_id``.

    A missing row and a row owned by someone else raise the same NotFound,
    so callers can't discover ids that exist. Ids no row could ever have
    are missing too, and never reach the driver.
    """
    row = db.get(model, entity_id) if storable_id(entity_id) else None
    if row is None or row.user_id != user_id:
        raise NotFound(f"{label} not found")
    return row


def require_user(db: Session, user_id: int) -> User:
    user = db.get(User, user_id) if storable_id(user_id) else None
    if user is None:
        raise NotFound("User not found")
    return user
