import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..core.errors import Conflict, ValidationFailed
from ..core.utils import utcnow
from ..database import transaction
from ..models import Review
from ..schemas.review import ReviewResponse, ReviewUpsertRequest
from .ownership import find_owned, require_user
from .works import find_owned_work

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5


def list_reviews(db: Session, user_id: int) -> List[ReviewResponse]:
    rows = (
        db.query(Review)
        .filter(Review.user_id == user_id)
        .order_by(Review.updated_at.desc(), Review.id.desc())
        .all()
    )
    return [ReviewResponse.model_validate(r) for r in rows]


def get_review(db: Session, user_id: int, review_id: int) -> ReviewResponse:
    return ReviewResponse.model_validate(find_owned(db, Review, user_id, review_id, "Review"))


def get_review_for_work(db: Session, user_id: int, work_id: int) -> Optional[ReviewResponse]:
    """The caller's review of a work, or None when there isn't one yet.

    The work itself must belong to the caller; otherwise NotFound.
    """
    find_owned_work(db, user_id, work_id)
    rv = (
        db.query(Review)
        .filter(Review.user_id == user_id, Review.work_id == work_id)
        .first()
    )
    if rv is None:
        return None
    return ReviewResponse.model_validate(rv)


def upsert_review(db: Session, user_id: int, data: ReviewUpsertRequest) -> ReviewResponse:
    """Create the (user, work) review, or overwrite it if it exists."""
    if data.rating is None or not MIN_RATING <= data.rating <= MAX_RATING:
        raise ValidationFailed("Rating must be between 1 and 5", {"rating": "must be between 1 and 5"})

    try:
        with transaction(db):
            require_user(db, user_id)
            work = find_owned_work(db, user_id, data.work_id)
            now = utcnow()
            rv = (
                db.query(Review)
                .filter(Review.user_id == user_id, Review.work_id == work.id)
                .first()
            )
            if rv is None:
                rv = Review(user_id=user_id, work_id=work.id, created_at=now)
                db.add(rv)
            rv.rating = data.rating
            rv.title = data.title
            rv.body = data.body
            rv.is_private = bool(data.is_private)
            rv.updated_at = now
    except IntegrityError:
        # a concurrent upsert created the row first
        raise Conflict("Review was modified concurrently, retry")
    db.refresh(rv)
    return ReviewResponse.model_validate(rv)


def delete_review(db: Session, user_id: int, review_id: int) -> None:
    with transaction(db):
        rv = find_owned(db, Review, user_id, review_id, "Review")
        db.delete(rv)
    logger.info("Review deleted: %s for user %s", review_id, user_id)
