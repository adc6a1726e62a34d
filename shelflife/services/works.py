import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..core.utils import utcnow
from ..database import transaction
from ..models import Work, WorkStatus, WorkType
from ..schemas.work import WorkCreateUpdateRequest, WorkDetail, WorkSummary
from .ownership import find_owned, require_user

logger = logging.getLogger(__name__)

# shelf order: what's next, what's on the go, what's done
STATUS_RANK = {
    WorkStatus.TO_EXPLORE: 0,
    WorkStatus.IN_PROGRESS: 1,
    WorkStatus.FINISHED: 2,
}


def shelf_sort_key(work):
    return (STATUS_RANK.get(work.status, len(STATUS_RANK)), (work.title or "").lower())


def find_owned_work(db: Session, user_id: int, work_id: Optional[int]) -> Work:
    return find_owned(db, Work, user_id, work_id, "Work")


def list_works(
    db: Session,
    user_id: int,
    work_status: Optional[WorkStatus] = None,
    work_type: Optional[WorkType] = None,
) -> List[WorkSummary]:
    q = db.query(Work).filter(Work.user_id == user_id)
    if work_status is not None:
        q = q.filter(Work.status == work_status)
    if work_type is not None:
        q = q.filter(Work.type == work_type)
    # sorted() is stable, id order breaks title ties
    works = sorted(q.order_by(Work.id).all(), key=shelf_sort_key)
    return [WorkSummary.model_validate(w) for w in works]


def get_work(db: Session, user_id: int, work_id: int) -> WorkDetail:
    return WorkDetail.model_validate(find_owned_work(db, user_id, work_id))


def _apply(data: WorkCreateUpdateRequest, work: Work) -> None:
    work.title = data.title
    work.type = data.type or WorkType.BOOK
    work.creator = data.creator
    work.genre = data.genre
    work.status = data.status or WorkStatus.TO_EXPLORE
    work.total_units = data.total_units
    work.cover_url = data.cover_url
    work.started_at = data.started_at
    work.finished_at = data.finished_at


def create_work(db: Session, user_id: int, data: WorkCreateUpdateRequest) -> WorkDetail:
    with transaction(db):
        require_user(db, user_id)
        now = utcnow()
        work = Work(user_id=user_id, created_at=now, updated_at=now)
        _apply(data, work)
        db.add(work)
    db.refresh(work)
    logger.info("Work created: %s for user %s", work.id, user_id)
    return WorkDetail.model_validate(work)


def update_work(db: Session, user_id: int, work_id: int, data: WorkCreateUpdateRequest) -> WorkDetail:
    with transaction(db):
        work = find_owned_work(db, user_id, work_id)
        _apply(data, work)
        work.updated_at = utcnow()
    db.refresh(work)
    return WorkDetail.model_validate(work)


def delete_work(db: Session, user_id: int, work_id: int) -> None:
    """Delete a work; its sessions and review go with it."""
    with transaction(db):
        work = find_owned_work(db, user_id, work_id)
        db.delete(work)
    logger.info("Work deleted: %s for user %s", work_id, user_id)
