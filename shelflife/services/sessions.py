import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..core.errors import ValidationFailed
from ..core.utils import to_utc_naive, utcnow
from ..database import transaction
from ..models import WorkSession
from ..schemas.session import SessionCreateUpdateRequest, SessionResponse
from .ownership import find_owned, require_user
from .works import find_owned_work

logger = logging.getLogger(__name__)


def _most_recent_first(sessions):
    # newest started_at first, sessions without one at the end
    dated = [s for s in sessions if s.started_at is not None]
    undated = [s for s in sessions if s.started_at is None]
    dated.sort(key=lambda s: s.started_at, reverse=True)
    return dated + undated


def find_owned_session(db: Session, user_id: int, session_id: int) -> WorkSession:
    return find_owned(db, WorkSession, user_id, session_id, "Session")


def list_sessions(db: Session, user_id: int, work_id: Optional[int] = None) -> List[SessionResponse]:
    q = db.query(WorkSession).filter(WorkSession.user_id == user_id)
    if work_id is not None:
        work = find_owned_work(db, user_id, work_id)
        q = q.filter(WorkSession.work_id == work.id)
    sessions = _most_recent_first(q.order_by(WorkSession.id.desc()).all())
    return [SessionResponse.model_validate(s) for s in sessions]


def get_session(db: Session, user_id: int, session_id: int) -> SessionResponse:
    return SessionResponse.model_validate(find_owned_session(db, user_id, session_id))


def _apply(data: SessionCreateUpdateRequest, session: WorkSession) -> None:
    if data.started_at is not None:
        session.started_at = to_utc_naive(data.started_at)
    session.ended_at = to_utc_naive(data.ended_at)
    session.minutes = data.minutes
    session.units_completed = data.units_completed
    session.note = data.note


def create_session(db: Session, user_id: int, data: SessionCreateUpdateRequest) -> SessionResponse:
    if data.work_id is None:
        raise ValidationFailed("workId is required", {"workId": "must not be null"})
    return create_session_for_work(db, user_id, data.work_id, data)


def create_session_for_work(
    db: Session, user_id: int, work_id: int, data: SessionCreateUpdateRequest
) -> SessionResponse:
    with transaction(db):
        require_user(db, user_id)
        work = find_owned_work(db, user_id, work_id)
        now = utcnow()
        session = WorkSession(
            user_id=user_id,
            work_id=work.id,
            started_at=now,
            created_at=now,
            updated_at=now,
        )
        _apply(data, session)
        db.add(session)
    db.refresh(session)
    logger.info("Session created: %s on work %s for user %s", session.id, work_id, user_id)
    return SessionResponse.model_validate(session)


def update_session(
    db: Session, user_id: int, session_id: int, data: SessionCreateUpdateRequest
) -> SessionResponse:
    with transaction(db):
        session = find_owned_session(db, user_id, session_id)
        if data.work_id is not None and data.work_id != session.work_id:
            session.work_id = find_owned_work(db, user_id, data.work_id).id
        _apply(data, session)
        session.updated_at = utcnow()
    db.refresh(session)
    return SessionResponse.model_validate(session)


def delete_session(db: Session, user_id: int, session_id: int) -> None:
    with transaction(db):
        session = find_owned_session(db, user_id, session_id)
        db.delete(session)
    logger.info("Session deleted: %s for user %s", session_id, user_id)
