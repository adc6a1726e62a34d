from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from ..core.auth import get_current_user_id
from ..database import get_db
from ..models import WorkStatus, WorkType
from ..schemas.review import ReviewResponse, ReviewUpsertRequest
from ..schemas.session import SessionCreateUpdateRequest, SessionResponse
from ..schemas.work import WorkCreateUpdateRequest, WorkDetail, WorkSummary
from ..services import reviews as review_service
from ..services import sessions as session_service
from ..services import works as work_service

router = APIRouter(prefix="/api/works", tags=["works"])


@router.get("", response_model=List[WorkSummary], summary="Library, shelf order")
def list_works(
    status_filter: Optional[WorkStatus] = Query(None, alias="status"),
    type_filter: Optional[WorkType] = Query(None, alias="type"),
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    return work_service.list_works(db, user_id, work_status=status_filter, work_type=type_filter)


@router.post("", response_model=WorkDetail, status_code=status.HTTP_201_CREATED)
def create_work(
    payload: WorkCreateUpdateRequest,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    return work_service.create_work(db, user_id, payload)


@router.get("/{work_id}", response_model=WorkDetail)
def get_work(
    work_id: int,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    return work_service.get_work(db, user_id, work_id)


@router.put("/{work_id}", response_model=WorkDetail)
def update_work(
    work_id: int,
    payload: WorkCreateUpdateRequest,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    return work_service.update_work(db, user_id, work_id, payload)


@router.delete("/{work_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_work(
    work_id: int,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    work_service.delete_work(db, user_id, work_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ---------- work-scoped sessions ----------


@router.get("/{work_id}/sessions", response_model=List[SessionResponse])
def list_work_sessions(
    work_id: int,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    return session_service.list_sessions(db, user_id, work_id=work_id)


@router.post("/{work_id}/sessions", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
def create_work_session(
    work_id: int,
    payload: SessionCreateUpdateRequest,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    return session_service.create_session_for_work(db, user_id, work_id, payload)


# ---------- work-scoped review ----------


@router.get(
    "/{work_id}/review",
    response_model=Optional[ReviewResponse],
    summary="My review of this work, null if none yet",
)
def get_work_review(
    work_id: int,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    return review_service.get_review_for_work(db, user_id, work_id)


@router.put("/{work_id}/review", response_model=ReviewResponse, summary="Create or replace my review")
def upsert_work_review(
    work_id: int,
    payload: ReviewUpsertRequest,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    # path and body can't point at different works
    data = payload.model_copy(update={"work_id": work_id})
    return review_service.upsert_review(db, user_id, data)
