from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from ..core.auth import get_current_user_id
from ..database import get_db
from ..schemas.session import SessionCreateUpdateRequest, SessionResponse
from ..services import sessions as session_service

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


@router.get("", response_model=List[SessionResponse], summary="My sessions, newest first")
def list_sessions(
    work_id: Optional[int] = Query(None, alias="workId"),
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    return session_service.list_sessions(db, user_id, work_id=work_id)


@router.post("", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
def create_session(
    payload: SessionCreateUpdateRequest,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    return session_service.create_session(db, user_id, payload)


@router.get("/{session_id}", response_model=SessionResponse)
def get_session(
    session_id: int,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    return session_service.get_session(db, user_id, session_id)


@router.put("/{session_id}", response_model=SessionResponse)
def update_session(
    session_id: int,
    payload: SessionCreateUpdateRequest,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    return session_service.update_session(db, user_id, session_id, payload)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_session(
    session_id: int,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    session_service.delete_session(db, user_id, session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
