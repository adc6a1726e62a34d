from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ..core.auth import get_current_user_id
from ..database import get_db
from ..schemas.user import UserProfile, UserUpdateRequest
from ..services import users as user_service

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/me", response_model=UserProfile)
def me(
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    return user_service.get_profile(db, user_id)


@router.patch("/me", response_model=UserProfile, summary="Change display name")
def update_me(
    payload: UserUpdateRequest,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    return user_service.update_profile(db, user_id, payload)


@router.delete("/me", status_code=status.HTTP_204_NO_CONTENT, summary="Delete account and everything in it")
def delete_me(
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    user_service.delete_user(db, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
