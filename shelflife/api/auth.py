from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..core.auth import get_current_user_id
from ..database import get_db
from ..schemas.auth import AuthResponse, LoginRequest
from ..schemas.user import UserProfile, UserRegistrationRequest
from ..services import auth as auth_service
from ..services import users as user_service

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=UserProfile, status_code=status.HTTP_201_CREATED)
def register(data: UserRegistrationRequest, db: Session = Depends(get_db)):
    return auth_service.register(db, data)


@router.post("/login", response_model=AuthResponse)
def login(data: LoginRequest, db: Session = Depends(get_db)):
    return auth_service.login(db, data)


@router.get("/me", response_model=UserProfile, summary="Current profile (same as /api/users/me)")
def me(
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    return user_service.get_profile(db, user_id)
