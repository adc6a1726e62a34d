from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ..core.auth import get_current_user_id
from ..database import get_db
from ..schemas.review import ReviewResponse
from ..services import reviews as review_service

router = APIRouter(prefix="/api/reviews", tags=["reviews"])


@router.get("", response_model=List[ReviewResponse])
def list_reviews(
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    return review_service.list_reviews(db, user_id)


@router.get("/{review_id}", response_model=ReviewResponse)
def get_review(
    review_id: int,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    return review_service.get_review(db, user_id, review_id)


@router.delete("/{review_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_review(
    review_id: int,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    review_service.delete_review(db, user_id, review_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
