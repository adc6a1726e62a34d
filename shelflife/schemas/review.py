from typing import Optional

from pydantic import Field

from .base import ApiModel, UtcDateTime


class ReviewUpsertRequest(ApiModel):
    # under /works/{id}/review the path id wins
    work_id: Optional[int] = None
    rating: int = Field(..., ge=1, le=5)
    title: Optional[str] = Field(None, max_length=255)
    body: Optional[str] = None
    is_private: bool = False


class ReviewResponse(ApiModel):
    id: int
    work_id: int
    rating: int
    title: Optional[str] = None
    body: Optional[str] = None
    is_private: bool = False
    created_at: Optional[UtcDateTime] = None
    updated_at: Optional[UtcDateTime] = None
