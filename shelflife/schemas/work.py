from datetime import date
from typing import Optional

from pydantic import Field, field_validator

from ..models import WorkStatus, WorkType
from .base import ApiModel, UtcDateTime


class WorkCreateUpdateRequest(ApiModel):
    """Body of POST /api/works and PUT /api/works/{id}. PUT replaces every field."""

    title: str = Field(..., min_length=1, max_length=255)
    type: Optional[WorkType] = Field(None, description="defaults to BOOK")
    creator: Optional[str] = Field(None, max_length=255)
    genre: Optional[str] = Field(None, max_length=100)
    status: Optional[WorkStatus] = Field(None, description="defaults to TO_EXPLORE")
    total_units: Optional[int] = Field(None, ge=1, le=1_000_000, description="pages / episodes / chapters")
    cover_url: Optional[str] = Field(None, max_length=500)
    started_at: Optional[date] = None
    finished_at: Optional[date] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("title must not be blank")
        return v.strip()

    @field_validator("started_at", "finished_at")
    @classmethod
    def not_in_future(cls, v: Optional[date]) -> Optional[date]:
        if v is not None and v > date.today():
            raise ValueError("date must be in the past or present")
        return v


class WorkSummary(ApiModel):
    """Shelf / list view."""

    id: int
    title: str
    creator: Optional[str] = None
    type: WorkType
    genre: Optional[str] = None
    status: WorkStatus
    cover_url: Optional[str] = None


class WorkDetail(ApiModel):
    id: int
    title: str
    type: WorkType
    creator: Optional[str] = None
    genre: Optional[str] = None
    status: WorkStatus
    total_units: Optional[int] = None
    cover_url: Optional[str] = None
    started_at: Optional[date] = None
    finished_at: Optional[date] = None
    created_at: Optional[UtcDateTime] = None
    updated_at: Optional[UtcDateTime] = None
