from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import ApiModel, UtcDateTime


class SessionCreateUpdateRequest(ApiModel):
    work_id: Optional[int] = Field(None, description="required on POST /api/sessions; taken from the path under /works/{id}")
    started_at: Optional[datetime] = Field(None, description="defaults to now")
    ended_at: Optional[datetime] = None
    minutes: Optional[int] = Field(None, ge=1, le=1_000_000)
    units_completed: Optional[int] = Field(None, ge=0, le=1_000_000)
    note: Optional[str] = Field(None, max_length=500)


class SessionResponse(ApiModel):
    id: int
    work_id: int
    started_at: Optional[UtcDateTime] = None
    ended_at: Optional[UtcDateTime] = None
    minutes: Optional[int] = None
    units_completed: Optional[int] = None
    note: Optional[str] = None
