from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    timestamp: datetime
    status: int
    error: str
    message: str
    path: str
    # field -> message, validation failures only
    errors: Optional[Dict[str, str]] = None
