from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from ..database import get_db
from ..services.auth import resolve_token
from .errors import Unauthenticated

# auto_error=False: a missing header must answer 401, not HTTPBearer's 403
bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> int:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise Unauthenticated("Missing or invalid Authorization header")
    return resolve_token(db, credentials.credentials)
