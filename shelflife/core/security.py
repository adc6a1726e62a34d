from datetime import datetime, timedelta, timezone
import uuid
from typing import Any, Dict
from jose import jwt, JWTError
from passlib.context import CryptContext

from .config import get_settings
from .errors import Unauthenticated

# Use pbkdf2_sha256 to avoid native bcrypt backend issues and keep portability
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

ACCESS_TOKEN_TYPE = "access"


def hash_password(raw: str) -> str:
    return pwd_context.hash(raw)


def verify_password(raw: str, hashed: str) -> bool:
    try:
        return pwd_context.verify(raw, hashed)
    except ValueError:
        # unrecognized or corrupt hash
        return False


def _create_token(subject: str, expires_delta: timedelta, token_type: str) -> str:
    settings = get_settings()
    now = datetime.now(timezone.utc)
    to_encode: Dict[str, Any] = {
        "sub": subject,
        "iat": int(now.timestamp()),
        "exp": int((now + expires_delta).timestamp()),
        "type": token_type,
        # ensure uniqueness even within the same second
        "jti": uuid.uuid4().hex,
    }
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.jwt_algorithm)


def create_access_token(user_id: int) -> str:
    settings = get_settings()
    return _create_token(str(user_id), timedelta(minutes=settings.access_token_exp_minutes), ACCESS_TOKEN_TYPE)


def decode_token(token: str, expected_type: str = ACCESS_TOKEN_TYPE) -> Dict[str, Any]:
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        raise Unauthenticated("Token invalid or expired")
    if payload.get("type") != expected_type:
        raise Unauthenticated("Invalid token type")
    return payload


def user_id_from_token(token: str) -> int:
    payload = decode_token(token)
    try:
        return int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        raise Unauthenticated("Invalid token")
