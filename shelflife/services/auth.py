"""Registration, login and bearer-token resolution."""
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..core.errors import Conflict, Unauthenticated, ValidationFailed
from ..core.security import create_access_token, hash_password, user_id_from_token, verify_password
from ..core.utils import utcnow
from ..database import transaction
from ..models import User
from ..schemas.auth import AuthResponse, LoginRequest
from ..schemas.user import UserProfile, UserRegistrationRequest
from .ownership import storable_id
from .users import normalize_identifier, to_profile

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8
INVALID_CREDENTIALS = "Invalid username/email or password"


def register(db: Session, data: UserRegistrationRequest) -> UserProfile:
    username = normalize_identifier(data.username)
    email = normalize_identifier(data.email)
    if not username:
        raise ValidationFailed("Username is required", {"username": "must not be blank"})
    if not email:
        raise ValidationFailed("Email is required", {"email": "must not be blank"})
    if not (data.password or "").strip():
        raise ValidationFailed("Password is required", {"password": "must not be blank"})
    if len(data.password) < MIN_PASSWORD_LENGTH:
        raise ValidationFailed(
            "Password must be at least 8 characters",
            {"password": f"must be at least {MIN_PASSWORD_LENGTH} characters"},
        )

    if db.query(User.id).filter(User.username == username).first() is not None:
        logger.info("Registration rejected, username taken: %s", username)
        raise Conflict("Username already taken")
    if db.query(User.id).filter(User.email == email).first() is not None:
        logger.info("Registration rejected, email taken: %s", email)
        raise Conflict("Email already registered")

    display_name = (data.display_name or "").strip() or username
    now = utcnow()
    user = User(
        username=username,
        email=email,
        password_hash=hash_password(data.password),
        display_name=display_name,
        created_at=now,
        updated_at=now,
    )
    try:
        with transaction(db):
            db.add(user)
    except IntegrityError:
        # lost a race with a concurrent registration
        raise Conflict("Username or email already registered")
    db.refresh(user)
    logger.info("User registered: id=%s username=%s", user.id, username)
    return to_profile(user)


def login(db: Session, data: LoginRequest) -> AuthResponse:
    identifier = normalize_identifier(data.username_or_email)
    if not identifier or not (data.password or "").strip():
        raise ValidationFailed("Username/email and password are required")

    if "@" in identifier:
        user = db.query(User).filter(User.email == identifier).first()
    else:
        user = db.query(User).filter(User.username == identifier).first()

    # same answer for unknown user and wrong password
    if not user or not verify_password(data.password, user.password_hash):
        logger.warning("Failed login for %s", identifier)
        raise Unauthenticated(INVALID_CREDENTIALS)

    return AuthResponse(token=create_access_token(user.id), profile=to_profile(user))


def resolve_token(db: Session, token: str) -> int:
    """Map a bearer token to the id of an existing user, or raise Unauthenticated."""
    if not token:
        raise Unauthenticated("Missing bearer token")
    user_id = user_id_from_token(token)
    if not storable_id(user_id) or db.get(User, user_id) is None:
        raise Unauthenticated("Invalid token")
    return user_id
