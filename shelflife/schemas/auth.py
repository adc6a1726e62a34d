from .base import ApiModel
from .user import UserProfile


class LoginRequest(ApiModel):
    # "@" means email, anything else a username
    username_or_email: str
    password: str


class AuthResponse(ApiModel):
    token: str
    token_type: str = "bearer"
    profile: UserProfile
