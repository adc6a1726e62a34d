from typing import Optional

from pydantic import EmailStr, Field, field_validator

from .base import ApiModel, UtcDateTime


class UserRegistrationRequest(ApiModel):
    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=8)
    display_name: Optional[str] = Field(None, max_length=100)

    @field_validator("username", mode="before")
    @classmethod
    def trim_username(cls, v):
        # length limits apply to what gets stored
        return v.strip() if isinstance(v, str) else v

    @field_validator("password")
    @classmethod
    def password_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("password must not be blank")
        return v


class UserProfile(ApiModel):
    id: int
    username: str
    email: str
    display_name: Optional[str] = None
    created_at: Optional[UtcDateTime] = None


class UserUpdateRequest(ApiModel):
    # blank resets to the username
    display_name: Optional[str] = Field(None, max_length=100)
