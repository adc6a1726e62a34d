from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    # DB URL (env: DATABASE_URL)
    database_url: Optional[str] = Field(
        default="sqlite:///./shelflife.db",
        validation_alias="DATABASE_URL",
    )
    environment: str = Field(default="local")
    sql_echo: bool = Field(default=False)

    # token signing
    secret_key: str = Field(default="CHANGE_ME_SECRET")
    access_token_exp_minutes: int = Field(default=1440)  # 24h
    jwt_algorithm: str = Field(default="HS256")

    log_level: str = Field(default="INFO")

    # CORS
    cors_origins: str = Field(default="*")  # comma separated list for production

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
