from functools import lru_cache
from typing import List, Literal

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SECRET_KEY = "change-me-in-production-use-env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Tareas API"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"
    log_level: str = "INFO"

    # HTTP
    api_prefix: str = ""
    host: str = "0.0.0.0"
    port: int = 3000

    # MongoDB
    mongodb_uri: str = "mongodb://localhost:27017/"
    mongodb_db: str = "todo_db"
    mongodb_timeout_ms: int = 5000

    # JWT
    secret_key: str = DEFAULT_SECRET_KEY
    algorithm: str = "HS256"
    access_token_expire_days: int = 7

    # Passwords
    bcrypt_rounds: int = 12
    password_reset_expire_hours: int = 24
    reset_token_length: int = 32

    # Frontend
    cors_origins: List[str] = ["*"]
    frontend_url: str = "http://localhost:3000"

    # Email
    smtp_host: str = ""
    smtp_port: int = 587
    smtp_user: str = ""
    smtp_password: str = ""
    smtp_from: str = "noreply@example.com"
    smtp_use_tls: bool = True
    password_reset_link_path: str = "/reset-password"

    @model_validator(mode="after")
    def _check_secret_key(self) -> "Settings":
        if self.environment == "production" and self.secret_key == DEFAULT_SECRET_KEY:
            raise ValueError("SECRET_KEY must be set in production")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
