from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Sweet Shop API"
    API_PREFIX: str = "/api"
    VERSION: str = "1.0.0"

    # Server
    ENVIRONMENT: str = "development"
    PORT: int = 5000
    ALLOWED_ORIGINS: str = "*"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None
    LOG_FILE: str = "backend.log"

    # Image uploads
    UPLOAD_DIR: str = "uploads"  # Directory for storing uploaded images
    UPLOAD_URL_PREFIX: str = "/uploads"
    MAX_UPLOAD_SIZE: int = 5 * 1024 * 1024  # 5MB max image size
    UPLOAD_PLACEHOLDER_NAME: str = "file"
    PLACEHOLDER_IMAGE_URL: str = "https://via.placeholder.com/300x200?text=Sweet+Image"
    PUBLIC_BASE_URL: Optional[str] = Field(default=None)

    @field_validator("PORT")
    @classmethod
    def _check_port(cls, value: int) -> int:
        if value < 1 or value > 65535:
            raise ValueError(f"Invalid PORT: {value}. Must be between 1-65535")
        return value

    @field_validator("UPLOAD_URL_PREFIX")
    @classmethod
    def _check_url_prefix(cls, value: str) -> str:
        value = "/" + value.strip("/")
        if value == "/":
            raise ValueError("UPLOAD_URL_PREFIX must not be the site root")
        return value

    @field_validator("MAX_UPLOAD_SIZE")
    @classmethod
    def _check_upload_size(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("MAX_UPLOAD_SIZE must be positive")
        return value

    # Load backend-local .env regardless of current working directory.
    # Ignore unrelated env vars (e.g. VITE_*) so frontend settings don't crash the backend.
    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).resolve().parents[2] / ".env"),
        case_sensitive=True,
        extra="ignore",
    )

settings = Settings()
