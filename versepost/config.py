from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, read from ``VERSEPOST_*`` variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="VERSEPOST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    mongo_uri: str = Field(default="mongodb://localhost:27017/versepost")

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=4766, ge=1, le=65535)

    # API docs
    title: str = Field(default="versepost blog api")
    description: str = Field(default="Just api description")
    version: str = Field(default="1.0")
    docs_path: str = Field(default="/docs")

    # Files
    static_dir: str = Field(default="./public")
    static_prefix: str = Field(default="/static")
    upload_dir: str = Field(default="uploads")

    default_page_size: int = Field(default=20, ge=0)

    # Logging and post operation tracing
    log_level: str = Field(default="INFO")
    trace_posts: bool = Field(default=False)
    slow_post_ms: float = Field(default=100.0, ge=0)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {sorted(valid_levels)}")
        return upper
