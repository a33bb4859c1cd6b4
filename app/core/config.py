"""
Application configuration using Pydantic settings
"""

from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables"""

    # Application
    PROJECT_NAME: str = "Key Catalog Admin"
    VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    API_V1_STR: str = "/api/v1"
    DEBUG: bool = True
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    WORKERS: int = 1
    SENTRY_DSN: Optional[str] = None
    BACKEND_CORS_ORIGINS: List[str] = ["*"]

    # MongoDB
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "keycatalog"
    mongodb_server_selection_timeout_ms: int = 5000

    # S3 uploads
    aws_region: str = "ap-southeast-2"
    aws_access_key_id: Optional[str] = None
    aws_secret_access_key: Optional[str] = None
    aws_s3_bucket: Optional[str] = None
    upload_max_size_mb: int = 5
    upload_expires_seconds: int = 3600  # 1 hour
    upload_default_folder: str = "logos"

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
