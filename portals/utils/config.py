"""
Configuration settings for the portals.
"""

import os
from functools import lru_cache
from pydantic import ConfigDict
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application settings."""

    # MongoDB
    MONGODB_URL: str = os.getenv("MONGODB_URL", "mongodb://localhost:27017")
    MONGODB_SERVER_SELECTION_TIMEOUT_MS: int = int(os.getenv("MONGODB_SERVER_SELECTION_TIMEOUT_MS", "30000"))

    # Employee portal
    EMPLOYEE_DB_NAME: str = os.getenv("EMPLOYEE_DB_NAME", "employee_db")
    EMPLOYEE_COLLECTION: str = os.getenv("EMPLOYEE_COLLECTION", "employees")
    EMPLOYEE_PAGE_SIZE: int = int(os.getenv("EMPLOYEE_PAGE_SIZE", "5"))

    # Banking
    BANKING_DB_NAME: str = os.getenv("BANKING_DB_NAME", "banking_system")
    ACCOUNTS_COLLECTION: str = os.getenv("ACCOUNTS_COLLECTION", "accounts")

    # Student enrollment
    ENROLLMENT_DB_NAME: str = os.getenv("ENROLLMENT_DB_NAME", "student_enrollment")

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))
    RELOAD: bool = os.getenv("RELOAD", "False").lower() == "true"

    # Logging
    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR: str = os.getenv("LOG_DIR", "logs")

    model_config = ConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="allow"
    )

@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
