"""
Configuration Module

Centralized configuration for the university records package using Pydantic Settings.
Supports environment variables (``UNIVERSITY_`` prefix), .env files, and runtime overrides.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application-wide configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="UNIVERSITY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = Field(default=False, description="Enable debug mode")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_format: Literal["json", "text"] = "text"
    error_log_path: str = Field(
        default="errors.log",
        description="Append-only error log, relative to the working directory",
    )

    # Academic rules
    course_max_students: int = Field(default=30, ge=1, description="Roster capacity per course")
    default_pass_grade: float = Field(default=50.0, ge=0.0, le=100.0)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Application settings singleton
    """
    return Settings()


# Convenience exports
settings = get_settings()
