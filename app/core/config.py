"""Configuration management for the Loyalty Maturity Quiz service."""

from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file (only if accessible)
try:
    load_dotenv()
except (PermissionError, OSError):
    # In sandboxed environments, .env might not be accessible
    # Environment variables should be set directly
    pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Environment
    QUIZ_ENV: Literal["dev", "test", "staging", "prod"] = Field(
        default="dev", description="Environment: dev, test, staging, prod"
    )

    # HTTP surface
    APP_TITLE: str = Field(
        default="Loyalty Program Maturity Quiz", description="Title shown in the OpenAPI docs"
    )
    API_PREFIX: str = Field(default="/api", description="Prefix for the quiz routes")

    # Reports
    REPORT_FILENAME_PREFIX: str = Field(
        default="loyalty-assessment-report",
        description="Prefix of the exported plain-text report file name",
    )

    # Terminal client
    CLI_API_TIMEOUT_SECONDS: float = Field(
        default=10.0, gt=0, description="HTTP timeout used by the terminal client"
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance

    Raises:
        ValidationError: If an environment variable has an invalid value
    """
    return Settings()
