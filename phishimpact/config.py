"""
Configuration management using pydantic-settings.
All settings loaded from environment variables (12-factor app).
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from PHISHIMPACT_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PHISHIMPACT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="info", description="Log level")
    log_format: str = Field(default="json", description="Log format (json|console)")

    # Incidence sweep
    incidence_sweep_steps: int = Field(
        default=5, ge=1, description="Number of intervals in the incidence sweep"
    )
    max_phishing_rate: float = Field(
        default=0.5, gt=0.0, le=1.0, description="Phishing rate reached by the last sweep sample"
    )

    # Cascade propagation
    cascade_max_steps: int = Field(
        default=3, ge=1, le=10, description="Max propagation steps per cascade run"
    )
    topology_path: Optional[str] = Field(
        default=None, description="Optional NetworkTopology JSON file replacing the default graph"
    )

    # Development
    dev_mode: bool = Field(default=True, description="Development mode")

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Only json and console renderers are supported."""
        v = v.lower().strip()
        if v not in ("json", "console"):
            raise ValueError("log_format must be 'json' or 'console'")
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Uses lru_cache to ensure singleton behavior.
    """
    return Settings()
