"""
Configuration settings for the trenchcalc package.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Estimating rates live on the input record (EstimatingSettings); these
    settings only control the runtime around the engine.

    Attributes:
        environment: Deployment environment, selects the console log format
        log_level: Log level name, defaults by environment when unset
        log_file: Optional path of a rotating log file
        json_logs: Whether file logs are written as JSON lines
        slow_estimate_threshold_ms: Estimates slower than this are logged
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="TRENCHCALC_",
        extra="ignore",
    )

    environment: Literal["development", "staging", "production"] = "development"

    # Logging
    log_level: Optional[str] = None
    log_file: Optional[Path] = None
    json_logs: bool = False

    # Performance logging
    slow_estimate_threshold_ms: float = 50.0

    @property
    def default_log_level(self) -> str:
        """Log level used when none is configured explicitly."""
        if self.log_level:
            return self.log_level.upper()
        return "DEBUG" if self.environment == "development" else "INFO"


# Global settings instance
settings = Settings()
