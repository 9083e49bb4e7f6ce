"""
Application configuration.
Settings come from COMPOUND_* environment variables or a .env file.
"""

import logging
from pathlib import Path
from typing import Dict, List

from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root (one level up from the package)
PROJECT_ROOT = Path(__file__).parent.parent

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseSettings):
    """
    Application settings.
    (Note: environment variables take precedence over the .env file)
    """

    # Server
    PORT: int = 5000
    DEBUG: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"

    # CORS (frontend dev servers)
    CORS_ORIGINS: List[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]

    # Display labels served to the frontend; keys are frequency wire values
    FREQUENCY_LABELS: Dict[str, str] = {
        "annually": "Annually",
        "semi-annually": "Semi-Annually",
        "quarterly": "Quarterly",
        "monthly": "Monthly",
        "weekly": "Weekly",
        "daily": "Daily",
        "continuously": "Continuously",
    }

    model_config = SettingsConfigDict(
        env_prefix="COMPOUND_",
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


def get_settings() -> Settings:
    """Build a fresh settings instance."""
    return Settings()


def configure_logging(level: str = "INFO") -> None:
    """Set the root log level and format."""
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"invalid log level: {level}")
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    logging.getLogger().setLevel(numeric_level)
