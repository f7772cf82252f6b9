"""
Settings - Application configuration using Pydantic Settings.

Loads from environment variables (``QUANTPRO_`` prefix) and .env files.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Knowledge base shipped inside the installed package
BUNDLED_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class Settings(BaseSettings):
    """Application settings."""

    # Paths
    data_dir: Path | None = None
    shared_dir_name: str = "quant-trading-pro"
    home_install_dir: Path = Field(
        default_factory=lambda: Path.home() / ".quant-trading-skill"
    )

    # Search
    default_max_results: int = Field(default=3, ge=1)
    bm25_k1: float = Field(default=1.5, ge=0.0)
    bm25_b: float = Field(default=0.75, ge=0.0, le=1.0)

    # Logging
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="QUANTPRO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def find_data_dir(settings: Settings | None = None, cwd: Path | None = None) -> Path:
    """
    Locate the knowledge base directory.

    An explicit ``settings.data_dir`` is returned as-is. Otherwise the first
    existing candidate wins:
    1. ``./data``
    2. ``./.shared/<shared_dir_name>/data`` (created by ``quantpro init``)
    3. ``<home_install_dir>/data``

    With none of them present, the dataset directory bundled with the
    package is used.

    Args:
        settings: Settings to read paths from (default: cached settings)
        cwd: Directory relative candidates are resolved against

    Returns:
        The first existing candidate, or the bundled dataset directory
    """
    settings = settings or get_settings()
    base = cwd or Path.cwd()

    if settings.data_dir is not None:
        return settings.data_dir

    candidates = [
        base / "data",
        base / ".shared" / settings.shared_dir_name / "data",
        settings.home_install_dir / "data",
    ]

    for candidate in candidates:
        if candidate.is_dir():
            logger.debug("Using data directory %s", candidate)
            return candidate

    logger.debug("Using bundled data directory %s", BUNDLED_DATA_DIR)
    return BUNDLED_DATA_DIR
