"""Configuration settings using Pydantic Settings.

Provides typed runtime configuration with environment variable support.

Usage:
    from pixelgarden.config import GardenSettings

    # Load from environment variables (GARDEN_*)
    settings = GardenSettings()

    # Or override with explicit values
    settings = GardenSettings(save_path="saves/slot1.json", tick_interval=0.5)
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GardenSettings(BaseSettings):  # type: ignore[misc]
    """Runtime configuration for a game session.

    Attributes:
        save_path: File used by the primary persistence tier.
        tick_interval: Seconds between ticks of the game loop.
        save_retry_attempts: Total save attempts for a forced save
            (2 = one bounded retry).
        save_retry_delay: Seconds to wait before retrying a failed save.
        log_level: Logging level name for `configure_logging`.

    Environment Variables:
        GARDEN_SAVE_PATH
        GARDEN_TICK_INTERVAL
        GARDEN_SAVE_RETRY_ATTEMPTS
        GARDEN_SAVE_RETRY_DELAY
        GARDEN_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="GARDEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    save_path: Path = Path("pixelgarden_save.json")
    tick_interval: float = Field(default=1.0, gt=0)
    save_retry_attempts: int = Field(default=2, ge=1)
    save_retry_delay: float = Field(default=3.0, ge=0)
    log_level: str = "INFO"
