"""Configuration module using Pydantic Settings.

Usage:
    from pixelgarden.config import GardenSettings

    settings = GardenSettings(save_path="slot1.json")
"""

from pixelgarden.config.settings import GardenSettings

__all__ = [
    "GardenSettings",
]
