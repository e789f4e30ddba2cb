"""Static content catalogs: templates the engine reads but never mutates."""

from pixelgarden.catalog.catalog import Catalog
from pixelgarden.catalog.data import DEFAULT_CATALOG
from pixelgarden.catalog.models import (
    AchievementPredicate,
    AchievementTemplate,
    Biome,
    CapacityUpgradeTemplate,
    ProducerTemplate,
    UpgradeTemplate,
)

__all__ = [
    "Catalog",
    "DEFAULT_CATALOG",
    # Templates
    "AchievementPredicate",
    "AchievementTemplate",
    "Biome",
    "CapacityUpgradeTemplate",
    "ProducerTemplate",
    "UpgradeTemplate",
]
