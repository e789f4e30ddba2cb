"""pixelgarden: game-state engine for an idle garden clicker.

Usage:
    import asyncio
    from pixelgarden import GameEngine, GameLoop, MemoryPersistence

    async def main():
        engine = GameEngine(persistence=MemoryPersistence())
        await engine.initialize()          # 50 gold, empty garden

        engine.purchase_entity("p1")       # Pixel Wheat, 10 gold
        await GameLoop(engine, interval=1.0).run(ticks=10)

        print(engine.snapshot().currency)
        await engine.flush()

    asyncio.run(main())
"""

__version__ = "0.1.0"

# Catalog
from pixelgarden.catalog import (
    DEFAULT_CATALOG,
    AchievementTemplate,
    Biome,
    CapacityUpgradeTemplate,
    Catalog,
    ProducerTemplate,
    UpgradeTemplate,
)

# Configuration
from pixelgarden.config import GardenSettings

# Core primitives
from pixelgarden.core import (
    GrowableEntity,
    GrowthKind,
    InstanceId,
    compute_yield,
)

# Engine
from pixelgarden.engine import (
    EngineConfig,
    EngineSnapshot,
    GameEngine,
    PurchaseCheck,
    RejectReason,
    UpgradeStatus,
    create_engine,
)
from pixelgarden.garden import Garden
from pixelgarden.logging_config import configure_logging

# Persistence
from pixelgarden.persistence import (
    JsonFilePersistence,
    MemoryPersistence,
    PersistenceError,
    PersistencePort,
    ResilientPersistence,
    SaveRecord,
    create_persistence,
)

# Runtime
from pixelgarden.runtime import GameLoop, RetryPolicy, save_with_retry

__all__ = [
    # Version
    "__version__",
    # Core
    "GrowableEntity",
    "GrowthKind",
    "InstanceId",
    "compute_yield",
    "Garden",
    # Catalog
    "Catalog",
    "DEFAULT_CATALOG",
    "ProducerTemplate",
    "UpgradeTemplate",
    "CapacityUpgradeTemplate",
    "AchievementTemplate",
    "Biome",
    # Engine
    "GameEngine",
    "create_engine",
    "EngineConfig",
    "EngineSnapshot",
    "PurchaseCheck",
    "RejectReason",
    "UpgradeStatus",
    # Persistence
    "PersistencePort",
    "SaveRecord",
    "MemoryPersistence",
    "JsonFilePersistence",
    "ResilientPersistence",
    "create_persistence",
    "PersistenceError",
    # Runtime
    "GameLoop",
    "RetryPolicy",
    "save_with_retry",
    # Config
    "GardenSettings",
    "configure_logging",
]
