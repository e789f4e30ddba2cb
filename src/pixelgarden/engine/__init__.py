"""Game engine: economic state, rules, tick accrual and achievements."""

from pixelgarden.engine.engine import (
    AchievementListener,
    GameEngine,
    ReloadHook,
    StateListener,
)
from pixelgarden.engine.factory import create_engine
from pixelgarden.engine.models import (
    EngineConfig,
    EngineSnapshot,
    PurchaseCheck,
    RejectReason,
    UpgradeStatus,
)

__all__ = [
    # Engine
    "GameEngine",
    "create_engine",
    # Models
    "EngineConfig",
    "EngineSnapshot",
    "PurchaseCheck",
    "RejectReason",
    "UpgradeStatus",
    # Callback types
    "StateListener",
    "AchievementListener",
    "ReloadHook",
]
