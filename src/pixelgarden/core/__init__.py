"""Core primitives: producer identity, growth curves and shared types.

Usage:
    from pixelgarden.core import GrowableEntity, GrowthKind, InstanceId
"""

from pixelgarden.core.growth import (
    EXPONENTIAL_BASE,
    GrowableEntity,
    GrowthKind,
    compute_yield,
)
from pixelgarden.core.identity import InstanceId, InstanceIdAllocator
from pixelgarden.core.types import Copy

__all__ = [
    # Types
    "Copy",
    # Identity
    "InstanceId",
    "InstanceIdAllocator",
    # Growth
    "EXPONENTIAL_BASE",
    "GrowableEntity",
    "GrowthKind",
    "compute_yield",
]
