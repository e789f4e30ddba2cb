"""Growth curves and owned producer instances."""

from pixelgarden.core.growth.models import (
    EXPONENTIAL_BASE,
    GrowableEntity,
    GrowthKind,
    compute_yield,
)

__all__ = [
    "EXPONENTIAL_BASE",
    "GrowableEntity",
    "GrowthKind",
    "compute_yield",
]
