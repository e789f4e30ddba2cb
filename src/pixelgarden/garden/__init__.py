"""Producer collection."""

from pixelgarden.garden.garden import Garden

__all__ = [
    "Garden",
]
