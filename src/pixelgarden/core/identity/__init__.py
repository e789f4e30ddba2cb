"""Instance identity: opaque producer IDs and their allocator."""

from pixelgarden.core.identity.models import InstanceId, InstanceIdAllocator

__all__ = [
    "InstanceId",
    "InstanceIdAllocator",
]
