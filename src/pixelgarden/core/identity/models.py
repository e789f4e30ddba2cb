"""Instance identity models.

Usage:
    allocator = InstanceIdAllocator()
    instance_id = allocator.allocate()  # e.g. "1729300000123-0001"
"""

from __future__ import annotations

import itertools
import time
from typing import NewType

InstanceId = NewType("InstanceId", str)
"""Opaque identifier of one owned producer. Stable across save/load."""


class InstanceIdAllocator:
    """Allocates unique instance IDs for producers.

    IDs combine a millisecond timestamp with a per-allocator counter, so two
    producers bought within the same millisecond still get distinct IDs.
    IDs restored from a save are registered via `reserve()` so that fresh
    allocations never collide with them.

    Args:
        clock: Callable returning seconds since the epoch (injectable for tests).
    """

    def __init__(self, clock=time.time):
        self._clock = clock
        self._counter = itertools.count(1)
        self._issued: set[InstanceId] = set()

    def allocate(self) -> InstanceId:
        """Allocate a fresh instance ID.

        Returns:
            InstanceId not previously issued or reserved by this allocator.
        """
        while True:
            candidate = InstanceId(f"{int(self._clock() * 1000)}-{next(self._counter):04d}")
            if candidate not in self._issued:
                self._issued.add(candidate)
                return candidate

    def reserve(self, instance_id: str) -> InstanceId:
        """Mark an externally supplied ID (e.g. from a save) as taken."""
        reserved = InstanceId(instance_id)
        self._issued.add(reserved)
        return reserved

    def reset(self) -> None:
        """Forget all issued IDs (used when the garden is rebuilt from a save)."""
        self._issued.clear()
