"""Garden: ordered collection of owned producers.

Simple list-backed container. Insertion order is kept stable so that UI list
identity survives a session; it carries no other meaning.

Usage:
    garden = Garden()
    garden.add(entity)
    garden.total_yield(global_multiplier=1.32)
"""

from __future__ import annotations

import copy as cp
from collections.abc import Iterator

from pixelgarden.core.growth import GrowableEntity
from pixelgarden.core.types import Copy


class Garden:
    """Owns producer instances and computes their aggregate yield.

    Holds no reference back to the engine. Capacity and per-type limits are
    enforced by the caller before `add`.
    """

    def __init__(self) -> None:
        self._entities: list[GrowableEntity] = []

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[GrowableEntity]:
        return iter(self._entities)

    def add(self, entity: GrowableEntity) -> None:
        """Append a producer."""
        self._entities.append(entity)

    def remove_by_id(self, instance_id: str) -> None:
        """Remove the first producer with this ID. No-op if absent."""
        for index, entity in enumerate(self._entities):
            if entity.id == instance_id:
                del self._entities[index]
                return

    def find_by_id(self, instance_id: str) -> GrowableEntity | None:
        """Look up a producer by instance ID (live reference, engine use)."""
        for entity in self._entities:
            if entity.id == instance_id:
                return entity
        return None

    def count_of(self, template_id: str) -> int:
        """Number of owned producers built from `template_id`."""
        return sum(1 for entity in self._entities if entity.template_id == template_id)

    def total_yield(self, global_multiplier: float = 1.0) -> float:
        """Sum of member yields under one shared multiplier."""
        return sum(entity.yield_rate(global_multiplier) for entity in self._entities)

    def snapshot(self) -> list[Copy[GrowableEntity]]:
        """Ordered copies of all producers.

        Mutating the returned list or its items does not touch the garden.
        """
        return [cp.copy(entity) for entity in self._entities]

    def clear(self) -> None:
        """Remove every producer."""
        self._entities.clear()
