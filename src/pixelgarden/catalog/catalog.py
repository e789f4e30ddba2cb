"""Catalog: indexed, read-only bundle of all static template tables.

Usage:
    catalog = Catalog(producers=[...], upgrades=[...],
                      capacity_upgrades=[...], achievements=[...])
    catalog.producer("p1")
    catalog.upgrade_prerequisite("u2")  # -> "u1"
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol, TypeVar

from pixelgarden.catalog.models import (
    AchievementTemplate,
    CapacityUpgradeTemplate,
    ProducerTemplate,
    UpgradeTemplate,
)


class _HasId(Protocol):
    @property
    def id(self) -> str: ...


TemplateT = TypeVar("TemplateT", bound=_HasId)


def _index(templates: Sequence[TemplateT], table: str) -> dict[str, int]:
    positions: dict[str, int] = {}
    for position, template in enumerate(templates):
        if template.id in positions:
            raise ValueError(f"Duplicate id {template.id!r} in {table} catalog")
        positions[template.id] = position
    return positions


class Catalog:
    """Immutable reference tables keyed by ID.

    Upgrade and capacity-upgrade tables keep their declared order, which is
    the prerequisite chain: entry N requires entry N-1. Achievements keep
    their evaluation order.

    Raises:
        ValueError: If any table contains a duplicate ID.
    """

    def __init__(
        self,
        producers: Iterable[ProducerTemplate] = (),
        upgrades: Iterable[UpgradeTemplate] = (),
        capacity_upgrades: Iterable[CapacityUpgradeTemplate] = (),
        achievements: Iterable[AchievementTemplate] = (),
    ):
        self._producers = tuple(producers)
        self._upgrades = tuple(upgrades)
        self._capacity_upgrades = tuple(capacity_upgrades)
        self._achievements = tuple(achievements)

        self._producer_index = _index(self._producers, "producer")
        self._upgrade_index = _index(self._upgrades, "upgrade")
        self._capacity_index = _index(self._capacity_upgrades, "capacity upgrade")
        self._achievement_index = _index(self._achievements, "achievement")

    @property
    def producers(self) -> tuple[ProducerTemplate, ...]:
        return self._producers

    @property
    def upgrades(self) -> tuple[UpgradeTemplate, ...]:
        return self._upgrades

    @property
    def capacity_upgrades(self) -> tuple[CapacityUpgradeTemplate, ...]:
        return self._capacity_upgrades

    @property
    def achievements(self) -> tuple[AchievementTemplate, ...]:
        return self._achievements

    def producer(self, template_id: str) -> ProducerTemplate | None:
        position = self._producer_index.get(template_id)
        return None if position is None else self._producers[position]

    def upgrade(self, upgrade_id: str) -> UpgradeTemplate | None:
        position = self._upgrade_index.get(upgrade_id)
        return None if position is None else self._upgrades[position]

    def capacity_upgrade(self, upgrade_id: str) -> CapacityUpgradeTemplate | None:
        position = self._capacity_index.get(upgrade_id)
        return None if position is None else self._capacity_upgrades[position]

    def achievement(self, achievement_id: str) -> AchievementTemplate | None:
        position = self._achievement_index.get(achievement_id)
        return None if position is None else self._achievements[position]

    def upgrade_prerequisite(self, upgrade_id: str) -> str | None:
        """ID of the upgrade that must be owned first, None for the chain head."""
        return _previous(self._upgrades, self._upgrade_index, upgrade_id)

    def capacity_upgrade_prerequisite(self, upgrade_id: str) -> str | None:
        """ID of the capacity upgrade that must be owned first, None for the chain head."""
        return _previous(self._capacity_upgrades, self._capacity_index, upgrade_id)


def _previous(chain: Sequence[_HasId], index: dict[str, int], item_id: str) -> str | None:
    position = index.get(item_id)
    if position is None:
        raise KeyError(item_id)
    if position == 0:
        return None
    return chain[position - 1].id
