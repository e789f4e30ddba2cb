"""GameEngine: owner of all economic state and the rules that change it.

Usage:
    engine = GameEngine(persistence=create_persistence())
    await engine.initialize()

    engine.set_listener(redraw)
    engine.set_achievement_listener(show_toast)

    engine.purchase_entity("p1")
    engine.tick(1.0)
    snapshot = engine.snapshot()

Commands (purchase, level up, sell, upgrades, tick) are synchronous and never
raise for player mistakes: an unaffordable or disallowed command simply has no
effect. Each successful command initiates a save before returning. Inside a
running event loop the save is scheduled as a task and not awaited; outside
one it runs to completion. Only `save_game()` reports the outcome.
"""

from __future__ import annotations

import asyncio
import copy as cp
import logging
from collections.abc import Callable

from pixelgarden.catalog import DEFAULT_CATALOG, AchievementTemplate, Catalog, ProducerTemplate
from pixelgarden.catalog.models import Biome
from pixelgarden.core.growth import GrowableEntity
from pixelgarden.core.identity import InstanceId, InstanceIdAllocator
from pixelgarden.core.types import Copy
from pixelgarden.engine import economy
from pixelgarden.engine.models import (
    EngineConfig,
    EngineSnapshot,
    PurchaseCheck,
    RejectReason,
    UpgradeStatus,
)
from pixelgarden.garden import Garden
from pixelgarden.persistence.errors import PersistenceError
from pixelgarden.persistence.models import EntityRecord, SaveRecord
from pixelgarden.persistence.protocol import PersistencePort

logger = logging.getLogger(__name__)

StateListener = Callable[[], None]
AchievementListener = Callable[[AchievementTemplate], None]
ReloadHook = Callable[[], None]


def _noop(*_: object) -> None:
    pass


class GameEngine:
    """Central game state and rule enforcement.

    Exclusively owns the garden, currency, player level, capacity and the
    purchased/unlocked ID sets. Everything handed out is a copy.

    Args:
        persistence: Save backend, normally a ResilientPersistence.
        catalog: Static content tables. Defaults to the shipped catalog.
        config: Economy constants. Defaults to the shipped balance.
        reload: Hook invoked by `reset_game()` after the save is cleared.
            Defaults to restarting this engine from a fresh state.
        id_allocator: Source of producer instance IDs.
    """

    def __init__(
        self,
        persistence: PersistencePort,
        catalog: Catalog | None = None,
        config: EngineConfig | None = None,
        reload: ReloadHook | None = None,
        id_allocator: InstanceIdAllocator | None = None,
    ):
        self._persistence = persistence
        self._catalog = catalog or DEFAULT_CATALOG
        self._config = config or EngineConfig()
        self._reload = reload or self._restart_fresh
        self._ids = id_allocator or InstanceIdAllocator()

        self._garden = Garden()
        self._currency = 0.0
        self._level = 1
        self._capacity = self._config.default_capacity
        self._purchased_upgrades: set[str] = set()
        self._purchased_capacity_upgrades: set[str] = set()
        self._unlocked_achievements: set[str] = set()

        self._notify: StateListener = _noop
        self._notify_achievement: AchievementListener = _noop
        self._pending_saves: set[asyncio.Task[bool]] = set()

        self._start_fresh()

    # --- Listeners ---

    def set_listener(self, listener: StateListener | None) -> None:
        """Register the state-changed callback (replaces any previous one)."""
        self._notify = listener or _noop

    def set_achievement_listener(self, listener: AchievementListener | None) -> None:
        """Register the achievement-unlocked callback (replaces any previous one)."""
        self._notify_achievement = listener or _noop

    # --- Read-only state ---

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def currency(self) -> float:
        return self._currency

    @property
    def level(self) -> int:
        return self._level

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def purchased_upgrades(self) -> frozenset[str]:
        return frozenset(self._purchased_upgrades)

    @property
    def purchased_capacity_upgrades(self) -> frozenset[str]:
        return frozenset(self._purchased_capacity_upgrades)

    @property
    def unlocked_achievements(self) -> frozenset[str]:
        return frozenset(self._unlocked_achievements)

    def entities(self) -> list[Copy[GrowableEntity]]:
        """Copies of owned producers in insertion order."""
        return self._garden.snapshot()

    def entity(self, instance_id: str) -> Copy[GrowableEntity] | None:
        found = self._garden.find_by_id(instance_id)
        return None if found is None else cp.copy(found)

    def global_multiplier(self) -> float:
        """Product of the multipliers of every purchased upgrade (1.0 if none)."""
        return economy.stacked_multiplier(
            template
            for template in self._catalog.upgrades
            if template.id in self._purchased_upgrades
        )

    def total_yield(self) -> float:
        """Aggregate currency per second under the current global multiplier."""
        return self._garden.total_yield(self.global_multiplier())

    def biome(self) -> Biome:
        return economy.biome_for_level(self._level)

    def unlocked_producers(self) -> list[ProducerTemplate]:
        """Producer templates whose unlock level has been reached (display gating)."""
        return [p for p in self._catalog.producers if p.unlock_level <= self._level]

    def snapshot(self) -> EngineSnapshot:
        multiplier = self.global_multiplier()
        return EngineSnapshot(
            currency=self._currency,
            level=self._level,
            capacity=self._capacity,
            entities=tuple(self._garden.snapshot()),
            total_yield=self._garden.total_yield(multiplier),
            global_multiplier=multiplier,
            biome=self.biome(),
            purchased_upgrade_ids=frozenset(self._purchased_upgrades),
            purchased_capacity_upgrade_ids=frozenset(self._purchased_capacity_upgrades),
            unlocked_achievement_ids=frozenset(self._unlocked_achievements),
        )

    # --- Prices ---

    def producer_cost(self, template_id: str) -> int | None:
        """Price of the next unit of this producer, None if it does not exist."""
        template = self._catalog.producer(template_id)
        if template is None:
            return None
        return economy.purchase_cost(
            template.base_cost, self._garden.count_of(template_id), self._config.purchase_growth
        )

    def level_up_cost(self, instance_id: str) -> int | None:
        """Price of the next level of an owned producer, None if unknown."""
        entity = self._garden.find_by_id(instance_id)
        if entity is None:
            return None
        template = self._catalog.producer(entity.template_id)
        if template is None:
            return None
        return economy.level_up_cost(template.base_cost, entity.level, self._config.level_up_factor)

    def sell_value(self, instance_id: str) -> int | None:
        """Refund for selling an owned producer, None if unknown."""
        entity = self._garden.find_by_id(instance_id)
        if entity is None:
            return None
        return economy.sell_value(entity.invested_value, self._config.salvage_rate)

    def upgrade_status(self, upgrade_id: str) -> UpgradeStatus:
        """Chain status of a global upgrade.

        Raises:
            KeyError: If upgrade_id is not in the catalog.
        """
        return self._chain_status(
            upgrade_id,
            self._purchased_upgrades,
            self._catalog.upgrade_prerequisite(upgrade_id),
        )

    def capacity_upgrade_status(self, upgrade_id: str) -> UpgradeStatus:
        """Chain status of a capacity upgrade.

        Raises:
            KeyError: If upgrade_id is not in the catalog.
        """
        return self._chain_status(
            upgrade_id,
            self._purchased_capacity_upgrades,
            self._catalog.capacity_upgrade_prerequisite(upgrade_id),
        )

    @staticmethod
    def _chain_status(item_id: str, owned: set[str], prerequisite: str | None) -> UpgradeStatus:
        if item_id in owned:
            return UpgradeStatus.PURCHASED
        if prerequisite is not None and prerequisite not in owned:
            return UpgradeStatus.LOCKED
        return UpgradeStatus.AVAILABLE

    # --- Commands ---

    def tick(self, dt_seconds: float) -> None:
        """Accrue `total_yield * dt_seconds` currency, then evaluate achievements.

        Raises:
            ValueError: If dt_seconds is negative.
        """
        if dt_seconds < 0:
            raise ValueError(f"dt_seconds must be non-negative, got {dt_seconds}")
        self._currency += self.total_yield() * dt_seconds
        self.check_achievements()
        self._notify()

    def can_purchase_entity(self, template_id: str) -> PurchaseCheck:
        if len(self._garden) >= self._capacity:
            return PurchaseCheck(False, RejectReason.CAPACITY_FULL)
        if self._garden.count_of(template_id) >= self._config.per_type_limit:
            return PurchaseCheck(False, RejectReason.TYPE_LIMIT)
        if self._catalog.producer(template_id) is None:
            return PurchaseCheck(False, RejectReason.UNKNOWN_PRODUCER)
        return PurchaseCheck(True)

    def purchase_entity(self, template_id: str) -> None:
        """Buy one producer of this template if allowed and affordable."""
        if not self.can_purchase_entity(template_id):
            return
        template = self._catalog.producer(template_id)
        if template is None:
            return
        cost = self.producer_cost(template_id)
        if cost is None or self._currency < cost:
            return

        self._currency -= cost
        entity = self._create_entity(self._ids.allocate(), template, level=1, invested_value=cost)
        self._garden.add(entity)
        logger.debug("Purchased %s (%s) for %s", entity.id, template_id, cost)
        self._raise_level()
        self._persist()
        self._notify()

    def level_up_entity(self, instance_id: str) -> None:
        """Raise an owned producer by one level if affordable."""
        entity = self._garden.find_by_id(instance_id)
        if entity is None:
            return
        cost = self.level_up_cost(instance_id)
        if cost is None or self._currency < cost:
            return

        self._currency -= cost
        entity.level_up(cost)
        logger.debug("Leveled %s to %d for %s", instance_id, entity.level, cost)
        self._persist()
        self._notify()

    def sell_entity(self, instance_id: str) -> None:
        """Sell an owned producer for its salvage value.

        Player level is left unchanged: it never goes down.
        """
        entity = self._garden.find_by_id(instance_id)
        if entity is None:
            return
        refund = economy.sell_value(entity.invested_value, self._config.salvage_rate)
        self._garden.remove_by_id(instance_id)
        self._currency += refund
        logger.debug("Sold %s for %s", instance_id, refund)
        self._persist()
        self._notify()

    def purchase_global_upgrade(self, upgrade_id: str) -> None:
        """Buy a global multiplier upgrade if unlocked and affordable."""
        template = self._catalog.upgrade(upgrade_id)
        if template is None:
            return
        if self.upgrade_status(upgrade_id) is not UpgradeStatus.AVAILABLE:
            return
        if self._currency < template.cost:
            return

        self._currency -= template.cost
        self._purchased_upgrades.add(upgrade_id)
        logger.debug("Purchased upgrade %s (x%s)", upgrade_id, template.multiplier)
        self._persist()
        self._notify()

    def purchase_capacity_upgrade(self, upgrade_id: str) -> None:
        """Buy a capacity upgrade if unlocked and affordable."""
        template = self._catalog.capacity_upgrade(upgrade_id)
        if template is None:
            return
        if self.capacity_upgrade_status(upgrade_id) is not UpgradeStatus.AVAILABLE:
            return
        if self._currency < template.cost:
            return

        self._currency -= template.cost
        self._purchased_capacity_upgrades.add(upgrade_id)
        self._capacity += template.capacity_increase
        logger.debug("Purchased capacity upgrade %s, capacity now %d", upgrade_id, self._capacity)
        self._persist()
        self._notify()

    def check_achievements(self) -> list[AchievementTemplate]:
        """Unlock every achievement whose predicate now holds.

        Predicates all see one reading of currency, level, producer count and
        yield taken at the start of the pass.

        Returns:
            Achievements unlocked by this pass, in catalog order.
        """
        currency = self._currency
        level = self._level
        entity_count = len(self._garden)
        yield_rate = self.total_yield()

        unlocked: list[AchievementTemplate] = []
        for achievement in self._catalog.achievements:
            if achievement.id in self._unlocked_achievements:
                continue
            if achievement.is_met(currency, level, entity_count, yield_rate):
                self._unlocked_achievements.add(achievement.id)
                unlocked.append(achievement)
                logger.info("Achievement unlocked: %s", achievement.id)
                self._notify_achievement(achievement)
                self._persist()
        return unlocked

    # --- Persistence ---

    async def initialize(self) -> bool:
        """Load the saved game, or start fresh if there is none.

        A load failure on every tier is logged and treated like a fresh
        install so the session can still run.

        Returns:
            True if a save was restored.
        """
        await self.flush()
        try:
            record = await self._persistence.load()
        except PersistenceError:
            logger.exception("Could not load saved game, starting fresh")
            record = None

        if record is None:
            self._start_fresh()
        else:
            self._restore(record)
        self._notify()
        return record is not None

    async def save_game(self) -> bool:
        """Write the full state now.

        Returns:
            True on success, False if every persistence tier failed.
        """
        return await self._write(self.to_record())

    async def reset_game(self) -> None:
        """Delete the save, then invoke the reload hook.

        Saves still in flight from earlier commands finish first so none of
        them lands after the clear.

        Raises:
            PersistenceError: If the save could not be cleared; the reload
                hook is not invoked in that case.
        """
        await self.flush()
        await self._persistence.clear()
        self._reload()

    async def flush(self) -> None:
        """Wait for every save started by a command to finish."""
        while self._pending_saves:
            await asyncio.gather(*list(self._pending_saves))

    def to_record(self) -> SaveRecord:
        """Serialize the full state into a SaveRecord."""
        return SaveRecord(
            currency=self._currency,
            level=self._level,
            capacity=self._capacity,
            entities=[
                EntityRecord(
                    instance_id=entity.id,
                    level=entity.level,
                    template_id=entity.template_id,
                    invested_value=entity.invested_value,
                )
                for entity in self._garden
            ],
            purchased_upgrade_ids=sorted(self._purchased_upgrades),
            purchased_capacity_upgrade_ids=sorted(self._purchased_capacity_upgrades),
            unlocked_achievement_ids=sorted(self._unlocked_achievements),
        )

    async def _write(self, record: SaveRecord) -> bool:
        try:
            await self._persistence.save(record)
        except PersistenceError:
            logger.exception("Save failed on every tier")
            return False
        return True

    def _persist(self) -> None:
        """Initiate a save of the current state without waiting for it."""
        record = self.to_record()
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            asyncio.run(self._write(record))
            return
        task = loop.create_task(self._write(record))
        self._pending_saves.add(task)
        task.add_done_callback(self._pending_saves.discard)

    # --- Internals ---

    def _start_fresh(self) -> None:
        self._garden.clear()
        self._ids.reset()
        self._currency = float(self._config.starting_currency)
        self._level = 1
        self._capacity = self._config.default_capacity
        self._purchased_upgrades = set()
        self._purchased_capacity_upgrades = set()
        self._unlocked_achievements = set()

    def _restart_fresh(self) -> None:
        self._start_fresh()
        self._notify()

    def _restore(self, record: SaveRecord) -> None:
        self._currency = float(record.currency)
        self._level = record.level
        self._capacity = record.capacity
        self._purchased_upgrades = set(record.purchased_upgrade_ids)
        self._purchased_capacity_upgrades = set(record.purchased_capacity_upgrade_ids)
        self._unlocked_achievements = set(record.unlocked_achievement_ids)

        self._garden.clear()
        self._ids.reset()
        for saved in record.entities:
            if self._garden.find_by_id(saved.instance_id) is not None:
                logger.warning("Dropping repeated saved producer %s", saved.instance_id)
                continue
            template = self._catalog.producer(saved.template_id)
            if template is None:
                logger.warning(
                    "Dropping saved producer %s: unknown template %r",
                    saved.instance_id,
                    saved.template_id,
                )
                continue
            invested = saved.invested_value
            if invested is None:
                invested = template.base_cost * saved.level
            self._garden.add(
                self._create_entity(
                    self._ids.reserve(saved.instance_id), template, saved.level, invested
                )
            )

    def _raise_level(self) -> None:
        candidate = economy.level_for_entity_count(len(self._garden), self._config.entities_per_level)
        if candidate > self._level:
            logger.info("Player level %d -> %d", self._level, candidate)
            self._level = candidate

    @staticmethod
    def _create_entity(
        instance_id: InstanceId, template: ProducerTemplate, level: int, invested_value: float
    ) -> GrowableEntity:
        return GrowableEntity(
            id=instance_id,
            template_id=template.id,
            display_name=template.name,
            kind=template.kind,
            base_yield=template.base_yield,
            invested_value=invested_value,
            level=level,
        )