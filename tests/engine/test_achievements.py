"""Tests for achievement evaluation."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pixelgarden import (
    DEFAULT_CATALOG,
    EngineConfig,
    GameEngine,
    MemoryPersistence,
    SaveRecord,
)


def test_check_unlocks_met_achievements_once(make_engine):
    engine = make_engine(50)
    engine.purchase_entity("p1")

    first = engine.check_achievements()
    second = engine.check_achievements()

    assert [a.id for a in first] == ["a1"]
    assert second == []
    assert engine.unlocked_achievements == {"a1"}


def test_listener_receives_each_unlock(engine):
    unlocked = []
    engine.set_achievement_listener(lambda achievement: unlocked.append(achievement.id))
    engine.purchase_entity("p1")

    engine.tick(0)

    # 990 currency is below Pocket Money after the purchase
    assert unlocked == ["a1"]


def test_tick_evaluates_achievements(make_engine):
    engine = make_engine(1_000)
    engine.tick(1)
    assert "a2" in engine.unlocked_achievements


def test_all_upgrades_reach_tycoon(make_engine):
    engine = make_engine(1_000_000_000)
    engine.purchase_entity("p1")
    for upgrade in DEFAULT_CATALOG.upgrades:
        engine.purchase_global_upgrade(upgrade.id)

    assert engine.total_yield() >= 10_000
    unlocked = {a.id for a in engine.check_achievements()}

    assert {"a1", "a2", "a5"} <= unlocked


@pytest.mark.asyncio
async def test_level_achievement_after_restore(make_engine, memory):
    await memory.save(
        SaveRecord(currency=0, level=6, entities=[], purchased_upgrade_ids=[])
    )
    engine = make_engine()
    await engine.initialize()

    assert [a.id for a in engine.check_achievements()] == ["a4"]


@pytest.mark.asyncio
async def test_unlock_is_saved(engine, memory):
    engine.check_achievements()
    await engine.flush()
    assert (await memory.load()).unlocked_achievement_ids == ["a2"]


@settings(max_examples=25, deadline=None)
@given(st.lists(st.sampled_from(["p1", "p2", "p3", "sell", "tick"]), max_size=15))
def test_unlocked_set_only_grows(actions):
    engine = GameEngine(MemoryPersistence(), config=EngineConfig(starting_currency=500))
    seen: set[str] = set()
    for action in actions:
        if action == "sell":
            entities = engine.entities()
            if entities:
                engine.sell_entity(entities[0].id)
        elif action == "tick":
            engine.tick(1)
        else:
            engine.purchase_entity(action)
        assert seen <= engine.unlocked_achievements
        seen = set(engine.unlocked_achievements)
