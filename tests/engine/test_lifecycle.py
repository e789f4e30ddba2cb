"""Tests for GameEngine save, load and reset."""

import pytest

from pixelgarden import GameEngine, MemoryPersistence, ResilientPersistence, SaveRecord
from pixelgarden.persistence import ClearFailedError


@pytest.fixture
def saved_record():
    return SaveRecord(
        currency=321.5,
        level=4,
        capacity=8,
        entities=[
            {"instance_id": "1700000000000-0001", "level": 2, "template_id": "p1", "invested_value": 15},
            {"instance_id": "1700000000000-0002", "level": 3, "template_id": "p2"},
        ],
        purchased_upgrade_ids=["u1"],
        purchased_capacity_upgrade_ids=["g1"],
        unlocked_achievement_ids=["a1"],
    )


@pytest.mark.asyncio
async def test_initialize_without_save_starts_fresh(make_engine):
    engine = make_engine(50)
    restored = await engine.initialize()

    assert restored is False
    assert engine.currency == 50
    assert engine.entities() == []


@pytest.mark.asyncio
async def test_initialize_restores_state(make_engine, memory, saved_record):
    await memory.save(saved_record)
    engine = make_engine()

    assert await engine.initialize() is True

    assert engine.currency == 321.5
    assert engine.level == 4
    assert engine.capacity == 8
    assert engine.purchased_upgrades == {"u1"}
    assert engine.purchased_capacity_upgrades == {"g1"}
    assert engine.unlocked_achievements == {"a1"}
    assert [(e.id, e.level) for e in engine.entities()] == [
        ("1700000000000-0001", 2),
        ("1700000000000-0002", 3),
    ]


@pytest.mark.asyncio
async def test_restore_estimates_missing_investment(make_engine, memory, saved_record):
    await memory.save(saved_record)
    engine = make_engine()
    await engine.initialize()

    legacy = engine.entity("1700000000000-0002")
    assert legacy.invested_value == 150
    assert engine.sell_value(legacy.id) == 67


@pytest.mark.asyncio
async def test_restore_drops_unknown_templates(make_engine, memory, caplog):
    await memory.save(
        SaveRecord(
            currency=0,
            level=1,
            entities=[
                {"instance_id": "a", "level": 1, "template_id": "retired"},
                {"instance_id": "b", "level": 1, "template_id": "p1"},
            ],
            purchased_upgrade_ids=[],
        )
    )
    engine = make_engine()

    with caplog.at_level("WARNING"):
        await engine.initialize()

    assert [e.id for e in engine.entities()] == ["b"]
    assert "retired" in caplog.text


@pytest.mark.asyncio
async def test_new_ids_do_not_collide_with_restored(make_engine, memory, saved_record):
    await memory.save(saved_record)
    engine = make_engine()
    await engine.initialize()

    engine.purchase_entity("p1")
    await engine.flush()

    ids = [e.id for e in engine.entities()]
    assert len(ids) == len(set(ids)) == 3


@pytest.mark.asyncio
async def test_commands_save_in_background(engine, memory):
    engine.purchase_entity("p1")
    engine.purchase_global_upgrade("u1")
    await engine.flush()

    record = await memory.load()
    assert record.currency == 890
    assert record.purchased_upgrade_ids == ["u1"]
    assert [e.template_id for e in record.entities] == ["p1"]


def test_commands_save_without_event_loop(engine, memory):
    engine.purchase_entity("p1")
    assert memory.has_save


@pytest.mark.asyncio
async def test_round_trip_through_new_engine(make_engine):
    engine = make_engine(5_000)
    engine.purchase_entity("p1")
    [entity] = engine.entities()
    engine.level_up_entity(entity.id)
    engine.purchase_capacity_upgrade("g1")
    await engine.flush()
    assert await engine.save_game() is True

    reloaded = make_engine()
    await reloaded.initialize()

    assert reloaded.snapshot() == engine.snapshot()


@pytest.mark.asyncio
async def test_initialize_survives_total_load_failure(make_engine, failing_cls):
    engine = make_engine(50, persistence=ResilientPersistence(failing_cls(), failing_cls()))

    assert await engine.initialize() is False
    assert engine.currency == 50


@pytest.mark.asyncio
async def test_initialize_uses_fallback_when_primary_fails(make_engine, failing, saved_record):
    fallback = MemoryPersistence()
    await fallback.save(saved_record)
    engine = make_engine(persistence=ResilientPersistence(failing, fallback))

    assert await engine.initialize() is True
    assert engine.currency == 321.5


@pytest.mark.asyncio
async def test_save_game_reports_failure(make_engine, failing_cls):
    engine = make_engine(persistence=ResilientPersistence(failing_cls(), failing_cls()))

    assert await engine.save_game() is False

    # Commands stay usable while saves fail
    engine.purchase_entity("p1")
    await engine.flush()
    assert len(engine.entities()) == 1


@pytest.mark.asyncio
async def test_reset_game_clears_save_and_restarts(engine, memory):
    engine.purchase_entity("p1")
    await engine.flush()
    calls = []
    engine.set_listener(lambda: calls.append("changed"))

    await engine.reset_game()

    assert not memory.has_save
    assert engine.entities() == []
    assert engine.currency == 1_000
    assert calls == ["changed"]


@pytest.mark.asyncio
async def test_reset_game_invokes_reload_hook(make_engine, memory):
    reloads = []
    engine = make_engine(reload=lambda: reloads.append(True))
    await engine.save_game()

    await engine.reset_game()

    assert reloads == [True]
    assert not memory.has_save


@pytest.mark.asyncio
async def test_reset_game_propagates_clear_failure(make_engine, failing):
    reloads = []
    engine = make_engine(
        persistence=ResilientPersistence(MemoryPersistence(), failing),
        reload=lambda: reloads.append(True),
    )

    with pytest.raises(ClearFailedError):
        await engine.reset_game()
    assert reloads == []


def test_to_record_sorts_id_sets(make_engine):
    engine = make_engine(10_000)
    engine.purchase_global_upgrade("u1")
    engine.purchase_global_upgrade("u2")
    engine.purchase_global_upgrade("u3")

    assert engine.to_record().purchased_upgrade_ids == ["u1", "u2", "u3"]


def test_engine_accepts_any_port(failing):
    engine = GameEngine(persistence=failing)
    assert engine.currency == 50


@pytest.mark.asyncio
async def test_reset_game_waits_for_queued_saves(engine, memory):
    engine.purchase_entity("p1")

    await engine.reset_game()
    await engine.flush()

    assert not memory.has_save
    assert await memory.load() is None


@pytest.mark.asyncio
async def test_initialize_waits_for_queued_saves(engine):
    engine.purchase_entity("p1")

    assert await engine.initialize() is True
    assert [e.template_id for e in engine.entities()] == ["p1"]
    assert engine.currency == 990


@pytest.mark.asyncio
async def test_restore_drops_repeated_instance_ids(make_engine, memory, caplog):
    await memory.save(
        SaveRecord(
            currency=0,
            level=1,
            entities=[
                {"instance_id": "a", "level": 1, "template_id": "p1"},
                {"instance_id": "a", "level": 4, "template_id": "p2"},
                {"instance_id": "b", "level": 1, "template_id": "p1"},
            ],
            purchased_upgrade_ids=[],
        )
    )
    engine = make_engine()

    with caplog.at_level("WARNING"):
        await engine.initialize()

    assert [(e.id, e.template_id) for e in engine.entities()] == [("a", "p1"), ("b", "p1")]
    assert "repeated" in caplog.text

    engine.sell_entity("a")
    assert engine.entity("a") is None
