"""Tests for the Garden collection."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pixelgarden import Garden, GrowableEntity, GrowthKind, InstanceId


def crop(instance_id: str, base_yield: float = 10, level: int = 1) -> GrowableEntity:
    return GrowableEntity(
        id=InstanceId(instance_id),
        template_id="wheat",
        display_name="Wheat",
        kind=GrowthKind.LINEAR,
        base_yield=base_yield,
        invested_value=10,
        level=level,
    )


def tree(instance_id: str, base_yield: float = 20, level: int = 1) -> GrowableEntity:
    return GrowableEntity(
        id=InstanceId(instance_id),
        template_id="apple",
        display_name="Apple",
        kind=GrowthKind.EXPONENTIAL,
        base_yield=base_yield,
        invested_value=20,
        level=level,
    )


@pytest.fixture
def garden():
    return Garden()


def test_total_yield_mixed_producers(garden):
    """Crop 10*1 + tree 20*1.5 = 40."""
    garden.add(crop("1"))
    garden.add(tree("2"))
    assert garden.total_yield(1.0) == pytest.approx(40)


def test_total_yield_applies_multiplier(garden):
    garden.add(crop("1"))
    assert garden.total_yield(2.0) == pytest.approx(20)


def test_empty_garden_yields_nothing(garden):
    assert garden.total_yield(5.0) == 0


def test_remove_by_id_removes_only_first_match(garden):
    garden.add(crop("1"))
    garden.add(crop("2"))
    garden.remove_by_id("1")
    assert [e.id for e in garden.snapshot()] == ["2"]


def test_remove_missing_id_is_noop(garden):
    garden.add(crop("1"))
    garden.remove_by_id("nope")
    assert len(garden) == 1


def test_find_by_id(garden):
    target = tree("t")
    garden.add(crop("c"))
    garden.add(target)
    assert garden.find_by_id("t") is target
    assert garden.find_by_id("missing") is None


def test_snapshot_returns_copies(garden):
    """Mutating a snapshot never changes the garden."""
    garden.add(crop("1"))

    snap = garden.snapshot()
    snap[0].level = 99
    snap.clear()

    assert len(garden) == 1
    assert garden.find_by_id("1").level == 1


def test_snapshot_keeps_insertion_order(garden):
    for i in range(5):
        garden.add(crop(str(i)))
    assert [e.id for e in garden.snapshot()] == ["0", "1", "2", "3", "4"]


def test_count_of_and_clear(garden):
    garden.add(crop("1"))
    garden.add(crop("2"))
    garden.add(tree("3"))
    assert garden.count_of("wheat") == 2
    assert garden.count_of("apple") == 1

    garden.clear()
    assert len(garden) == 0


@given(
    levels=st.lists(st.integers(min_value=1, max_value=20), max_size=12),
    multiplier=st.floats(min_value=0.5, max_value=50),
)
def test_total_yield_is_sum_of_members(levels, multiplier):
    """PROPERTY: aggregate yield is exactly the member sum under one multiplier."""
    garden = Garden()
    members = []
    for i, level in enumerate(levels):
        entity = crop(str(i), level=level) if i % 2 else tree(str(i), level=level)
        members.append(entity)
        garden.add(entity)

    expected = sum(entity.yield_rate(multiplier) for entity in members)
    assert garden.total_yield(multiplier) == pytest.approx(expected)
