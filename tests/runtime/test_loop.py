"""Tests for the periodic tick driver."""

import asyncio

import pytest

from pixelgarden import GameLoop


@pytest.mark.asyncio
async def test_run_fixed_ticks(engine):
    engine.purchase_entity("p1")
    loop = GameLoop(engine, interval=0.0, dt=1.0)

    await loop.run(ticks=5)

    assert loop.ticks == 5
    assert engine.currency == pytest.approx(995)


@pytest.mark.asyncio
async def test_start_and_stop(engine, memory):
    engine.purchase_entity("p1")
    loop = GameLoop(engine, interval=0.01)

    loop.start()
    assert loop.running
    await asyncio.sleep(0.05)
    await loop.stop()

    assert not loop.running
    assert loop.ticks >= 1
    assert memory.has_save


@pytest.mark.asyncio
async def test_start_twice_rejected(engine):
    loop = GameLoop(engine, interval=0.01)
    loop.start()
    try:
        with pytest.raises(RuntimeError):
            loop.start()
    finally:
        await loop.stop()


def test_negative_interval_rejected(engine):
    with pytest.raises(ValueError):
        GameLoop(engine, interval=-1)
