"""Headless pixelgarden session.

Demonstrates:
- Building an engine from settings (JSON file save with memory fallback)
- Buying producers, leveling and upgrades
- Driving the engine with GameLoop
- Achievement and state listeners
- Forced save with retry

Run with:
    GARDEN_SAVE_PATH=/tmp/garden.json python examples/headless_session.py
"""

import asyncio

from pixelgarden import (
    AchievementTemplate,
    GameLoop,
    GardenSettings,
    RetryPolicy,
    configure_logging,
    create_engine,
    save_with_retry,
)


def announce(achievement: AchievementTemplate) -> None:
    print(f"*** Achievement unlocked: {achievement.name} ({achievement.description})")


async def main() -> None:
    settings = GardenSettings()
    configure_logging(settings.log_level)

    engine = create_engine(settings)
    restored = await engine.initialize()
    print(f"{'Restored' if restored else 'New'} garden at {settings.save_path}")
    engine.set_achievement_listener(announce)

    # Spend the starting gold on wheat, then let it grow
    while engine.can_purchase_entity("p1") and engine.currency >= (engine.producer_cost("p1") or 0):
        engine.purchase_entity("p1")
    for entity in engine.entities():
        engine.level_up_entity(entity.id)

    # Fast-forward: one simulated minute per tick
    await GameLoop(engine, interval=0.0, dt=60.0).run(ticks=10)
    engine.purchase_global_upgrade("u1")

    snapshot = engine.snapshot()
    print(f"Currency: {snapshot.currency:.1f}")
    print(f"Level {snapshot.level} ({snapshot.biome.value}), capacity {snapshot.capacity}")
    print(f"Yield: {snapshot.total_yield:.2f}/s at x{snapshot.global_multiplier:.2f}")
    for entity in snapshot.entities:
        print(f"  {entity.id}  {entity.display_name:<12} lvl {entity.level}")

    ok = await save_with_retry(
        engine,
        RetryPolicy.from_settings(settings),
        on_failure=lambda attempt: print(f"Save attempt {attempt} failed, retrying..."),
    )
    await engine.flush()
    print("Saved." if ok else "Save failed.")


if __name__ == "__main__":
    asyncio.run(main())
