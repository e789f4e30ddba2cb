"""Default game content: producers, upgrades, capacity upgrades and achievements."""

from __future__ import annotations

from pixelgarden.catalog.catalog import Catalog
from pixelgarden.catalog.models import (
    AchievementTemplate,
    CapacityUpgradeTemplate,
    ProducerTemplate,
    UpgradeTemplate,
)
from pixelgarden.core.growth import GrowthKind

LINEAR = GrowthKind.LINEAR
EXPONENTIAL = GrowthKind.EXPONENTIAL

PRODUCERS: tuple[ProducerTemplate, ...] = (
    # Farm (levels 1-5)
    ProducerTemplate("p1", "Pixel Wheat", LINEAR, 1, 10, 1, "Basic sustenance.", "The first pixel of life."),
    ProducerTemplate("p2", "Bit Carrot", LINEAR, 3, 50, 2, "Orange and crunchy.", "Rabbits dream in 8-bit."),
    ProducerTemplate("p3", "Data Corn", LINEAR, 8, 150, 3, "It listens.", "Kernels of pure info."),
    ProducerTemplate("p4", "Logic Potato", LINEAR, 15, 400, 4, "Powered by chips.", "Processes starch logic."),
    ProducerTemplate("p5", "Apple Tree", EXPONENTIAL, 5, 1_000, 5, "Gravity defying.", "Sir Isaac was here."),
    # Desert (levels 6-10)
    ProducerTemplate("p6", "Sand Cactus", LINEAR, 40, 2_500, 6, "Spiky business.", "Hugs are not advised."),
    ProducerTemplate("p7", "Aloe Vera", LINEAR, 75, 6_000, 7, "Healing pixels.", "Soothes digital burns."),
    ProducerTemplate("p8", "Dry Bush", LINEAR, 120, 15_000, 8, "Tumbleweed starter.", "Rolls when nobody looks."),
    ProducerTemplate("p9", "Date Palm", EXPONENTIAL, 30, 35_000, 9, "Sweet oasis fruit.", "A mirage made real."),
    ProducerTemplate("p10", "Joshua Tree", EXPONENTIAL, 50, 80_000, 10, "Desert guardian.", "Reaching for the sky."),
    # Jungle (levels 11-15)
    ProducerTemplate("p11", "Wild Fern", LINEAR, 300, 200_000, 11, "Ancient flora.", "Dinosaur snack food."),
    ProducerTemplate("p12", "Creep Vine", LINEAR, 500, 500_000, 12, "It grows fast.", "Climbs without permission."),
    ProducerTemplate("p13", "Cocoa Plant", LINEAR, 800, 1_200_000, 13, "Sweet beans.", "Source of dark gold."),
    ProducerTemplate("p14", "Banana Tree", EXPONENTIAL, 200, 3_000_000, 14, "Potassium rich.", "Slippery when peeled."),
    ProducerTemplate("p15", "Rubber Tree", EXPONENTIAL, 450, 8_000_000, 15, "Elastic profits.", "Bounce back economy."),
)

UPGRADES: tuple[UpgradeTemplate, ...] = (
    UpgradeTemplate("u1", "Rusty Hoe", 100, 1.1, "Better than hands.", "Found in the old barn."),
    UpgradeTemplate("u2", "Water Can", 500, 1.2, "Hydration is key.", "Leaks a bit, but works."),
    UpgradeTemplate("u3", "Fertilizer", 2_000, 1.25, "Smells bad, works good.", "Organic pixel waste."),
    UpgradeTemplate("u4", "Scarecrow", 5_000, 1.3, "Frightens bugs.", "It has a binary brain."),
    UpgradeTemplate("u5", "Sprinkler", 12_000, 1.4, "Auto-watering.", "Advanced irrigation tech."),
    UpgradeTemplate("u6", "Greenhouse", 30_000, 1.5, "Controlled climate.", "Glass walls keep heat."),
    UpgradeTemplate("u7", "Grafting Tool", 75_000, 1.6, "Mix plants.", "Create hybrid pixels."),
    UpgradeTemplate("u8", "Drone", 200_000, 1.7, "Aerial survey.", "Watching from above."),
    UpgradeTemplate("u9", "Hydroponics", 500_000, 1.8, "No soil needed.", "Water is the new earth."),
    UpgradeTemplate("u10", "Solar Lamp", 1_500_000, 2.0, "24/7 Sunlight.", "Harness the sun."),
    UpgradeTemplate("u11", "AI Manager", 5_000_000, 2.2, "Automated farming.", "Neural networks for farming."),
    UpgradeTemplate("u12", "Genetics Lab", 15_000_000, 2.5, "Modify DNA.", "Playing god with pixels."),
    UpgradeTemplate("u13", "Weather Ctrl", 50_000_000, 3.0, "Rain on demand.", "Cloud seeding machine."),
    UpgradeTemplate("u14", "Time Warp", 150_000_000, 4.0, "Faster growth.", "Bend time for crops."),
    UpgradeTemplate("u15", "Gaia Link", 500_000_000, 5.0, "One with nature.", "The planet helps you farm."),
)

CAPACITY_UPGRADES: tuple[CapacityUpgradeTemplate, ...] = (
    CapacityUpgradeTemplate("g1", "Plot Expansion I", 1_000, 2, "Clear some weeds."),
    CapacityUpgradeTemplate("g2", "Plot Expansion II", 5_000, 3, "Buy neighbor's land."),
    CapacityUpgradeTemplate("g3", "Plot Expansion III", 20_000, 5, "Deforest the area."),
    CapacityUpgradeTemplate("g4", "Plot Expansion IV", 100_000, 5, "Terraforming."),
    CapacityUpgradeTemplate("g5", "Plot Expansion V", 500_000, 10, "Pocket Dimension."),
)

ACHIEVEMENTS: tuple[AchievementTemplate, ...] = (
    AchievementTemplate("a1", "First Sprout", lambda c, lvl, n, gps: n >= 1, "Own 1 Plant.", "sprout"),
    AchievementTemplate("a2", "Pocket Money", lambda c, lvl, n, gps: c >= 1_000, "Reach 1,000 Gold.", "coin"),
    AchievementTemplate("a3", "Full House", lambda c, lvl, n, gps: n >= 6, "Have 6 Plants.", "house"),
    AchievementTemplate("a4", "Desert Storm", lambda c, lvl, n, gps: lvl >= 6, "Reach Level 6.", "cactus"),
    AchievementTemplate("a5", "Tycoon", lambda c, lvl, n, gps: gps >= 10_000, "Reach 10,000 GPS.", "bolt"),
    AchievementTemplate(
        "a6", "Millionaire", lambda c, lvl, n, gps: c >= 1_000_000, "Reach 1,000,000 Gold.", "gem"
    ),
)

DEFAULT_CATALOG = Catalog(
    producers=PRODUCERS,
    upgrades=UPGRADES,
    capacity_upgrades=CAPACITY_UPGRADES,
    achievements=ACHIEVEMENTS,
)
