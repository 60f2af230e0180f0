#!/usr/bin/env python3
"""
Test fixtures for fruits.

Engine-level Fruit objects for scorer tests, and the same fruits as raw
camelCase records for schema / CLI tests.
"""
import random
import copy

from matchmaking.scorer.models import (
    Fruit, FruitType, FruitAttributes, FruitPreferences,
    NumericPreference, ShineFactor
)


# ============================================================================
# ENGINE FIXTURES
# ============================================================================

APPLE_NO_PREFERENCES = Fruit(
    id="fruits:apple1",
    type=FruitType.APPLE,
    attributes=FruitAttributes(
        size=7.0, weight=180, has_stem=True, has_leaf=False, has_worm=False,
        shine_factor=ShineFactor.SHINY, has_chemicals=False
    ),
    preferences=FruitPreferences(),
)

ORANGE_PERFECT_MATCH = Fruit(
    id="fruits:orange1",
    type=FruitType.ORANGE,
    attributes=FruitAttributes(
        size=7.5, weight=200, has_stem=False, has_leaf=True, has_worm=False,
        shine_factor=ShineFactor.SHINY, has_chemicals=False
    ),
    preferences=FruitPreferences(),
)

APPLE_WITH_PREFERENCES = Fruit(
    id="fruits:apple2",
    type=FruitType.APPLE,
    attributes=FruitAttributes(
        size=6.0, weight=150, has_stem=True, has_leaf=True, has_worm=False,
        shine_factor=ShineFactor.NEUTRAL, has_chemicals=False
    ),
    preferences=FruitPreferences(
        size=NumericPreference(min=7.0, max=10.0),
        weight=NumericPreference(min=180, max=220),
        has_worm=False,
        shine_factor=frozenset([ShineFactor.SHINY, ShineFactor.EXTRA_SHINY]),
    ),
)

ORANGE_GOOD_MATCH = Fruit(
    id="fruits:orange2",
    type=FruitType.ORANGE,
    attributes=FruitAttributes(
        size=8.0, weight=195, has_stem=False, has_leaf=False, has_worm=False,
        shine_factor=ShineFactor.SHINY, has_chemicals=False
    ),
    preferences=FruitPreferences(has_worm=False, has_chemicals=False),
)

ORANGE_POOR_MATCH = Fruit(
    id="fruits:orange3",
    type=FruitType.ORANGE,
    attributes=FruitAttributes(
        size=4.0, weight=100, has_stem=True, has_leaf=True, has_worm=True,
        shine_factor=ShineFactor.DULL, has_chemicals=True
    ),
    preferences=FruitPreferences(has_worm=True),
)


# ============================================================================
# RAW RECORD FIXTURES (seed-file format)
# ============================================================================

RAW_FRUITS = [
    {
        "id": "fruits:apple2",
        "type": "apple",
        "attributes": {
            "size": 6.0, "weight": 150, "hasStem": True, "hasLeaf": True,
            "hasWorm": False, "shineFactor": "neutral", "hasChemicals": False
        },
        "preferences": {
            "size": {"min": 7.0, "max": 10.0},
            "weight": {"min": 180, "max": 220},
            "hasWorm": False,
            "shineFactor": ["shiny", "extraShiny"]
        }
    },
    {
        "id": "fruits:orange3",
        "type": "orange",
        "attributes": {
            "size": 4.0, "weight": 100, "hasStem": True, "hasLeaf": True,
            "hasWorm": True, "shineFactor": "dull", "hasChemicals": True
        },
        "preferences": {"hasWorm": True}
    },
    {
        "id": "fruits:orange2",
        "type": "orange",
        "attributes": {
            "size": 8.0, "weight": 195, "hasStem": False, "hasLeaf": False,
            "hasWorm": False, "shineFactor": "shiny", "hasChemicals": False
        },
        "preferences": {"hasWorm": False, "hasChemicals": False}
    },
    {
        "id": "fruits:orange1",
        "type": "orange",
        "attributes": {
            "size": 7.5, "weight": 200, "hasStem": False, "hasLeaf": True,
            "hasWorm": False, "shineFactor": "shiny", "hasChemicals": False
        },
        "preferences": {}
    },
    {
        "id": "fruits:apple1",
        "type": "apple",
        "attributes": {
            "size": 7.0, "weight": 180, "hasStem": True, "hasLeaf": False,
            "hasWorm": False, "shineFactor": "shiny", "hasChemicals": None
        },
        "preferences": {}
    },
]


def raw_fruits():
    """Fresh copy of RAW_FRUITS for tests that mutate records."""
    return copy.deepcopy(RAW_FRUITS)


# ============================================================================
# RANDOM FRUITS FOR PROPERTY CHECKS
# ============================================================================

def _maybe(rng: random.Random, value, none_rate: float = 0.3):
    return None if rng.random() < none_rate else value


def _random_range(rng: random.Random, low: float, high: float):
    kind = rng.choice(["none", "empty", "min", "max", "both"])
    if kind == "none":
        return None
    if kind == "empty":
        return NumericPreference()
    a = rng.uniform(low, high)
    b = rng.uniform(low, high)
    if kind == "min":
        return NumericPreference(min=a)
    if kind == "max":
        return NumericPreference(max=a)
    return NumericPreference(min=min(a, b), max=max(a, b))


def random_fruit(rng: random.Random, fruit_type: FruitType, fruit_id: str = None) -> Fruit:
    """Random fruit, including out-of-range numerics and every shine value."""
    shines = list(ShineFactor)
    shine_pref = None
    if rng.random() < 0.6:
        shine_pref = frozenset(rng.sample(shines, rng.randint(0, len(shines))))

    return Fruit(
        id=fruit_id,
        type=fruit_type,
        attributes=FruitAttributes(
            size=_maybe(rng, rng.uniform(-5, 20)),
            weight=_maybe(rng, rng.uniform(-50, 500)),
            has_stem=_maybe(rng, rng.random() < 0.5),
            has_leaf=_maybe(rng, rng.random() < 0.5),
            has_worm=_maybe(rng, rng.random() < 0.5),
            shine_factor=_maybe(rng, rng.choice(shines)),
            has_chemicals=_maybe(rng, rng.random() < 0.5),
        ),
        preferences=FruitPreferences(
            size=_random_range(rng, 0, 15),
            weight=_random_range(rng, 0, 400),
            has_stem=_maybe(rng, rng.random() < 0.5, 0.5),
            has_leaf=_maybe(rng, rng.random() < 0.5, 0.5),
            has_worm=_maybe(rng, rng.random() < 0.5, 0.5),
            shine_factor=shine_pref,
            has_chemicals=_maybe(rng, rng.random() < 0.5, 0.5),
        ),
    )
