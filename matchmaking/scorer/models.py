#!/usr/bin/env python3
"""
Scoring Models - Data structures for fruits and match results.

Every attribute is independently nullable: None means "unknown", which is
distinct from False / 0. Every preference is independently optional: None
means "no preference stated".
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, FrozenSet


class FruitType(Enum):
    """The two fixed fruit categories."""
    APPLE = "apple"
    ORANGE = "orange"

    def opposite(self) -> "FruitType":
        return FruitType.ORANGE if self is FruitType.APPLE else FruitType.APPLE


class ShineFactor(Enum):
    """Shine factor options (wire values)."""
    DULL = "dull"
    NEUTRAL = "neutral"
    SHINY = "shiny"
    EXTRA_SHINY = "extraShiny"


@dataclass(frozen=True)
class FruitAttributes:
    """Self-reported attributes of a fruit."""
    size: Optional[float] = None
    weight: Optional[float] = None
    has_stem: Optional[bool] = None
    has_leaf: Optional[bool] = None
    has_worm: Optional[bool] = None
    shine_factor: Optional[ShineFactor] = None
    has_chemicals: Optional[bool] = None


@dataclass(frozen=True)
class NumericPreference:
    """Optional lower / upper bound on a numeric attribute."""
    min: Optional[float] = None
    max: Optional[float] = None

    @property
    def is_active(self) -> bool:
        """A range with neither bound is the same as no preference."""
        return self.min is not None or self.max is not None


@dataclass(frozen=True)
class FruitPreferences:
    """
    Sparse preferences over the attribute space.

    Attributes:
        size: Range preference on size
        weight: Range preference on weight
        has_stem: Exact-match requirement
        has_leaf: Exact-match requirement
        has_worm: Exact-match requirement
        shine_factor: Set of acceptable shine factors
        has_chemicals: Exact-match requirement
    """
    size: Optional[NumericPreference] = None
    weight: Optional[NumericPreference] = None
    has_stem: Optional[bool] = None
    has_leaf: Optional[bool] = None
    has_worm: Optional[bool] = None
    shine_factor: Optional[FrozenSet[ShineFactor]] = None
    has_chemicals: Optional[bool] = None


@dataclass(frozen=True)
class Fruit:
    """A fruit looking for (or being considered as) a match."""
    type: FruitType
    attributes: FruitAttributes = field(default_factory=FruitAttributes)
    preferences: FruitPreferences = field(default_factory=FruitPreferences)
    id: Optional[str] = None


@dataclass(frozen=True)
class Match:
    """Scored pairing of a seeker with one candidate fruit."""
    fruit: Fruit
    fruit_id: str
    seeker_to_fruit_score: float
    fruit_to_seeker_score: float
    mutual_score: float
