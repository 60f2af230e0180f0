#!/usr/bin/env python3
"""
Compatibility - Directional and mutual compatibility scores.

Directional score (seeker -> candidate):
- start from base_score
- add one attribute contribution per preference the seeker has stated
- clamp(min_score, max_score, total)

Mutual score (A <-> B):
- geometric mean of A->B and B->A, rounded to one decimal
- zero if either direction is zero
"""

from typing import Dict, Any, Optional
import logging
import math

from matchmaking.config_loader import ScorerConfig, DEFAULT_SCORER_CONFIG
from matchmaking.scorer.models import Fruit
from matchmaking.scorer.attributes import (
    score_numeric_attribute,
    score_boolean_attribute,
    score_enum_attribute,
)

logger = logging.getLogger(__name__)


def round_score(value: float) -> float:
    """Round half-up to one decimal place (8.25 -> 8.3, not 8.2)."""
    return math.floor(value * 10 + 0.5) / 10


def score_breakdown(
    seeker: Fruit,
    candidate: Fruit,
    config: Optional[ScorerConfig] = None
) -> Dict[str, Any]:
    """
    Score the seeker's preferences against the candidate's attributes.

    Only dimensions where the seeker stated a preference appear in
    'contributions'.

    Returns:
        Dict with base, contributions (dimension -> points), raw (unclamped
        total) and score (clamped directional score)
    """
    cfg = config or DEFAULT_SCORER_CONFIG
    prefs = seeker.preferences
    attrs = candidate.attributes

    contributions: Dict[str, float] = {}

    if prefs.size is not None:
        contributions['size'] = score_numeric_attribute(prefs.size, attrs.size, cfg)
    if prefs.weight is not None:
        contributions['weight'] = score_numeric_attribute(prefs.weight, attrs.weight, cfg)
    if prefs.has_stem is not None:
        contributions['has_stem'] = score_boolean_attribute(prefs.has_stem, attrs.has_stem, cfg)
    if prefs.has_leaf is not None:
        contributions['has_leaf'] = score_boolean_attribute(prefs.has_leaf, attrs.has_leaf, cfg)
    if prefs.has_worm is not None:
        contributions['has_worm'] = score_boolean_attribute(prefs.has_worm, attrs.has_worm, cfg)
    if prefs.has_chemicals is not None:
        contributions['has_chemicals'] = score_boolean_attribute(
            prefs.has_chemicals, attrs.has_chemicals, cfg
        )
    if prefs.shine_factor is not None:
        contributions['shine_factor'] = score_enum_attribute(
            prefs.shine_factor, attrs.shine_factor, cfg
        )

    raw_score = cfg.base_score + sum(contributions.values())
    score = max(cfg.min_score, min(cfg.max_score, raw_score))

    return {
        'base': cfg.base_score,
        'contributions': contributions,
        'raw': raw_score,
        'score': score
    }


def calculate_compatibility_score(
    seeker: Fruit,
    candidate: Fruit,
    config: Optional[ScorerConfig] = None
) -> float:
    """Directional compatibility of candidate as seen by seeker (0-100)."""
    return score_breakdown(seeker, candidate, config)['score']


def combine_scores(score_a_to_b: float, score_b_to_a: float) -> float:
    """
    Geometric mean of two directional scores, unrounded.

    Raises:
        ValueError: If either score is negative (clamping was bypassed)
    """
    if score_a_to_b < 0 or score_b_to_a < 0:
        raise ValueError(
            f"Directional scores must be non-negative, got {score_a_to_b} and {score_b_to_a}"
        )
    return math.sqrt(score_a_to_b * score_b_to_a)


def calculate_mutual_score(
    fruit_a: Fruit,
    fruit_b: Fruit,
    config: Optional[ScorerConfig] = None
) -> float:
    """Mutual compatibility of two fruits (0-100, one decimal)."""
    a_to_b = calculate_compatibility_score(fruit_a, fruit_b, config)
    b_to_a = calculate_compatibility_score(fruit_b, fruit_a, config)
    mutual = round_score(combine_scores(a_to_b, b_to_a))

    logger.debug(f"Mutual {fruit_a.id}<->{fruit_b.id}: a->b={a_to_b:.2f}, b->a={b_to_a:.2f}, mutual={mutual}")
    return mutual
