#!/usr/bin/env python3
"""
Attribute Scorers - Signed point contributions for a single preference.

Each scorer takes one preference (None = not stated) and one candidate
attribute value (None = unknown) and returns the amount to add to the
directional score. Both "not stated" and "unknown" contribute nothing.

Contribution ranges with the default ScorerConfig:
- numeric range:   -20 .. +15
- boolean exact:   -25 .. +15
- enum membership: -15 .. +12
"""

from typing import Optional, FrozenSet

from matchmaking.config_loader import ScorerConfig, DEFAULT_SCORER_CONFIG
from matchmaking.scorer.models import NumericPreference, ShineFactor


def score_numeric_attribute(
    preference: Optional[NumericPreference],
    value: Optional[float],
    config: Optional[ScorerConfig] = None
) -> float:
    """
    Score a numeric attribute (size, weight) against a range preference.

    Out-of-range values take a flat penalty. In-range values earn a bonus
    that depends on where they sit:
    - both bounds: proximity to the midpoint of the window
    - min only: proximity to min, decaying over numeric_one_sided_window units
    - max only: proximity to max, decaying over the same window

    The one-sided window is a fixed number of attribute units and is not
    scaled to the attribute's range, so it is much tighter for weight
    (roughly 0-300) than for size (roughly 0-10).
    """
    cfg = config or DEFAULT_SCORER_CONFIG

    if preference is None or not preference.is_active:
        return 0.0

    if value is None:
        return 0.0

    if preference.min is not None and value < preference.min:
        return -cfg.numeric_out_of_range_penalty

    if preference.max is not None and value > preference.max:
        return -cfg.numeric_out_of_range_penalty

    if preference.min is not None and preference.max is not None:
        half_width = (preference.max - preference.min) / 2
        if half_width == 0:
            # Single-point window and value sits on it
            return cfg.numeric_in_range_bonus
        midpoint = (preference.min + preference.max) / 2
        proximity = 1 - abs(value - midpoint) / half_width
    elif preference.min is not None:
        proximity = 1 - (value - preference.min) / cfg.numeric_one_sided_window
    else:
        proximity = 1 - (preference.max - value) / cfg.numeric_one_sided_window

    return cfg.numeric_in_range_bonus * max(0.0, proximity)


def score_boolean_attribute(
    preference: Optional[bool],
    value: Optional[bool],
    config: Optional[ScorerConfig] = None
) -> float:
    """Score an exact-match boolean (has_stem, has_leaf, has_worm, has_chemicals)."""
    cfg = config or DEFAULT_SCORER_CONFIG

    if preference is None or value is None:
        return 0.0

    if value == preference:
        return cfg.boolean_match_bonus
    return -cfg.boolean_mismatch_penalty


def score_enum_attribute(
    preference: Optional[FrozenSet[ShineFactor]],
    value: Optional[ShineFactor],
    config: Optional[ScorerConfig] = None
) -> float:
    """Score shine_factor membership in the set of acceptable values."""
    cfg = config or DEFAULT_SCORER_CONFIG

    if preference is None or value is None:
        return 0.0

    if value in preference:
        return cfg.enum_match_bonus
    return -cfg.enum_mismatch_penalty
