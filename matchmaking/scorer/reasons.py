#!/usr/bin/env python3
"""
Match Reasons - Human-readable list of satisfied preferences.

Reports which of the seeker's preferences the matched fruit satisfies.
Penalties are not reported. Output feeds the LLM explanation prompt and
the template fallback message.
"""

from typing import List, Optional

from matchmaking.scorer.models import Fruit, Match, NumericPreference

MUTUAL_SCORE_SUFFIX = "% mutual compatibility score"


def format_number(value: float) -> str:
    """Render 8.0 as '8' and 7.5 as '7.5'."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _range_reason(
    label: str,
    preference: Optional[NumericPreference],
    value: Optional[float]
) -> Optional[str]:
    # Only closed ranges are reported
    if preference is None or value is None:
        return None
    if preference.min is None or preference.max is None:
        return None
    if preference.min <= value <= preference.max:
        return (f"{label} {format_number(value)} is within preferred range "
                f"{format_number(preference.min)}-{format_number(preference.max)}")
    return None


def generate_match_reasons(seeker: Fruit, match: Match) -> List[str]:
    """
    Summarize why a match was chosen.

    Returns:
        Reasons in a fixed order (size, weight, worm, stem, leaf, chemicals,
        shine), always ending with the mutual score line
    """
    reasons = []
    prefs = seeker.preferences
    attrs = match.fruit.attributes

    size_reason = _range_reason("Size", prefs.size, attrs.size)
    if size_reason:
        reasons.append(size_reason)

    weight_reason = _range_reason("Weight", prefs.weight, attrs.weight)
    if weight_reason:
        reasons.append(weight_reason)

    if prefs.has_worm is False and attrs.has_worm is False:
        reasons.append("Worm-free as preferred")

    if prefs.has_stem is not None and attrs.has_stem == prefs.has_stem:
        reasons.append("Has a stem" if prefs.has_stem else "No stem")

    if prefs.has_leaf is not None and attrs.has_leaf == prefs.has_leaf:
        reasons.append("Has a leaf" if prefs.has_leaf else "No leaf")

    if prefs.has_chemicals is not None and attrs.has_chemicals == prefs.has_chemicals:
        reasons.append("Treated with chemicals" if prefs.has_chemicals else "Chemical-free")

    if prefs.shine_factor is not None and attrs.shine_factor is not None:
        if attrs.shine_factor in prefs.shine_factor:
            reasons.append(f"Shine factor ({attrs.shine_factor.value}) matches preference")

    reasons.append(f"{format_number(match.mutual_score)}{MUTUAL_SCORE_SUFFIX}")

    return reasons
