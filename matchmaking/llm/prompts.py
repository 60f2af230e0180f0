#!/usr/bin/env python3
"""
Match explanation prompts.

Builds the text sent to the LLM for a new fruit's match results, plus the
template message shown when no LLM response is available. Nothing here
talks to a model.
"""

from typing import List, Optional

from matchmaking.scorer.models import Fruit, FruitType, Match, NumericPreference
from matchmaking.scorer.reasons import (
    generate_match_reasons, format_number, MUTUAL_SCORE_SUFFIX
)

EXCELLENT_MATCH_THRESHOLD = 80.0
GOOD_MATCH_THRESHOLD = 60.0
FALLBACK_REASON_COUNT = 2


def _plural(fruit_type: FruitType) -> str:
    return f"{fruit_type.value}s"


def _key_reasons(seeker: Fruit, match: Match) -> List[str]:
    """Reasons without the trailing mutual score line."""
    return [
        r for r in generate_match_reasons(seeker, match)
        if not r.endswith(MUTUAL_SCORE_SUFFIX)
    ]


def _yes_no(value: Optional[bool], yes: str, no: str) -> Optional[str]:
    if value is None:
        return None
    return yes if value else no


def _range_text(label: str, preference: Optional[NumericPreference]) -> Optional[str]:
    if preference is None or not preference.is_active:
        return None
    if preference.min is not None and preference.max is not None:
        return f"{label} between {format_number(preference.min)} and {format_number(preference.max)}"
    if preference.min is not None:
        return f"{label} of at least {format_number(preference.min)}"
    return f"{label} of at most {format_number(preference.max)}"


def describe_attributes(fruit: Fruit) -> str:
    """First-person description of a fruit's known attributes."""
    attrs = fruit.attributes
    parts = []

    if attrs.size is not None:
        parts.append(f"my size is {format_number(attrs.size)}")
    if attrs.weight is not None:
        parts.append(f"I weigh {format_number(attrs.weight)}g")

    for text in (
        _yes_no(attrs.has_stem, "I have a stem", "I have no stem"),
        _yes_no(attrs.has_leaf, "I have a leaf", "I have no leaf"),
        _yes_no(attrs.has_worm, "I have a worm", "I am worm-free"),
        _yes_no(attrs.has_chemicals, "I was treated with chemicals", "I am chemical-free"),
    ):
        if text:
            parts.append(text)

    if attrs.shine_factor is not None:
        parts.append(f"my shine is {attrs.shine_factor.value}")

    intro = f"I'm an {fruit.type.value}."
    if not parts:
        return f"{intro} I'd rather keep a little mystery about myself."
    text = "; ".join(parts)
    return f"{intro} {text[0].upper()}{text[1:]}."


def describe_preferences(fruit: Fruit) -> str:
    """First-person description of what a fruit is looking for."""
    prefs = fruit.preferences
    parts = []

    for text in (_range_text("a size", prefs.size), _range_text("a weight", prefs.weight)):
        if text:
            parts.append(text)

    for text in (
        _yes_no(prefs.has_stem, "a stem", "no stem"),
        _yes_no(prefs.has_leaf, "a leaf", "no leaf"),
        _yes_no(prefs.has_worm, "a worm", "no worm"),
        _yes_no(prefs.has_chemicals, "chemical treatment", "no chemicals"),
    ):
        if text:
            parts.append(text)

    if prefs.shine_factor is not None:
        if prefs.shine_factor:
            shines = " or ".join(sorted(s.value for s in prefs.shine_factor))
            parts.append(f"a shine that is {shines}")
        else:
            parts.append("no particular shine at all")

    wanted = _plural(fruit.type.opposite())
    if not parts:
        return f"I'm open to all {wanted}!"
    return f"I'm looking for {wanted} with {', '.join(parts)}."


def build_match_explanation_prompt(
    fruit: Fruit,
    matches: List[Match],
    attributes_text: str,
    preferences_text: str
) -> str:
    """
    Build the user prompt describing a new fruit and its matches.

    Args:
        fruit: The fruit seeking matches
        matches: Ranked matches for the fruit
        attributes_text: The fruit's self-description
        preferences_text: The fruit's description of what it wants

    Returns:
        Prompt text to pair with MATCH_EXPLANATION_SYSTEM_PROMPT
    """
    match_blocks = []
    for i, match in enumerate(matches, start=1):
        factors = "\n  ".join(f"• {r}" for r in _key_reasons(fruit, match))
        match_blocks.append(
            f"Match {i}: {match.fruit.type.value} (ID: {match.fruit_id})\n"
            f"- Mutual Compatibility: {format_number(match.mutual_score)}%\n"
            f"- Key compatibility factors:\n"
            f"  {factors}"
        )

    return (
        f"A new {fruit.type.value} has joined the matchmaking service!\n\n"
        f"They describe themselves as:\n\"{attributes_text}\"\n\n"
        f"They're looking for:\n\"{preferences_text}\"\n\n"
        f"I've analyzed {len(matches)} potential matches:\n\n"
        + "\n\n".join(match_blocks)
        + f"\n\nPlease communicate these results to the {fruit.type.value} in a friendly, "
        f"encouraging way. Highlight the best match(es) and explain why they're compatible "
        f"based on the specific attributes and preferences mentioned. Keep it concise and natural."
    )


def generate_fallback_message(fruit: Fruit, matches: List[Match]) -> str:
    """Template message used when the LLM explanation is unavailable."""
    opposite = fruit.type.opposite()

    if not matches:
        return (f"No matches found at the moment. Don't worry! New {_plural(opposite)} "
                f"are joining all the time. Check back soon!")

    best = matches[0]
    score = format_number(best.mutual_score)
    noun = "match" if len(matches) == 1 else "matches"

    message = f"Great news! We found {len(matches)} potential {noun} for you. "

    if best.mutual_score >= EXCELLENT_MATCH_THRESHOLD:
        message += (f"Your top match is an {opposite.value} with a {score}% compatibility score. "
                    f"This is an excellent match! ")
    elif best.mutual_score >= GOOD_MATCH_THRESHOLD:
        message += (f"Your top match is an {opposite.value} with a {score}% compatibility score. "
                    f"This could be a great connection! ")
    else:
        message += (f"Your best option is an {opposite.value} with a {score}% compatibility score. "
                    f"There's potential here! ")

    top_reasons = _key_reasons(fruit, best)[:FALLBACK_REASON_COUNT]
    if top_reasons:
        message += f"They match your preferences in key areas: {', and '.join(top_reasons)}."

    return message.strip()
