#!/usr/bin/env python3
"""
Ranking - Score a candidate pool against a seeker and keep the top matches.

Candidates may be scored on a thread pool; results are always collected in
input order and sorted once on the calling thread, so equal mutual scores
keep their input order whatever max_workers is.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence
import logging

from matchmaking.config_loader import ScorerConfig
from matchmaking.scorer.models import Fruit, Match
from matchmaking.scorer.compatibility import (
    calculate_compatibility_score,
    combine_scores,
    round_score,
)

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 5
UNKNOWN_FRUIT_ID = "unknown"


def score_candidate(
    seeker: Fruit,
    candidate: Fruit,
    config: Optional[ScorerConfig] = None
) -> Match:
    """Build the Match record for one candidate."""
    seeker_to_fruit = calculate_compatibility_score(seeker, candidate, config)
    fruit_to_seeker = calculate_compatibility_score(candidate, seeker, config)
    mutual = combine_scores(seeker_to_fruit, fruit_to_seeker)

    return Match(
        fruit=candidate,
        fruit_id=candidate.id or UNKNOWN_FRUIT_ID,
        seeker_to_fruit_score=round_score(seeker_to_fruit),
        fruit_to_seeker_score=round_score(fruit_to_seeker),
        mutual_score=round_score(mutual),
    )


def find_top_matches(
    seeker: Fruit,
    candidates: Sequence[Fruit],
    limit: int = DEFAULT_LIMIT,
    config: Optional[ScorerConfig] = None,
    max_workers: Optional[int] = None
) -> List[Match]:
    """
    Rank candidates by mutual score (highest first).

    Candidates are assumed to be of the opposite type already; see
    find_top_matches_in_pool for type filtering.

    Args:
        seeker: Fruit looking for matches
        candidates: Pool of potential matches
        limit: Maximum number of matches to return (>= 0)
        config: Scorer constants, defaults if omitted
        max_workers: Thread pool size for scoring; None or 1 scores inline

    Returns:
        At most `limit` matches, sorted by mutual_score descending. Ties keep
        the order of `candidates`.

    Raises:
        ValueError: If limit is negative
    """
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")

    if not candidates or limit == 0:
        return []

    if max_workers and max_workers > 1 and len(candidates) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            # map() yields in submission order
            scored = list(executor.map(
                lambda candidate: score_candidate(seeker, candidate, config),
                candidates
            ))
    else:
        scored = [score_candidate(seeker, candidate, config) for candidate in candidates]

    for match in scored:
        logger.debug(
            f"Candidate {match.fruit_id}: seeker->fruit={match.seeker_to_fruit_score}, "
            f"fruit->seeker={match.fruit_to_seeker_score}, mutual={match.mutual_score}"
        )

    # list.sort is stable
    scored.sort(key=lambda m: m.mutual_score, reverse=True)
    top = scored[:limit]

    logger.info(f"Ranked {len(scored)} candidates for {seeker.type.value} {seeker.id}, "
                f"returning top {len(top)}")
    return top


def find_top_matches_in_pool(
    seeker: Fruit,
    pool: Sequence[Fruit],
    limit: int = DEFAULT_LIMIT,
    config: Optional[ScorerConfig] = None,
    max_workers: Optional[int] = None
) -> List[Match]:
    """
    Rank the opposite-type fruits of a mixed pool against the seeker.

    Fruits of the seeker's own type, including the seeker itself, are
    skipped before ranking.
    """
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")

    wanted_type = seeker.type.opposite()
    candidates = [fruit for fruit in pool if fruit.type is wanted_type]

    skipped = len(pool) - len(candidates)
    if skipped:
        logger.debug(f"Skipped {skipped} {seeker.type.value}(s) while selecting {wanted_type.value} candidates")

    if not candidates:
        logger.info(f"No {wanted_type.value} candidates available for {seeker.id}")
        return []

    return find_top_matches(seeker, candidates, limit, config=config, max_workers=max_workers)
