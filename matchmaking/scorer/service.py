#!/usr/bin/env python3
"""
Matching Service - Configured entry point to the scoring engine.

Binds ScorerConfig (point values) and RankingConfig (top_k, worker pool)
so callers such as the CLI or an HTTP layer do not pass them around.
Performs no I/O: candidate pools are supplied by the caller.
"""

from typing import List, Optional, Sequence
import logging

from matchmaking.config_loader import AppConfig, ScorerConfig, RankingConfig
from matchmaking.scorer.models import Fruit, Match
from matchmaking.scorer.compatibility import calculate_mutual_score
from matchmaking.scorer.ranking import find_top_matches, find_top_matches_in_pool
from matchmaking.scorer.reasons import generate_match_reasons

logger = logging.getLogger(__name__)


class MatchingService:
    """
    Service for ranking candidate fruits against a seeker.

    Results are truncated to ranking.top_k unless a limit is given per call.
    """

    def __init__(
        self,
        scorer_config: Optional[ScorerConfig] = None,
        ranking_config: Optional[RankingConfig] = None
    ):
        self.scorer_config = scorer_config or ScorerConfig()
        self.ranking_config = ranking_config or RankingConfig()
        logger.debug(
            f"MatchingService ready: top_k={self.ranking_config.top_k}, "
            f"max_workers={self.ranking_config.max_workers}"
        )

    @classmethod
    def from_config(cls, config: AppConfig) -> "MatchingService":
        return cls(scorer_config=config.scorer, ranking_config=config.ranking)

    def _limit(self, limit: Optional[int]) -> int:
        return self.ranking_config.top_k if limit is None else limit

    def rank(
        self,
        seeker: Fruit,
        candidates: Sequence[Fruit],
        limit: Optional[int] = None
    ) -> List[Match]:
        """Rank candidates that are already known to be of the opposite type."""
        return find_top_matches(
            seeker,
            candidates,
            self._limit(limit),
            config=self.scorer_config,
            max_workers=self.ranking_config.max_workers
        )

    def rank_pool(
        self,
        seeker: Fruit,
        pool: Sequence[Fruit],
        limit: Optional[int] = None
    ) -> List[Match]:
        """Rank the opposite-type fruits of a mixed pool."""
        return find_top_matches_in_pool(
            seeker,
            pool,
            self._limit(limit),
            config=self.scorer_config,
            max_workers=self.ranking_config.max_workers
        )

    def mutual_score(self, fruit_a: Fruit, fruit_b: Fruit) -> float:
        return calculate_mutual_score(fruit_a, fruit_b, self.scorer_config)

    def explain(self, seeker: Fruit, match: Match) -> List[str]:
        return generate_match_reasons(seeker, match)
