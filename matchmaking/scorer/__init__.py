#!/usr/bin/env python3
"""
Scoring Module - Bidirectional compatibility scoring and ranking.

Public API:
- MatchingService: Configured ranking orchestrator
- find_top_matches / find_top_matches_in_pool: Rank candidates for a seeker
- calculate_compatibility_score / calculate_mutual_score: Pairwise scores
- generate_match_reasons: Satisfied-preference summary for a match

Modules:

- models.py: Data structures (Fruit, FruitAttributes, FruitPreferences, Match)
- attributes.py: Numeric, boolean and enum attribute scorers
- compatibility.py: Directional score, mutual score, rounding
- ranking.py: Candidate scoring, sorting and truncation
- reasons.py: Match reasons
- service.py: MatchingService orchestrator
"""

from matchmaking.scorer.models import (
    Fruit, FruitType, FruitAttributes, FruitPreferences,
    NumericPreference, ShineFactor, Match
)
from matchmaking.scorer.compatibility import (
    calculate_compatibility_score, calculate_mutual_score
)
from matchmaking.scorer.ranking import find_top_matches, find_top_matches_in_pool
from matchmaking.scorer.reasons import generate_match_reasons
from matchmaking.scorer.service import MatchingService

__all__ = [
    'MatchingService', 'find_top_matches', 'find_top_matches_in_pool',
    'calculate_compatibility_score', 'calculate_mutual_score',
    'generate_match_reasons',
    'Fruit', 'FruitType', 'FruitAttributes', 'FruitPreferences',
    'NumericPreference', 'ShineFactor', 'Match'
]
