"""
Fruit Matchmaking - Bidirectional compatibility scoring for apples and oranges.

Packages:
- scorer: attribute scorers, directional/mutual scores, ranking, match reasons
- llm: prompt assembly and template fallback for match explanations
- schemas: validated JSON wire records
- config_loader: YAML configuration
"""

__version__ = "1.0.0"
