"""LLM Module - Prompt assembly for match explanations."""
from matchmaking.llm.system_prompts import MATCH_EXPLANATION_SYSTEM_PROMPT
from matchmaking.llm.prompts import (
    describe_attributes, describe_preferences,
    build_match_explanation_prompt, generate_fallback_message
)

__all__ = [
    'MATCH_EXPLANATION_SYSTEM_PROMPT',
    'describe_attributes', 'describe_preferences',
    'build_match_explanation_prompt', 'generate_fallback_message'
]
