"""
Suggestion Context

Responsibilities:
- Builds prompts for skill and summary suggestions
- Calls the configured LLM provider (vitae.utils.llm)
- Parses responses and reports failures as InvalidInput / UpstreamError

Owns: Prompt wording, response parsing
Never: Writes to the résumé
"""

from vitae.contexts.suggestion.client import MAX_SKILLS, SuggestionClient, parse_skills_response
from vitae.contexts.suggestion.exceptions import InvalidInput, SuggestionError, UpstreamError

__all__ = [
    "SuggestionClient",
    "parse_skills_response",
    "MAX_SKILLS",
    "SuggestionError",
    "InvalidInput",
    "UpstreamError",
]
