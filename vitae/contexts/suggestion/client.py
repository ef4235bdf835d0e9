"""
Suggestion Client

LLM-backed suggestions for the skills and summary editors. One prompt string
goes out, one free-text block comes back; the client parses it and converts
every failure into InvalidInput or UpstreamError.

Merging a suggestion into the résumé is the caller's job (see
vitae.contexts.editing.editors).
"""

import time
from typing import List

from vitae.contexts.suggestion.exceptions import InvalidInput, UpstreamError
from vitae.contexts.suggestion.logger import _log_error, log_llm_call
from vitae.contexts.suggestion.prompts import SKILLS_PROMPT, SUMMARY_PROMPT
from vitae.utils.llm import LLMProvider, get_provider
from vitae.utils.text_processing import split_delimited

MAX_SKILLS = 10


def parse_skills_response(text: str, limit: int = MAX_SKILLS) -> List[str]:
    """
    Parse a comma-delimited LLM response into skill names.

    Args:
        text: Raw response text
        limit: Maximum number of skills kept

    Returns:
        Trimmed, non-empty items in response order, capped at limit

    Example:
        >>> parse_skills_response(" Python,  SQL ,,Docker ")
        ['Python', 'SQL', 'Docker']
    """
    return split_delimited(text or "", ",")[:limit]


class SuggestionClient:
    """
    Skill and summary suggestions from an LLM provider.

    The provider is created on first use, so constructing a client never needs
    API credentials.
    """

    def __init__(self, provider: LLMProvider = None, provider_name: str = None, model: str = None):
        """
        Args:
            provider: Ready provider instance (tests pass a fake here)
            provider_name: Provider to create lazily when provider is None
            model: Model to request when creating the provider
        """
        self._provider = provider
        self._provider_name = provider_name
        self._model = model

    @property
    def provider(self) -> LLMProvider:
        if self._provider is None:
            self._provider = get_provider(self._provider_name, self._model)
        return self._provider

    def _generate(self, kind: str, prompt: str, failure_message: str) -> str:
        """Run one LLM call, converting any provider failure into UpstreamError."""
        start = time.time()
        try:
            provider = self.provider
            response = provider.generate(prompt)
        except Exception as e:
            # Every provider/SDK failure crosses this boundary as UpstreamError
            _log_error(f"{kind} suggestion failed: {type(e).__name__}: {e}")
            raise UpstreamError(failure_message, provider=self._provider_name, original_error=e) from e

        log_llm_call(kind, provider.name, response, time.time() - start)
        return response.content or ""

    def suggest_skills(self, role_title: str) -> List[str]:
        """
        Suggest up to MAX_SKILLS skills for a role.

        Args:
            role_title: Target role (e.g., "Data Engineer")

        Returns:
            Ordered list of at most MAX_SKILLS skill names

        Raises:
            InvalidInput: If role_title is blank
            UpstreamError: If the call fails or no skills can be parsed
        """
        if not role_title or not role_title.strip():
            raise InvalidInput("Job role is required", field="role_title")

        failure = "Failed to generate skills. Please try again."
        prompt = SKILLS_PROMPT.format(count=MAX_SKILLS, role=role_title.strip())
        skills = parse_skills_response(self._generate("skills", prompt, failure))
        if not skills:
            _log_error("skills suggestion returned no parsable text")
            raise UpstreamError(failure, provider=self.provider.name)
        return skills

    def suggest_summary(self, hints: str) -> str:
        """
        Write a summary paragraph from free-text key points.

        Args:
            hints: Key points supplied by the user

        Returns:
            Trimmed response text, verbatim

        Raises:
            InvalidInput: If hints is blank
            UpstreamError: If the call fails or returns empty text
        """
        if not hints or not hints.strip():
            raise InvalidInput("Key points are required", field="hints")

        failure = "Failed to generate summary. Please try again."
        summary = self._generate("summary", SUMMARY_PROMPT.format(hints=hints.strip()), failure).strip()
        if not summary:
            _log_error("summary suggestion returned empty text")
            raise UpstreamError(failure, provider=self.provider.name)
        return summary
