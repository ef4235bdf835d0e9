"""Custom exceptions for the suggestion context."""

from typing import Optional


class SuggestionError(Exception):
    """
    Base class for suggestion failures.

    Every subclass is caught by the requesting editor and shown as an inline,
    field-local message; the résumé is never touched.

    Attributes:
        message: User-facing error description
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidInput(SuggestionError):
    """
    Raised when a suggestion is requested with empty required input.

    Attributes:
        field: Name of the input that was blank (e.g., "role_title", "hints")
    """

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class UpstreamError(SuggestionError):
    """
    Raised when the LLM call fails or returns unusable content.

    Safe to retry immediately.

    Attributes:
        provider: Provider name (e.g., "openai/gpt-4o-mini"), if known
        original_error: The provider exception, if any
    """

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.provider = provider
        self.original_error = original_error
        super().__init__(message)

    def __str__(self) -> str:
        parts = [self.message]
        if self.provider:
            parts.append(f"Provider: {self.provider}")
        if self.original_error:
            parts.append(f"Original error: {self.original_error}")
        return "\n".join(parts)
