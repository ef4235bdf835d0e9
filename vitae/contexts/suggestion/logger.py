"""
Suggestion context logger.

Provides logging interface for the suggestion context with automatic [suggest] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[suggest]"


def _log_info(message: str) -> None:
    """Log info message with [suggest] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [suggest] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [suggest] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_llm_call(kind: str, provider_name: str, response, elapsed_time: float) -> None:
    """
    Log a completed LLM call.

    Args:
        kind: "skills" or "summary"
        provider_name: Provider identifier (e.g., "openai/gpt-4o-mini")
        response: LLMResponse returned by the provider
        elapsed_time: Wall-clock seconds spent in the call
    """
    _log_info(f"{kind} suggestion from {provider_name} ({elapsed_time:.2f}s)")
    _log_debug(f"  Tokens: {response.input_tokens} in / {response.output_tokens} out")
    logger.opt(raw=True).debug(f"{CONTEXT_PREFIX} raw response:\n{response.content}\n")
