"""
Editing context logger.

Provides logging interface for section editors with automatic [editing] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[editing]"


def _log_info(message: str) -> None:
    """Log info message with [editing] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [editing] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [editing] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [editing] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_suggestion_outcome(editor_name: str, outcome) -> None:
    """
    Log the result of a suggestion request.

    Args:
        editor_name: "skills" or "summary"
        outcome: SuggestionOutcome returned by the editor
    """
    if outcome.busy:
        _log_debug(f"{editor_name}: suggestion already in flight, request ignored")
    elif outcome.applied:
        if outcome.added:
            _log_info(f"{editor_name}: merged {len(outcome.added)} suggestion(s)")
        else:
            _log_info(f"{editor_name}: suggestion applied")
    else:
        _log_warning(f"{editor_name}: {outcome.error}")
