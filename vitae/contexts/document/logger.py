"""
Document context logger.

Provides logging interface for the document context with automatic [document] prefix.
All document modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[document]"


# Wrapper functions with automatic [document] prefix


def _log_info(message: str) -> None:
    """Log info message with [document] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [document] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [document] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [document] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level document-specific logging helpers


def log_restore_result(storage_description: str, restored: bool, error=None) -> None:
    """
    Log the outcome of restoring the résumé at store start-up.

    Args:
        storage_description: Human-readable storage location
        restored: Whether a stored document was loaded
        error: PersistedStateCorrupt raised while loading, if any
    """
    if error is not None:
        _log_warning(f"Discarding stored résumé from {storage_description}: {error.message}")
        if error.payload:
            logger.opt(raw=True).debug(f"Corrupt payload:\n{error.payload}\n")
    elif restored:
        _log_info(f"Restored résumé from {storage_description}")
    else:
        _log_debug(f"No stored résumé in {storage_description}, starting empty")


def log_patch(fields) -> None:
    """Log which top-level fields a patch replaced."""
    _log_debug(f"Patched fields: {', '.join(fields)}")
