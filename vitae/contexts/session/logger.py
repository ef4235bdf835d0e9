"""
Session context logger.

Provides logging interface for the session controller with automatic [session] prefix.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

load_dotenv()

CONTEXT_PREFIX = "[session]"


def setup_session_logger(log_dir: Path = None, console_level: str = "INFO") -> Path:
    """
    Setup logger for a résumé-building session.

    Configures loguru with provenance tracking plus the storage location and
    suggestion provider in use.

    Args:
        log_dir: Directory for this session's log file (default: LOGS_PATH)
        console_level: Minimum level echoed to the console

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="session",
        log_dir=log_dir,
        extra_provenance={
            "Storage": os.getenv("VITAE_STORAGE_PATH", "outs/storage"),
            "LLM provider": os.getenv("LLM_PROVIDER", "openai"),
        },
        console_level=console_level,
    )


def _log_info(message: str) -> None:
    """Log info message with [session] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [session] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [session] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [session] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [session] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_state_change(previous, current, sector=None) -> None:
    """Log a session state transition."""
    if sector is not None:
        _log_info(f"{previous.value} -> {current.value} (sector: {sector.value})")
    else:
        _log_info(f"{previous.value} -> {current.value}")
