"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[render]"


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_render(theme_name: str, layout) -> None:
    """Log which sections a render produced."""
    kinds = ", ".join(kind.value for kind in layout.section_kinds) or "header only"
    _log_debug(f"Rendered {theme_name}: {kinds}")


def log_export_result(filename: str, result, elapsed_time: float) -> None:
    """
    Log export result.

    Args:
        filename: Target PDF file name
        result: ExportResult from PdfExporter.export()
        elapsed_time: Time taken to write the PDF
    """
    if result.success:
        _log_success(f"Exported {filename} ({elapsed_time:.2f}s)")
        if result.pdf_path:
            _log_debug(f"  PDF: {result.pdf_path}")
        if result.page_count is not None:
            _log_info(f"  Pages: {result.page_count}")
            if result.page_count > 1:
                _log_warning(f"  {filename} spans {result.page_count} pages")
    else:
        _log_error(f"Export failed for {filename} ({elapsed_time:.2f}s)")
        if result.error:
            _log_error(f"  {result.error}")
