"""Custom exceptions for the rendering context."""

from pathlib import Path
from typing import Optional


class TemplateRenderError(Exception):
    """
    Exception raised when a renderer's HTML template fails to render.

    Attributes:
        message: Error description
        theme_name: Theme whose template failed (e.g., 'plain')
        template_path: Path to the template file
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        theme_name: Optional[str] = None,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.theme_name = theme_name
        self.template_path = template_path
        self.original_error = original_error

        parts = [message]
        if theme_name:
            parts.append(f"Theme: {theme_name}")
        if template_path:
            parts.append(f"Template: {template_path}")
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))


class ExportFailure(Exception):
    """
    Exception raised when the rendered preview cannot be turned into a PDF.

    Shown to the user as a blocking alert. The résumé and session state are
    unaffected and the export can be retried.

    Attributes:
        message: User-facing error description
        filename: Target file name (e.g., 'Jane Doe.pdf'), if known
        original_error: The writer exception, if any
    """

    def __init__(
        self,
        message: str,
        filename: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.filename = filename
        self.original_error = original_error

        parts = [message]
        if filename:
            parts.append(f"File: {filename}")
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))
