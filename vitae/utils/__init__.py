"""
Shared utilities for VITAE.

Common functionality used across contexts:
- Logger setup
- LLM provider access
- Text helpers
- PDF inspection
"""

from vitae.utils.text_processing import strip_url_scheme, truncate_display

__all__ = ["strip_url_scheme", "truncate_display"]
