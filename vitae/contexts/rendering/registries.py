"""
Template Registry

Loads and caches the Jinja2 HTML templates used by the renderers.
"""

import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

load_dotenv()
TEMPLATES_PATH = Path(os.getenv("VITAE_TEMPLATES_PATH", Path(__file__).parent / "templates"))
TEMPLATE_FILENAME = "resume.html.jinja"


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for HTML rendering.

    Templates are stored in vitae/contexts/rendering/templates/{theme}/resume.html.jinja.
    Output is autoescaped, so résumé text can never inject markup.
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Base path for theme directories. Defaults to
                            VITAE_TEMPLATES_PATH from environment
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def get_template(self, theme_template: str) -> Template:
        """
        Get a template by theme directory name, loading and caching it if necessary.

        Args:
            theme_template: Name of the theme's template directory (e.g., 'plain')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if theme_template in self._cache:
            return self._cache[theme_template]

        template_path = f"{theme_template}/{TEMPLATE_FILENAME}"

        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for theme '{theme_template}' at {self.templates_path / template_path}"
            ) from e

        self._cache[theme_template] = template
        return template

    def get_template_path(self, theme_template: str) -> Path:
        return self.templates_path / theme_template / TEMPLATE_FILENAME

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, theme_template: str) -> bool:
        return theme_template in self._cache
