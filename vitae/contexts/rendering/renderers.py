"""
Résumé Renderers

Two interchangeable presentation variants over the shared layout traversal.
Both call build_layout() for data selection and differ only in their theme
preset and HTML template; neither owns state beyond its loaded configuration.

Examples:
    >>> renderer = renderer_for_sector(Sector.IT)
    >>> html = renderer.render(store.get())
"""

from typing import Any, Dict, Union

from jinja2 import TemplateError

from vitae.contexts.document.resume_data_structure import ResumeDocument, Sector
from vitae.contexts.rendering.exceptions import TemplateRenderError
from vitae.contexts.rendering.layout import ResumeLayout, build_layout
from vitae.contexts.rendering.logger import log_render
from vitae.contexts.rendering.registries import TemplateRegistry
from vitae.contexts.rendering.theme_resolver import get_theme


class Renderer:
    """
    Base renderer: snapshot -> layout -> themed HTML.

    Subclasses only name their theme preset.

    Attributes:
        theme_name: Key into themes.yaml
        theme: Loaded theme preset (template, headings, colors, ...)
        registry: Template registry used to load the HTML template
    """

    theme_name: str = ""

    def __init__(self, registry: TemplateRegistry = None, theme: Dict[str, Any] = None):
        self.registry = registry if registry is not None else TemplateRegistry()
        self.theme = theme if theme is not None else get_theme(self.theme_name)

    def render(self, snapshot: ResumeDocument) -> str:
        """
        Render a résumé snapshot to HTML.

        Args:
            snapshot: Immutable document from RecordStore.get()

        Returns:
            Complete HTML document containing the #resume-preview element

        Raises:
            TemplateRenderError: If the theme template fails to render
        """
        return self.render_layout(build_layout(snapshot))

    def render_layout(self, layout: ResumeLayout) -> str:
        template_name = self.theme["template"]
        try:
            template = self.registry.get_template(template_name)
            html = template.render(layout=layout, theme=self.theme)
        except TemplateError as e:
            raise TemplateRenderError(
                f"Failed to render {self.theme_name} résumé",
                theme_name=self.theme_name,
                template_path=self.registry.get_template_path(template_name),
                original_error=e,
            ) from e

        log_render(self.theme_name, layout)
        return html


class PlainRenderer(Renderer):
    """Monochrome single-rule layout with upper-case headings."""

    theme_name = "plain"


class DecoratedRenderer(Renderer):
    """Gradient header, per-section accent colours and panelled content."""

    theme_name = "decorated"


SECTOR_RENDERERS = {
    Sector.IT: PlainRenderer,
    Sector.OTHER: DecoratedRenderer,
}


def renderer_for_sector(sector: Union[Sector, str], registry: TemplateRegistry = None) -> Renderer:
    """
    Build the renderer variant for a sector.

    Args:
        sector: Sector or its value ("IT" / "Other")
        registry: Optional shared template registry

    Raises:
        ValueError: If sector is unset or unknown
    """
    if sector is None:
        raise ValueError("Cannot choose a renderer before a sector is selected")
    return SECTOR_RENDERERS[Sector(sector)](registry=registry)
