"""
Rendering Context

Responsibilities:
- Projects a résumé snapshot into a neutral layout tree (section inclusion,
  field selection, date formatting, skill columns)
- Renders the layout through one of two themed HTML templates
- Formats the layout as markdown for terminal previews
- Exports rendered HTML to PDF

Owns: Layout traversal, theme presets, HTML templates, PDF output
Never: Mutates the résumé or holds state between renders
"""

from vitae.contexts.rendering.exceptions import ExportFailure, TemplateRenderError
from vitae.contexts.rendering.exporter import ExportResult, PdfExporter, export_filename
from vitae.contexts.rendering.layout import (
    ResumeLayout,
    SectionKind,
    build_layout,
    date_range_label,
    format_month,
    split_columns,
)
from vitae.contexts.rendering.markdown_formatter import format_layout_markdown
from vitae.contexts.rendering.renderers import (
    DecoratedRenderer,
    PlainRenderer,
    Renderer,
    renderer_for_sector,
)

__all__ = [
    # Layout traversal
    "build_layout",
    "ResumeLayout",
    "SectionKind",
    "format_month",
    "date_range_label",
    "split_columns",
    # Renderers
    "Renderer",
    "PlainRenderer",
    "DecoratedRenderer",
    "renderer_for_sector",
    "format_layout_markdown",
    # Export
    "PdfExporter",
    "ExportResult",
    "export_filename",
    # Errors
    "ExportFailure",
    "TemplateRenderError",
]
