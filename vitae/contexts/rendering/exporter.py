"""
PDF Export

Turns the rendered preview HTML into a downloadable PDF named after the
résumé owner. Page geometry comes from export.yaml; the HTML-to-PDF step is a
pluggable writer (weasyprint by default).
"""

import os
import re
import shutil
import tempfile
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from dotenv import load_dotenv

from vitae.contexts.rendering.exceptions import ExportFailure
from vitae.contexts.rendering.logger import _log_debug, _log_info, log_export_result
from vitae.contexts.rendering.theme_resolver import load_export_config
from vitae.utils.pdf_processing import page_count

load_dotenv()
EXPORT_PATH = Path(os.getenv("EXPORT_PATH", "outs/exports"))

# Element every renderer template wraps the résumé in
PREVIEW_ANCHOR = 'id="resume-preview"'

# Characters that cannot appear in a file name on common filesystems
_UNSAFE_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|\x00-\x1f]')

PdfWriter = Callable[[str, Path, str], None]


@dataclass
class ExportResult:
    """
    Result of a PDF export.

    Attributes:
        success: Whether the PDF was written
        pdf_path: Path to the written PDF (None if failed)
        page_count: Number of pages in the PDF (None if not available)
        error: Failure message shown to the user
    """

    success: bool
    pdf_path: Optional[Path] = None
    page_count: Optional[int] = None
    error: str = ""


def export_filename(full_name: str, default_name: str = "Resume", extension: str = ".pdf") -> str:
    """
    Build the download file name from the identity's full name.

    Example:
        >>> export_filename("Jane Doe")
        'Jane Doe.pdf'
        >>> export_filename("   ")
        'Resume.pdf'
    """
    name = _UNSAFE_FILENAME_CHARS.sub("-", full_name or "").strip()
    return f"{name or default_name}{extension}"


def page_css(page_config: Dict[str, Any]) -> str:
    """Build the @page rule for the configured size, orientation and margin."""
    return (
        f"@page {{ size: {page_config['size']} {page_config['orientation']}; "
        f"margin: {page_config['margin']}; }}"
    )


def write_pdf_with_weasyprint(html: str, pdf_path: Path, stylesheet: str) -> None:
    """Render HTML to a PDF file with weasyprint."""
    from weasyprint import CSS, HTML

    HTML(string=html).write_pdf(str(pdf_path), stylesheets=[CSS(string=stylesheet)])


class PdfExporter:
    """
    Writes rendered résumé HTML to PDF files in an output directory.

    Attributes:
        output_dir: Directory receiving exported PDFs
        config: Export settings (page geometry, default filename, extension)
        writer: Callable (html, pdf_path, stylesheet) that produces the PDF
    """

    def __init__(
        self,
        output_dir: Path = None,
        config: Dict[str, Any] = None,
        writer: PdfWriter = None,
    ):
        self.output_dir = Path(output_dir) if output_dir is not None else EXPORT_PATH
        self.config = config if config is not None else load_export_config()
        self.writer = writer if writer is not None else write_pdf_with_weasyprint

    def filename_for(self, full_name: str) -> str:
        return export_filename(
            full_name,
            default_name=self.config["default_filename"],
            extension=self.config["extension"],
        )

    def export(self, html: str, full_name: str) -> ExportResult:
        """
        Export rendered HTML to "<full name>.pdf".

        The PDF is written to a temporary file first and moved into place, so a
        failed export never leaves a truncated file behind.

        Args:
            html: Output of a renderer's render()
            full_name: Identity full name used for the file name

        Returns:
            ExportResult with the PDF path and page count

        Raises:
            ExportFailure: If the preview is missing or the writer fails
        """
        filename = self.filename_for(full_name)

        if not html or PREVIEW_ANCHOR not in html:
            raise ExportFailure("Resume preview not rendered", filename=filename)

        pdf_path = self.output_dir / filename
        _log_info(f"Exporting {filename}")
        _log_debug(f"  Output directory: {self.output_dir}")

        start_time = time.time()
        temp_path = None
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            fd, temp_path = tempfile.mkstemp(dir=self.output_dir, suffix=".pdf.tmp")
            os.close(fd)
            self.writer(html, Path(temp_path), page_css(self.config["page"]))
            shutil.move(temp_path, pdf_path)
        except Exception as e:
            if temp_path is not None:
                Path(temp_path).unlink(missing_ok=True)
            result = ExportResult(success=False, error=f"Failed to generate PDF: {e}")
            log_export_result(filename, result, time.time() - start_time)
            raise ExportFailure("Failed to generate PDF", filename=filename, original_error=e) from e

        result = ExportResult(success=True, pdf_path=pdf_path, page_count=page_count(pdf_path))
        log_export_result(filename, result, time.time() - start_time)
        return result
