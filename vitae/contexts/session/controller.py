"""
Session Controller

Top-level orchestrator for a résumé-building session. Owns the sector choice
and the active renderer, wires the section editors to the Record Store,
re-renders after every change, and runs the export.

State machine:
    SECTOR_UNSELECTED --choose_sector()--> ACTIVE
    ACTIVE --change_sector()--> SECTOR_UNSELECTED   (résumé and storage cleared)

Example:
    >>> session = SessionController(RecordStore(MemoryStorage()))
    >>> session.choose_sector(Sector.IT)
    >>> session.identity.update(full_name="Jane Doe")
    >>> "Jane Doe" in session.current_view
    True
"""

import asyncio
from enum import Enum
from typing import Optional, Union

from vitae.contexts.document.record_store import RecordStore
from vitae.contexts.document.resume_data_structure import ResumeDocument, Sector
from vitae.contexts.editing.editors import (
    CollectionEditor,
    IdentityEditor,
    SkillsEditor,
    SummaryEditor,
)
from vitae.contexts.rendering.exceptions import ExportFailure
from vitae.contexts.rendering.exporter import ExportResult, PdfExporter
from vitae.contexts.rendering.layout import build_layout
from vitae.contexts.rendering.markdown_formatter import format_layout_markdown
from vitae.contexts.rendering.registries import TemplateRegistry
from vitae.contexts.rendering.renderers import Renderer, renderer_for_sector
from vitae.contexts.session.exceptions import InvalidTransition
from vitae.contexts.session.logger import _log_debug, _log_error, _log_info, log_state_change
from vitae.contexts.suggestion.client import SuggestionClient

EXPORT_IN_PROGRESS_MESSAGE = "Export already in progress"
NO_SECTOR_MESSAGE = "Choose a sector before exporting"


class SessionState(str, Enum):
    SECTOR_UNSELECTED = "sector_unselected"
    ACTIVE = "active"


class SessionController:
    """
    One résumé-building session.

    Attributes:
        store: Record Store owning the résumé
        identity, summary, skills: Flat-field editors
        work_history, education, projects: Collection editors
        state: Current SessionState
        sector: Chosen sector, or None while unselected
        current_view: Latest rendered HTML ("" while unselected)
        is_exporting: True while an export is pending
        last_alert: Message of the last failed export, shown as a blocking alert
    """

    def __init__(
        self,
        store: RecordStore = None,
        client: SuggestionClient = None,
        exporter: PdfExporter = None,
        registry: TemplateRegistry = None,
    ):
        self.store = store if store is not None else RecordStore()
        client = client if client is not None else SuggestionClient()
        self.exporter = exporter if exporter is not None else PdfExporter()
        self.registry = registry if registry is not None else TemplateRegistry()

        self.identity = IdentityEditor(self.store)
        self.summary = SummaryEditor(self.store, client)
        self.skills = SkillsEditor(self.store, client)
        self.work_history = CollectionEditor(self.store, "work_history")
        self.education = CollectionEditor(self.store, "education")
        self.projects = CollectionEditor(self.store, "projects")

        self.state = SessionState.SECTOR_UNSELECTED
        self.sector: Optional[Sector] = None
        self.renderer: Optional[Renderer] = None
        self.current_view = ""
        self.is_exporting = False
        self.last_alert = ""

        self._unsubscribe = self.store.subscribe(self._on_change)

        # A previously chosen sector resumes the session where it left off
        stored = self.store.stored_sector()
        if stored is not None:
            self._activate(stored)
            self.render()

    # --- State machine ---

    def _activate(self, sector: Sector) -> None:
        previous = self.state
        self.sector = sector
        self.renderer = renderer_for_sector(sector, registry=self.registry)
        self.state = SessionState.ACTIVE
        log_state_change(previous, self.state, sector)

    def choose_sector(self, sector: Union[Sector, str]) -> None:
        """
        Select the sector and start editing.

        Raises:
            InvalidTransition: If a sector is already chosen
            ValueError: If sector is not a known Sector value
        """
        if self.state is SessionState.ACTIVE:
            raise InvalidTransition("choose_sector", self.state.value)

        sector = Sector(sector)
        self._activate(sector)
        # The patch notification renders the first view
        self.store.patch({"sector": sector})

    def change_sector(self) -> None:
        """
        Discard the résumé and return to sector selection.

        Clears both storage keys; the next session starts from the empty document.

        Raises:
            InvalidTransition: If no sector is chosen
        """
        if self.state is SessionState.SECTOR_UNSELECTED:
            raise InvalidTransition("change_sector", self.state.value)

        previous = self.state
        self.state = SessionState.SECTOR_UNSELECTED
        self.sector = None
        self.renderer = None
        self.current_view = ""
        self.store.reset()
        log_state_change(previous, self.state)

    # --- Rendering ---

    def _on_change(self, document: ResumeDocument) -> None:
        if self.state is SessionState.ACTIVE:
            self.render()

    def render(self) -> str:
        """Re-render the current snapshot with the active renderer."""
        if self.renderer is None:
            return ""
        self.current_view = self.renderer.render(self.store.get())
        return self.current_view

    def preview_markdown(self) -> str:
        """Markdown preview of the current snapshot using the active theme's headings."""
        headings = self.renderer.theme["headings"] if self.renderer is not None else None
        return format_layout_markdown(build_layout(self.store.get()), headings=headings)

    # --- Export ---

    async def export(self) -> ExportResult:
        """
        Export the current view to PDF.

        A request made while another export is pending is rejected, not queued.
        Failures set last_alert and come back as an unsuccessful ExportResult;
        the résumé and session state are unaffected.
        """
        if self.is_exporting:
            _log_debug("Export already in flight, request ignored")
            return ExportResult(success=False, error=EXPORT_IN_PROGRESS_MESSAGE)

        if self.state is not SessionState.ACTIVE:
            self.last_alert = NO_SECTOR_MESSAGE
            return ExportResult(success=False, error=NO_SECTOR_MESSAGE)

        self.is_exporting = True
        self.last_alert = ""
        full_name = self.store.get().identity.full_name
        try:
            result = await asyncio.to_thread(self.exporter.export, self.current_view, full_name)
            _log_info(f"Export complete: {result.pdf_path}")
        except ExportFailure as e:
            self.last_alert = e.message
            _log_error(f"Export failed: {e.message}")
            result = ExportResult(success=False, error=e.message)
        finally:
            self.is_exporting = False

        return result

    def close(self) -> None:
        """Stop listening to the Record Store."""
        self._unsubscribe()
