"""
Session Context

Responsibilities:
- Tracks the session state (sector unselected / active) and the chosen sector
- Selects the renderer for the sector and re-renders after every change
- Holds one editor per résumé section
- Runs the export, guarded against concurrent re-entry

Owns: Session state, active renderer, current view, export in-flight flag
Never: Edits the résumé directly (editors do) or formats it (renderers do)
"""

from vitae.contexts.session.controller import SessionController, SessionState
from vitae.contexts.session.exceptions import InvalidTransition

__all__ = [
    "SessionController",
    "SessionState",
    "InvalidTransition",
]
