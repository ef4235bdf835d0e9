"""
Document Context

Responsibilities:
- Defines the résumé record (identity, summary, skills, work history, education, projects, sector)
- Owns the live document and applies patches to it
- Persists the document and the sector tag to durable local storage
- Restores the document at start-up, discarding corrupt payloads

Owns: ResumeDocument, Record Store, storage layout
Never: Decides how input becomes a patch or how the document is displayed
"""

from vitae.contexts.document.exceptions import PersistedStateCorrupt
from vitae.contexts.document.record_store import RecordStore, dump_document, load_document
from vitae.contexts.document.resume_data_structure import (
    EducationEntry,
    Experience,
    Identity,
    ProjectEntry,
    ResumeDocument,
    Sector,
)
from vitae.contexts.document.storage import FileStorage, LocalStorage, MemoryStorage

__all__ = [
    # Data structure classes
    "ResumeDocument",
    "Identity",
    "Experience",
    "EducationEntry",
    "ProjectEntry",
    "Sector",
    # Store and persistence
    "RecordStore",
    "dump_document",
    "load_document",
    "LocalStorage",
    "FileStorage",
    "MemoryStorage",
    # Errors
    "PersistedStateCorrupt",
]
