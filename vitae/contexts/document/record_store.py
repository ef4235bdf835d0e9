"""
Record Store

Single writable owner of the résumé. Every edit arrives as a patch, is
persisted, and is announced to subscribers (the Session Controller re-renders
on each notification). Readers only ever receive immutable snapshots.

Persisted layout (two independent string entries):
    resume_builder_data    {"schema_version": 1, "document": {...}}
    resume_builder_sector  "IT" | "Other"
"""

import json
from typing import Any, Callable, List, Mapping, Optional

from vitae.contexts.document.defaults import DATA_KEY, SCHEMA_VERSION, SECTOR_KEY
from vitae.contexts.document.exceptions import PersistedStateCorrupt
from vitae.contexts.document.logger import (
    _log_info,
    _log_warning,
    log_patch,
    log_restore_result,
)
from vitae.contexts.document.resume_data_structure import ResumeDocument, Sector
from vitae.contexts.document.storage import FileStorage, LocalStorage

Subscriber = Callable[[ResumeDocument], None]


def dump_document(document: ResumeDocument) -> str:
    """Serialize a document into the versioned JSON envelope."""
    return json.dumps(
        {"schema_version": SCHEMA_VERSION, "document": document.to_dict()},
        ensure_ascii=False,
    )


def load_document(text: str, storage_key: str = DATA_KEY) -> ResumeDocument:
    """
    Parse the versioned JSON envelope back into a document.

    Args:
        text: Stored JSON text
        storage_key: Key the text was read from (for error reporting)

    Returns:
        Restored ResumeDocument

    Raises:
        PersistedStateCorrupt: If the text is not valid JSON, the envelope is
            malformed, the schema version is unknown, or the document shape
            does not match
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise PersistedStateCorrupt(
            f"Stored résumé is not valid JSON ({e.msg})", storage_key, text
        ) from e

    if not isinstance(payload, dict) or "document" not in payload:
        raise PersistedStateCorrupt("Stored résumé has no document envelope", storage_key, text)

    version = payload.get("schema_version")
    if version != SCHEMA_VERSION:
        raise PersistedStateCorrupt(
            f"Unsupported schema version {version!r} (expected {SCHEMA_VERSION})",
            storage_key,
            text,
        )

    try:
        return ResumeDocument.from_dict(payload["document"])
    except (TypeError, ValueError, KeyError) as e:
        raise PersistedStateCorrupt(
            f"Stored résumé does not match the document structure: {e}", storage_key, text
        ) from e


class RecordStore:
    """
    Owner of the canonical ResumeDocument.

    Contract:
        get()            -> current snapshot
        patch(partial)   -> shallow merge, persist, notify
        reset()          -> clear both storage keys, empty document, notify

    Only ever driven from one logical thread of control, so there is no locking.
    """

    def __init__(self, storage: LocalStorage = None):
        """
        Initialize the store, restoring any previously saved résumé.

        A stored document that cannot be restored is discarded (logged as a
        warning) and the store starts from the empty document.

        Args:
            storage: Durable storage backend (default: FileStorage())
        """
        self.storage = storage if storage is not None else FileStorage()
        self._subscribers: List[Subscriber] = []
        self._document = self._restore()

    def _restore(self) -> ResumeDocument:
        location = self.storage.describe()
        try:
            text = self.storage.get(DATA_KEY)
            if text is None:
                log_restore_result(location, restored=False)
                return ResumeDocument.empty()
            document = load_document(text)
        except PersistedStateCorrupt as e:
            log_restore_result(location, restored=False, error=e)
            return ResumeDocument.empty()

        log_restore_result(location, restored=True)
        return document

    def get(self) -> ResumeDocument:
        """Return the current immutable snapshot."""
        return self._document

    def patch(self, partial: Mapping[str, Any]) -> ResumeDocument:
        """
        Merge top-level fields into the document, persist, and notify.

        Collection fields are replaced wholesale. Nothing is applied or written
        if any value fails coercion.

        Args:
            partial: Mapping of field name to new value

        Returns:
            The new snapshot

        Raises:
            KeyError: On unknown field names
            TypeError / ValueError: On values that cannot be coerced
        """
        document = self._document.with_updates(partial)

        self.storage.set(DATA_KEY, dump_document(document))
        if "sector" in partial and document.sector is not None:
            self.storage.set(SECTOR_KEY, document.sector.value)

        self._document = document
        log_patch(partial.keys())
        self._notify()
        return document

    def reset(self) -> None:
        """Clear both storage keys and restore the empty document."""
        self.storage.remove(DATA_KEY)
        self.storage.remove(SECTOR_KEY)
        self._document = ResumeDocument.empty()
        _log_info("Résumé reset and storage cleared")
        self._notify()

    def stored_sector(self) -> Optional[Sector]:
        """Return the persisted sector tag, or None if absent or unrecognised."""
        try:
            value = self.storage.get(SECTOR_KEY)
        except PersistedStateCorrupt as e:
            _log_warning(f"Ignoring unreadable stored sector: {e.message}")
            return None
        if value is None:
            return None
        try:
            return Sector(value)
        except ValueError:
            _log_warning(f"Ignoring unrecognised stored sector: {value!r}")
            return None

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback invoked with the new snapshot after every change.

        Returns:
            Function that removes the subscription
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        for callback in list(self._subscribers):
            callback(self._document)
