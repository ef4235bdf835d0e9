"""
Section Editors

One editor per résumé section. Editors turn user input into single-field
patches against the Record Store and own nothing durable themselves; their only
state is transient (pending hint text, last error message, in-flight flag).

Suggestion requests are coroutines: the blocking LLM call runs in a worker
thread, each editor refuses a repeat request while its previous one is pending,
and the outcome comes back as a SuggestionOutcome value rather than an
exception.
"""

import asyncio
from dataclasses import asdict, dataclass
from typing import Tuple

from vitae.contexts.document.record_store import RecordStore
from vitae.contexts.document.resume_data_structure import COLLECTION_TYPES, Identity, build_record
from vitae.contexts.editing.logger import _log_debug, _log_error, log_suggestion_outcome
from vitae.contexts.editing.patches import (
    append_entry,
    contains_entry,
    format_skills,
    merge_skills,
    parse_skills,
    remove_entry,
    remove_skill_at,
    update_entry,
)
from vitae.contexts.suggestion.client import SuggestionClient
from vitae.contexts.suggestion.exceptions import SuggestionError

MISSING_ROLE_MESSAGE = "Please enter a job role first"
MISSING_HINTS_MESSAGE = "Please enter some key points first"
SAVE_FAILED_MESSAGE = "Could not save the suggestion. Please try again."


@dataclass(frozen=True)
class SuggestionOutcome:
    """
    Result of a suggestion request.

    Attributes:
        applied: Whether the suggestion was merged into the résumé
        error: Display-only message when the request failed
        added: Skills appended by a skills request
        busy: True when rejected because a previous request is still pending
    """

    applied: bool
    error: str = ""
    added: Tuple[str, ...] = ()
    busy: bool = False


class CollectionEditor:
    """
    Editor for a repeatable collection (work_history, education, projects).

    Every operation replaces the whole collection field in one patch.
    """

    def __init__(self, store: RecordStore, collection: str):
        if collection not in COLLECTION_TYPES:
            raise ValueError(
                f"Unknown collection: {collection}. Must be one of {sorted(COLLECTION_TYPES)}"
            )
        self.store = store
        self.collection = collection
        self.entry_type = COLLECTION_TYPES[collection]

    @property
    def entries(self) -> tuple:
        return getattr(self.store.get(), self.collection)

    def add(self, **fields) -> str:
        """
        Append a new entry with a fresh id.

        Args:
            **fields: Optional initial field values (blank by default)

        Returns:
            The new entry's id

        Raises:
            ValueError: If fields include "id" or unknown names
        """
        if "id" in fields:
            raise ValueError("Entry ids are generated, not supplied")
        entry = build_record(self.entry_type, fields)
        self.store.patch({self.collection: append_entry(self.entries, entry)})
        _log_debug(f"{self.collection}: added {entry.id}")
        return entry.id

    def remove(self, entry_id: str) -> bool:
        """
        Remove the entry with entry_id.

        Returns:
            False (and no patch) if the id is absent
        """
        entries = self.entries
        if not contains_entry(entries, entry_id):
            _log_debug(f"{self.collection}: remove ignored, no entry {entry_id}")
            return False
        self.store.patch({self.collection: remove_entry(entries, entry_id)})
        return True

    def update(self, entry_id: str, **changes) -> bool:
        """
        Merge changes into the entry with entry_id.

        Returns:
            False (and no patch) if the id is absent

        Raises:
            ValueError: If changes set the id or name unknown fields
            TypeError: If a value has the wrong type
        """
        entries = self.entries
        if not contains_entry(entries, entry_id):
            _log_debug(f"{self.collection}: update ignored, no entry {entry_id}")
            return False
        self.store.patch({self.collection: update_entry(entries, entry_id, changes)})
        return True


class IdentityEditor:
    """Maps identity form controls to identity patches."""

    def __init__(self, store: RecordStore):
        self.store = store

    @property
    def identity(self) -> Identity:
        return self.store.get().identity

    def update(self, **fields) -> Identity:
        """
        Change one or more identity fields.

        Raises:
            ValueError: On unknown field names
            TypeError: On non-string values
        """
        identity = build_record(Identity, {**asdict(self.identity), **fields})
        self.store.patch({"identity": identity})
        return identity


class SummaryEditor:
    """
    Summary paragraph editor with LLM-written suggestions.

    Attributes:
        hint: Pending free-text key points for the next suggestion request
        error: Last suggestion error, shown beside the summary field
        in_flight: True while a suggestion request is pending
    """

    def __init__(self, store: RecordStore, client: SuggestionClient = None):
        self.store = store
        self.client = client if client is not None else SuggestionClient()
        self.hint = ""
        self.error = ""
        self.in_flight = False

    @property
    def summary(self) -> str:
        return self.store.get().summary

    def set_summary(self, text: str) -> None:
        self.store.patch({"summary": text})

    async def request_suggestion(self) -> SuggestionOutcome:
        """
        Replace the summary with one written from the pending hint.

        On success the summary is overwritten and the hint cleared. On failure
        the error is stored on the editor and the résumé is untouched.
        """
        if self.in_flight:
            outcome = SuggestionOutcome(applied=False, busy=True)
            log_suggestion_outcome("summary", outcome)
            return outcome

        if not self.hint.strip():
            self.error = MISSING_HINTS_MESSAGE
            outcome = SuggestionOutcome(applied=False, error=self.error)
            log_suggestion_outcome("summary", outcome)
            return outcome

        self.in_flight = True
        self.error = ""
        try:
            summary = await asyncio.to_thread(self.client.suggest_summary, self.hint)
            self.store.patch({"summary": summary})
            self.hint = ""
            outcome = SuggestionOutcome(applied=True)
        except SuggestionError as e:
            self.error = e.message
            outcome = SuggestionOutcome(applied=False, error=e.message)
        except OSError as e:
            _log_error(f"Saving suggestion failed: {e}")
            self.error = SAVE_FAILED_MESSAGE
            outcome = SuggestionOutcome(applied=False, error=self.error)
        finally:
            self.in_flight = False

        log_suggestion_outcome("summary", outcome)
        return outcome


class SkillsEditor:
    """
    Skills editor: delimited-text entry, single-skill removal, and LLM
    suggestions merged without case-insensitive duplicates.

    Attributes:
        error: Last suggestion error, shown beside the skills field
        in_flight: True while a suggestion request is pending
    """

    def __init__(self, store: RecordStore, client: SuggestionClient = None):
        self.store = store
        self.client = client if client is not None else SuggestionClient()
        self.error = ""
        self.in_flight = False

    @property
    def skills(self) -> Tuple[str, ...]:
        return self.store.get().skills

    def as_text(self) -> str:
        """Current skills as the comma-delimited text shown in the form field."""
        return format_skills(self.skills)

    def set_from_text(self, text: str) -> Tuple[str, ...]:
        """Replace the skills with those parsed from comma-delimited text."""
        skills = parse_skills(text)
        self.store.patch({"skills": skills})
        return skills

    def remove_at(self, index: int) -> bool:
        """
        Remove the skill at index.

        Returns:
            False (and no patch) if index is out of range
        """
        skills = self.skills
        if not 0 <= index < len(skills):
            return False
        self.store.patch({"skills": remove_skill_at(skills, index)})
        return True

    async def request_suggestions(self) -> SuggestionOutcome:
        """
        Merge suggested skills for the identity's target role.

        Existing skills keep their positions; suggestions not already present
        (ignoring case) are appended in the order returned.
        """
        if self.in_flight:
            outcome = SuggestionOutcome(applied=False, busy=True)
            log_suggestion_outcome("skills", outcome)
            return outcome

        role = self.store.get().identity.target_role
        if not role.strip():
            self.error = MISSING_ROLE_MESSAGE
            outcome = SuggestionOutcome(applied=False, error=self.error)
            log_suggestion_outcome("skills", outcome)
            return outcome

        self.in_flight = True
        self.error = ""
        try:
            suggested = await asyncio.to_thread(self.client.suggest_skills, role)
            # Re-read: the résumé may have been edited while the request was pending
            current = self.skills
            merged = merge_skills(current, suggested)
            added = merged[len(current) :]
            if added:
                self.store.patch({"skills": merged})
            outcome = SuggestionOutcome(applied=True, added=added)
        except SuggestionError as e:
            self.error = e.message
            outcome = SuggestionOutcome(applied=False, error=e.message)
        except OSError as e:
            _log_error(f"Saving suggestion failed: {e}")
            self.error = SAVE_FAILED_MESSAGE
            outcome = SuggestionOutcome(applied=False, error=self.error)
        finally:
            self.in_flight = False

        log_suggestion_outcome("skills", outcome)
        return outcome
