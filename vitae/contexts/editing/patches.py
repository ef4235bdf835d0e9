"""
Patch helpers for section editors.

Pure functions that compute the next value of a single résumé field. Editors
wrap the result in a one-field patch and hand it to the Record Store, so a
collection is always replaced as a whole.
"""

from dataclasses import asdict
from typing import Any, Dict, Iterable, Sequence, Tuple, TypeVar

from vitae.contexts.document.resume_data_structure import build_record
from vitae.utils.text_processing import split_delimited

T = TypeVar("T")


# --- Repeatable collections ---


def append_entry(entries: Sequence[T], entry: T) -> Tuple[T, ...]:
    """Return entries with entry added at the end (display order = insertion order)."""
    return (*entries, entry)


def remove_entry(entries: Sequence[T], entry_id: str) -> Tuple[T, ...]:
    """Return entries without the one whose id is entry_id; unchanged if absent."""
    return tuple(entry for entry in entries if entry.id != entry_id)


def update_entry(entries: Sequence[T], entry_id: str, changes: Dict[str, Any]) -> Tuple[T, ...]:
    """
    Merge changes into the entry whose id is entry_id, leaving others untouched.

    Args:
        entries: Current collection
        entry_id: Identifier of the entry to change
        changes: Field name to new value

    Returns:
        New collection; equal to entries if entry_id is absent

    Raises:
        ValueError: If changes try to set the id or name unknown fields
        TypeError: If a value has the wrong type
    """
    if "id" in changes:
        raise ValueError("Entry ids are fixed at creation and cannot be updated")

    updated = []
    for entry in entries:
        if entry.id == entry_id:
            entry = build_record(type(entry), {**asdict(entry), **changes})
        updated.append(entry)
    return tuple(updated)


def contains_entry(entries: Iterable[Any], entry_id: str) -> bool:
    return any(entry.id == entry_id for entry in entries)


# --- Skills ---


def parse_skills(text: str) -> Tuple[str, ...]:
    """
    Parse the comma-delimited skills field.

    Example:
        >>> parse_skills("Python,  SQL, ,Docker")
        ('Python', 'SQL', 'Docker')
    """
    return tuple(split_delimited(text, ","))


def format_skills(skills: Iterable[str]) -> str:
    """Inverse of parse_skills for pre-filling the skills field."""
    return ", ".join(skills)


def remove_skill_at(skills: Sequence[str], index: int) -> Tuple[str, ...]:
    """Return skills without the item at index; unchanged if index is out of range."""
    if not 0 <= index < len(skills):
        return tuple(skills)
    return (*skills[:index], *skills[index + 1 :])


def merge_skills(existing: Sequence[str], suggested: Iterable[str]) -> Tuple[str, ...]:
    """
    Append suggested skills that are not already present, ignoring case.

    Existing skills keep their positions; new skills are appended in the order
    suggested. A suggestion repeated within the same batch is added once.

    Example:
        >>> merge_skills(["python"], ["Python", "SQL", "sql"])
        ('python', 'SQL')
    """
    seen = {skill.casefold() for skill in existing}
    merged = list(existing)
    for skill in suggested:
        key = skill.casefold()
        if key not in seen:
            seen.add(key)
            merged.append(skill)
    return tuple(merged)
