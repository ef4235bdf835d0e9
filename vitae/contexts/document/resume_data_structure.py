"""
Resume Document Structure

Defines the structured representation of the résumé record. This structure is
the interface between every context:

Document owns:
- The canonical ResumeDocument and its durable form
- Coercion of patch values into the typed structure

Editing produces patches against it, Rendering projects snapshots of it, and the
Suggestion context only ever reads snapshot fields.

All classes are frozen dataclasses and collections are tuples, so any instance
handed out by the Record Store is already an immutable snapshot.
"""

import uuid
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, fields, replace
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple, Type, TypeVar


class Sector(str, Enum):
    """Coarse domain tag selecting the renderer variant."""

    IT = "IT"
    OTHER = "Other"


def new_entry_id() -> str:
    """Generate an opaque identifier for a collection entry."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Identity:
    """
    Identity header of the résumé.

    Attributes:
        full_name: Candidate name, shown as the header
        target_role: Role title, also the input for skill suggestions
        email: Contact email
        phone: Contact phone
        location: City / region
        website: Optional personal site
        linkedin: Optional professional-network link
    """

    full_name: str = ""
    target_role: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    website: str = ""
    linkedin: str = ""


@dataclass(frozen=True)
class Experience:
    """
    Work-history entry.

    Attributes:
        id: Opaque entry identifier, stable for the entry's lifetime
        company: Employer name
        position: Job title
        start_month: Start month as "YYYY-MM"
        end_month: End month as "YYYY-MM"; ignored for display while is_current
        is_current: Whether this is the current job
        description: Free-text description
    """

    id: str = field(default_factory=new_entry_id)
    company: str = ""
    position: str = ""
    start_month: str = ""
    end_month: str = ""
    is_current: bool = False
    description: str = ""


@dataclass(frozen=True)
class EducationEntry:
    """
    Education entry.

    Attributes:
        id: Opaque entry identifier
        institution: School name
        degree: Degree title (e.g., "BSc")
        field: Field of study
        graduation_month: Graduation month as "YYYY-MM"
        gpa: Optional grade point average
    """

    id: str = field(default_factory=new_entry_id)
    institution: str = ""
    degree: str = ""
    field: str = ""
    graduation_month: str = ""
    gpa: str = ""


@dataclass(frozen=True)
class ProjectEntry:
    """
    Project entry.

    Attributes:
        id: Opaque entry identifier
        title: Project name
        tech_stack: Free-text technology list
        description: Free-text description
        role: Candidate's role on the project
    """

    id: str = field(default_factory=new_entry_id)
    title: str = ""
    tech_stack: str = ""
    description: str = ""
    role: str = ""


# Repeatable collections and the entry type each one holds
COLLECTION_TYPES: Dict[str, type] = {
    "work_history": Experience,
    "education": EducationEntry,
    "projects": ProjectEntry,
}

E = TypeVar("E")


def build_record(cls: Type[E], data: Any, require_id: bool = False) -> E:
    """
    Build a dataclass instance from a mapping, checking field names and types.

    Unknown keys are rejected so that typos in patches fail loudly. Missing keys
    take the dataclass default, except ``id`` when ``require_id`` is set.

    Raises:
        TypeError: If data is not a mapping or a value has the wrong type
        ValueError: If data has unknown keys or lacks a required id
    """
    if isinstance(data, cls):
        return data
    if not isinstance(data, Mapping):
        raise TypeError(f"{cls.__name__} must be a mapping, got {type(data).__name__}")

    known = {f.name: f for f in fields(cls)}
    unknown = set(data) - set(known)
    if unknown:
        raise ValueError(f"Unknown {cls.__name__} fields: {sorted(unknown)}")
    if require_id and "id" in known and not data.get("id"):
        raise ValueError(f"{cls.__name__} entry is missing its id")

    for name, value in data.items():
        expected = bool if known[name].type in (bool, "bool") else str
        if not isinstance(value, expected):
            raise TypeError(
                f"{cls.__name__}.{name} must be {expected.__name__}, got {type(value).__name__}"
            )

    return cls(**data)


def _coerce_entries(entry_cls: type, values: Iterable[Any], require_id: bool) -> tuple:
    if isinstance(values, (str, bytes, Mapping)):
        raise TypeError(f"Expected a sequence of {entry_cls.__name__}, got {type(values).__name__}")
    return tuple(build_record(entry_cls, value, require_id=require_id) for value in values)


def _coerce_skills(values: Iterable[Any]) -> Tuple[str, ...]:
    if isinstance(values, (str, bytes, Mapping)):
        raise TypeError(f"skills must be a sequence of strings, got {type(values).__name__}")
    skills = tuple(values)
    for skill in skills:
        if not isinstance(skill, str):
            raise TypeError(f"skills must contain strings, got {type(skill).__name__}")
    return skills


def coerce_field(name: str, value: Any, require_id: bool = False) -> Any:
    """
    Convert a patch value into the typed form stored on ResumeDocument.

    Args:
        name: Top-level field name
        value: Raw value (dataclass instance, mapping, list, enum or string)
        require_id: Reject collection entries without an id (used when restoring)

    Returns:
        Value suitable for dataclasses.replace()

    Raises:
        KeyError: If name is not a ResumeDocument field
        TypeError / ValueError: If value cannot be coerced
    """
    if name == "identity":
        return build_record(Identity, value)
    if name == "summary":
        if not isinstance(value, str):
            raise TypeError(f"summary must be str, got {type(value).__name__}")
        return value
    if name == "skills":
        return _coerce_skills(value)
    if name in COLLECTION_TYPES:
        return _coerce_entries(COLLECTION_TYPES[name], value, require_id)
    if name == "sector":
        return None if value is None else Sector(value)
    raise KeyError(f"Unknown résumé field: {name}")


@dataclass(frozen=True)
class ResumeDocument:
    """
    The canonical résumé record.

    Attributes:
        identity: Name, role and contact details
        summary: Professional summary paragraph
        skills: Skills in display order
        work_history: Experience entries in display order
        education: Education entries in display order
        projects: Project entries in display order
        sector: Selected sector, or None before a sector is chosen
    """

    identity: Identity = field(default_factory=Identity)
    summary: str = ""
    skills: Tuple[str, ...] = ()
    work_history: Tuple[Experience, ...] = ()
    education: Tuple[EducationEntry, ...] = ()
    projects: Tuple[ProjectEntry, ...] = ()
    sector: Optional[Sector] = None

    @classmethod
    def empty(cls) -> "ResumeDocument":
        """Blank document: empty collections, blank text, sector unset."""
        return cls()

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def with_updates(self, partial: Mapping) -> "ResumeDocument":
        """
        Shallow-merge top-level fields into a new document.

        Collection fields are replaced wholesale, never element-merged. All
        values are coerced before anything is applied, so a bad value leaves
        the document untouched.

        Raises:
            KeyError: On unknown field names
            TypeError / ValueError: On values that cannot be coerced
        """
        coerced = {name: coerce_field(name, value) for name, value in partial.items()}
        return replace(self, **coerced)

    def to_dict(self) -> Dict[str, Any]:
        """Plain-JSON representation (lists, strings, booleans, None)."""
        data = asdict(self)
        for name in ("skills", *COLLECTION_TYPES):
            data[name] = list(data[name])
        data["sector"] = self.sector.value if self.sector else None
        return data

    @classmethod
    def from_dict(cls, data: Mapping) -> "ResumeDocument":
        """
        Rebuild a document from its plain-JSON representation.

        Missing top-level fields take their empty default; entries must carry
        their id.

        Raises:
            TypeError / ValueError: If the structure does not match
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"Résumé document must be a mapping, got {type(data).__name__}")

        unknown = set(data) - set(cls.field_names())
        if unknown:
            raise ValueError(f"Unknown résumé fields: {sorted(unknown)}")

        values = {name: coerce_field(name, value, require_id=True) for name, value in data.items()}
        return cls(**values)

    def find_entry(self, collection: str, entry_id: str):
        """Return the entry with entry_id in a collection, or None."""
        for entry in getattr(self, collection):
            if entry.id == entry_id:
                return entry
        return None
