"""
Résumé Layout

The single traversal shared by every renderer. build_layout() decides which
sections appear, which fields each entry shows, how dates read, and how skills
split into columns; the result is a neutral tree that presentation code only
has to style.

Section order is fixed:
    header -> summary -> skills -> experience -> projects -> education
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from vitae.contexts.document.resume_data_structure import (
    EducationEntry,
    Experience,
    ProjectEntry,
    ResumeDocument,
)
from vitae.utils.text_processing import strip_url_scheme

PRESENT_LABEL = "Present"
DATE_RANGE_SEPARATOR = " - "

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_MONTH_VALUE = re.compile(r"^(?P<year>\d{4})-(?P<month>\d{1,2})$")

# Shown when required display text is blank
PLACEHOLDERS = {
    "full_name": "Your Name",
    "position": "Position Title",
    "company": "Company Name",
    "project_title": "Project Title",
    "project_role": "Role",
    "degree": "Degree",
    "institution": "Institution Name",
}


class SectionKind(str, Enum):
    SUMMARY = "summary"
    SKILLS = "skills"
    EXPERIENCE = "experience"
    PROJECTS = "projects"
    EDUCATION = "education"


@dataclass(frozen=True)
class ContactItem:
    """One contact detail in the header (kind: email, phone, location, website, linkedin)."""

    kind: str
    text: str


@dataclass(frozen=True)
class HeaderBlock:
    name: str
    role: str = ""
    contacts: Tuple[ContactItem, ...] = ()


@dataclass(frozen=True)
class Detail:
    """Labelled secondary line of an entry (e.g., GPA, Tech Stack)."""

    label: str
    value: str


@dataclass(frozen=True)
class LayoutEntry:
    """
    One entry of a list section.

    Attributes:
        title: Bold heading (position, project title, degree)
        trailing: Right-aligned text (date range, project role, graduation date)
        subtitle: Line under the title (company, institution)
        details: Labelled lines shown only when their value is non-empty
        body: Description paragraph
    """

    title: str
    trailing: str = ""
    subtitle: str = ""
    details: Tuple[Detail, ...] = ()
    body: str = ""


@dataclass(frozen=True)
class LayoutSection:
    """
    A visible résumé section.

    Attributes:
        kind: Which section this is
        text: Paragraph content (summary)
        columns: Skill columns, left then right
        entries: List content (experience, projects, education)
    """

    kind: SectionKind
    text: str = ""
    columns: Tuple[Tuple[str, ...], ...] = ()
    entries: Tuple[LayoutEntry, ...] = ()


@dataclass(frozen=True)
class ResumeLayout:
    header: HeaderBlock
    sections: Tuple[LayoutSection, ...] = ()

    @property
    def section_kinds(self) -> Tuple[SectionKind, ...]:
        return tuple(section.kind for section in self.sections)

    def section(self, kind: SectionKind) -> Optional[LayoutSection]:
        """Return the section of the given kind, or None if it was omitted."""
        for section in self.sections:
            if section.kind == kind:
                return section
        return None


# --- Field formatting ---


def _present(value: str) -> bool:
    return bool(value and value.strip())


def format_month(value: str) -> str:
    """
    Format a stored "YYYY-MM" month as abbreviated month and full year.

    Blank input gives ""; text that is not a valid month is returned trimmed
    and unchanged.

    Example:
        >>> format_month("2021-01")
        'Jan 2021'
    """
    if not _present(value):
        return ""
    value = value.strip()
    match = _MONTH_VALUE.match(value)
    if not match:
        return value
    month = int(match.group("month"))
    if not 1 <= month <= 12:
        return value
    return f"{MONTH_ABBREVIATIONS[month - 1]} {match.group('year')}"


def date_range_label(start_month: str, end_month: str, is_current: bool) -> str:
    """
    Format an experience date range.

    A current job always ends in "Present", whatever end month is stored.
    Blank ends are dropped rather than leaving a dangling separator.

    Example:
        >>> date_range_label("2021-01", "2020-05", True)
        'Jan 2021 - Present'
    """
    end_label = PRESENT_LABEL if is_current else format_month(end_month)
    return DATE_RANGE_SEPARATOR.join(label for label in (format_month(start_month), end_label) if label)


def split_columns(items: Sequence[str]) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    """
    Split items into two columns; the first gets ceil(n/2) items.

    Example:
        >>> split_columns(["a", "b", "c"])
        (('a', 'b'), ('c',))
    """
    middle = (len(items) + 1) // 2
    return tuple(items[:middle]), tuple(items[middle:])


# --- Entry builders ---


def _experience_entry(experience: Experience) -> LayoutEntry:
    return LayoutEntry(
        title=experience.position.strip() or PLACEHOLDERS["position"],
        trailing=date_range_label(experience.start_month, experience.end_month, experience.is_current),
        subtitle=experience.company.strip() or PLACEHOLDERS["company"],
        body=experience.description.strip(),
    )


def _project_entry(project: ProjectEntry) -> LayoutEntry:
    details = ()
    if _present(project.tech_stack):
        details = (Detail("Tech Stack", project.tech_stack.strip()),)
    return LayoutEntry(
        title=project.title.strip() or PLACEHOLDERS["project_title"],
        trailing=project.role.strip() or PLACEHOLDERS["project_role"],
        details=details,
        body=project.description.strip(),
    )


def _education_entry(education: EducationEntry) -> LayoutEntry:
    title = education.degree.strip() or PLACEHOLDERS["degree"]
    if _present(education.field):
        title = f"{title} in {education.field.strip()}"

    details = ()
    if _present(education.gpa):
        details = (Detail("GPA", education.gpa.strip()),)

    return LayoutEntry(
        title=title,
        trailing=format_month(education.graduation_month),
        subtitle=education.institution.strip() or PLACEHOLDERS["institution"],
        details=details,
    )


def _header(document: ResumeDocument) -> HeaderBlock:
    identity = document.identity
    candidates = (
        ("email", identity.email),
        ("phone", identity.phone),
        ("location", identity.location),
        ("website", strip_url_scheme(identity.website.strip())),
        ("linkedin", strip_url_scheme(identity.linkedin.strip())),
    )
    return HeaderBlock(
        name=identity.full_name.strip() or PLACEHOLDERS["full_name"],
        role=identity.target_role.strip(),
        contacts=tuple(ContactItem(kind, text.strip()) for kind, text in candidates if _present(text)),
    )


def build_layout(document: ResumeDocument) -> ResumeLayout:
    """
    Project a résumé snapshot into the neutral layout tree.

    A section is omitted entirely when its backing field or collection is
    empty. Entries keep their stored order.

    Args:
        document: Snapshot to project

    Returns:
        ResumeLayout with the header and visible sections in fixed order
    """
    sections = []

    if _present(document.summary):
        sections.append(LayoutSection(SectionKind.SUMMARY, text=document.summary.strip()))

    if document.skills:
        sections.append(LayoutSection(SectionKind.SKILLS, columns=split_columns(document.skills)))

    if document.work_history:
        entries = tuple(_experience_entry(entry) for entry in document.work_history)
        sections.append(LayoutSection(SectionKind.EXPERIENCE, entries=entries))

    if document.projects:
        entries = tuple(_project_entry(entry) for entry in document.projects)
        sections.append(LayoutSection(SectionKind.PROJECTS, entries=entries))

    if document.education:
        entries = tuple(_education_entry(entry) for entry in document.education)
        sections.append(LayoutSection(SectionKind.EDUCATION, entries=entries))

    return ResumeLayout(header=_header(document), sections=tuple(sections))
