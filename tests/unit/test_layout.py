"""Unit tests for the shared layout traversal."""

import pytest

from vitae.contexts.document.resume_data_structure import (
    EducationEntry,
    Experience,
    Identity,
    ProjectEntry,
    ResumeDocument,
)
from vitae.contexts.rendering.layout import (
    PLACEHOLDERS,
    SectionKind,
    build_layout,
    date_range_label,
    format_month,
    split_columns,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "value,expected",
    [
        ("2021-01", "Jan 2021"),
        ("1999-12", "Dec 1999"),
        ("2020-5", "May 2020"),
        ("", ""),
        ("   ", ""),
        ("2021-13", "2021-13"),
        ("Spring 2020", "Spring 2020"),
    ],
)
def test_format_month(value, expected):
    assert format_month(value) == expected


@pytest.mark.unit
def test_current_job_always_ends_present():
    assert date_range_label("2021-01", "2020-05", True) == "Jan 2021 - Present"
    assert date_range_label("2021-01", "", True) == "Jan 2021 - Present"


@pytest.mark.unit
def test_date_range_drops_blank_parts():
    assert date_range_label("2019-03", "2021-06", False) == "Mar 2019 - Jun 2021"
    assert date_range_label("2019-03", "", False) == "Mar 2019"
    assert date_range_label("", "", True) == "Present"
    assert date_range_label("", "", False) == ""


@pytest.mark.unit
@pytest.mark.parametrize("count", [0, 1, 2, 5, 10, 11])
def test_split_columns_sizes_and_order(count):
    items = [f"s{i}" for i in range(count)]
    left, right = split_columns(items)

    assert len(left) == (count + 1) // 2
    assert len(right) == count // 2
    assert list(left + right) == items


@pytest.mark.unit
def test_empty_document_has_header_only():
    layout = build_layout(ResumeDocument.empty())

    assert layout.sections == ()
    assert layout.header.name == PLACEHOLDERS["full_name"]
    assert layout.header.contacts == ()


@pytest.mark.unit
def test_sections_follow_fixed_order():
    doc = ResumeDocument(
        summary="Summary",
        skills=("Python",),
        work_history=(Experience(id="w"),),
        education=(EducationEntry(id="e"),),
        projects=(ProjectEntry(id="p"),),
    )

    assert build_layout(doc).section_kinds == (
        SectionKind.SUMMARY,
        SectionKind.SKILLS,
        SectionKind.EXPERIENCE,
        SectionKind.PROJECTS,
        SectionKind.EDUCATION,
    )


@pytest.mark.unit
def test_blank_summary_is_omitted():
    layout = build_layout(ResumeDocument(summary="   \n", skills=("Go",)))
    assert layout.section(SectionKind.SUMMARY) is None
    assert layout.section_kinds == (SectionKind.SKILLS,)


@pytest.mark.unit
def test_header_contacts_only_when_present():
    identity = Identity(
        full_name="Jane Doe",
        target_role="Engineer",
        email="jane@example.com",
        location=" ",
        website="https://jane.dev",
        linkedin="http://linkedin.com/in/jane",
    )
    header = build_layout(ResumeDocument(identity=identity)).header

    assert header.name == "Jane Doe"
    assert header.role == "Engineer"
    assert [(c.kind, c.text) for c in header.contacts] == [
        ("email", "jane@example.com"),
        ("website", "jane.dev"),
        ("linkedin", "linkedin.com/in/jane"),
    ]


@pytest.mark.unit
def test_experience_entry_fields():
    doc = ResumeDocument(
        work_history=(
            Experience(id="1", company="Acme", position="Engineer", start_month="2021-01", is_current=True),
            Experience(id="2", start_month="2018-02", end_month="2020-12", description=" Built things. "),
        )
    )
    first, second = build_layout(doc).section(SectionKind.EXPERIENCE).entries

    assert (first.title, first.subtitle, first.trailing) == ("Engineer", "Acme", "Jan 2021 - Present")
    assert first.body == ""
    assert second.title == PLACEHOLDERS["position"]
    assert second.subtitle == PLACEHOLDERS["company"]
    assert second.trailing == "Feb 2018 - Dec 2020"
    assert second.body == "Built things."


@pytest.mark.unit
def test_project_tech_stack_only_when_present():
    doc = ResumeDocument(
        projects=(
            ProjectEntry(id="1", title="Site", tech_stack="Django, Postgres", role="Lead"),
            ProjectEntry(id="2", tech_stack="  "),
        )
    )
    with_stack, without = build_layout(doc).section(SectionKind.PROJECTS).entries

    assert [(d.label, d.value) for d in with_stack.details] == [("Tech Stack", "Django, Postgres")]
    assert with_stack.trailing == "Lead"
    assert without.details == ()
    assert without.title == PLACEHOLDERS["project_title"]
    assert without.trailing == PLACEHOLDERS["project_role"]


@pytest.mark.unit
def test_education_title_and_gpa():
    doc = ResumeDocument(
        education=(
            EducationEntry(id="1", institution="MIT", degree="BSc", field="Physics", graduation_month="2015-05", gpa="3.9"),
            EducationEntry(id="2", degree="MBA"),
        )
    )
    first, second = build_layout(doc).section(SectionKind.EDUCATION).entries

    assert first.title == "BSc in Physics"
    assert first.subtitle == "MIT"
    assert first.trailing == "May 2015"
    assert [(d.label, d.value) for d in first.details] == [("GPA", "3.9")]
    assert second.title == "MBA"
    assert second.subtitle == PLACEHOLDERS["institution"]
    assert second.details == ()


@pytest.mark.unit
def test_entries_keep_stored_order():
    doc = ResumeDocument(work_history=tuple(Experience(id=str(i), company=f"C{i}") for i in range(4)))
    entries = build_layout(doc).section(SectionKind.EXPERIENCE).entries
    assert [entry.subtitle for entry in entries] == ["C0", "C1", "C2", "C3"]
