"""Unit tests for the résumé document structure."""

from dataclasses import FrozenInstanceError

import pytest

from vitae.contexts.document.resume_data_structure import (
    EducationEntry,
    Experience,
    Identity,
    ProjectEntry,
    ResumeDocument,
    Sector,
    build_record,
    coerce_field,
)


@pytest.mark.unit
def test_empty_document():
    doc = ResumeDocument.empty()

    assert doc.identity == Identity()
    assert doc.summary == ""
    assert doc.skills == ()
    assert doc.work_history == ()
    assert doc.education == ()
    assert doc.projects == ()
    assert doc.sector is None


@pytest.mark.unit
def test_new_entries_get_unique_ids():
    ids = {Experience().id for _ in range(50)}
    assert len(ids) == 50
    assert all(ids)


@pytest.mark.unit
def test_document_is_frozen():
    doc = ResumeDocument.empty()
    with pytest.raises(FrozenInstanceError):
        doc.summary = "changed"


@pytest.mark.unit
def test_with_updates_is_shallow_and_replaces_collections():
    doc = ResumeDocument.empty().with_updates(
        {"skills": ["Python", "SQL"], "projects": [{"id": "p1", "title": "Site"}]}
    )
    updated = doc.with_updates({"projects": [{"id": "p2", "title": "App"}]})

    assert updated.skills == ("Python", "SQL")
    assert [p.id for p in updated.projects] == ["p2"]
    assert doc.projects == (ProjectEntry(id="p1", title="Site"),)


@pytest.mark.unit
def test_with_updates_unknown_field():
    with pytest.raises(KeyError):
        ResumeDocument.empty().with_updates({"hobbies": "chess"})


@pytest.mark.unit
def test_with_updates_applies_nothing_when_any_value_is_bad():
    doc = ResumeDocument.empty()
    with pytest.raises(TypeError):
        doc.with_updates({"summary": "ok", "skills": "Python, SQL"})
    assert doc == ResumeDocument.empty()


@pytest.mark.unit
def test_coerce_sector_from_value():
    assert coerce_field("sector", "IT") is Sector.IT
    assert coerce_field("sector", "Other") is Sector.OTHER
    assert coerce_field("sector", None) is None
    with pytest.raises(ValueError):
        coerce_field("sector", "Finance")


@pytest.mark.unit
def test_build_record_checks_types_and_names():
    assert build_record(Identity, {"full_name": "Jane"}) == Identity(full_name="Jane")

    with pytest.raises(ValueError):
        build_record(Identity, {"nickname": "J"})
    with pytest.raises(TypeError):
        build_record(Experience, {"is_current": "yes"})
    with pytest.raises(TypeError):
        build_record(Identity, ["Jane"])


@pytest.mark.unit
def test_build_record_require_id():
    with pytest.raises(ValueError, match="missing its id"):
        build_record(EducationEntry, {"institution": "MIT"}, require_id=True)


@pytest.mark.unit
def test_dict_round_trip():
    doc = ResumeDocument(
        identity=Identity(full_name="Jane Doe", email="jane@example.com"),
        summary="Engineer.",
        skills=("Python",),
        work_history=(Experience(id="w1", company="Acme", is_current=True),),
        education=(EducationEntry(id="e1", degree="BSc", field="Physics", gpa="3.9"),),
        projects=(ProjectEntry(id="p1", title="Site", tech_stack="Django"),),
        sector=Sector.IT,
    )

    data = doc.to_dict()
    assert data["sector"] == "IT"
    assert data["work_history"][0]["is_current"] is True
    assert ResumeDocument.from_dict(data) == doc


@pytest.mark.unit
def test_from_dict_fills_missing_fields():
    doc = ResumeDocument.from_dict({"summary": "Hello"})
    assert doc == ResumeDocument(summary="Hello")


@pytest.mark.unit
def test_from_dict_rejects_unknown_fields():
    with pytest.raises(ValueError):
        ResumeDocument.from_dict({"summary": "Hello", "photo": "x.png"})


@pytest.mark.unit
def test_find_entry():
    doc = ResumeDocument(projects=(ProjectEntry(id="p1"), ProjectEntry(id="p2")))
    assert doc.find_entry("projects", "p2").id == "p2"
    assert doc.find_entry("projects", "nope") is None
