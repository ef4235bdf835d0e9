"""Unit tests for editor patch helpers."""

import pytest

from vitae.contexts.document.resume_data_structure import Experience, ProjectEntry
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


@pytest.fixture
def jobs():
    return (
        Experience(id="a", company="Acme"),
        Experience(id="b", company="Globex"),
        Experience(id="c", company="Initech"),
    )


@pytest.mark.unit
def test_append_entry_goes_to_end(jobs):
    new = Experience(id="d", company="Umbrella")
    result = append_entry(jobs, new)

    assert [entry.id for entry in result] == ["a", "b", "c", "d"]
    assert len(jobs) == 3


@pytest.mark.unit
def test_remove_entry_filters_by_id(jobs):
    result = remove_entry(jobs, "b")
    assert [entry.id for entry in result] == ["a", "c"]


@pytest.mark.unit
def test_remove_entry_absent_id_is_noop(jobs):
    assert remove_entry(jobs, "missing") == jobs


@pytest.mark.unit
def test_update_entry_changes_only_matching_entry(jobs):
    result = update_entry(jobs, "b", {"position": "Engineer", "is_current": True})

    assert result[1] == Experience(id="b", company="Globex", position="Engineer", is_current=True)
    assert result[0] is jobs[0]
    assert result[2] is jobs[2]


@pytest.mark.unit
def test_update_entry_absent_id_is_noop(jobs):
    assert update_entry(jobs, "missing", {"company": "X"}) == jobs


@pytest.mark.unit
def test_update_entry_rejects_id_change(jobs):
    with pytest.raises(ValueError):
        update_entry(jobs, "a", {"id": "z"})


@pytest.mark.unit
def test_update_entry_rejects_unknown_field(jobs):
    with pytest.raises(ValueError, match="Unknown"):
        update_entry(jobs, "a", {"salary": "lots"})


@pytest.mark.unit
def test_update_entry_rejects_wrong_type():
    projects = (ProjectEntry(id="p"),)
    with pytest.raises(TypeError):
        update_entry(projects, "p", {"title": 42})


@pytest.mark.unit
def test_contains_entry(jobs):
    assert contains_entry(jobs, "c")
    assert not contains_entry(jobs, "z")


@pytest.mark.unit
def test_parse_skills_trims_and_drops_empty():
    assert parse_skills(" Python,  SQL , ,Docker,") == ("Python", "SQL", "Docker")


@pytest.mark.unit
def test_parse_skills_empty_text():
    assert parse_skills("") == ()
    assert parse_skills(" , , ") == ()


@pytest.mark.unit
def test_format_skills_joins_with_comma():
    assert format_skills(("Python", "SQL")) == "Python, SQL"
    assert parse_skills(format_skills(("Python", "SQL"))) == ("Python", "SQL")


@pytest.mark.unit
def test_remove_skill_at():
    skills = ("Python", "SQL", "Docker")
    assert remove_skill_at(skills, 1) == ("Python", "Docker")
    assert remove_skill_at(skills, 0) == ("SQL", "Docker")


@pytest.mark.unit
@pytest.mark.parametrize("index", [3, -1, 100])
def test_remove_skill_at_out_of_range_is_noop(index):
    assert remove_skill_at(("Python", "SQL", "Docker"), index) == ("Python", "SQL", "Docker")


@pytest.mark.unit
def test_merge_skills_is_case_insensitive():
    assert merge_skills(("python",), ["Python"]) == ("python",)


@pytest.mark.unit
def test_merge_skills_keeps_existing_positions_and_appends_in_order():
    merged = merge_skills(("SQL", "Python"), ["Docker", "sql", "Kubernetes"])
    assert merged == ("SQL", "Python", "Docker", "Kubernetes")


@pytest.mark.unit
def test_merge_skills_drops_duplicates_within_suggestions():
    assert merge_skills((), ["Go", "go", "GO", "Rust"]) == ("Go", "Rust")
