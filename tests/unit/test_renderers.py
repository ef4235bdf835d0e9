"""Unit tests for the HTML renderers, theme presets and markdown preview."""

import pytest

from vitae.contexts.document.resume_data_structure import (
    EducationEntry,
    Experience,
    Identity,
    ProjectEntry,
    ResumeDocument,
    Sector,
)
from vitae.contexts.rendering.exceptions import TemplateRenderError
from vitae.contexts.rendering.layout import build_layout
from vitae.contexts.rendering.markdown_formatter import format_layout_markdown
from vitae.contexts.rendering.registries import TemplateRegistry
from vitae.contexts.rendering.renderers import (
    DecoratedRenderer,
    PlainRenderer,
    renderer_for_sector,
)
from vitae.contexts.rendering.theme_resolver import get_theme, load_export_config, load_themes


@pytest.fixture
def full_document():
    return ResumeDocument(
        identity=Identity(full_name="Jane Doe", target_role="Engineer", email="jane@example.com"),
        summary="Builds reliable systems.",
        skills=("Python", "SQL", "Docker"),
        work_history=(
            Experience(id="w1", company="Acme", position="Engineer", start_month="2021-01", is_current=True),
        ),
        education=(EducationEntry(id="e1", institution="MIT", degree="BSc", field="Physics", gpa="3.9"),),
        projects=(ProjectEntry(id="p1", title="Site", tech_stack="Django", role="Lead"),),
    )


# --- Theme presets ---


@pytest.mark.unit
def test_packaged_themes_load():
    themes = load_themes()
    assert {"plain", "decorated"} <= set(themes)
    assert themes["plain"]["headings"]["skills"] == "SKILLS"
    assert themes["decorated"]["headings"]["skills"] == "Core Skills"


@pytest.mark.unit
def test_get_theme_unknown_name():
    with pytest.raises(ValueError, match="not found"):
        get_theme("neon")


@pytest.mark.unit
def test_theme_missing_required_key(tmp_path):
    config = tmp_path / "themes.yaml"
    config.write_text("broken:\n  template: plain\n  headings: {}\n", encoding="utf-8")

    with pytest.raises(ValueError, match="missing keys"):
        load_themes(config)


@pytest.mark.unit
def test_export_config_page_geometry():
    config = load_export_config()
    assert config["page"] == {"size": "letter", "orientation": "portrait", "margin": "0.3in"}
    assert config["default_filename"] == "Resume"


# --- Renderers ---


@pytest.mark.unit
def test_renderer_for_sector():
    assert isinstance(renderer_for_sector(Sector.IT), PlainRenderer)
    assert isinstance(renderer_for_sector("Other"), DecoratedRenderer)

    with pytest.raises(ValueError):
        renderer_for_sector(None)
    with pytest.raises(ValueError):
        renderer_for_sector("Finance")


@pytest.mark.unit
@pytest.mark.parametrize("renderer_cls", [PlainRenderer, DecoratedRenderer])
def test_render_contains_all_sections(renderer_cls, full_document):
    html = renderer_cls().render(full_document)

    assert 'id="resume-preview"' in html
    assert "Jane Doe" in html
    assert "jane@example.com" in html
    assert "Jan 2021 - Present" in html
    assert "Tech Stack: Django" in html
    assert "GPA: 3.9" in html
    assert "BSc in Physics" in html
    for kind in ("summary", "skills", "experience", "projects", "education"):
        assert f'class="section-{kind}"' in html


@pytest.mark.unit
def test_variants_differ_only_in_presentation(full_document):
    plain = PlainRenderer().render(full_document)
    decorated = DecoratedRenderer().render(full_document)

    assert "PROFESSIONAL SUMMARY" in plain
    assert "Professional Summary" in decorated
    assert "theme-plain" in plain
    assert "theme-decorated" in decorated
    assert plain != decorated


@pytest.mark.unit
def test_sections_appear_in_fixed_order(full_document):
    html = PlainRenderer().render(full_document)
    positions = [
        html.index(f'class="section-{kind}"')
        for kind in ("summary", "skills", "experience", "projects", "education")
    ]
    assert positions == sorted(positions)


@pytest.mark.unit
@pytest.mark.parametrize("renderer_cls", [PlainRenderer, DecoratedRenderer])
def test_empty_collections_are_omitted(renderer_cls):
    html = renderer_cls().render(ResumeDocument(identity=Identity(full_name="Jane Doe")))

    assert "Jane Doe" in html
    assert 'class="section-' not in html


@pytest.mark.unit
def test_render_escapes_user_text():
    doc = ResumeDocument(summary="<script>alert(1)</script>")
    html = PlainRenderer().render(doc)

    assert "<script>" not in html
    assert "&lt;script&gt;" in html


@pytest.mark.unit
def test_render_is_pure(full_document):
    renderer = DecoratedRenderer()
    assert renderer.render(full_document) == renderer.render(full_document)


@pytest.mark.unit
def test_missing_template_raises_template_render_error(tmp_path):
    renderer = PlainRenderer(registry=TemplateRegistry(tmp_path))

    with pytest.raises(TemplateRenderError) as exc_info:
        renderer.render(ResumeDocument.empty())

    assert exc_info.value.theme_name == "plain"
    assert exc_info.value.template_path == tmp_path / "plain" / "resume.html.jinja"


# --- Markdown preview ---


@pytest.mark.unit
def test_markdown_preview(full_document):
    markdown = format_layout_markdown(build_layout(full_document))

    assert markdown.startswith("# Jane Doe\n*Engineer*\njane@example.com\n")
    assert "## Skills\n\n- Python\n- SQL\n- Docker" in markdown
    assert "### Engineer | *Jan 2021 - Present*\n**Acme**" in markdown
    assert "### BSc in Physics" in markdown
    assert markdown.index("## Projects") < markdown.index("## Education")


@pytest.mark.unit
def test_markdown_preview_uses_theme_headings(full_document):
    headings = get_theme("plain")["headings"]
    markdown = format_layout_markdown(build_layout(full_document), headings=headings)

    assert "## PROFESSIONAL SUMMARY" in markdown
    assert "## Summary" not in markdown
