"""Unit tests for TemplateRegistry class."""

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound

from vitae.contexts.rendering.registries import TEMPLATE_FILENAME, TemplateRegistry


@pytest.mark.unit
def test_template_registry_init():
    """Test TemplateRegistry initialization."""
    registry = TemplateRegistry()
    assert registry.templates_path.exists()
    assert registry._cache == {}


@pytest.mark.unit
@pytest.mark.parametrize("theme_template", ["plain", "decorated"])
def test_get_template(theme_template):
    registry = TemplateRegistry()
    template = registry.get_template(theme_template)

    assert template is not None
    assert registry.is_cached(theme_template)


@pytest.mark.unit
def test_template_caching():
    """Test that templates are cached after first load."""
    registry = TemplateRegistry()

    template1 = registry.get_template("plain")
    template2 = registry.get_template("plain")
    assert template1 is template2

    registry.clear_cache()
    assert not registry.is_cached("plain")


@pytest.mark.unit
def test_get_template_not_found():
    """Test error handling for missing template."""
    registry = TemplateRegistry()

    with pytest.raises(TemplateNotFound, match="nonexistent"):
        registry.get_template("nonexistent")


@pytest.mark.unit
def test_get_template_path():
    registry = TemplateRegistry()
    path = registry.get_template_path("decorated")

    assert isinstance(path, Path)
    assert path.name == TEMPLATE_FILENAME
    assert path.parent.name == "decorated"
    assert path.exists()
