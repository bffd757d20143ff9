"""Tests for the Jinja2 template manager."""

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound

from luadoc.generators.template_manager import TemplateManager
from luadoc.parsers.structure import (
    Documentation,
    DocumentedFunction,
    Parameter,
    ReturnValue,
)


@pytest.fixture
def manager() -> TemplateManager:
    """Create a TemplateManager with the packaged templates."""
    return TemplateManager()


@pytest.fixture
def docs() -> Documentation:
    """Create a small documentation mapping."""
    docs = Documentation()
    docs.add(
        "Math",
        DocumentedFunction(
            name="Add",
            description="Adds <b>two</b> numbers",
            params=(Parameter("x", "number", "Value 1"),),
            returns=(ReturnValue("number", "The sum"),),
        ),
    )
    docs.add("Array", DocumentedFunction(name="max"))
    return docs


class TestListTemplates:
    """Tests for template discovery."""

    def test_packaged_templates(self, manager: TemplateManager) -> None:
        names = manager.list_templates()
        for expected in ("category.html", "index.html", "style.css", "search.js"):
            assert expected in names


class TestRenderCategoryPage:
    """Tests for category page rendering."""

    def test_contains_function(
        self, manager: TemplateManager, docs: Documentation
    ) -> None:
        html = manager.render_category_page("Math", docs["Math"], docs)
        assert '<h1 class="page-title">Math</h1>' in html
        assert 'id="add"' in html
        assert "Math:Add" in html
        assert "Value 1" in html
        assert "The sum" in html

    def test_escapes_text(self, manager: TemplateManager, docs: Documentation) -> None:
        html = manager.render_category_page("Math", docs["Math"], docs)
        assert "&lt;b&gt;two&lt;/b&gt;" in html
        assert "<b>two</b>" not in html

    def test_navigation_links(
        self, manager: TemplateManager, docs: Documentation
    ) -> None:
        html = manager.render_category_page("Math", docs["Math"], docs)
        assert 'href="#add"' in html
        assert 'href="array.html#max"' in html

    def test_empty_sections(
        self, manager: TemplateManager, docs: Documentation
    ) -> None:
        html = manager.render_category_page("Array", docs["Array"], docs)
        assert "No parameters" in html
        assert "No return value" in html

    def test_title_and_footer(
        self, manager: TemplateManager, docs: Documentation
    ) -> None:
        html = manager.render_category_page(
            "Math", docs["Math"], docs, title="My SDK", footer="BSD 3-Clause"
        )
        assert "<title>Math - My SDK</title>" in html
        assert "BSD 3-Clause" in html


class TestRenderIndex:
    """Tests for the redirect page."""

    def test_redirect_target(self, manager: TemplateManager) -> None:
        html = manager.render_index("math.html")
        assert 'content="0; url=math.html"' in html


class TestAssets:
    """Tests for static assets and custom directories."""

    def test_read_asset(self, manager: TemplateManager) -> None:
        assert "initSearch" in manager.read_asset("search.js")

    def test_missing_asset(self, manager: TemplateManager) -> None:
        with pytest.raises(FileNotFoundError):
            manager.read_asset("missing.css")

    def test_custom_directory(self, tmp_path: Path) -> None:
        (tmp_path / "index.html").write_text("go to {{ target }}")
        manager = TemplateManager(templates_dir=str(tmp_path))
        assert manager.render_index("x.html") == "go to x.html"

    def test_missing_template(self, tmp_path: Path) -> None:
        manager = TemplateManager(templates_dir=str(tmp_path))
        with pytest.raises(TemplateNotFound):
            manager.render_index("x.html")
