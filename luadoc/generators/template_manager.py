"""Template manager for loading and rendering Jinja2 site templates.

Provides a centralized interface for rendering the HTML pages of the
documentation site and reading its static assets from the templates/
directory.
"""

import logging
import re
from pathlib import Path
from typing import Any, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from luadoc.parsers.structure import Documentation, DocumentedFunction

logger = logging.getLogger(__name__)

_DEFAULT_TEMPLATES_DIR = Path(__file__).parent.parent / "templates"

_UNSAFE_FILENAME_RE = re.compile(r"[^\w.-]+")


def page_name(category: str) -> str:
    """Return the file name of a category page.

    Characters outside letters, digits, `_`, `.` and `-` become `_`, so
    a free-form class name such as `io/net` stays inside the site directory.
    """
    return _UNSAFE_FILENAME_RE.sub("_", category.lower()) + ".html"


class TemplateManager:
    """Loads and renders Jinja2 templates for the documentation site.

    Templates are loaded from a configurable directory. HTML templates
    are autoescaped so annotation text cannot inject markup.
    """

    def __init__(self, templates_dir: Optional[str] = None) -> None:
        """Initialize the template manager.

        Args:
            templates_dir: Path to the templates directory. Uses the
                packaged templates/ directory if not specified.
        """
        self._templates_path = (
            Path(templates_dir) if templates_dir else _DEFAULT_TEMPLATES_DIR
        )

        if not self._templates_path.exists():
            logger.warning("Templates directory not found: %s", self._templates_path)

        self._env = Environment(
            loader=FileSystemLoader(str(self._templates_path)),
            autoescape=select_autoescape(["html"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._env.filters["page_name"] = page_name
        logger.debug("Template manager initialized with: %s", self._templates_path)

    def render_category_page(
        self,
        category: str,
        functions: list[DocumentedFunction],
        docs: Documentation,
        title: str = "Documentation",
        footer: str = "",
    ) -> str:
        """Render the page of one category.

        Args:
            category: Category shown on the page.
            functions: Functions of that category, in discovery order.
            docs: Full documentation, used for the sidebar navigation.
            title: Site title shown in the browser tab.
            footer: Footer text.

        Returns:
            Rendered HTML.
        """
        return self._render(
            "category.html",
            category=category,
            functions=functions,
            docs=docs,
            title=title,
            footer=footer,
        )

    def render_index(self, target: str, title: str = "Documentation") -> str:
        """Render the index page that redirects to another page.

        Args:
            target: Relative URL of the page to redirect to.
            title: Site title.

        Returns:
            Rendered HTML.
        """
        return self._render("index.html", target=target, title=title)

    def read_asset(self, name: str) -> str:
        """Read a static asset such as a stylesheet verbatim.

        Args:
            name: File name within the templates directory.

        Returns:
            The asset content.

        Raises:
            FileNotFoundError: If the asset does not exist.
        """
        return (self._templates_path / name).read_text(encoding="utf-8")

    def _render(self, template_name: str, **kwargs: Any) -> str:
        """Render a template with the given context variables.

        Args:
            template_name: Name of the template file to render.
            **kwargs: Template context variables.

        Returns:
            Rendered template string.

        Raises:
            TemplateNotFound: If the template file does not exist.
        """
        template = self._env.get_template(template_name)
        rendered = template.render(**kwargs)
        logger.debug("Rendered template %s (%d chars)", template_name, len(rendered))
        return rendered

    def list_templates(self) -> list[str]:
        """List all available template files.

        Returns:
            List of template file names.
        """
        return self._env.list_templates()
