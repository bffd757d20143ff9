"""Static HTML site generation.

Writes one page per documentation category, the shared stylesheet and
search script, and an index page redirecting to the first category.
"""

import logging
import shutil
from pathlib import Path
from typing import Optional

from luadoc.generators.template_manager import TemplateManager, page_name
from luadoc.parsers.structure import Documentation

logger = logging.getLogger(__name__)

_ASSETS = ("style.css", "search.js")


class SiteWriter:
    """Renders a Documentation mapping as a browsable static site."""

    def __init__(
        self,
        site_dir: str = "dist",
        title: str = "Documentation",
        footer: str = "",
        clean: bool = True,
        templates: Optional[TemplateManager] = None,
    ) -> None:
        """Initialize the site writer.

        Args:
            site_dir: Directory the site is written to.
            title: Site title shown in page titles.
            footer: Footer text shown on every category page.
            clean: Whether to remove an existing site directory first.
            templates: Template manager to render with. Uses the packaged
                templates if not provided.
        """
        self.site_dir = Path(site_dir)
        self.title = title
        self.footer = footer
        self.clean = clean
        self.templates = templates or TemplateManager()

    def write_site(self, docs: Documentation) -> Path:
        """Write the complete site for a documentation mapping.

        Args:
            docs: The documentation to render.

        Returns:
            Path to the site directory.
        """
        if self.clean and self.site_dir.exists():
            logger.info("Removing existing site directory %s", self.site_dir)
            shutil.rmtree(self.site_dir)
        self.site_dir.mkdir(parents=True, exist_ok=True)

        self._write_assets()
        for category in docs:
            self.write_category_page(category, docs)
        self._write_index(docs)

        logger.info(
            "Wrote site to %s (%d categories, %d functions)",
            self.site_dir,
            len(docs),
            docs.function_count,
        )
        return self.site_dir

    def write_category_page(self, category: str, docs: Documentation) -> Path:
        """Write the page of one category.

        Args:
            category: Category to render; must be present in docs.
            docs: Full documentation, used for navigation.

        Returns:
            Path to the written page.
        """
        html = self.templates.render_category_page(
            category,
            docs[category],
            docs,
            title=self.title,
            footer=self.footer,
        )
        path = self.site_dir / page_name(category)
        path.write_text(html, encoding="utf-8")
        logger.debug("Wrote category page %s", path)
        return path

    def _write_assets(self) -> None:
        for name in _ASSETS:
            (self.site_dir / name).write_text(
                self.templates.read_asset(name), encoding="utf-8"
            )

    def _write_index(self, docs: Documentation) -> Optional[Path]:
        """Write index.html redirecting to the first category page.

        Returns:
            Path to the index, or None when there are no categories.
        """
        first = next(iter(docs), None)
        if first is None:
            logger.warning("No documented functions, skipping index page")
            return None

        path = self.site_dir / "index.html"
        path.write_text(
            self.templates.render_index(page_name(first), title=self.title),
            encoding="utf-8",
        )
        return path
