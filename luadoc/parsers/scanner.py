"""Line-oriented scanner for annotated Lua sources.

Walks a source top to bottom, accumulates each annotation block into a
DocBlockDraft, looks a few lines ahead for the declaration the block
documents, and files the result under its category in a Documentation
mapping. Blocks without a declaration in the lookahead window are
dropped without error.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from luadoc.parsers.declarations import categorize, extract_declared_name
from luadoc.parsers.structure import DocBlockDraft, Documentation, DocumentedFunction
from luadoc.parsers.tags import AnnotationTagParser
from luadoc.utils.config import ScannerConfig

logger = logging.getLogger(__name__)


@dataclass
class LineCursor:
    """Explicit read position over the lines of one source.

    Attributes:
        lines: Source lines without line terminators.
        position: Index of the current line.
    """

    lines: list[str]
    position: int = 0

    def at_end(self) -> bool:
        return self.position >= len(self.lines)

    @property
    def current(self) -> str:
        return self.lines[self.position]

    def advance(self) -> None:
        self.position += 1

    def seek(self, position: int) -> None:
        self.position = position

    def skip_blank(self) -> None:
        """Move past any blank lines at the current position."""
        while not self.at_end() and not self.current.strip():
            self.position += 1


class AnnotationScanner:
    """Extracts documented functions from annotated Lua sources.

    A block starts at a comment line carrying the tag marker (``--@`` or
    ``-- @``) and continues over consecutive comment lines. In permissive
    mode untagged comments continue the block too, except triple markers
    (``---``) and TODO/FIXME notes.
    """

    def __init__(self, config: Optional[ScannerConfig] = None) -> None:
        """Initialize the scanner.

        Args:
            config: Scanner settings. Uses defaults if not provided.
        """
        self.config = config or ScannerConfig()
        self._tags = AnnotationTagParser(
            tag_marker=self.config.tag_marker,
            placeholder_type=self.config.placeholder_type,
        )
        marker = self.config.comment_marker
        self._tag_prefixes = (
            marker + self.config.tag_marker,
            f"{marker} {self.config.tag_marker}",
        )
        self._triple_marker = marker + marker[-1]

    def scan_file(self, file_path: str) -> Documentation:
        """Scan one source file.

        Args:
            file_path: Path to the Lua file.

        Returns:
            Documentation discovered in the file.

        Raises:
            OSError: If the file cannot be read.
            UnicodeDecodeError: If the file is not valid UTF-8.
        """
        logger.info("Scanning file: %s", file_path)
        source = Path(file_path).read_text(encoding="utf-8")
        return self.scan_source(source, file_path)

    def scan_files(self, file_paths: Iterable[str]) -> Documentation:
        """Scan several files and merge their entries in discovery order.

        Args:
            file_paths: Paths of the files to scan, in traversal order.

        Returns:
            The merged Documentation.
        """
        docs = Documentation()
        for file_path in file_paths:
            docs.merge(self.scan_file(str(file_path)))
        return docs

    def scan_source(self, source: str, source_id: str = "<string>") -> Documentation:
        """Scan source text for documented functions.

        Args:
            source: Full text of one source.
            source_id: Name of the source, used in log messages.

        Returns:
            Documentation discovered in the source.
        """
        docs = Documentation()
        cursor = LineCursor(source.splitlines())

        while not cursor.at_end():
            if not self.is_block_start(cursor.current):
                cursor.advance()
                continue

            result = self._read_block(cursor, source_id)
            if result:
                category, function = result
                logger.debug(
                    "Found function %s in category %s (%s)",
                    function.name,
                    category,
                    source_id,
                )
                docs.add(category, function)

        logger.debug(
            "Scanned %s: %d categories, %d functions",
            source_id,
            len(docs),
            docs.function_count,
        )
        return docs

    def is_block_start(self, line: str) -> bool:
        """Check whether a line opens an annotation block."""
        return line.lstrip().startswith(self._tag_prefixes)

    def is_block_line(self, line: str) -> bool:
        """Check whether a line continues the current annotation block."""
        if self.is_block_start(line):
            return True
        if not self.config.permissive:
            return False

        stripped = line.lstrip()
        marker = self.config.comment_marker
        if not stripped.startswith(marker) or stripped.startswith(self._triple_marker):
            return False
        text = stripped[len(marker) :].lstrip()
        return not text.startswith(tuple(self.config.ignored_prefixes))

    def extract_content(self, line: str) -> str:
        """Strip the comment and tag markers from an annotation line."""
        text = line.strip()
        if text.startswith(self.config.comment_marker):
            text = text[len(self.config.comment_marker) :].lstrip()
        if text.startswith(self.config.tag_marker):
            text = text[len(self.config.tag_marker) :]
        return text.strip()

    def _read_block(
        self, cursor: LineCursor, source_id: str
    ) -> Optional[tuple[str, DocumentedFunction]]:
        """Accumulate one block and resolve the declaration it documents.

        On a match the cursor is left after the declaration line.
        Otherwise it is left on the first non-blank line after the block
        so the outer scan can still recognize a block starting there.

        Args:
            cursor: Cursor positioned on the first line of the block.
            source_id: Name of the source, used in log messages.

        Returns:
            Tuple of (category, function), or None if no declaration
            follows within the lookahead window.
        """
        draft = DocBlockDraft(start_line=cursor.position)
        while not cursor.at_end() and self.is_block_line(cursor.current):
            draft = self._tags.apply(draft, self.extract_content(cursor.current))
            cursor.advance()

        block_end = cursor.position
        # The window counts from the block end; blank lines use up slots.
        window_end = min(block_end + self.config.lookahead, len(cursor.lines))
        for index in range(block_end, window_end):
            line = cursor.lines[index]
            if not line.strip():
                continue
            if self.is_block_start(line):
                break
            if line.lstrip().startswith(self.config.comment_marker):
                continue

            declared = extract_declared_name(line)
            if declared:
                cursor.seek(index + 1)
                category, name = categorize(
                    declared, draft.class_name, self.config.default_category
                )
                return category, draft.build(name)

        logger.debug(
            "No declaration after doc block at %s:%d, discarding",
            source_id,
            draft.start_line + 1,
        )
        cursor.skip_blank()
        return None
