"""JSON interchange for extracted documentation.

Writes and reads the docs.json file passed from the scanner to the site
builder. Category order and entry order are preserved in both directions.
"""

import json
import logging
from pathlib import Path

from luadoc.parsers.structure import Documentation

logger = logging.getLogger(__name__)


class DocumentationFormatError(ValueError):
    """Raised when an interchange file does not hold a documentation mapping."""


def write_documentation(docs: Documentation, path: str) -> Path:
    """Serialize documentation to a JSON file.

    Args:
        docs: The documentation to write.
        path: Destination file path. Parent directories are created.

    Returns:
        Path to the written file.
    """
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(
        json.dumps(docs.to_dict(), indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    logger.info(
        "Wrote %s (%d categories, %d functions)",
        out_path,
        len(docs),
        docs.function_count,
    )
    return out_path


def read_documentation(path: str) -> Documentation:
    """Load documentation from a JSON file.

    Args:
        path: Path to a file written by write_documentation.

    Returns:
        The restored Documentation.

    Raises:
        FileNotFoundError: If the file does not exist.
        DocumentationFormatError: If the content is not valid JSON or does
            not match the expected layout.
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise DocumentationFormatError(f"{path} is not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise DocumentationFormatError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(data, dict) or not all(
        isinstance(functions, list) for functions in data.values()
    ):
        raise DocumentationFormatError(
            f"{path} must map category names to lists of functions"
        )

    try:
        docs = Documentation.from_dict(data)
    except (KeyError, TypeError, AttributeError) as e:
        raise DocumentationFormatError(f"{path} has a malformed entry: {e}") from e

    logger.debug("Loaded %d categories from %s", len(docs), path)
    return docs
