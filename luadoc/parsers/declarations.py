"""Declaration matching and categorization.

Recognizes the Lua syntaxes that introduce a function and derives the
(category, short name) pair a documented function is grouped under.
Only the declaring line is inspected; the function body is never parsed.
"""

import re
from typing import Optional

DEFAULT_CATEGORY = "Global"

_IDENT = r"[a-zA-Z_][a-zA-Z0-9_]*"
_DOTTED = rf"{_IDENT}(?:\.{_IDENT})*"

# Priority order matters: a line may satisfy more than one pattern.
_NAMED_RE = re.compile(rf"function\s+({_DOTTED})\s*\(")
_LOCAL_RE = re.compile(rf"local\s+function\s+({_IDENT})\s*\(")
_METHOD_RE = re.compile(rf"({_DOTTED}):({_IDENT})\s*\(")
_ASSIGNMENT_RE = re.compile(rf"({_DOTTED})\s*=\s*function\s*\(")


def extract_declared_name(line: str) -> Optional[str]:
    """Extract the declared function name from a line of source.

    Patterns are tried in order: ``function a.b(``, ``local function a(``,
    ``a.b:c(`` (reported as ``a.b.c``) and ``a.b = function(``. The first
    pattern that matches wins.

    Args:
        line: A single line of Lua source.

    Returns:
        The declared (possibly dotted) name, or None if the line does not
        declare a function.
    """
    match = _NAMED_RE.search(line)
    if match:
        return match.group(1)

    match = _LOCAL_RE.search(line)
    if match:
        return match.group(1)

    match = _METHOD_RE.search(line)
    if match:
        return f"{match.group(1)}.{match.group(2)}"

    match = _ASSIGNMENT_RE.search(line)
    if match:
        return match.group(1)

    return None


def categorize(
    declared_name: str,
    class_name: Optional[str] = None,
    default_category: str = DEFAULT_CATEGORY,
) -> tuple[str, str]:
    """Map a declared name to its (category, short name) pair.

    A dotted name is split on its first dot only, so ``a.b.c`` becomes
    category ``a`` and name ``b.c``. An undotted name falls under the
    block's class context, or the default category without one.

    Args:
        declared_name: Name returned by extract_declared_name.
        class_name: Class context from the doc block, if any.
        default_category: Category used when there is no other context.

    Returns:
        Tuple of (category, short name).
    """
    if "." in declared_name:
        category, _, name = declared_name.partition(".")
        return category, name
    return class_name or default_category, declared_name
