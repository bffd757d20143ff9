"""Annotation tag parsing.

Interprets the content of a single annotation line (comment and tag
markers already removed) and folds it into a DocBlockDraft. Malformed
parameter specs are skipped; malformed return specs degrade to a
placeholder type instead of being dropped.
"""

import logging
import re
from dataclasses import replace
from typing import Optional

from luadoc.parsers.structure import DocBlockDraft, Parameter, ReturnValue

logger = logging.getLogger(__name__)

# A colon-form parameter name is a single token: no whitespace, no commas
_PARAM_NAME_RE = re.compile(r"^[^\s,]+$")

_TAG_CLASS = "class"
_TAG_DESC = "desc"
_TAG_PARAM = "param"
_TAG_RETURN = "return"


def parse_param_spec(spec: str) -> Optional[Parameter]:
    """Parse the payload of a ``param`` tag.

    Accepted shapes, tried in order:

    1. ``name:type description`` (description optional)
    2. ``name, type, description`` (description optional)
    3. ``name type description...`` (whitespace separated)

    Args:
        spec: Text following the ``param`` keyword.

    Returns:
        A Parameter, or None if no name and type can be identified.
    """
    spec = spec.strip()

    name, colon, rest = spec.partition(":")
    name = name.strip()
    rest = rest.strip()
    if colon and rest and _PARAM_NAME_RE.match(name):
        parts = rest.split(None, 1)
        description = parts[1].strip() if len(parts) > 1 else ""
        return Parameter(name=name, type=parts[0], description=description)

    fields = [f.strip() for f in spec.split(",", 2)]
    if len(fields) >= 2 and fields[0] and fields[1]:
        description = fields[2] if len(fields) > 2 else ""
        return Parameter(name=fields[0], type=fields[1], description=description)

    words = spec.split()
    if len(words) >= 2:
        return Parameter(name=words[0], type=words[1], description=" ".join(words[2:]))

    return None


def parse_return_spec(spec: str) -> Optional[ReturnValue]:
    """Parse the payload of a ``return`` tag.

    Accepted shapes, tried in order: ``type, description``,
    ``type description`` and a bare ``type``.

    Args:
        spec: Text following the ``return`` keyword.

    Returns:
        A ReturnValue, or None when no type can be identified (empty
        content, or nothing before the first comma).
    """
    spec = spec.strip()
    if not spec:
        return None

    if "," in spec:
        return_type, _, description = spec.partition(",")
        return_type = return_type.strip()
        if not return_type:
            return None
        return ReturnValue(type=return_type, description=description.strip())

    parts = spec.split(None, 1)
    if len(parts) == 2:
        return ReturnValue(type=parts[0], description=parts[1].strip())

    return ReturnValue(type=spec)


class AnnotationTagParser:
    """Folds annotation line contents into a DocBlockDraft.

    Recognized keywords are ``class``, ``desc``, ``param`` and
    ``return``. Any other non-empty content becomes the description
    when the block has none yet.
    """

    def __init__(self, tag_marker: str = "@", placeholder_type: str = "any") -> None:
        """Initialize the tag parser.

        Args:
            tag_marker: Marker that introduces a tag; content that still
                starts with it is treated as a redundant tag and ignored.
            placeholder_type: Type used for return entries whose spec
                cannot be parsed.
        """
        self.tag_marker = tag_marker
        self.placeholder_type = placeholder_type

    def apply(self, draft: DocBlockDraft, content: str) -> DocBlockDraft:
        """Apply one annotation line to a draft.

        Args:
            draft: The block accumulated so far.
            content: Line content with comment and tag markers stripped.

        Returns:
            The updated draft. The input draft is never modified.
        """
        content = content.strip()
        if not content or content.startswith(self.tag_marker):
            return draft

        parts = content.split(None, 1)
        keyword = parts[0]
        payload = parts[1].strip() if len(parts) > 1 else ""

        if keyword == _TAG_CLASS:
            if not payload:
                return draft
            return replace(draft, class_name=payload)

        if keyword == _TAG_DESC:
            return self._append_description(draft, payload)

        if keyword == _TAG_PARAM:
            param = parse_param_spec(payload)
            if param is None:
                logger.debug(
                    "Skipping malformed param spec %r (block at line %d)",
                    payload,
                    draft.start_line + 1,
                )
                return draft
            return replace(draft, params=draft.params + (param,))

        if keyword == _TAG_RETURN:
            ret = parse_return_spec(payload)
            if ret is None:
                ret = ReturnValue(type=self.placeholder_type, description=payload)
            return replace(draft, returns=draft.returns + (ret,))

        if not draft.description:
            return replace(draft, description=content)
        return draft

    def _append_description(self, draft: DocBlockDraft, text: str) -> DocBlockDraft:
        """Append text to the draft description with a single space."""
        if not text:
            return draft
        if draft.description:
            return replace(draft, description=f"{draft.description} {text}")
        return replace(draft, description=text)
