"""Heading detection for star-marked outline documents.

A heading line starts with one or more ``*`` characters; the length of that
run is the heading level. Anything from the first ``;`` onward is an inline
comment and is not part of the label:

    * Assets                 level 1, label "Assets"
    ** Bank  ;#region        level 2, label "Bank"
    ***                      not a heading (empty label)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .document import TextLine

MARKER = "*"
COMMENT_DELIMITER = ";"


class SymbolKind(str, Enum):
    """Presentation tag for an outline node."""

    CLASS = "class"
    FUNCTION = "function"

    @classmethod
    def for_level(cls, level: int) -> SymbolKind:
        return cls.CLASS if level == 1 else cls.FUNCTION


@dataclass
class BlockRecord:
    """A heading found during the scan, before it becomes an outline node."""

    label: str
    level: int
    kind: SymbolKind
    start: TextLine | None = None
    end: TextLine | None = None


def is_heading_candidate(text: str) -> bool:
    """Return True if the line could be a heading (starts with the marker)."""
    return text.startswith(MARKER)


def extract_heading(text: str) -> BlockRecord | None:
    """Parse a heading line into a block record.

    Args:
        text: The line text, expected to start with the marker character.

    Returns:
        BlockRecord with label, level and kind, or None if the label is empty.
    """
    level = 0
    label_chars: list[str] = []
    in_marker_run = True

    for char in text:
        if char == COMMENT_DELIMITER:
            break
        if char == MARKER:
            # Only the leading run counts toward the level
            if in_marker_run:
                level += 1
            continue
        in_marker_run = False
        label_chars.append(char)

    label = "".join(label_chars).strip()
    if not label:
        return None

    return BlockRecord(label=label, level=level, kind=SymbolKind.for_level(level))
