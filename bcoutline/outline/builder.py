"""Single-pass outline construction for star-marked documents."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from dataclasses import dataclass, field

from .document import LineSource, Position, Range
from .extractor import BlockRecord, SymbolKind, extract_heading, is_heading_candidate

logger = logging.getLogger(__name__)


class OutlineError(Exception):
    """Base class for outline failures."""


class OutlineStructureError(OutlineError):
    """Raised when a heading cannot be placed in the outline tree."""

    def __init__(self, message: str, *, level: int, depth: int, line_number: int | None = None):
        self.level = level
        self.depth = depth
        self.line_number = line_number
        if line_number is not None:
            message = f"Line {line_number + 1}: {message}"
        super().__init__(message)


@dataclass
class OutlineNode:
    """A heading block in the outline, with its nested sub-blocks."""

    label: str
    kind: SymbolKind
    level: int  # 1 for *, 2 for **, etc.
    range: Range  # Whole block, heading line through last content line
    selection_range: Range  # Label portion of the heading line
    detail: str = ""
    children: list[OutlineNode] = field(default_factory=list)

    @property
    def start_line(self) -> int:
        return self.range.start.line

    @property
    def end_line(self) -> int:
        """Last line of the block (inclusive)."""
        return self.range.end.line

    def iter_nodes(self) -> Iterator[OutlineNode]:
        """Walk this node and its descendants in document order."""
        yield self
        for child in self.children:
            yield from child.iter_nodes()

    def find(self, label: str) -> OutlineNode | None:
        """Find the first node with the given label (case-insensitive)."""
        wanted = label.lower()
        for node in self.iter_nodes():
            if node.label.lower() == wanted:
                return node
        return None

    def to_dict(self, max_depth: int | None = None) -> dict:
        """Convert to a JSON-friendly dict, optionally cutting off deep levels."""
        children = [
            child.to_dict(max_depth)
            for child in self.children
            if max_depth is None or child.level <= max_depth
        ]
        return {
            "label": self.label,
            "level": self.level,
            "kind": self.kind.value,
            "start_line": self.start_line,
            "end_line": self.end_line,
            "children": children,
        }


def create_node(block: BlockRecord) -> OutlineNode:
    """Turn a completed block record into an outline node.

    Raises:
        OutlineError: If the block's line span has not been set.
    """
    start, end = block.start, block.end
    if start is None or end is None:
        raise OutlineError(f"Heading '{block.label}' has no line span")
    return OutlineNode(
        label=block.label,
        kind=block.kind,
        level=block.level,
        range=Range(start.range.start, end.range.end),
        # Highlight the label, skipping the marker run and the space after it
        selection_range=Range(
            Position(start.line_number, block.level + 1),
            Position(start.line_number, len(start.text)),
        ),
    )


class OutlineBuilder:
    """Incrementally assembles outline nodes into a forest.

    ``path_stack[i]`` holds the most recently inserted node at level ``i + 1``,
    i.e. the path from the current root to the frontier where the next node
    may attach. A builder is meant for one document scan.
    """

    def __init__(self) -> None:
        self.path_stack: list[OutlineNode] = []
        self.roots: list[OutlineNode] = []

    @property
    def depth(self) -> int:
        """Deepest level currently open."""
        return len(self.path_stack)

    def insert(self, node: OutlineNode) -> None:
        """Attach a node to the forest based on its level.

        Raises:
            OutlineStructureError: If the level is below 1, or more than one
                level deeper than the currently open depth.
        """
        level = node.level
        depth = self.depth

        if level < 1:
            raise OutlineStructureError(
                f"Heading level must be at least 1, got {level}",
                level=level,
                depth=depth,
                line_number=node.start_line,
            )

        if level == 1:
            self.roots.append(node)
            self.path_stack = [node]
            return

        # Sibling of the open node at this level, or a return to a shallower
        # level after any amount of nesting
        #
        #   *     A        level 1
        #   **    B        level 2
        #   ***   C        level 3   <- previous
        #   **    D        level 2   <- current, closes C
        if level <= depth:
            self.path_stack[level - 2].children.append(node)
            del self.path_stack[level:]
            self.path_stack[level - 1] = node
            return

        if level == depth + 1:
            self.path_stack[-1].children.append(node)
            self.path_stack.append(node)
            return

        logger.warning(
            "Heading %r at line %d skips from level %d to %d",
            node.label,
            node.start_line,
            depth,
            level,
        )
        raise OutlineStructureError(
            f"Heading '{node.label}' jumps from level {depth} to level {level}; "
            "headings may only nest one level at a time",
            level=level,
            depth=depth,
            line_number=node.start_line,
        )


def build_outline(
    source: LineSource, *, cancel: threading.Event | None = None
) -> list[OutlineNode]:
    """Scan a document once, top to bottom, and build its outline.

    Args:
        source: The document lines.
        cancel: Optional event; when set, the scan stops between blocks and
            an empty outline is returned.

    Returns:
        Root (level 1) nodes, each with its full subtree.

    Raises:
        OutlineStructureError: If a heading skips a level going deeper.
    """
    builder = OutlineBuilder()
    line_count = source.line_count
    line_number = 0

    while line_number < line_count:
        if cancel is not None and cancel.is_set():
            logger.debug("Outline scan cancelled at line %d", line_number)
            return []

        current = source.line_at(line_number)
        line_number += 1

        if not is_heading_candidate(current.text):
            continue

        block = extract_heading(current.text)
        if block is None:
            continue

        logger.debug("Processing heading line %d: %s", current.line_number, current.text)
        block.start = current
        block.end = current

        # Absorb content lines up to the next marker-prefixed line
        while line_number < line_count:
            line = source.line_at(line_number)
            if is_heading_candidate(line.text):
                break
            block.end = line
            line_number += 1

        builder.insert(create_node(block))

    return builder.roots
