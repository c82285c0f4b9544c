"""Outline parser for star-marked plain-text documents."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from pathlib import Path

from .builder import OutlineNode, build_outline
from .document import TextDocument


@dataclass
class OutlineResult:
    """Result of parsing a document's outline."""

    roots: list[OutlineNode]
    lines: list[str]

    @property
    def total_nodes(self) -> int:
        return sum(1 for root in self.roots for _ in root.iter_nodes())


class OutlineParser:
    """Parses documents into outlines and answers queries about the last one."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding
        # Store last parse result for convenience methods
        self._result: OutlineResult | None = None

    def parse_file(
        self, file_path: str | Path, *, cancel: threading.Event | None = None
    ) -> OutlineResult:
        """Parse a file and return the outline result."""
        document = TextDocument.from_file(file_path, encoding=self.encoding)
        return self._parse(document, cancel)

    def parse_content(
        self, content: str, *, cancel: threading.Event | None = None
    ) -> OutlineResult:
        """Parse document text and return the outline result."""
        return self._parse(TextDocument.from_text(content), cancel)

    def _parse(self, document: TextDocument, cancel: threading.Event | None) -> OutlineResult:
        roots = build_outline(document, cancel=cancel)
        self._result = OutlineResult(roots=roots, lines=document.lines)
        return self._result

    # Convenience methods that operate on the last parse result

    @property
    def roots(self) -> list[OutlineNode]:
        return self._result.roots if self._result else []

    @property
    def lines(self) -> list[str]:
        return self._result.lines if self._result else []

    def get_all_nodes(self) -> list[OutlineNode]:
        """Get all nodes in document order (flattened tree)."""
        return [node for root in self.roots for node in root.iter_nodes()]

    def find_node(self, label: str) -> OutlineNode | None:
        """Find the first node with the given label (case-insensitive)."""
        for root in self.roots:
            result = root.find(label)
            if result:
                return result
        return None

    def get_node_content(self, node: OutlineNode) -> str:
        """Get the text of a node's own block (heading and content lines)."""
        if node.start_line >= len(self.lines):
            return ""
        return "\n".join(self.lines[node.start_line : node.end_line + 1])
