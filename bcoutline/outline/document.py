"""Line-addressable text documents used as the outline's input."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


@dataclass(frozen=True)
class Position:
    """A zero-indexed (line, column) position in a document."""

    line: int
    column: int


@dataclass(frozen=True)
class Range:
    """A span between two positions (end column is exclusive)."""

    start: Position
    end: Position


@dataclass(frozen=True)
class TextLine:
    """A single line of a document, without its line terminator."""

    line_number: int
    text: str

    @property
    def range(self) -> Range:
        """Range covering the whole line."""
        return Range(
            Position(self.line_number, 0),
            Position(self.line_number, len(self.text)),
        )


class LineSource(Protocol):
    """Anything that hands out lines by index."""

    @property
    def line_count(self) -> int: ...

    def line_at(self, index: int) -> TextLine: ...


class TextDocument:
    """In-memory document backed by a list of lines."""

    def __init__(self, lines: list[str]):
        self._lines = lines

    @classmethod
    def from_text(cls, content: str) -> TextDocument:
        """Create a document from a string, splitting on line boundaries."""
        return cls(content.splitlines())

    @classmethod
    def from_file(cls, file_path: str | Path, encoding: str = "utf-8") -> TextDocument:
        """Read a document from disk.

        Raises:
            FileNotFoundError: If the file does not exist.
            UnicodeDecodeError: If the file cannot be decoded.
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")
        return cls.from_text(path.read_text(encoding=encoding))

    @property
    def lines(self) -> list[str]:
        return self._lines

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line_at(self, index: int) -> TextLine:
        if index < 0 or index >= len(self._lines):
            raise IndexError(f"Line {index} out of range (document has {len(self._lines)} lines)")
        return TextLine(line_number=index, text=self._lines[index])
