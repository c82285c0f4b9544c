"""Outline extraction for star-marked plain-text documents."""

from .builder import (
    OutlineBuilder,
    OutlineError,
    OutlineNode,
    OutlineStructureError,
    build_outline,
)
from .document import LineSource, Position, Range, TextDocument, TextLine
from .extractor import (
    COMMENT_DELIMITER,
    MARKER,
    BlockRecord,
    SymbolKind,
    extract_heading,
    is_heading_candidate,
)
from .parser import OutlineParser, OutlineResult
from .tool import DocumentOutlineTool, OutlineAction, OutlineExecutor, OutlineObservation

__all__ = [
    "BlockRecord",
    "COMMENT_DELIMITER",
    "DocumentOutlineTool",
    "LineSource",
    "MARKER",
    "OutlineAction",
    "OutlineBuilder",
    "OutlineError",
    "OutlineExecutor",
    "OutlineNode",
    "OutlineObservation",
    "OutlineParser",
    "OutlineResult",
    "OutlineStructureError",
    "Position",
    "Range",
    "SymbolKind",
    "TextDocument",
    "TextLine",
    "build_outline",
    "extract_heading",
    "is_heading_candidate",
]
