"""CLI entry point for bcoutline.

Usage:
    python -m bcoutline show ledger.beancount             # Print the heading tree
    python -m bcoutline show ledger.beancount --json      # Print the tree as JSON
    python -m bcoutline find ledger.beancount "Expenses"  # Print one block

Or via the installed command:
    bcoutline show notes.txt --max-depth 2
    bcoutline --version
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

# Set default log level to WARNING before importing SDK (reduces verbose output)
# Users can override with LOG_LEVEL=INFO or LOG_LEVEL=DEBUG
if "LOG_LEVEL" not in os.environ:
    os.environ["LOG_LEVEL"] = "WARNING"

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.text import Text
from rich.tree import Tree

from bcoutline._version import get_full_version_string
from bcoutline.config import OutlineConfig, load_config
from bcoutline.outline import OutlineError, OutlineNode, OutlineParser

# Load environment variables
load_dotenv()

console = Console()


def configure_logging() -> None:
    """Route bcoutline log records to stderr at LOG_LEVEL."""
    level = os.environ.get("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def _node_label(node: OutlineNode, *, show_lines: bool) -> Text:
    label = Text(node.label, style="bold" if node.level == 1 else "")
    if show_lines:
        if node.start_line == node.end_line:
            label.append(f"  line {node.start_line + 1}", style="dim")
        else:
            label.append(f"  lines {node.start_line + 1}-{node.end_line + 1}", style="dim")
    return label


def _add_children(
    tree: Tree, node: OutlineNode, *, max_depth: int | None, show_lines: bool
) -> None:
    for child in node.children:
        if max_depth is not None and child.level > max_depth:
            continue
        branch = tree.add(_node_label(child, show_lines=show_lines))
        _add_children(branch, child, max_depth=max_depth, show_lines=show_lines)


def render_outline(
    roots: list[OutlineNode], title: str, *, max_depth: int | None = None, show_lines: bool = True
) -> Tree:
    """Build a rich Tree for an outline."""
    tree = Tree(Text(title, style="bold blue"))
    for root in roots:
        branch = tree.add(_node_label(root, show_lines=show_lines))
        _add_children(branch, root, max_depth=max_depth, show_lines=show_lines)
    return tree


def _parse_document(document: Path, config: OutlineConfig) -> OutlineParser | None:
    """Parse a document, printing errors. Returns None on failure."""
    if not document.exists():
        console.print(f"[red]Error:[/] Document not found: {document}")
        return None

    parser = OutlineParser(encoding=config.files.encoding)
    try:
        parser.parse_file(document)
    except UnicodeDecodeError:
        console.print(f"[red]Error:[/] Could not read {document} as {config.files.encoding}")
        return None
    except OutlineError as e:
        console.print(f"[red]Error:[/] Invalid outline structure in {document}: {e}")
        return None

    return parser


def run_show(
    document: Path,
    workspace: Path,
    *,
    max_depth: int | None = None,
    as_json: bool = False,
    show_lines: bool | None = None,
) -> int:
    """Print the outline of a document.

    Args:
        document: Path to the document
        workspace: Path to the workspace (for configuration)
        max_depth: Deepest level to show (0 for unlimited, None for config default)
        as_json: Print JSON instead of a tree
        show_lines: Whether to show line spans (None for config default)

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    config = load_config(workspace)
    parser = _parse_document(document, config)
    if parser is None:
        return 1

    depth_limit = config.get_max_depth(max_depth=max_depth)

    if as_json:
        data = [root.to_dict(depth_limit) for root in parser.roots]
        console.print_json(json.dumps(data))
        return 0

    if not parser.roots:
        console.print(f"[dim]No headings found in {document.name}[/]")
        return 0

    lines = show_lines if show_lines is not None else config.display.show_lines
    console.print(render_outline(parser.roots, document.name, max_depth=depth_limit, show_lines=lines))
    return 0


def run_find(document: Path, label: str, workspace: Path) -> int:
    """Print a single heading block.

    Returns:
        Exit code (0 for success, 1 for failure or no match)
    """
    config = load_config(workspace)
    parser = _parse_document(document, config)
    if parser is None:
        return 1

    node = parser.find_node(label)
    if node is None:
        console.print(f"[yellow]No heading matching '{escape(label)}' in {document.name}[/]")
        return 1

    console.print(
        f"[bold]{escape(node.label)}[/] [dim](level {node.level}, "
        f"lines {node.start_line + 1}-{node.end_line + 1})[/]",
        highlight=False,
    )
    console.print(parser.get_node_content(node), markup=False, highlight=False)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="bcoutline",
        description="bcoutline - Outline viewer for star-marked plain-text documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  bcoutline show ledger.beancount            Print the heading tree
  bcoutline show notes.txt --max-depth 2     Only the first two levels
  bcoutline show notes.txt --json            Machine-readable output
  bcoutline find ledger.beancount Expenses   Print one heading block

Configuration:
  Create .bcoutline/config.toml in your repo to change defaults:
    [display]
    max_depth = 0
    show_lines = true

    [files]
    encoding = "utf-8"
""",
    )
    parser.add_argument(
        "--version",
        "-V",
        action="store_true",
        help="Show version and exit",
    )

    subparsers = parser.add_subparsers(dest="command")

    # Show subcommand
    show_parser = subparsers.add_parser(
        "show",
        help="Print the heading outline of a document",
    )
    show_parser.add_argument("document", type=Path, help="Path to the document")
    show_parser.add_argument(
        "--max-depth",
        "-m",
        type=int,
        default=None,
        help="Deepest heading level to show (0 for unlimited)",
    )
    show_parser.add_argument(
        "--json",
        "-j",
        dest="as_json",
        action="store_true",
        help="Print the outline as JSON",
    )
    show_parser.add_argument(
        "--no-lines",
        dest="show_lines",
        action="store_false",
        default=None,
        help="Hide line spans",
    )
    show_parser.add_argument(
        "--workspace",
        "-w",
        type=Path,
        default=None,
        help="Workspace directory (defaults to git root)",
    )

    # Find subcommand
    find_parser = subparsers.add_parser(
        "find",
        help="Print the block under a heading",
    )
    find_parser.add_argument("document", type=Path, help="Path to the document")
    find_parser.add_argument("label", help="Heading label (case-insensitive)")
    find_parser.add_argument(
        "--workspace",
        "-w",
        type=Path,
        default=None,
        help="Workspace directory (defaults to git root)",
    )

    args = parser.parse_args(argv)

    if args.version:
        print(get_full_version_string())
        return 0

    if args.command is None:
        parser.error("a command is required")

    configure_logging()

    document = args.document.resolve()
    workspace = args.workspace.resolve() if args.workspace else find_git_root(document.parent)

    if args.command == "find":
        return run_find(document, args.label, workspace)

    return run_show(
        document,
        workspace,
        max_depth=args.max_depth,
        as_json=args.as_json,
        show_lines=args.show_lines,
    )


def find_git_root(start_path: Path) -> Path:
    """Find the git repository root from a starting path.

    Args:
        start_path: Directory to start searching from

    Returns:
        Path to the git root, or start_path if not found
    """
    current = start_path.resolve()
    while current != current.parent:
        if (current / ".git").exists():
            return current
        current = current.parent
    return start_path


if __name__ == "__main__":
    sys.exit(main())
