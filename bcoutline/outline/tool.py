"""Document Outline Tool for reading the heading structure of star-marked files."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from openhands.sdk.tool import (
    Action,
    Observation,
    ToolAnnotations,
    ToolDefinition,
    ToolExecutor,
)
from pydantic import Field
from rich.text import Text

from .builder import OutlineError, OutlineNode
from .parser import OutlineParser

if TYPE_CHECKING:
    from openhands.sdk.conversation.state import ConversationState


OUTLINE_TOOL_DESCRIPTION = """
Document Outline Tool for star-marked plain-text documents (beancount ledgers,
org-style notes) where headings look like `* Title`, `** Subtitle`, ...

This tool provides commands for:
- Listing the nested heading outline of a document with line spans
- Finding a single heading block by label and returning its content

Text after `;` on a heading line is a comment and is not part of the label.
""".strip()

# Command visualization metadata: (icon, style, label_template)
ACTION_DISPLAY: dict[str, tuple[str, str, str]] = {
    "outline": ("🗂️ ", "blue", "Read Document Outline"),
    "find": ("🔎 ", "cyan", "Find Block '{label}'"),
}


class OutlineAction(Action):
    """Action for the document outline tool."""

    command: Literal["outline", "find"] = Field(
        description=(
            "Command to execute: 'outline' lists the heading tree, "
            "'find' returns one heading block by label"
        )
    )
    file: str = Field(description="Path to the document to read")
    label: str | None = Field(
        default=None, description="Heading label to look up (case-insensitive). Used with find."
    )
    max_depth: int | None = Field(
        default=None, description="Deepest heading level to include. Used with outline."
    )

    @property
    def visualize(self) -> Text:
        """Return Rich Text representation of this action."""
        content = Text()
        icon, style, label_template = ACTION_DISPLAY[self.command]
        content.append(icon, style=style)
        content.append(label_template.format(label=self.label), style=style)
        content.append(f" - {self.file}", style="white")
        return content


class OutlineObservation(Observation):
    """Observation from the document outline tool."""

    command: Literal["outline", "find"] = Field(description="The command that was executed.")
    file: str = Field(description="Path to the document that was read.")
    result: str = Field(description="Result of the operation: 'success' or 'error'.")

    total_nodes: int | None = Field(default=None, description="Number of headings found.")
    root_count: int | None = Field(default=None, description="Number of top-level headings.")
    outline_structure: list[dict] | None = Field(
        default=None, description="Nested heading tree with labels, levels and line spans."
    )
    matched_node: dict[str, str | int] | None = Field(
        default=None, description="The heading block found by 'find'."
    )
    block_content: str | None = Field(default=None, description="Text of the found block.")

    @property
    def visualize(self) -> Text:
        """Return Rich Text representation of this observation."""
        text = Text()

        if self.is_error:
            text.append("❌ ", style="red bold")
            text.append(self.ERROR_MESSAGE_HEADER, style="bold red")
            return text

        text.append("✅ ", style="green bold")
        if self.command == "outline":
            text.append(f"Found {self.total_nodes} headings", style="blue")
            text.append(f" ({self.root_count} top-level)", style="dim")
        elif self.command == "find":
            if self.matched_node:
                text.append(f"Found '{self.matched_node['label']}'", style="cyan")
                text.append(
                    f" (lines {self.matched_node['start_line']}-{self.matched_node['end_line']})",
                    style="dim",
                )
            else:
                text.append("No matching heading", style="yellow")

        return text


class OutlineExecutor(ToolExecutor[OutlineAction, OutlineObservation]):
    """Executor for document outline commands."""

    def __init__(self, workspace_dir: Path, encoding: str = "utf-8"):
        self.workspace_dir = workspace_dir
        self.encoding = encoding

    def __call__(self, action: OutlineAction, conversation=None) -> OutlineObservation:  # noqa: ARG002
        return self.execute(action)

    def _error(self, action: OutlineAction, message: str) -> OutlineObservation:
        return OutlineObservation.from_text(
            text=message,
            is_error=True,
            command=action.command,
            file=action.file,
            result="error",
        )

    def execute(self, action: OutlineAction) -> OutlineObservation:
        """Execute an outline action.

        Args:
            action: The action to execute.

        Returns:
            Observation with the results.
        """
        file_path = (self.workspace_dir / action.file).resolve()

        # Prevent path traversal attacks
        if not file_path.is_relative_to(self.workspace_dir.resolve()):
            return self._error(action, f"Invalid path (outside workspace): {action.file}")

        parser = OutlineParser(encoding=self.encoding)
        try:
            parser.parse_file(file_path)
        except FileNotFoundError:
            return self._error(action, f"File not found: {action.file}")
        except UnicodeDecodeError:
            return self._error(action, f"Could not read file as {self.encoding}: {action.file}")
        except OutlineError as e:
            return self._error(action, f"Invalid outline structure: {e}")

        if action.command == "find":
            return self._find_block(action, parser)
        return self._list_outline(action, parser)

    def _list_outline(self, action: OutlineAction, parser: OutlineParser) -> OutlineObservation:
        return OutlineObservation(
            command=action.command,
            file=action.file,
            result="success",
            total_nodes=len(parser.get_all_nodes()),
            root_count=len(parser.roots),
            outline_structure=[root.to_dict(action.max_depth) for root in parser.roots],
        )

    def _find_block(self, action: OutlineAction, parser: OutlineParser) -> OutlineObservation:
        if not action.label:
            return self._error(action, "The 'find' command requires a label")

        node = parser.find_node(action.label)
        if node is None:
            return OutlineObservation(
                command=action.command, file=action.file, result="success"
            )

        return OutlineObservation(
            command=action.command,
            file=action.file,
            result="success",
            matched_node=_summarize(node),
            block_content=parser.get_node_content(node),
        )


def _summarize(node: OutlineNode) -> dict[str, str | int]:
    return {
        "label": node.label,
        "level": node.level,
        "start_line": node.start_line,
        "end_line": node.end_line,
        "children": len(node.children),
    }


class DocumentOutlineTool(ToolDefinition[OutlineAction, OutlineObservation]):
    """Tool for reading the outline of star-marked documents."""

    @classmethod
    def create(cls, conv_state: ConversationState) -> Sequence[DocumentOutlineTool]:
        """Create the document outline tool.

        Args:
            conv_state: Conversation state with workspace info.
        """
        workspace_dir = Path(conv_state.workspace.working_dir)
        executor = OutlineExecutor(workspace_dir)

        return [
            cls(
                description=OUTLINE_TOOL_DESCRIPTION,
                action_type=OutlineAction,
                observation_type=OutlineObservation,
                annotations=ToolAnnotations(
                    title="Document Outline Tool",
                    readOnlyHint=True,
                    destructiveHint=False,
                    idempotentHint=True,
                    openWorldHint=False,
                ),
                executor=executor,
            )
        ]
