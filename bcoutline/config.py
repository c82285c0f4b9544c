"""bcoutline configuration management.

Loads configuration from .bcoutline/config.toml if present, with sensible defaults.
Configuration hierarchy (highest priority first):
1. Command-line flags
2. Repo-level config (.bcoutline/config.toml)
3. Defaults
"""

from dataclasses import dataclass, field
from pathlib import Path

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore[import-not-found]

CONFIG_DIR = ".bcoutline"
CONFIG_FILE = "config.toml"


@dataclass
class DisplayConfig:
    """Configuration for rendering outlines."""

    max_depth: int = 0  # 0 means unlimited
    show_lines: bool = True


@dataclass
class FilesConfig:
    """Configuration for reading documents."""

    encoding: str = "utf-8"


@dataclass
class OutlineConfig:
    """bcoutline configuration."""

    display: DisplayConfig = field(default_factory=DisplayConfig)
    files: FilesConfig = field(default_factory=FilesConfig)

    def get_max_depth(self, *, max_depth: int | None = None) -> int | None:
        """Determine the deepest heading level to show.

        Args:
            max_depth: CLI override; 0 means unlimited.

        Returns:
            Level limit, or None for no limit.
        """
        depth = max_depth if max_depth is not None else self.display.max_depth
        return depth if depth > 0 else None


def load_config(workspace: Path) -> OutlineConfig:
    """Load configuration from .bcoutline/config.toml if it exists.

    Args:
        workspace: Path to the workspace/repository root.

    Returns:
        OutlineConfig with values from config file or defaults.
    """
    config_path = workspace / CONFIG_DIR / CONFIG_FILE

    if not config_path.exists():
        return OutlineConfig()

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    display_data = data.get("display", {})
    files_data = data.get("files", {})

    display = DisplayConfig(
        max_depth=display_data.get("max_depth", 0),
        show_lines=display_data.get("show_lines", True),
    )

    files = FilesConfig(
        encoding=files_data.get("encoding", "utf-8"),
    )

    return OutlineConfig(display=display, files=files)
