"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest


@pytest.fixture
def git_workspace(tmp_path: Path) -> Path:
    """A temporary directory that looks like a git repository root."""
    (tmp_path / ".git").mkdir()
    return tmp_path


@pytest.fixture
def write_config():
    """Write a .bcoutline/config.toml into a workspace."""

    def _write(workspace: Path, content: str) -> Path:
        config_dir = workspace / ".bcoutline"
        config_dir.mkdir(exist_ok=True)
        config_path = config_dir / "config.toml"
        config_path.write_text(content)
        return config_path

    return _write
