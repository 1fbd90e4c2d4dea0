"""Pytest configuration for foxxy tests."""

import logging
import subprocess
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Add src directory to path so tests run without an editable install
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture()
def git_repo(tmp_path: Path) -> str:
    """Create an empty temporary git repo (no commits, no remotes)."""
    repo = str(tmp_path)
    subprocess.run(["git", "init"], cwd=repo, capture_output=True, check=True)
    return repo


@pytest.fixture()
def restore_root_logging() -> Iterator[None]:
    """Undo changes that ``setup_logging()`` makes to the root logger."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
