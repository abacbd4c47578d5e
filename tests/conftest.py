from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures building small real directory trees under tmp_path.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create a small mixed directory structure.

    Structure:
    /root
      /Docs
        guide.md      (30 bytes)
      /empty
      banana.txt      (200 bytes)
      Apple.txt       (10 bytes)
      cherry.bin      (50 bytes)
    """
    root = tmp_path / "root"
    root.mkdir()

    docs = root / "Docs"
    docs.mkdir()
    (docs / "guide.md").write_bytes(b"g" * 30)

    (root / "empty").mkdir()
    (root / "banana.txt").write_bytes(b"b" * 200)
    (root / "Apple.txt").write_bytes(b"a" * 10)
    (root / "cherry.bin").write_bytes(b"c" * 50)

    return root


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Switch the process working directory to an isolated empty folder."""
    cwd = tmp_path / "cwd"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd
