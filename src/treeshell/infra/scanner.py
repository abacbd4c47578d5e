from __future__ import annotations

"""
Directory Scanning Service.

Thin, non-recursive wrappers over os.scandir used to materialize tree nodes
and to compute live directory sizes. Enumeration order is whatever the OS
reports; no sorting is applied here.
"""

import logging
import os
from dataclasses import dataclass
from typing import List

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ScannedEntry:
    """
    Snapshot of one immediate directory entry.

    Attributes:
        path: Absolute path of the entry.
        name: Final path segment.
        is_dir: Whether the entry resolves to a directory.
        size: Byte size for regular files, 0 for anything else.
    """
    path: str
    name: str
    is_dir: bool
    size: int


# ==============================================================================
# PUBLIC API
# ==============================================================================

def scan_directory(path: str) -> List[ScannedEntry]:
    """
    Enumerate the immediate entries of a directory.

    Args:
        path: Directory to scan.

    Returns:
        List[ScannedEntry]: One snapshot per entry, in OS enumeration order.

    Raises:
        OSError: If the path does not exist or is not a directory.
    """
    entries: List[ScannedEntry] = []
    with os.scandir(path) as it:
        for entry in it:
            is_dir = entry.is_dir()
            entries.append(
                ScannedEntry(
                    path=os.path.abspath(entry.path),
                    name=entry.name,
                    is_dir=is_dir,
                    size=0 if is_dir else _entry_file_size(entry),
                )
            )

    logger.debug(f"Scanned {len(entries)} entries under '{path}'")
    return entries


def total_file_size(path: str) -> int:
    """
    Sum the sizes of the regular files directly under a directory.

    Subdirectories are not descended into.

    Args:
        path: Directory to measure.

    Returns:
        int: Total byte size.

    Raises:
        OSError: If the path cannot be scanned.
    """
    total = 0
    with os.scandir(path) as it:
        for entry in it:
            total += _entry_file_size(entry)
    return total


def is_directory(path: str) -> bool:
    """Check whether a path currently resolves to a directory on disk."""
    return os.path.isdir(path)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _entry_file_size(entry: os.DirEntry) -> int:
    """Return the byte size of a regular file entry, 0 for anything else."""
    try:
        if entry.is_file():
            return int(entry.stat().st_size)
    except FileNotFoundError:
        # Entry vanished between enumeration and stat
        logger.debug(f"Entry disappeared during scan: '{entry.path}'")
    return 0
