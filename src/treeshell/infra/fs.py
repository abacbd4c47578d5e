from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Path normalization and the few disk mutations the shell performs. Acts as
an abstraction over the 'os' module so the domain layer never touches it
directly for writes.
"""

import logging
import os
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def display_name(path: str) -> str:
    """
    Return the last segment of a path, or the path itself for a root.

    Args:
        path: Absolute path.

    Returns:
        str: A non-empty display name.
    """
    name = os.path.basename(os.path.normpath(path))
    return name or path


def path_exists(path: str) -> bool:
    """Check for any filesystem entry at path, relative paths included."""
    return os.path.exists(path)

# -----------------------------------------------------------------------------
# FILESYSTEM MUTATION API
# -----------------------------------------------------------------------------

def create_directory(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to create a single directory level.

    Parents are not created; an existing entry at path is a failure.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.mkdir(path)
        logger.debug(f"Created directory '{path}'")
        return True, None
    except (OSError, ValueError) as e:
        # ValueError: embedded NUL byte in the name
        return False, str(e)
