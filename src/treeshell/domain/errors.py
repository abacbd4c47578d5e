from __future__ import annotations

"""
Domain Error Taxonomy.

Fatal conditions of the directory tree are modeled as exceptions. Recoverable
outcomes (navigation failures, creation conflicts) are reported through
CommandStatus values instead.
"""


class TreeShellError(Exception):
    """Base class for all errors raised by the tree domain."""


class ConstructionError(TreeShellError):
    """
    Raised when a DirectoryNode cannot be materialized from disk.

    Attributes:
        path: The path that failed to scan.
        reason: Human-readable cause reported by the OS layer.
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot scan directory '{path}': {reason}")
