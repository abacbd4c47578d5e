from __future__ import annotations

"""
Directory Tree Composite Models.

Defines the two-variant node hierarchy (FileNode, DirectoryNode) the shell
operates on. A DirectoryNode materializes its children from disk exactly
once, at construction. Later disk changes are not reflected in the cached
children, while directory sizes are always recomputed from a fresh scan.
"""

import logging
import os
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from treeshell.domain.errors import ConstructionError
from treeshell.infra.fs import create_directory, display_name, path_exists
from treeshell.infra.scanner import is_directory, scan_directory, total_file_size

logger = logging.getLogger(__name__)

DIRECTORY_TAG = "Directory"
FILE_TAG = "File"


def _has_separator(name: str) -> bool:
    """Whether name contains a path separator of the host OS."""
    return os.sep in name or bool(os.altsep and os.altsep in name)


# -----------------------------------------------------------------------------
# ABSTRACT COMPONENT
# -----------------------------------------------------------------------------

class Node(ABC):
    """
    Common interface of every entry in the tree.

    Only FileNode and DirectoryNode implement it.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name of the entry."""

    @property
    @abstractmethod
    def is_container(self) -> bool:
        """True only for directories."""

    @abstractmethod
    def size(self) -> int:
        """Byte size of the entry."""

    @abstractmethod
    def list(self) -> List[str]:
        """Lines describing the entry or its immediate children."""

    @abstractmethod
    def navigate(self, segment: str) -> bool:
        """Whether the entry can be descended into through segment."""

    def describe(self) -> str:
        """Single listing line used by a parent directory."""
        tag = DIRECTORY_TAG if self.is_container else FILE_TAG
        return f"{tag}: {self.name} {self.size()}"


# -----------------------------------------------------------------------------
# LEAF
# -----------------------------------------------------------------------------

class FileNode(Node):
    """
    Leaf entry with a fixed size.

    Scanned files keep the size read at construction. Synthetic files have
    no path and carry the size they were created with.
    """

    def __init__(self, name: str, size: int, path: Optional[str] = None):
        self._name = name
        self._size = int(size)
        self._path = path

    @classmethod
    def synthetic(cls, name: str, size: int) -> FileNode:
        return cls(name=name, size=size, path=None)

    @property
    def name(self) -> str:
        return self._name

    @property
    def path(self) -> Optional[str]:
        return self._path

    @property
    def is_synthetic(self) -> bool:
        return self._path is None

    @property
    def is_container(self) -> bool:
        return False

    def size(self) -> int:
        return self._size

    def list(self) -> List[str]:
        return [f"{FILE_TAG}: {self._name} ({self._size} bytes)"]

    def navigate(self, segment: str) -> bool:
        return False

    def __repr__(self) -> str:
        return f"FileNode(name={self._name!r}, size={self._size}, path={self._path!r})"


# -----------------------------------------------------------------------------
# CONTAINER
# -----------------------------------------------------------------------------

class DirectoryNode(Node):
    """
    Container entry backed by a real directory.

    Children are scanned eagerly and recursively when the node is built, in
    OS enumeration order. Sorting and creation mutate the cached sequence.
    """

    def __init__(self, path: str):
        self._path = os.path.abspath(path)
        self._name = display_name(self._path)
        self._children: List[Node] = self._materialize()

    def _materialize(self) -> List[Node]:
        try:
            entries = scan_directory(self._path)
        except OSError as e:
            raise ConstructionError(self._path, e.strerror or str(e)) from e

        children: List[Node] = []
        for entry in entries:
            if entry.is_dir:
                children.append(DirectoryNode(entry.path))
            else:
                children.append(FileNode(name=entry.name, size=entry.size, path=entry.path))
        return children

    # --- Node interface ---

    @property
    def name(self) -> str:
        return self._name

    @property
    def path(self) -> str:
        return self._path

    @property
    def is_container(self) -> bool:
        return True

    @property
    def children(self) -> Tuple[Node, ...]:
        return tuple(self._children)

    def size(self) -> int:
        """
        Sum the regular files currently on disk under this directory.

        The cached children are ignored. A directory removed from disk
        after construction reports 0.
        """
        try:
            return total_file_size(self._path)
        except (FileNotFoundError, NotADirectoryError):
            logger.warning(f"Directory no longer exists on disk: '{self._path}'")
            return 0

    def list(self) -> List[str]:
        return [child.describe() for child in self._children]

    def navigate(self, segment: str) -> bool:
        return self.descend(segment) is not None

    # --- Navigation ---

    def descend(self, segment: str) -> Optional[DirectoryNode]:
        """
        Build a fresh node for the directory at path/segment.

        The cached children are not consulted; only the disk decides.

        Args:
            segment: Path segment joined literally to this node's path.

        Returns:
            Optional[DirectoryNode]: The scanned node, or None when the
                                     candidate is missing or not a directory.
        """
        if not segment:
            return None

        candidate = os.path.join(self._path, segment)
        if not is_directory(candidate):
            logger.debug(f"Navigation rejected, not a directory: '{candidate}'")
            return None

        try:
            return DirectoryNode(candidate)
        except ConstructionError as e:
            # Removed or unreadable between the check and the scan
            logger.warning(str(e))
            return None

    # --- Ordering ---

    def sort_by_size(self) -> None:
        """Stable ascending sort by each child's size at call time."""
        self._children.sort(key=lambda child: child.size())

    def sort_by_name(self) -> None:
        """Stable ascending sort by case-insensitive name."""
        self._children.sort(key=lambda child: child.name.casefold())

    # --- Creation ---

    def has_child(self, name: str) -> bool:
        return any(child.name == name for child in self._children)

    def make_subdirectory(self, name: str) -> bool:
        """
        Create a real subdirectory and append its node.

        Args:
            name: Name of the new directory, relative to this node.

        Returns:
            bool: False if a child with that exact name is cached, the name
                  spans more than one path segment, or the disk operation
                  fails; True once the node is appended.
        """
        if self.has_child(name):
            return False

        if _has_separator(name):
            logger.error(f"Refusing to create nested directory '{name}' under '{self._path}'")
            return False

        target = os.path.join(self._path, name)
        created, error = create_directory(target)
        if not created:
            logger.error(f"Failed to create directory '{target}': {error}")
            return False

        try:
            node = DirectoryNode(target)
        except ConstructionError as e:
            logger.error(str(e))
            return False

        self._children.append(node)
        return True

    def make_file(self, name: str, size: int) -> bool:
        """
        Append a synthetic, in-memory file.

        The existence check runs against name relative to the process
        working directory, not against this node's path.

        Args:
            name: Name of the synthetic file.
            size: Byte size to assign.

        Returns:
            bool: False if an entry already exists at name, True otherwise.
        """
        if path_exists(name):
            return False

        self._children.append(FileNode.synthetic(name, size))
        return True

    def __repr__(self) -> str:
        return f"DirectoryNode(path={self._path!r}, children={len(self._children)})"
