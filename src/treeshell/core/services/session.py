from __future__ import annotations

"""
Tree Session Service.

Holds the single "current directory" reference of a running shell and
exposes the command-level operations. Every operation either fully succeeds
or leaves the session untouched.
"""

import logging
from typing import Optional

from treeshell.core.services.size_generator import RandomSizeGenerator, SizeGenerator
from treeshell.domain.session_models import CommandResult, CommandStatus
from treeshell.domain.tree_models import DirectoryNode
from treeshell.utils.i18n import i18n

logger = logging.getLogger(__name__)


class TreeSession:
    """
    Forward-only cursor over a DirectoryNode tree.

    Navigation replaces the current node with a freshly scanned one;
    previously visited nodes are not linked back.
    """

    def __init__(
            self,
            root: DirectoryNode,
            size_generator: Optional[SizeGenerator] = None,
    ):
        """
        Args:
            root: Starting directory node.
            size_generator: Source of sizes for synthetic files. Defaults
                            to uniform integers in [1, 1024].
        """
        self._current = root
        self._size_generator = size_generator or RandomSizeGenerator()

    @classmethod
    def open(cls, root_path: str, size_generator: Optional[SizeGenerator] = None) -> TreeSession:
        """
        Scan root_path and start a session there.

        Raises:
            ConstructionError: If root_path is not a readable directory.
        """
        logger.debug(f"Opening session at '{root_path}'")
        return cls(DirectoryNode(root_path), size_generator=size_generator)

    @property
    def current(self) -> DirectoryNode:
        return self._current

    # -------------------------------------------------------------------------
    # QUERIES
    # -------------------------------------------------------------------------

    def list(self) -> CommandResult:
        return CommandResult(CommandStatus.OK, self._current.list())

    # -------------------------------------------------------------------------
    # NAVIGATION
    # -------------------------------------------------------------------------

    def change_directory(self, segment: str) -> bool:
        """
        Move into path/segment when it is a directory on disk.

        Returns:
            bool: True if the current node was replaced.
        """
        target = self._current.descend(segment)
        if target is None:
            return False

        logger.debug(f"Changed directory to '{target.path}'")
        self._current = target
        return True

    def cd(self, segment: str) -> CommandResult:
        if self.change_directory(segment):
            return CommandResult(CommandStatus.OK)
        return CommandResult(
            CommandStatus.NAVIGATION_FAILURE,
            [i18n.t("shell.cd.invalid", default="Invalid directory or not a directory.")],
        )

    # -------------------------------------------------------------------------
    # ORDERING (sort then list)
    # -------------------------------------------------------------------------

    def sort_by_size(self) -> CommandResult:
        self._current.sort_by_size()
        return self.list()

    def sort_by_name(self) -> CommandResult:
        self._current.sort_by_name()
        return self.list()

    # -------------------------------------------------------------------------
    # CREATION
    # -------------------------------------------------------------------------

    def make_directory(self, name: str) -> CommandResult:
        """Create a subdirectory of the current node and report the outcome."""
        if self._current.make_subdirectory(name):
            return CommandResult(
                CommandStatus.OK,
                [i18n.t("shell.mkdir.created", default="Directory: {name} was created", name=name)],
            )

        if self._current.has_child(name):
            return CommandResult(
                CommandStatus.CREATION_CONFLICT,
                [i18n.t("shell.mkdir.exists", default="Directory: {name} already exists", name=name)],
            )

        return CommandResult(
            CommandStatus.CREATION_FAILED,
            [i18n.t("shell.mkdir.failed", default="Directory: {name} could not be created", name=name)],
        )

    def make_file(self, name: str) -> CommandResult:
        """Append a synthetic file with a generated size and report the outcome."""
        size = self._size_generator()
        if self._current.make_file(name, size):
            logger.debug(f"Synthetic file '{name}' added with size {size}")
            return CommandResult(
                CommandStatus.OK,
                [i18n.t("shell.mkfile.created", default="File: {name} was created", name=name)],
            )

        return CommandResult(
            CommandStatus.CREATION_CONFLICT,
            [i18n.t("shell.mkfile.exists", default="File: {name} already exists", name=name)],
        )
