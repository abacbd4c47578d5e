from __future__ import annotations

"""
Session Result Models.

Defines the Data Transfer Objects returned by session operations and the
command dispatcher. Results carry output lines and a status; rendering is
left to the interface layer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

# -----------------------------------------------------------------------------
# STATUS CODES
# -----------------------------------------------------------------------------

class CommandStatus(Enum):
    """Outcome classification for a single shell command."""
    OK = "ok"
    NAVIGATION_FAILURE = "navigation_failure"
    CREATION_CONFLICT = "creation_conflict"
    CREATION_FAILED = "creation_failed"
    INVALID_COMMAND = "invalid_command"
    EXIT = "exit"


# -----------------------------------------------------------------------------
# RESULT DTO
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CommandResult:
    """
    Output of one shell command.

    Attributes:
        status: Outcome classification.
        lines: Text lines to present to the user, in order.
    """
    status: CommandStatus = CommandStatus.OK
    lines: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status in (CommandStatus.OK, CommandStatus.EXIT)

    @property
    def should_exit(self) -> bool:
        return self.status is CommandStatus.EXIT
