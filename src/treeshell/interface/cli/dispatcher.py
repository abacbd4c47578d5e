from __future__ import annotations

"""
Shell Command Dispatcher.

Maps one raw input line onto a TreeSession operation. Matching is literal:
argument commands need a single space after the verb followed by a
non-empty argument, which is taken verbatim. The dispatcher never prints;
it returns CommandResult objects for the interface to render.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List

from treeshell.core.services.session import TreeSession
from treeshell.domain.session_models import CommandResult, CommandStatus
from treeshell.utils.i18n import i18n

logger = logging.getLogger(__name__)

CommandHandler = Callable[[TreeSession, str], CommandResult]


@dataclass(frozen=True)
class CommandSpec:
    """
    Registry entry for one shell verb.

    Attributes:
        name: Verb typed by the user.
        handler: Callable receiving the session and the raw argument.
        takes_argument: Whether the verb requires '<verb> <argument>'.
    """
    name: str
    handler: CommandHandler
    takes_argument: bool = False


def _exit(session: TreeSession, arg: str) -> CommandResult:
    return CommandResult(CommandStatus.EXIT)


DEFAULT_COMMANDS: List[CommandSpec] = [
    CommandSpec("dir", lambda s, _: s.list()),
    CommandSpec("cd", lambda s, arg: s.cd(arg), takes_argument=True),
    CommandSpec("sortsize", lambda s, _: s.sort_by_size()),
    CommandSpec("sortname", lambda s, _: s.sort_by_name()),
    CommandSpec("mkdir", lambda s, arg: s.make_directory(arg), takes_argument=True),
    CommandSpec("mkfile", lambda s, arg: s.make_file(arg), takes_argument=True),
    CommandSpec("exit", _exit),
]


class CommandDispatcher:
    """Parses input lines and routes them to the session."""

    def __init__(self, session: TreeSession):
        self.session = session
        self._commands: Dict[str, CommandSpec] = {}
        for spec in DEFAULT_COMMANDS:
            self.register(spec)

    def register(self, spec: CommandSpec) -> None:
        self._commands[spec.name] = spec

    def available_commands(self) -> List[str]:
        return list(self._commands)

    def dispatch(self, line: str) -> CommandResult:
        """
        Execute a single input line.

        Args:
            line: Raw input without its trailing newline.

        Returns:
            CommandResult: Outcome of the command; INVALID_COMMAND when the
                           line matches no registered verb.
        """
        spec = self._commands.get(line)
        if spec is not None and not spec.takes_argument:
            logger.debug(f"Dispatching '{spec.name}'")
            return spec.handler(self.session, "")

        verb, sep, arg = line.partition(" ")
        spec = self._commands.get(verb)
        if spec is not None and spec.takes_argument and sep and arg:
            logger.debug(f"Dispatching '{verb}' with argument '{arg}'")
            return spec.handler(self.session, arg)

        return CommandResult(
            CommandStatus.INVALID_COMMAND,
            [i18n.t("shell.invalid_command", default="Invalid command. Please try again.")],
        )
