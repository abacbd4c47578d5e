from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the shell lifecycle: argument parsing, logging bootstrap,
configuration validation, session construction and the read-dispatch-print
loop. Returns a process exit code instead of exiting.
"""

import sys
from typing import List, Optional, TextIO

from treeshell.core.services.session import TreeSession
from treeshell.core.services.size_generator import RandomSizeGenerator
from treeshell.core.services.validator import validate_config
from treeshell.domain.errors import ConstructionError
from treeshell.infra.logging import LoggingConfig, configure_logging, get_logger
from treeshell.interface.cli import args as cli_args
from treeshell.interface.cli.dispatcher import CommandDispatcher
from treeshell.utils.i18n import i18n

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_BAD_ROOT = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(
        argv: Optional[List[str]] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
) -> int:
    """
    Execute the interactive shell.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.
        stdin: Input stream for commands. Defaults to sys.stdin.
        stdout: Output stream for results. Defaults to sys.stdout.

    Returns:
        int: Process exit code (0 on exit or end of input).
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Schema validation and normalization
    config, warnings = validate_config(cli_args.args_to_overrides(args), strict=False)

    # 3. Logging bootstrap (console on stderr, optional rotating file)
    configure_logging(
        LoggingConfig(level=config["log_level"], console=True, log_file=config["log_file"])
    )
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    # 4. Message catalog selection
    i18n.load_locale(config["locale"])

    # 5. Session construction
    try:
        session = TreeSession.open(
            config["root_path"],
            size_generator=RandomSizeGenerator(
                config["min_file_size"], config["max_file_size"], seed=config["seed"]
            ),
        )
    except ConstructionError as e:
        msg = i18n.t("cli.errors.root_invalid", default="Cannot open starting directory: {error}", error=e)
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_BAD_ROOT

    logger.info(f"Session started at '{session.current.path}'")

    # 6. Interactive loop
    try:
        run_loop(CommandDispatcher(session), stdin, stdout, show_prompt=config["show_prompt"])
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted", default="Interrupted.")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return EXIT_INTERRUPTED

    return EXIT_OK

# -----------------------------------------------------------------------------
# READ-DISPATCH-PRINT LOOP
# -----------------------------------------------------------------------------

def run_loop(
        dispatcher: CommandDispatcher,
        stdin: TextIO,
        stdout: TextIO,
        *,
        show_prompt: bool = True,
) -> None:
    """
    Read commands until 'exit' or end of input.

    OS errors raised by a single command are logged and reported without
    ending the session.

    Args:
        dispatcher: Command router bound to a session.
        stdin: Source of command lines.
        stdout: Destination for result lines.
        show_prompt: Whether to print the prompt before each read.
    """
    prompt = i18n.t("shell.prompt", default="> ")

    while True:
        if show_prompt:
            stdout.write(prompt)
            stdout.flush()

        raw = stdin.readline()
        if not raw:
            logger.debug("End of input reached. Closing session.")
            break

        line = raw.rstrip("\r\n")
        try:
            result = dispatcher.dispatch(line)
        except OSError as e:
            msg = i18n.t("cli.errors.unexpected", default="Command failed: {error}", error=e)
            logger.error(msg, exc_info=True)
            print(f"ERROR: {msg}", file=sys.stderr)
            continue

        for out_line in result.lines:
            print(out_line, file=stdout)
        stdout.flush()

        if result.should_exit:
            break
