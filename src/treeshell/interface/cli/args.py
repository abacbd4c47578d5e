from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema of the shell launcher and translates the
parsed namespace into configuration overrides. Every flag is optional;
without flags the shell starts in the working directory.
"""

import argparse
from typing import Any, Dict

from treeshell.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the treeshell launcher.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="treeshell",
        description=i18n.t("app.description"),
    )

    # --- Navigation ---
    p.add_argument(
        "-r", "--root",
        dest="root_path",
        help=i18n.t("cli.args.root"),
        default=None,
    )

    # --- Synthetic files ---
    p.add_argument(
        "--min-size",
        dest="min_file_size",
        type=int,
        help=i18n.t("cli.args.min_size"),
        default=None,
    )
    p.add_argument(
        "--max-size",
        dest="max_file_size",
        type=int,
        help=i18n.t("cli.args.max_size"),
        default=None,
    )
    p.add_argument(
        "--seed",
        type=int,
        help=i18n.t("cli.args.seed"),
        default=None,
    )

    # --- Interface & diagnostics ---
    p.add_argument(
        "--no-prompt",
        action="store_true",
        help=i18n.t("cli.args.no_prompt"),
    )
    p.add_argument(
        "--lang",
        dest="locale",
        help=i18n.t("cli.args.lang"),
        default=None,
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        help=i18n.t("cli.args.log_file"),
        default=None,
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Map parsed arguments to configuration keys.

    Unset options map to None so that defaults win during validation.

    Args:
        args: Namespace returned by the parser.

    Returns:
        Dict[str, Any]: Configuration overrides.
    """
    overrides: Dict[str, Any] = {
        "root_path": args.root_path,
        "min_file_size": args.min_file_size,
        "max_file_size": args.max_file_size,
        "seed": args.seed,
        "locale": args.locale,
        "log_file": args.log_file,
    }

    if args.no_prompt:
        overrides["show_prompt"] = False
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
