from __future__ import annotations

"""
Diagnostics Settings for the Shell.

Command results go to stdout; everything emitted through logging goes to
stderr and, when requested with --log-file, to a rotating file. This
module only describes those sinks. Wiring them up lives in core.py.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

# Level names accepted by --debug and the log_level setting
LEVEL_NAMES: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Where shell diagnostics are written and how they look.

    The default threshold is WARNING so that an ordinary session prints
    nothing besides command output.

    Attributes:
        level: Threshold name, one of LEVEL_NAMES.
        console: Mirror records on stderr.
        log_file: Rotating file target; None keeps diagnostics on stderr only.
        max_bytes: Rotation threshold of the log file.
        backup_count: Rotated files kept next to log_file.
        console_fmt: Record layout on stderr.
        file_fmt: Record layout in the log file, with timestamp and logger name.
        datefmt: strftime pattern for file timestamps.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
