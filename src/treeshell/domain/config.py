from __future__ import annotations

"""
Configuration Domain Defaults.

Defines the runtime configuration dictionary that drives a shell session.
Nothing is persisted; every run starts from these defaults plus command
line overrides.
"""

import os
from typing import Any, Dict

from treeshell.core.services.size_generator import DEFAULT_MAX_SIZE, DEFAULT_MIN_SIZE
from treeshell.utils.i18n import DEFAULT_LOCALE

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_LOG_LEVEL = "WARNING"


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration (Session State).

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Navigation
        "root_path": os.getcwd(),

        # Synthetic files
        "min_file_size": DEFAULT_MIN_SIZE,
        "max_file_size": DEFAULT_MAX_SIZE,
        "seed": None,

        # Interface
        "show_prompt": True,
        "locale": DEFAULT_LOCALE,

        # Diagnostics
        "log_level": DEFAULT_LOG_LEVEL,
        "log_file": None,
    }
