from __future__ import annotations

"""
Configuration Validation Service.

Ensures the configuration dictionary conforms to the expected schema before
a session is built. Handles type coercion, path normalization and default
value injection.
"""

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from treeshell.domain.config import get_default_config
from treeshell.infra.fs import normalize_path
from treeshell.infra.logging.config import LEVEL_NAMES
from treeshell.utils.i18n import AVAILABLE_LOCALES

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Converts untrusted inputs (e.g., from CLI arguments) into strictly typed
    parameters. Fills missing keys with domain defaults.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: A tuple containing the normalized
                                          configuration and a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if v is not None})

    # 2. Field Processing & Normalization
    root = _as_str(merged.get("root_path"), defaults["root_path"], "root_path", warnings, strict)
    merged["root_path"] = normalize_path(root, fallback=os.getcwd())

    merged["min_file_size"] = _as_positive_int(
        merged.get("min_file_size"), defaults["min_file_size"], "min_file_size", warnings, strict
    )
    merged["max_file_size"] = _as_positive_int(
        merged.get("max_file_size"), defaults["max_file_size"], "max_file_size", warnings, strict
    )
    merged["seed"] = _as_optional_int(merged.get("seed"), "seed", warnings, strict)
    merged["show_prompt"] = _as_bool(
        merged.get("show_prompt"), defaults["show_prompt"], "show_prompt", warnings, strict
    )
    merged["locale"] = _as_locale(merged.get("locale"), defaults["locale"], warnings, strict)
    merged["log_level"] = _as_level(merged.get("log_level"), defaults["log_level"], warnings, strict)

    log_file = merged.get("log_file")
    if log_file is not None:
        merged["log_file"] = _as_str(log_file, "", "log_file", warnings, strict) or None

    # 3. Domain-Specific Normalization (size bounds)
    _normalize_size_bounds(merged, warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "si", "sí"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_int(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[int]:
    """Coerce to int, returning None when the value cannot be used."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and not strict:
        try:
            converted = int(value.strip())
            warnings.append(f"Field '{field}' converted from '{value}' to {converted}.")
            return converted
        except ValueError:
            pass

    msg = f"Invalid field '{field}': expected int, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return None


def _as_positive_int(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    """Coerce to a strictly positive int."""
    if value is None:
        return fallback
    converted = _as_int(value, field, warnings, strict)
    if converted is None:
        return fallback
    if converted < 1:
        msg = f"Invalid field '{field}': must be >= 1, received {converted}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback
    return converted


def _as_optional_int(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[int]:
    """Coerce to int while letting None through."""
    if value is None:
        return None
    return _as_int(value, field, warnings, strict)


def _as_level(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    """Normalize a logging level name."""
    level = _as_str(value, fallback, "log_level", warnings, strict).upper()
    if level in LEVEL_NAMES:
        return level

    msg = f"Invalid field 'log_level': unknown level '{value}'."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_locale(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    """Normalize a locale identifier to one of the shipped message catalogs."""
    locale = _as_str(value, fallback, "locale", warnings, strict).lower()
    if locale in AVAILABLE_LOCALES:
        return locale

    msg = f"Invalid field 'locale': unsupported locale '{value}'."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_size_bounds(merged: Dict[str, Any], warnings: List[str], strict: bool) -> None:
    """Ensure min_file_size <= max_file_size, swapping inverted bounds."""
    low, high = merged["min_file_size"], merged["max_file_size"]
    if low <= high:
        return

    msg = f"Size bounds inverted: min_file_size={low} > max_file_size={high}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Bounds swapped.")
    merged["min_file_size"], merged["max_file_size"] = high, low
