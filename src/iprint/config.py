"""Process-wide indent configuration for iprint.

Three-layer resolution (highest priority wins):
  1. configure() — explicit call made before any output is formatted
  2. Environment — IPRINT_INDENT_UNIT (literal) or IPRINT_INDENT_WIDTH (spaces)
  3. Default — four spaces per depth level

The configuration is read once. The first formatting call freezes it,
and every execution context formats with the same unit from then on.
"""

import os
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError


DEFAULT_INDENT_WIDTH = 4
ENV_INDENT_UNIT = "IPRINT_INDENT_UNIT"
ENV_INDENT_WIDTH = "IPRINT_INDENT_WIDTH"


@dataclass(frozen=True)
class IndentConfig:
    """Frozen indent settings.

    Attributes:
        indent_unit: String repeated once per depth level
        source: Where the unit came from ('configure', 'env', 'default')
    """
    indent_unit: str = " " * DEFAULT_INDENT_WIDTH
    source: str = "default"


_config: Optional[IndentConfig] = None
_requested: Optional[IndentConfig] = None


def _unit_from_width(width, origin):
    """Turn a space count into an indent unit, validating it."""
    try:
        n = int(width)
    except (TypeError, ValueError):
        raise ConfigurationError(
            f"{origin}: indent width must be an integer, got {width!r}"
        ) from None
    if n < 1:
        raise ConfigurationError(f"{origin}: indent width must be >= 1, got {n}")
    return " " * n


def _check_unit(unit, origin):
    if not isinstance(unit, str) or not unit:
        raise ConfigurationError(f"{origin}: indent unit must be a non-empty string")
    return unit


def load_env_config(environ=None) -> Optional[IndentConfig]:
    """Read indent settings from the environment.

    IPRINT_INDENT_UNIT wins over IPRINT_INDENT_WIDTH when both are set.
    Returns None when neither variable is present.
    """
    environ = os.environ if environ is None else environ
    unit = environ.get(ENV_INDENT_UNIT)
    if unit is not None:
        return IndentConfig(_check_unit(unit, ENV_INDENT_UNIT), source="env")
    width = environ.get(ENV_INDENT_WIDTH)
    if width is not None:
        return IndentConfig(_unit_from_width(width, ENV_INDENT_WIDTH), source="env")
    return None


def configure(indent_unit: Optional[str] = None,
              indent_width: Optional[int] = None) -> IndentConfig:
    """Set the process-wide indent unit before the first formatting call.

    Pass either a literal unit (e.g. "\\t", "| ") or a width in spaces.
    Calling this once output has been formatted raises ConfigurationError
    unless the requested unit equals the frozen one.

    Args:
        indent_unit: Literal string repeated per depth level
        indent_width: Number of spaces per depth level

    Returns:
        The requested IndentConfig
    """
    global _requested

    if indent_unit is not None and indent_width is not None:
        raise ConfigurationError("pass indent_unit or indent_width, not both")
    if indent_unit is not None:
        unit = _check_unit(indent_unit, "configure")
    elif indent_width is not None:
        unit = _unit_from_width(indent_width, "configure")
    else:
        unit = " " * DEFAULT_INDENT_WIDTH

    requested = IndentConfig(unit, source="configure")
    if _config is not None:
        if _config.indent_unit == unit:
            return _config
        raise ConfigurationError(
            f"indent unit is already frozen as {_config.indent_unit!r}; "
            "configure() must run before the first formatted output"
        )
    _requested = requested
    return requested


def get_config() -> IndentConfig:
    """Return the frozen configuration, resolving and freezing it on first use."""
    global _config
    if _config is None:
        _config = _requested or load_env_config() or IndentConfig()
    return _config


def get_indent_unit() -> str:
    """Shortcut for get_config().indent_unit."""
    return get_config().indent_unit


def is_frozen() -> bool:
    """True once the configuration has been read by a formatter."""
    return _config is not None


def _reset_config() -> None:
    """Forget the frozen configuration. Test-suite use only."""
    global _config, _requested
    _config = None
    _requested = None
