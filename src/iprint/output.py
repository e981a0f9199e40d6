"""
OutputManager — indented, verbosity-gated text output.

The print side of the emission adapter. Every message is formatted,
indented for the caller's call depth, and written to the configured
file handle (default: stdout). Emission is gated by a single
verbosity threshold:

    message.level <= verbosity  ->  shown
    verbosity <= -4             ->  hard wall, nothing is shown

Module-level helpers iformat()/iprint() cover the common case of
indenting a message and printing it without touching the manager.
"""

import sys
from typing import Any, Optional, TextIO

from .formatter import format_lines
from .levels import V_DEFAULT, V_ERROR, V_NOTHING, V_TRACE


def iformat(message: Any, *args: Any, **kwargs: Any) -> str:
    """Format a message and indent each line for the current call depth.

    Placeholders use ``str.format``; a message without arguments is
    taken literally, so stray braces are safe. Non-string messages are
    converted with str() first::

        iformat("loaded {} rows from {path}", 42, path="a.csv")
    """
    message = str(message)
    text = message.format(*args, **kwargs) if (args or kwargs) else message
    return format_lines(text)


def iprint(message: Any = "", *args: Any, file: Optional[TextIO] = None,
           **kwargs: Any) -> None:
    """Print an indented message followed by a newline.

    Without ``file`` the message goes through the OutputManager
    singleton at the default level, so it lands on the manager's stream
    and is hidden when verbosity is negative. An explicit ``file`` is
    written to unconditionally.

    Args:
        message: Format string (str.format placeholders)
        *args: Positional values for the placeholders
        file: Destination stream, bypassing the manager
        **kwargs: Keyword values for the placeholders
    """
    if file is not None:
        print(iformat(message, *args, **kwargs), file=file)
        return
    get_output().emit(V_DEFAULT, message, *args, **kwargs)


iprintln = iprint


class OutputManager:
    """Indented output with a verbosity threshold.

    Usage::

        out = OutputManager(verbosity=1)
        out.emit(1, "Loaded {count} items", count=42)
        out.error("Something went wrong")
    """

    def __init__(self, verbosity: int = V_DEFAULT, file: TextIO = None,
                 error_file: TextIO = None):
        self.verbosity = verbosity
        self._file = file
        self._error_file = error_file

    @property
    def file(self) -> TextIO:
        """Destination for regular output, resolved at write time."""
        return self._file if self._file is not None else sys.stdout

    @property
    def error_file(self) -> TextIO:
        """Destination for error output, resolved at write time."""
        return self._error_file if self._error_file is not None else sys.stderr

    def enabled(self, level: int) -> bool:
        """Check whether a message at ``level`` would be shown."""
        if self.verbosity <= V_NOTHING:
            return False
        return level <= self.verbosity

    def emit(self, level: int, message: str, *args: Any, **kwargs: Any) -> None:
        """Emit an indented message if level <= verbosity.

        Args:
            level: Message level (higher = more verbose)
            message: Format string (uses str.format with args/kwargs)
            *args: Positional values for template placeholders
            **kwargs: Keyword values for template placeholders
        """
        if not self.enabled(level):
            return
        print(iformat(message, *args, **kwargs), file=self.file)

    def print(self, message: str = "", *args: Any, **kwargs: Any) -> None:
        """Emit at the default level (same as module-level iprint)."""
        self.emit(V_DEFAULT, message, *args, **kwargs)

    def trace(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Emit a function-tracing line (level 3)."""
        self.emit(V_TRACE, message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Emit an indented error to the error stream (level -3).

        Errors show at any verbosity >= -3, i.e. everything except the
        hard wall.
        """
        if not self.enabled(V_ERROR):
            return
        print(iformat(message, *args, **kwargs), file=self.error_file)

    @property
    def quiet(self) -> bool:
        """True when verbosity is negative."""
        return self.verbosity < 0


# =============================================================================
# Module-level singleton
# =============================================================================

_manager: Optional[OutputManager] = None


def init_output(verbosity: int = V_DEFAULT, file: TextIO = None,
                error_file: TextIO = None) -> OutputManager:
    """Initialize the module-level OutputManager singleton.

    Call once at program startup, e.g. after parsing -v/-q flags.

    Returns:
        The initialized OutputManager instance
    """
    global _manager
    _manager = OutputManager(verbosity=verbosity, file=file, error_file=error_file)
    return _manager


def get_output() -> OutputManager:
    """Get the module-level OutputManager, creating a default if needed."""
    global _manager
    if _manager is None:
        _manager = OutputManager()
    return _manager
