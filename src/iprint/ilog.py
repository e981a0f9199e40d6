"""
Severity-leveled logging with automatic indentation.

Each helper indents the message for the caller's call depth and hands
the finished string to a stdlib ``logging.Logger``. iprint installs no
handlers; where records go is up to the host application's logging
configuration.

    import logging
    from iprint import iinfo, scoped

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    @scoped
    def load(path):
        iinfo("reading %s", path)

Arguments use logging's lazy %-style, but they are merged before
indentation so every line of a multi-line message is indented. The
merge only happens when the logger would actually emit the record.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from .formatter import format_lines
from .levels import DEBUG, ERROR, INFO, TRACE, WARN

DEFAULT_LOGGER_NAME = "iprint"

LoggerArg = Union[logging.Logger, logging.LoggerAdapter, str, None]


def _resolve_logger(logger: LoggerArg):
    if logger is None:
        return logging.getLogger(DEFAULT_LOGGER_NAME)
    if isinstance(logger, str):
        return logging.getLogger(logger)
    return logger


def _log(level, msg, args, logger, kwargs, stacklevel):
    log = _resolve_logger(logger)
    if not log.isEnabledFor(level):
        return
    # Attribute the record to the caller of the public helper
    kwargs.setdefault("stacklevel", stacklevel)
    raw_args = args
    # Same rule as LogRecord: a single non-empty mapping is the mapping
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        args = args[0]
    text = str(msg)
    if args:
        try:
            text = text % args
        except (TypeError, ValueError, KeyError):
            # Let the handlers report the bad arguments, as logging does
            log.log(level, msg, *raw_args, **kwargs)
            return
    log.log(level, format_lines(text), **kwargs)


def ilog(level: int, msg: Any, *args: Any, logger: LoggerArg = None,
         **kwargs: Any) -> None:
    """Log ``msg`` at ``level`` with indentation for the current depth.

    Args:
        level: Logging severity (TRACE, DEBUG, INFO, WARN, ERROR or any int)
        msg: Message, optionally with %-style placeholders
        *args: Values for the placeholders
        logger: Logger, adapter or logger name (default: "iprint")
        **kwargs: Passed through to Logger.log (exc_info, extra, ...)
    """
    _log(level, msg, args, logger, kwargs, 3)


def itrace(msg: Any, *args: Any, logger: LoggerArg = None, **kwargs: Any) -> None:
    """Log an indented message at TRACE (5)."""
    _log(TRACE, msg, args, logger, kwargs, 3)


def idebug(msg: Any, *args: Any, logger: LoggerArg = None, **kwargs: Any) -> None:
    """Log an indented message at DEBUG."""
    _log(DEBUG, msg, args, logger, kwargs, 3)


def iinfo(msg: Any, *args: Any, logger: LoggerArg = None, **kwargs: Any) -> None:
    """Log an indented message at INFO."""
    _log(INFO, msg, args, logger, kwargs, 3)


def iwarn(msg: Any, *args: Any, logger: LoggerArg = None, **kwargs: Any) -> None:
    """Log an indented message at WARNING."""
    _log(WARN, msg, args, logger, kwargs, 3)


def ierror(msg: Any, *args: Any, logger: LoggerArg = None, **kwargs: Any) -> None:
    """Log an indented message at ERROR."""
    _log(ERROR, msg, args, logger, kwargs, 3)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the iprint logger, or a named child of it."""
    if name is None:
        return logging.getLogger(DEFAULT_LOGGER_NAME)
    return logging.getLogger(f"{DEFAULT_LOGGER_NAME}.{name}")
