"""
iprint — indented printing and logging that follows call depth.

Output is indented in proportion to how many traced scopes are open in
the calling thread or asyncio task, so a reader can see the call
hierarchy in plain program output.

Public API:
    enter_scope      — open a traced scope (context manager guard)
    scoped           — decorator: run each call inside a scope
    trace            — decorator: scope plus entry/exit echo lines
    call_depth       — current depth of the calling context
    format           — prefix text with indentation for the current depth
    iformat / iprint — str.format + indent, and print it
    itrace .. ierror — indented stdlib logging at five severities
    OutputManager    — verbosity-gated indented writer
    configure        — set the process-wide indent unit before first use

Depth follows scope lifetime, not the interpreter stack: only code run
inside enter_scope()/@scoped/@trace adds indentation.
"""

from ._version import __version__, __app_name__
from .config import IndentConfig, configure, get_config
from .depth import call_depth, current_depth
from .errors import (
    IPrintError, GuardDisciplineError, DepthUnderflowError,
    ScopeOrderError, GuardReleasedError, ConfigurationError,
)
from .formatter import format, format_lines, indent_prefix
from .guard import ScopeGuard, enter_scope, live_guards, scoped
from .ilog import ilog, itrace, idebug, iinfo, iwarn, ierror, get_logger
from .levels import TRACE
from .output import OutputManager, init_output, get_output, iformat, iprint, iprintln
from .trace import trace

__all__ = [
    '__version__', '__app_name__',
    'IndentConfig', 'configure', 'get_config',
    'call_depth', 'current_depth',
    'IPrintError', 'GuardDisciplineError', 'DepthUnderflowError',
    'ScopeOrderError', 'GuardReleasedError', 'ConfigurationError',
    'format', 'format_lines', 'indent_prefix',
    'ScopeGuard', 'enter_scope', 'live_guards', 'scoped',
    'ilog', 'itrace', 'idebug', 'iinfo', 'iwarn', 'ierror', 'get_logger',
    'TRACE',
    'OutputManager', 'init_output', 'get_output', 'iformat', 'iprint', 'iprintln',
    'trace',
]
