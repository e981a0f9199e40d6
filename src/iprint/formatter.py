"""
Indentation formatter.

Maps the current call depth to a prefix built from the process-wide
indent unit. The formatter never inspects message text; it only
prepends the prefix.
"""

from .config import get_indent_unit
from .depth import current_depth
from .errors import DepthUnderflowError


def indent_prefix(depth: int) -> str:
    """Return the indent unit repeated ``depth`` times."""
    if depth < 0:
        raise DepthUnderflowError(f"cannot indent for negative depth {depth}")
    return get_indent_unit() * depth


def format(text: str) -> str:
    """Prefix ``text`` with indentation for the caller's current depth.

    Nothing else is added or stripped: at depth ``d`` the result is the
    indent unit ``d`` times followed by ``text`` verbatim.
    """
    return indent_prefix(current_depth()) + text


def format_lines(text: str) -> str:
    """Indent every line of ``text`` for the caller's current depth.

    Multi-line messages keep their shape under the indentation instead
    of only the first line moving right. A trailing newline is kept.
    An empty message stays empty, so a blank line carries no trailing
    whitespace. Other single-line text gives the same result as format().
    """
    prefix = indent_prefix(current_depth())
    if not prefix or not text:
        return text
    lines = text.split("\n")
    trailing = lines[-1] == "" and len(lines) > 1
    if trailing:
        lines.pop()
    out = "\n".join(prefix + line for line in lines)
    return out + "\n" if trailing else out
