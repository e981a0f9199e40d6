"""
Per-context call depth store.

The depth lives in a ``contextvars.ContextVar`` so each OS thread and
each asyncio Task sees its own counter. A context that has never
written the variable reads the default of 0, which is the lazy
initialisation; nothing has to be torn down when the context ends.

Only ScopeGuard should call increment()/decrement(). Everything else
reads through current_depth() or its public alias call_depth().
"""

import contextvars

from .errors import DepthUnderflowError

_depth: contextvars.ContextVar[int] = contextvars.ContextVar(
    "iprint_call_depth", default=0
)


def current_depth() -> int:
    """Return the depth of the calling execution context."""
    return _depth.get()


def call_depth() -> int:
    """Return the current call depth.

    Same read the formatter uses. Handy for custom formatting or for
    branching on how deep the caller is::

        if call_depth() > 5:
            iprint("deep recursion ...")
    """
    return _depth.get()


def increment() -> int:
    """Raise the depth by one and return the new value."""
    new = _depth.get() + 1
    _depth.set(new)
    return new


def decrement() -> int:
    """Lower the depth by one and return the new value.

    Raises:
        DepthUnderflowError: depth is already 0. The store is left at 0.
    """
    depth = _depth.get()
    if depth <= 0:
        raise DepthUnderflowError(
            "decrement at depth 0: a scope guard was released without a "
            "matching enter in this context"
        )
    _depth.set(depth - 1)
    return depth - 1
