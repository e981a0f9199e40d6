"""
Scope guards: the acquire/release pair that keeps call depth honest.

A guard bumps the depth when it is entered and owns exactly one
decrement. Used as a context manager the decrement runs on every exit
path out of the ``with`` block (normal exit, early ``return``, an
exception unwinding through it)::

    def walk(node):
        with enter_scope():
            iprint("visiting {}", node.name)
            for child in node.children:
                walk(child)

Guards must be released in strict LIFO order from the context that
entered them. Anything else is a GuardDisciplineError, raised before
the depth is touched.

Caveat: depth follows guard lifetime, not the interpreter call stack.
A function that is not wrapped in a scope adds no indentation, and a
scope opened in one function and held across calls into others keeps
counting for all of them. Likewise a scope that is skipped or merged
away (for example by a caller inlining the work of a traced function)
under-counts; iprint cannot detect that.
"""

import asyncio
import contextvars
import functools
import inspect
import threading
from typing import Tuple

from . import depth as _depth
from .errors import GuardReleasedError, ScopeOrderError

# Live guards of the calling context, innermost last. A tuple so that
# copied contexts (new Tasks, inheriting threads) never share a stack.
_live: contextvars.ContextVar[Tuple["ScopeGuard", ...]] = contextvars.ContextVar(
    "iprint_live_guards", default=()
)


def _context_key():
    """Identify the running thread and asyncio task, if any."""
    try:
        task = asyncio.current_task()
    except RuntimeError:
        task = None
    return threading.get_ident(), task


class ScopeGuard:
    """Handle owning one level of call depth.

    Attributes:
        level: Depth produced by entering this guard (outer guard + 1)
        active: True until the guard has been released
    """

    __slots__ = ("level", "active", "_owner")

    def __init__(self):
        self._owner = _context_key()
        self.level = _depth.increment()
        self.active = True
        _live.set(_live.get() + (self,))

    def release(self) -> None:
        """Give back the depth level this guard owns.

        Raises:
            GuardReleasedError: the guard was already released
            ScopeOrderError: a guard entered later is still live, or the
                guard belongs to a different execution context
        """
        if not self.active:
            raise GuardReleasedError(f"scope guard at level {self.level} released twice")
        if self._owner != _context_key():
            raise ScopeOrderError(
                f"scope guard at level {self.level} released from a thread "
                "or task that did not enter it"
            )
        stack = _live.get()
        if not stack or stack[-1] is not self:
            if self in stack:
                raise ScopeOrderError(
                    f"scope guard at level {self.level} released while "
                    f"{len(stack) - stack.index(self) - 1} inner scope(s) are still live"
                )
            raise ScopeOrderError(
                f"scope guard at level {self.level} is not live in the "
                "current contextvars context"
            )
        _live.set(stack[:-1])
        self.active = False
        _depth.decrement()

    def __enter__(self) -> "ScopeGuard":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.release()
        return False

    def __repr__(self):
        state = "active" if self.active else "released"
        return f"<ScopeGuard level={self.level} {state}>"


def enter_scope() -> ScopeGuard:
    """Open a traced scope in the calling context and return its guard."""
    return ScopeGuard()


def live_guards() -> int:
    """Number of unreleased guards in the calling context."""
    return len(_live.get())


def scoped(func):
    """Decorator running each call of ``func`` inside its own scope.

    Coroutine functions keep the scope across every ``await`` of the
    body. Generator functions hold the scope only while the generator
    body runs, so the consumer between two ``next()`` calls sees its own
    depth, not the generator's. Async generator functions get the same
    treatment around each ``__anext__``/``asend``/``athrow``.
    """
    if inspect.iscoroutinefunction(func):
        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            with enter_scope():
                return await func(*args, **kwargs)
        return async_wrapper

    if inspect.isgeneratorfunction(func):
        @functools.wraps(func)
        def gen_wrapper(*args, **kwargs):
            gen = func(*args, **kwargs)
            to_send = None
            to_throw = None
            while True:
                with enter_scope():
                    try:
                        if to_throw is not None:
                            item = gen.throw(to_throw)
                        else:
                            item = gen.send(to_send)
                    except StopIteration as stop:
                        return stop.value
                to_send = to_throw = None
                try:
                    to_send = yield item
                except GeneratorExit:
                    with enter_scope():
                        gen.close()
                    raise
                except BaseException as e:
                    to_throw = e
        return gen_wrapper

    if inspect.isasyncgenfunction(func):
        @functools.wraps(func)
        async def agen_wrapper(*args, **kwargs):
            agen = func(*args, **kwargs)
            to_send = None
            to_throw = None
            while True:
                with enter_scope():
                    try:
                        if to_throw is not None:
                            item = await agen.athrow(to_throw)
                        else:
                            item = await agen.asend(to_send)
                    except StopAsyncIteration:
                        return
                to_send = to_throw = None
                try:
                    to_send = yield item
                except GeneratorExit:
                    with enter_scope():
                        await agen.aclose()
                    raise
                except BaseException as e:
                    to_throw = e
        return agen_wrapper

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        with enter_scope():
            return func(*args, **kwargs)
    return wrapper
