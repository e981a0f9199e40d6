"""
Function tracing decorator.

Wraps each call in a scope and echoes entry, return and exception lines
through the OutputManager singleton at level 3. The echo lines sit at
the caller's depth; anything printed inside the function is indented
one level deeper.

    @trace
    def parse(path):
        iprint("reading {}", path)
        return 12

    >> mymod.parse(Path('a.txt'))
        reading a.txt
    << mymod.parse returned: 12
"""

import functools
import inspect
from pathlib import Path

from .guard import enter_scope
from .levels import V_TRACE


def _short_repr(value):
    """repr() that keeps trace lines to a readable width."""
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > 50:
        return f"'{value[:47]}...'"
    if isinstance(value, (list, tuple, dict, set)) and len(value) > 3:
        return f"[...{len(value)} items...]"
    return repr(value)


def _format_args(func_name, args, kwargs, is_method):
    args_repr = []
    remaining = args
    if is_method and args:
        if func_name != '__init__':
            args_repr.append('self')
        remaining = args[1:]
    args_repr.extend(_short_repr(a) for a in remaining)
    args_repr.extend(f"{k}={_short_repr(v)}" for k, v in kwargs.items())
    return ', '.join(args_repr)


def trace(func):
    """Decorator to trace function calls via the OutputManager.

    Entry/exit lines only print when the manager's verbosity is >= 3;
    the scope is entered either way, so nested iprint() output keeps
    its indentation regardless of verbosity. Coroutine functions hold
    the scope across the awaited body and report the awaited result.
    """
    module = inspect.getmodule(func)
    module_name = module.__name__ if module else "unknown"
    func_name = func.__name__
    try:
        params = list(inspect.signature(func).parameters)
    except (TypeError, ValueError):
        params = []
    is_method = bool(params) and params[0] in ('self', 'cls')

    def _enter(out, args, kwargs):
        out.trace(">> {mod}.{fn}({args})", mod=module_name, fn=func_name,
                  args=_format_args(func_name, args, kwargs, is_method))

    def _raised(out, e):
        out.trace("!! {mod}.{fn} raised: {exc}: {msg}",
                  mod=module_name, fn=func_name,
                  exc=type(e).__name__, msg=str(e))

    def _returned(out, result):
        if result is not None:
            out.trace("<< {mod}.{fn} returned: {val}",
                      mod=module_name, fn=func_name, val=_short_repr(result))
        else:
            out.trace("<< {mod}.{fn}", mod=module_name, fn=func_name)

    if inspect.iscoroutinefunction(func):
        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            from .output import get_output

            out = get_output()
            if not out.enabled(V_TRACE):
                with enter_scope():
                    return await func(*args, **kwargs)

            _enter(out, args, kwargs)
            try:
                with enter_scope():
                    result = await func(*args, **kwargs)
            except Exception as e:
                _raised(out, e)
                raise
            _returned(out, result)
            return result

        return async_wrapper

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        # Lazy import keeps the manager swappable in tests
        from .output import get_output

        out = get_output()
        if not out.enabled(V_TRACE):
            with enter_scope():
                return func(*args, **kwargs)

        _enter(out, args, kwargs)
        try:
            with enter_scope():
                result = func(*args, **kwargs)
        except Exception as e:
            _raised(out, e)
            raise
        _returned(out, result)
        return result

    return wrapper
