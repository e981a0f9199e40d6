"""
Exception types for iprint.

Every core operation is an in-memory counter update, so the only
failures are logic errors in the calling code (guard discipline) and
bad configuration values.
"""


class IPrintError(Exception):
    """Base class for all iprint errors."""


class GuardDisciplineError(IPrintError, RuntimeError):
    """A scope guard was used outside strict LIFO, same-context discipline."""


class DepthUnderflowError(GuardDisciplineError):
    """A decrement was attempted while the depth was already zero."""


class ScopeOrderError(GuardDisciplineError):
    """A guard was released out of order or from a foreign context."""


class GuardReleasedError(GuardDisciplineError):
    """A guard was released more than once."""


class ConfigurationError(IPrintError, ValueError):
    """Invalid indent configuration, or configuration after first use."""
