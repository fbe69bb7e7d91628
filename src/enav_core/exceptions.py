"""
enav-core 예외 정의

All errors raised by the package derive from EnavError. The concrete
classes also derive from the matching builtin so callers catching
ValueError / NotImplementedError keep working.

Vincenty non-convergence is deliberately absent here: it is reported
as NaN (or VincentyResult.converged == False), not raised.
"""


class EnavError(Exception):
    """Base exception for all enav-core errors."""

    pass


class InvalidArgumentError(EnavError, ValueError):
    """Raised when an argument is outside its valid domain (e.g. negative distance)."""

    pass


class NotSupportedError(EnavError, NotImplementedError):
    """Raised when a coordinate system variant does not implement an operation."""

    pass
