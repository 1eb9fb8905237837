"""Error taxonomy for the container types.

Both errors signal caller misuse rather than an internal fault. They are
raised synchronously at the point of misuse and are never caught inside the
library.

Each error also subclasses the builtin a plain-Python caller would expect
(``LookupError`` for unwrapping, ``ValueError`` for reducing), so existing
``except`` clauses keep working.
"""

__all__ = [
    "FpContainersError",
    "EmptyValueAccess",
    "EmptySequenceReduction",
]


class FpContainersError(Exception):
    """Base class for all errors raised by fpcontainers."""


class EmptyValueAccess(FpContainersError, LookupError):
    """Raised when ``Option.get()`` is called on ``Empty``."""

    def __init__(self, message: str = "get() called on Empty"):
        super().__init__(message)


class EmptySequenceReduction(FpContainersError, ValueError):
    """Raised when an empty ``Seq`` is reduced without a seed value."""

    def __init__(self, message: str = "reduce() of empty Seq with no seed"):
        super().__init__(message)
