"""Core container types."""

from fpcontainers.core.errors import (
    EmptySequenceReduction,
    EmptyValueAccess,
    FpContainersError,
)
from fpcontainers.core.option import EMPTY, Empty, Option, Present, from_nullable
from fpcontainers.core.sequence import Seq

__all__ = [
    "Option",
    "Present",
    "Empty",
    "EMPTY",
    "from_nullable",
    "Seq",
    "FpContainersError",
    "EmptyValueAccess",
    "EmptySequenceReduction",
]
