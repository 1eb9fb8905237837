"""Optional values and immutable sequences for functional-style Python.

``Option`` holds zero or one value, ``Seq`` holds zero or more in order. Both
are immutable and expose ``map`` / ``flat_map`` style operations so code can
be written as pipelines instead of ``None`` checks and index loops.
"""

from fpcontainers.core import (
    EMPTY,
    Empty,
    EmptySequenceReduction,
    EmptyValueAccess,
    FpContainersError,
    Option,
    Present,
    Seq,
    from_nullable,
)
from fpcontainers.functional import (
    compose,
    first_present,
    flatten_present,
    lift,
    map_n,
    sequence_options,
    traverse,
)

__version__ = "0.1.0"

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
    "compose",
    "map_n",
    "sequence_options",
    "traverse",
    "first_present",
    "flatten_present",
    "lift",
]
