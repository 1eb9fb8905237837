"""Functional helpers built on the core containers.

Utilities here are stateless and side-effect-free so they can be composed
freely with ``Option`` and ``Seq`` pipelines.
"""

from fpcontainers.functional.compose import (
    compose,
    first_present,
    flatten_present,
    lift,
    map_n,
    sequence_options,
    traverse,
)

__all__ = [
    "compose",
    "map_n",
    "sequence_options",
    "traverse",
    "first_present",
    "flatten_present",
    "lift",
]
