"""Reusable annotated types for validating containers with pydantic.

``Option[T]`` and ``Seq[T]`` already work as pydantic field types. The aliases
here add constraints on top of them for use in models and ``TypeAdapter``.

Type Aliases:
    NonEmptySeq: A ``Seq`` with at least one element.
    DefinedOption: An ``Option`` that must be ``Present`` after validation.

Example:
    >>> from pydantic import BaseModel
    >>> from fpcontainers.core.types import NonEmptySeq
    >>>
    >>> class Basket(BaseModel):
    ...     items: NonEmptySeq[str]
    >>>
    >>> Basket(items=["apple"]).items
    Seq('apple')
"""

from typing import Annotated, TypeVar

from pydantic.functional_validators import AfterValidator

from fpcontainers.core.option import Option
from fpcontainers.core.sequence import Seq

__all__ = [
    "NonEmptySeq",
    "DefinedOption",
]

T = TypeVar("T")


def validate_non_empty(seq: Seq) -> Seq:
    """Validator to ensure a ``Seq`` holds at least one element.

    Args:
        seq: The validated ``Seq``.

    Returns:
        The original ``Seq`` if validation passes.

    Raises:
        ValueError: If ``seq`` is empty.
    """
    if seq.is_empty:
        raise ValueError("Seq must contain at least one element.")
    return seq


def validate_defined(option: Option) -> Option:
    """Validator to ensure an ``Option`` is ``Present``.

    Raises:
        ValueError: If ``option`` is ``Empty``.
    """
    if option.is_empty:
        raise ValueError("Option must be Present.")
    return option


# A Seq with at least one element
NonEmptySeq = Annotated[Seq[T], AfterValidator(validate_non_empty)]

# An Option that must hold a value once validated
DefinedOption = Annotated[Option[T], AfterValidator(validate_defined)]
