"""Immutable ordered sequences with list-tutorial operations.

``Seq`` wraps a tuple and exposes the operations functional-style code reaches
for instead of index loops: ``map``, ``flat_map``, ``filter``, ``reduce`` and
the folds. Every operation returns a new ``Seq``; the receiver is never
modified, so a ``Seq`` can be shared freely and iterated any number of times.

Examples:
    >>> from fpcontainers import Seq
    >>>
    >>> prices = Seq.of(3, 1, 2)
    >>> prices.map(lambda p: p * 10)
    Seq(30, 10, 20)
    >>> prices.flat_map(lambda p: [p, p])
    Seq(3, 3, 1, 1, 2, 2)
    >>> prices.reduce(lambda a, b: a + b)
    6
    >>> Seq().reduce(lambda a, b: a + b, 0)
    0

Note:
    ``reduce`` and ``fold_left`` combine left to right; ``fold_right``
    combines right to left. Reducing an empty ``Seq`` without a seed raises
    ``EmptySequenceReduction``.
"""

from __future__ import annotations

import typing as tp
from itertools import chain, islice

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from fpcontainers.core.errors import EmptySequenceReduction
from fpcontainers.core.option import EMPTY, Option, Present

__all__ = [
    "Seq",
]

T = tp.TypeVar("T")
U = tp.TypeVar("U")
V = tp.TypeVar("V")

# Marks "no seed given" so that ``None`` stays usable as a seed
_NO_SEED: tp.Any = object()


class Seq(tp.Sequence[T]):
    """An ordered, immutable collection of zero or more elements.

    Args:
        items: Any finite iterable. It is consumed once, at construction.
    """

    __slots__ = ("_items",)

    def __init__(self, items: tp.Iterable[T] = ()) -> None:
        object.__setattr__(self, "_items", tuple(items))

    def __setattr__(self, name: str, value: tp.Any) -> None:
        raise AttributeError(f"Seq is immutable; cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Seq is immutable; cannot delete '{name}'")

    @classmethod
    def of(cls, *items: T) -> Seq[T]:
        """Build a ``Seq`` from positional arguments."""
        return cls(items)

    # --- Sequence protocol ---

    def __len__(self) -> int:
        return len(self._items)

    @tp.overload
    def __getitem__(self, index: int) -> T: ...

    @tp.overload
    def __getitem__(self, index: slice) -> Seq[T]: ...

    def __getitem__(self, index: tp.Union[int, slice]) -> tp.Union[T, Seq[T]]:
        if isinstance(index, slice):
            return Seq(self._items[index])
        return self._items[index]

    def __iter__(self) -> tp.Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Seq):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash((Seq, self._items))

    def __add__(self, other: tp.Iterable[T]) -> Seq[T]:
        return self.concat(other)

    def __repr__(self) -> str:
        return f"Seq({', '.join(repr(item) for item in self._items)})"

    @property
    def is_empty(self) -> bool:
        return not self._items

    # --- Transformations ---

    def map(self, f: tp.Callable[[T], U]) -> Seq[U]:
        """Apply ``f`` to every element, keeping order and length."""
        return Seq(f(item) for item in self._items)

    def flat_map(self, f: tp.Callable[[T], tp.Iterable[U]]) -> Seq[U]:
        """Apply ``f`` to every element and concatenate the results.

        Flattens exactly one level. ``f`` may return a ``Seq``, an ``Option``
        (zero or one element) or any other finite iterable.
        """
        return Seq(chain.from_iterable(f(item) for item in self._items))

    def filter(self, predicate: tp.Callable[[T], bool]) -> Seq[T]:
        return Seq(item for item in self._items if predicate(item))

    def concat(self, other: tp.Iterable[T]) -> Seq[T]:
        return Seq(chain(self._items, other))

    def take(self, n: int) -> Seq[T]:
        """First ``n`` elements (fewer if the sequence is shorter)."""
        return Seq(islice(self._items, max(n, 0)))

    def drop(self, n: int) -> Seq[T]:
        """Everything after the first ``n`` elements."""
        return Seq(self._items[max(n, 0) :])

    def reverse(self) -> Seq[T]:
        return Seq(reversed(self._items))

    def zip(self, other: tp.Iterable[U]) -> Seq[tuple[T, U]]:
        """Pair elements positionally, stopping at the shorter input."""
        return Seq(zip(self._items, other))

    # --- Aggregation ---

    def reduce(self, f: tp.Callable[[T, T], T], seed: T = _NO_SEED) -> T:
        """Combine elements left to right with ``f``.

        Without a seed the first element starts the accumulation; with a seed
        the seed does, and is returned unchanged for an empty sequence.

        Args:
            f: Binary function ``(accumulated, element) -> accumulated``.
            seed: Optional starting value.

        Returns:
            The accumulated value.

        Raises:
            EmptySequenceReduction: If the sequence is empty and no seed was
                given.
        """
        if seed is _NO_SEED:
            if not self._items:
                raise EmptySequenceReduction()
            return self.drop(1).fold_left(self._items[0], f)
        return self.fold_left(seed, f)

    def fold_left(self, seed: U, f: tp.Callable[[U, T], U]) -> U:
        """``f(...f(f(seed, x0), x1)..., xn)``."""
        accumulated = seed
        for item in self._items:
            accumulated = f(accumulated, item)
        return accumulated

    def fold_right(self, seed: U, f: tp.Callable[[T, U], U]) -> U:
        """``f(x0, f(x1, ...f(xn, seed)))``."""
        accumulated = seed
        for item in reversed(self._items):
            accumulated = f(item, accumulated)
        return accumulated

    # --- Queries ---

    def head_option(self) -> Option[T]:
        return Present(self._items[0]) if self._items else EMPTY

    def last_option(self) -> Option[T]:
        return Present(self._items[-1]) if self._items else EMPTY

    def find(self, predicate: tp.Callable[[T], bool]) -> Option[T]:
        """First element matching ``predicate``, or ``Empty``."""
        for item in self._items:
            if predicate(item):
                return Present(item)
        return EMPTY

    def exists(self, predicate: tp.Callable[[T], bool]) -> bool:
        return any(predicate(item) for item in self._items)

    def for_all(self, predicate: tp.Callable[[T], bool]) -> bool:
        return all(predicate(item) for item in self._items)

    # --- Side effects and conversion ---

    def for_each(self, action: tp.Callable[[T], tp.Any]) -> None:
        for item in self._items:
            action(item)

    def to_list(self) -> list[T]:
        """A fresh list; mutating it does not affect this ``Seq``."""
        return list(self._items)

    def mk_string(self, sep: str = "", start: str = "", end: str = "") -> str:
        """Join the ``str()`` of every element, e.g. ``mk_string(", ", "[", "]")``."""
        return start + sep.join(str(item) for item in self._items) + end

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: tp.Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        # Seq[T] validates like ``list[T]`` and dumps back to a list
        args = tp.get_args(source_type)
        items = handler.generate_schema(args[0]) if args else core_schema.any_schema()
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.no_info_before_validator_function(
                _unwrap_seq, core_schema.list_schema(items)
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(list),
        )


def _unwrap_seq(value: tp.Any) -> tp.Any:
    if isinstance(value, Seq):
        return value.to_list()
    return value
