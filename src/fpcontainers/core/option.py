"""Optional values as an explicit zero-or-one container.

This module provides ``Option``, a container that holds either exactly one
value (``Present``) or nothing at all (``Empty``). It replaces ``None`` checks
with total operations: transforming, chaining and extracting a value never
needs an ``if x is not None`` guard, and the absent case cannot be forgotten.

Variants:
    - **Present(value)**: Holds a single value. The value itself may be
      anything, ``None`` included; the container does not police it.
    - **Empty**: Holds nothing. ``EMPTY`` is a shared instance, though
      ``Empty()`` compares equal to it.

Key Features:
    - ``map`` / ``flat_map`` / ``filter`` for chaining without unwrapping
    - ``get_or_else`` / ``fold`` / ``for_each`` for safe extraction
    - Eager and deferred (``*_get``) fallbacks
    - Structural pattern matching on both variants
    - Iteration (zero or one element) and conversion to ``Seq``
    - Usable as a pydantic field type (``Option[int]`` validates ``int | None``)

Examples:
    >>> from fpcontainers import Empty, Present, from_nullable
    >>>
    >>> from_nullable({"port": 8080}.get("port")).map(str).get_or_else("none")
    '8080'
    >>> from_nullable({}.get("port")).map(str).get_or_else("none")
    'none'
    >>>
    >>> match from_nullable(0):
    ...     case Present(value):
    ...         print(f"got {value}")
    ...     case Empty():
    ...         print("nothing")
    got 0

Note:
    Presence is decided by ``is None`` only. ``from_nullable(0)``,
    ``from_nullable("")`` and ``from_nullable([])`` are all ``Present``.
"""

from __future__ import annotations

import typing as tp
from abc import ABC, abstractmethod
from dataclasses import dataclass

from pydantic import GetCoreSchemaHandler
from pydantic_core import SchemaSerializer, core_schema

from fpcontainers import config
from fpcontainers.core.errors import EmptyValueAccess
from fpcontainers.logger.logger import logger

if tp.TYPE_CHECKING:
    from fpcontainers.core.sequence import Seq

__all__ = [
    "Option",
    "Present",
    "Empty",
    "EMPTY",
    "from_nullable",
]

T = tp.TypeVar("T")
U = tp.TypeVar("U")


class Option(ABC, tp.Generic[T]):
    """A value that is either ``Present`` or ``Empty``.

    ``Option`` is abstract; build instances with ``Present(value)``,
    ``EMPTY`` or ``from_nullable(value)``. Every operation returns a new
    value and leaves the receiver untouched.
    """

    @property
    @abstractmethod
    def is_defined(self) -> bool:
        """True iff this is ``Present``."""

    @property
    def is_empty(self) -> bool:
        """True iff this is ``Empty``."""
        return not self.is_defined

    @abstractmethod
    def map(self, f: tp.Callable[[T], U]) -> Option[U]:
        """Apply ``f`` to the value if present, wrapping the result."""

    @abstractmethod
    def flat_map(self, f: tp.Callable[[T], Option[U]]) -> Option[U]:
        """Apply ``f`` to the value if present and return its result as is.

        Raises:
            TypeError: If ``f`` returns something other than an ``Option``.
        """

    @abstractmethod
    def filter(self, predicate: tp.Callable[[T], bool]) -> Option[T]:
        """Keep the value only if ``predicate`` holds for it."""

    @abstractmethod
    def get_or_else(self, default: T) -> T:
        """Return the value if present, otherwise ``default``."""

    @abstractmethod
    def get_or_else_get(self, supplier: tp.Callable[[], T]) -> T:
        """Return the value if present, otherwise call ``supplier``.

        ``supplier`` is not invoked when the value is present.
        """

    @abstractmethod
    def or_else(self, alternative: Option[T]) -> Option[T]:
        """Return ``self`` if present, otherwise ``alternative``."""

    @abstractmethod
    def or_else_get(self, supplier: tp.Callable[[], Option[T]]) -> Option[T]:
        """Return ``self`` if present, otherwise the result of ``supplier()``."""

    @abstractmethod
    def fold(self, if_empty: tp.Callable[[], U], f: tp.Callable[[T], U]) -> U:
        """Collapse both cases into one value.

        Args:
            if_empty: Called with no arguments when this is ``Empty``.
            f: Called with the value when this is ``Present``.

        Returns:
            Whatever the selected callable returns.
        """

    @abstractmethod
    def for_each(self, action: tp.Callable[[T], tp.Any]) -> None:
        """Run ``action`` on the value once if present, never otherwise."""

    @abstractmethod
    def to_nullable(self) -> tp.Optional[T]:
        """Return the value, or ``None`` when empty."""

    @abstractmethod
    def __iter__(self) -> tp.Iterator[T]: ...

    @abstractmethod
    def _get(self) -> T: ...

    def get(self) -> T:
        """Return the value, failing if there is none.

        Prefer ``get_or_else``, ``fold`` or ``for_each``. This accessor exists
        for interop with code that already knows the value is present.

        Raises:
            EmptyValueAccess: If this is ``Empty``.
        """
        if config.settings.warn_on_unsafe_get:
            logger.warning(
                f"Option.get() called on {self!r}; prefer get_or_else or fold"
            )
        return self._get()

    def to_seq(self) -> Seq[T]:
        """Return a ``Seq`` with zero or one element."""
        from fpcontainers.core.sequence import Seq

        return Seq(self)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: tp.Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        # Option[T] validates like ``T | None`` and dumps back to it
        args = tp.get_args(source_type)
        inner = handler.generate_schema(args[0]) if args else core_schema.any_schema()
        return core_schema.no_info_after_validator_function(
            from_nullable,
            core_schema.no_info_before_validator_function(
                _unwrap_option, core_schema.nullable_schema(inner)
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                _dump_option
            ),
        )


@dataclass(frozen=True, repr=False)
class Present(Option[T]):
    """An ``Option`` holding ``value``."""

    value: T

    @property
    def is_defined(self) -> bool:
        return True

    def map(self, f: tp.Callable[[T], U]) -> Option[U]:
        return Present(f(self.value))

    def flat_map(self, f: tp.Callable[[T], Option[U]]) -> Option[U]:
        result = f(self.value)
        if not isinstance(result, Option):
            raise TypeError(
                f"flat_map function must return an Option, got {type(result).__name__}"
            )
        return result

    def filter(self, predicate: tp.Callable[[T], bool]) -> Option[T]:
        return self if predicate(self.value) else EMPTY

    def get_or_else(self, default: T) -> T:
        return self.value

    def get_or_else_get(self, supplier: tp.Callable[[], T]) -> T:
        return self.value

    def or_else(self, alternative: Option[T]) -> Option[T]:
        return self

    def or_else_get(self, supplier: tp.Callable[[], Option[T]]) -> Option[T]:
        return self

    def fold(self, if_empty: tp.Callable[[], U], f: tp.Callable[[T], U]) -> U:
        return f(self.value)

    def for_each(self, action: tp.Callable[[T], tp.Any]) -> None:
        action(self.value)

    def to_nullable(self) -> tp.Optional[T]:
        return self.value

    def __iter__(self) -> tp.Iterator[T]:
        yield self.value

    def _get(self) -> T:
        return self.value

    def __repr__(self) -> str:
        return f"Present({self.value!r})"


@dataclass(frozen=True, repr=False)
class Empty(Option[T]):
    """An ``Option`` holding nothing. All instances are equal."""

    @property
    def is_defined(self) -> bool:
        return False

    def map(self, f: tp.Callable[[T], U]) -> Option[U]:
        return EMPTY

    def flat_map(self, f: tp.Callable[[T], Option[U]]) -> Option[U]:
        return EMPTY

    def filter(self, predicate: tp.Callable[[T], bool]) -> Option[T]:
        return self

    def get_or_else(self, default: T) -> T:
        return default

    def get_or_else_get(self, supplier: tp.Callable[[], T]) -> T:
        return supplier()

    def or_else(self, alternative: Option[T]) -> Option[T]:
        return alternative

    def or_else_get(self, supplier: tp.Callable[[], Option[T]]) -> Option[T]:
        return supplier()

    def fold(self, if_empty: tp.Callable[[], U], f: tp.Callable[[T], U]) -> U:
        return if_empty()

    def for_each(self, action: tp.Callable[[T], tp.Any]) -> None:
        return None

    def to_nullable(self) -> tp.Optional[T]:
        return None

    def __iter__(self) -> tp.Iterator[T]:
        return iter(())

    def _get(self) -> T:
        raise EmptyValueAccess()

    def __repr__(self) -> str:
        return "Empty()"


EMPTY: Empty[tp.Any] = Empty()


def from_nullable(value: tp.Optional[T]) -> Option[T]:
    """Wrap a possibly-``None`` value.

    Only ``None`` counts as absent. Falsy values such as ``0``, ``""``,
    ``False`` or an empty list are wrapped as ``Present``.

    Args:
        value: Any value, or ``None``.

    Returns:
        ``EMPTY`` for ``None``, otherwise ``Present(value)``.
    """
    if value is None:
        return EMPTY
    return Present(value)


def _unwrap_option(value: tp.Any) -> tp.Any:
    # Validation input may already be an Option; reduce it to ``T | None``
    if isinstance(value, Option):
        return value.to_nullable()
    return value


def _dump_option(value: tp.Any) -> tp.Any:
    if isinstance(value, Option):
        return value.to_nullable()
    return value


# Serialization outside an ``Option[T]`` field (``Any`` fields, JSON-schema
# defaults, ``to_jsonable_python``) also dumps to ``T | None``
_OPTION_SERIALIZER = SchemaSerializer(
    core_schema.any_schema(
        serialization=core_schema.plain_serializer_function_ser_schema(_dump_option)
    )
)
Present.__pydantic_serializer__ = _OPTION_SERIALIZER
Empty.__pydantic_serializer__ = _OPTION_SERIALIZER
