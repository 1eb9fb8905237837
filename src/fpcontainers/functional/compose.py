"""Combining several optional values into one.

A chain of ``flat_map`` calls reads poorly once more than two optionals are
involved. The helpers here cover the usual shapes of that problem:

    - **compose**: all of N optionals, as one ``Option`` of a tuple
    - **map_n**: all of N optionals, fed into one function
    - **sequence_options / traverse**: all elements of an iterable
    - **first_present**: the first of N optionals that has a value
    - **flatten_present**: only the values that exist
    - **lift**: turn a plain function into one over optionals

Every "all of" helper short-circuits: once an input is ``Empty`` the result is
``Empty`` and no later input is evaluated. Inputs may be given as ``Option``
values or as zero-argument callables returning one; only callables can be
skipped, so pass callables when producing an input is expensive.

Example:
    >>> from fpcontainers import Present, from_nullable
    >>> from fpcontainers.functional.compose import compose, map_n
    >>>
    >>> config = {"host": "db", "port": 5432}
    >>> compose(from_nullable(config.get("host")), from_nullable(config.get("port")))
    Present(('db', 5432))
    >>> map_n(lambda h, p: f"{h}:{p}", Present("db"), lambda: from_nullable(config.get("user")))
    Empty()
"""

import functools
import typing as tp

from fpcontainers.core.option import EMPTY, Option, Present
from fpcontainers.core.sequence import Seq
from fpcontainers.logger.logger import logger

__all__ = [
    "OptionSource",
    "compose",
    "map_n",
    "sequence_options",
    "traverse",
    "first_present",
    "flatten_present",
    "lift",
]

T = tp.TypeVar("T")
U = tp.TypeVar("U")

# An Option, or a thunk producing one on demand
OptionSource = tp.Union[Option[tp.Any], tp.Callable[[], Option[tp.Any]]]


def _require_option(value: tp.Any) -> Option[tp.Any]:
    if not isinstance(value, Option):
        raise TypeError(f"Expected an Option, got {type(value).__name__}")
    return value


def _resolve(source: OptionSource) -> Option[tp.Any]:
    return _require_option(source() if callable(source) else source)


def compose(*sources: OptionSource) -> Option[tuple]:
    """Join several optionals into one ``Option`` of a tuple.

    Args:
        *sources: ``Option`` values or zero-argument callables returning one.
            Evaluated left to right.

    Returns:
        ``Present`` of the tuple of all values if every input is present,
        otherwise ``EMPTY``. ``compose()`` with no inputs is ``Present(())``.

    Raises:
        TypeError: If an input is, or produces, something other than an
            ``Option``.
    """
    values = []
    for index, source in enumerate(sources):
        option = _resolve(source)
        if option.is_empty:
            logger.debug(
                f"compose short-circuited at input {index} of {len(sources)}"
            )
            return EMPTY
        values.extend(option)
    return Present(tuple(values))


def map_n(f: tp.Callable[..., U], *sources: OptionSource) -> Option[U]:
    """Apply ``f`` to the values of all inputs, if all are present.

    Equivalent to ``compose(*sources).map(lambda values: f(*values))``.
    """
    return compose(*sources).map(lambda values: f(*values))


def sequence_options(options: tp.Iterable[Option[T]]) -> Option[Seq[T]]:
    """Turn an iterable of optionals into an optional ``Seq``.

    The iterable is consumed lazily and abandoned at the first ``Empty``.

    Raises:
        TypeError: If an element is not an ``Option``.
    """
    values = []
    for index, option in enumerate(options):
        if _require_option(option).is_empty:
            logger.debug(f"sequence_options short-circuited at element {index}")
            return EMPTY
        values.extend(option)
    return Present(Seq(values))


def traverse(items: tp.Iterable[T], f: tp.Callable[[T], Option[U]]) -> Option[Seq[U]]:
    """Map ``f`` over ``items`` and sequence the results.

    ``f`` is not called for any element after the first one it maps to
    ``Empty``.

    Example:
        >>> traverse(["1", "2"], lambda s: Present(int(s)) if s.isdigit() else EMPTY)
        Present(Seq(1, 2))
    """
    return sequence_options(f(item) for item in items)


def first_present(*sources: OptionSource) -> Option[tp.Any]:
    """The first present input, or ``EMPTY`` if none is.

    Inputs after the first present one are not evaluated.
    """
    for source in sources:
        option = _resolve(source)
        if option.is_defined:
            return option
    return EMPTY


def flatten_present(options: tp.Iterable[Option[T]]) -> Seq[T]:
    """Values of the present inputs, in order; empty inputs are dropped.

    Raises:
        TypeError: If an element is not an ``Option``.
    """
    return Seq(value for option in options for value in _require_option(option))


def lift(f: tp.Callable[[T], U]) -> tp.Callable[[Option[T]], Option[U]]:
    """Turn ``T -> U`` into ``Option[T] -> Option[U]``."""

    @functools.wraps(f)
    def lifted(option: Option[T]) -> Option[U]:
        return option.map(f)

    return lifted
