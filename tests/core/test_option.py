import logging

import pytest

from fpcontainers import config
from fpcontainers.config import Settings
from fpcontainers.core.errors import EmptyValueAccess, FpContainersError
from fpcontainers.core.option import EMPTY, Empty, Option, Present, from_nullable
from fpcontainers.core.sequence import Seq


def boom(*_):
    raise AssertionError("must not be called")


@pytest.fixture
def present():
    return Present(21)


@pytest.fixture
def warn_on_get(monkeypatch):
    monkeypatch.setattr(config, "settings", Settings(warn_on_unsafe_get=True))


def test_variants_are_options(present):
    assert isinstance(present, Option)
    assert isinstance(EMPTY, Option)
    assert present.is_defined and not present.is_empty
    assert EMPTY.is_empty and not EMPTY.is_defined


def test_option_is_abstract():
    with pytest.raises(TypeError):
        Option()


def test_equality_and_hashing():
    assert Present(1) == Present(1)
    assert Present(1) != Present(2)
    assert Present(1) != EMPTY
    assert Empty() == EMPTY
    assert Present(None) != EMPTY
    assert len({Present(1), Present(1), Empty(), EMPTY}) == 2


def test_repr():
    assert repr(Present("a")) == "Present('a')"
    assert repr(EMPTY) == "Empty()"


def test_present_is_immutable(present):
    with pytest.raises(AttributeError):
        present.value = 3


def test_map(present):
    assert present.map(lambda x: x * 2) == Present(42)
    assert EMPTY.map(boom) == EMPTY


def test_map_may_produce_none():
    # map wraps whatever f returns; it does not re-check for None
    assert Present(1).map(lambda _: None) == Present(None)


def test_flat_map_does_not_rewrap(present):
    half = lambda x: Present(x // 2) if x % 2 == 0 else EMPTY  # noqa: E731
    assert Present(42).flat_map(half) == Present(21)
    assert present.flat_map(half) == EMPTY
    assert EMPTY.flat_map(boom) == EMPTY


def test_flat_map_rejects_non_option(present):
    with pytest.raises(TypeError, match="must return an Option"):
        present.flat_map(lambda x: x)


def test_filter(present):
    assert present.filter(lambda x: x > 20) == present
    assert present.filter(lambda x: x > 30) == EMPTY
    assert EMPTY.filter(boom) == EMPTY


def test_get_or_else(present):
    assert present.get_or_else(0) == 21
    assert EMPTY.get_or_else(0) == 0


def test_get_or_else_get_is_lazy(present):
    assert present.get_or_else_get(boom) == 21
    assert EMPTY.get_or_else_get(lambda: "fallback") == "fallback"


def test_or_else(present):
    alternative = Present(99)
    assert present.or_else(alternative) is present
    assert EMPTY.or_else(alternative) is alternative
    assert EMPTY.or_else(EMPTY) == EMPTY


def test_or_else_get_is_lazy(present):
    assert present.or_else_get(boom) is present
    assert EMPTY.or_else_get(lambda: Present(1)) == Present(1)


def test_fold(present):
    assert present.fold(lambda: "none", lambda x: f"value {x}") == "value 21"
    assert EMPTY.fold(lambda: "none", boom) == "none"


def test_for_each_runs_once_or_never(present):
    seen = []
    present.for_each(seen.append)
    EMPTY.for_each(seen.append)
    assert seen == [21]


def test_get(present):
    assert present.get() == 21
    with pytest.raises(EmptyValueAccess, match="Empty"):
        EMPTY.get()


def test_empty_value_access_is_a_lookup_error():
    with pytest.raises(LookupError):
        EMPTY.get()
    assert issubclass(EmptyValueAccess, FpContainersError)


def test_get_warns_when_enabled(present, warn_on_get, caplog):
    with caplog.at_level(logging.WARNING, logger="fpcontainers"):
        assert present.get() == 21
        with pytest.raises(EmptyValueAccess):
            EMPTY.get()
    messages = [r.getMessage() for r in caplog.records]
    assert len(messages) == 2
    assert all("Option.get()" in m for m in messages)


def test_get_is_silent_by_default(present, monkeypatch, caplog):
    monkeypatch.setattr(config, "settings", Settings())
    with caplog.at_level(logging.WARNING, logger="fpcontainers"):
        present.get()
    assert caplog.records == []


def test_iteration(present):
    assert list(present) == [21]
    assert list(EMPTY) == []
    # restartable
    assert list(present) == [21]


def test_to_seq_and_to_nullable(present):
    assert present.to_seq() == Seq.of(21)
    assert EMPTY.to_seq() == Seq()
    assert present.to_nullable() == 21
    assert EMPTY.to_nullable() is None


def test_pattern_matching(present):
    def describe(option):
        match option:
            case Present(value):
                return f"present {value}"
            case Empty():
                return "empty"

    assert describe(present) == "present 21"
    assert describe(EMPTY) == "empty"


@pytest.mark.parametrize("value", [0, 0.0, "", False, [], {}, ()])
def test_from_nullable_keeps_falsy_values(value):
    option = from_nullable(value)
    assert option.is_defined
    assert option.get_or_else(object()) is value


def test_from_nullable_none_is_empty():
    assert from_nullable(None) is EMPTY


def test_chained_lookup():
    users = {"ada": {"address": {"city": "London"}}, "bob": {}}

    def city(name):
        return (
            from_nullable(users.get(name))
            .flat_map(lambda u: from_nullable(u.get("address")))
            .flat_map(lambda a: from_nullable(a.get("city")))
        )

    assert city("ada") == Present("London")
    assert city("bob") == EMPTY
    assert city("eve") == EMPTY
