from unittest.mock import Mock

import pytest

from functors import Maybe, maybe


def test_factories_create_maybe():
    assert isinstance(maybe("val"), Maybe)
    assert isinstance(Maybe.create("val"), Maybe)


# Тесты для map


def test_map_calls_mapper_with_present_value():
    value = ["value"]
    fn = Mock(return_value=1)
    result = maybe(value).map(fn)
    fn.assert_called_once_with(value)
    assert result.unwrap() == 1


def test_map_skips_mapper_when_empty():
    fn = Mock()
    result = maybe(None).map(fn)
    fn.assert_not_called()
    assert result.is_empty()


@pytest.mark.parametrize("value", [0, "", False, [], {}])
def test_falsy_values_are_present(value):
    fn = Mock(return_value="called")
    assert maybe(value).is_present()
    assert maybe(value).map(fn).unwrap() == "called"
    fn.assert_called_once_with(value)


def test_map_to_none_becomes_empty():
    assert maybe({"a": 1}).map(lambda d: d.get("b")).is_empty()


# Тесты для map_empty


def test_map_empty_calls_fn_when_empty():
    fn = Mock(return_value=3000)
    result = maybe(None).map_empty(fn)
    fn.assert_called_once_with()
    assert result.unwrap() == 3000


def test_map_empty_skips_fn_when_present():
    fn = Mock()
    result = maybe(["value"]).map_empty(fn)
    fn.assert_not_called()
    assert result.unwrap() == ["value"]


def test_port_from_environment_example():
    def port(raw):
        return (
            maybe(raw)
            .map(int)
            .map_empty(lambda: 3000)
            .unwrap()
        )

    assert port("8080") == 8080
    assert port(None) == 3000


# Тесты для unwrap


def test_unwrap_returns_wrapped_value():
    value = {"foo": "bar"}
    assert maybe(value).unwrap() is value
    assert maybe(None).unwrap() is None


# Тесты для flat / flat_map


def test_flat_collapses_one_level():
    assert maybe(maybe("nested value")).flat().unwrap() == "nested value"


def test_flat_is_identity_on_non_nested():
    plain = maybe("non-nested value")
    assert plain.flat() is plain
    assert plain.flat().unwrap() == "non-nested value"


def test_flat_collapses_only_one_level():
    deep = maybe(maybe(maybe("deep")))
    once = deep.flat()
    assert isinstance(once.unwrap(), Maybe)
    assert once.flat().unwrap() == "deep"


def test_flat_map_flattens_returned_maybe():
    result = maybe("value").flat_map(lambda v: maybe(v.upper()))
    assert result.unwrap() == "VALUE"


def test_flat_map_applies_to_nested_value():
    result = maybe(maybe("nested value")).flat_map(str.upper)
    assert result.unwrap() == "NESTED VALUE"


def test_flat_map_on_empty_skips_fn():
    fn = Mock()
    assert maybe(None).flat_map(fn).is_empty()
    fn.assert_not_called()


def test_predicates_are_exclusive():
    for m in (maybe(1), maybe(None)):
        assert m.is_present() != m.is_empty()


def test_equality():
    assert maybe(1) == maybe(1)
    assert maybe(None) == maybe(None)
    assert maybe(1) != maybe(None)
