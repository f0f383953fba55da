"""Sequence and mapping formatters, default and pretty."""

from __future__ import annotations

import pytest

from debugfmt.lib.errors import MissingCapabilityError, MissingElementCapabilityError
from debugfmt.lib.handle import dbg
from debugfmt.lib.tags import Pretty


@pytest.mark.parametrize("value", [[], (), {}])
def test_empty_containers_render_empty_braces(value: object) -> None:
    assert str(dbg(value)) == "{}"


def test_empty_mapping_pretty_renders_empty_braces() -> None:
    assert str(dbg({}, Pretty)) == "{}"


def test_sequence_has_no_trailing_delimiter() -> None:
    rendered = str(dbg([1, 2, 3]))
    assert rendered == "{1, 2, 3}"
    assert rendered.count(", ") == 2


def test_single_element_sequence() -> None:
    assert str(dbg([42])) == "{42}"


def test_nested_sequences_use_the_same_rules() -> None:
    assert str(dbg([[1, 2], [3]])) == "{{1, 2}, {3}}"


def test_nested_empty_sequences() -> None:
    assert str(dbg([[], [1]])) == "{{}, {1}}"


def test_tuple_renders_like_a_sequence() -> None:
    assert str(dbg((1, "a", [2]))) == '{1, "a", {2}}'


def test_mixed_element_types() -> None:
    assert str(dbg([1, "a"])) == '{1, "a"}'


def test_mapping_default_mode() -> None:
    assert str(dbg({1: "a"})) == '{1: "a"}'


def test_mapping_pretty_mode() -> None:
    assert str(dbg({1: "a"}, Pretty)) == '{\n   1: "a"\n}'
    assert str(dbg({1: "a"}, Pretty)).splitlines() == ["{", '   1: "a"', "}"]


def test_mapping_follows_insertion_order() -> None:
    assert str(dbg({"b": 2, "a": 1})) == '{"b": 2, "a": 1}'


def test_mapping_pretty_multiple_entries() -> None:
    assert str(dbg({"x": 1, "y": 2}, Pretty)) == '{\n   "x": 1,\n   "y": 2\n}'


def test_mapping_values_recurse_into_containers() -> None:
    assert str(dbg({"k": [1, 2], "m": {3: "c"}})) == '{"k": {1, 2}, "m": {3: "c"}}'


def test_pretty_only_applies_to_the_outer_mapping() -> None:
    rendered = str(dbg({"k": {"x": 1}}, Pretty))
    assert rendered == '{\n   "k": {"x": 1}\n}'


def test_sequence_has_no_pretty_variant() -> None:
    with pytest.raises(MissingCapabilityError) as excinfo:
        dbg([1], Pretty)
    assert excinfo.value.tags == frozenset({Pretty})
    assert "pretty" in str(excinfo.value)


def test_unsupported_element_names_the_element() -> None:
    with pytest.raises(MissingElementCapabilityError) as excinfo:
        dbg([1.5])
    assert excinfo.value.element is float
    assert "float" in str(excinfo.value)


def test_unsupported_mapping_value_names_the_value_type() -> None:
    with pytest.raises(MissingElementCapabilityError) as excinfo:
        dbg({"a": None})
    assert excinfo.value.element is type(None)


def test_unsupported_deeply_nested_element() -> None:
    with pytest.raises(MissingElementCapabilityError) as excinfo:
        dbg([[1], [True]])
    assert excinfo.value.element is bool


def test_unregistered_container_is_rejected() -> None:
    with pytest.raises(MissingCapabilityError):
        dbg({1, 2})
