"""Contains tests for the functions provided by the flatten_methods.py module of the dot_methods package."""

from typing import Any
from collections import OrderedDict

import pytest
from ataraxis_base_utilities import error_format

from ataraxis_dot_access.dot_methods import dot_get, flatten_dictionary, unflatten_dictionary


@pytest.mark.parametrize(
    "root, expected",
    [
        ({}, {}),
        ({"a": 1, "b": 2}, {"a": 1, "b": 2}),
        ({"a": {"b": {"c": 1}}, "d": 2}, {"a.b.c": 1, "d": 2}),
        ({"a": {}}, {"a": {}}),
        ({"a": {"b": {}, "c": None}}, {"a.b": {}, "a.c": None}),
        ({"a": [{"b": 1}, 2], "c": (1, 2)}, {"a.0.b": 1, "a.1": 2, "c.0": 1, "c.1": 2}),
        ({"a": [], "b": (), "c": "text"}, {"a": [], "b": (), "c": "text"}),
        ({1: {2: "x"}}, {"1.2": "x"}),
        (OrderedDict(a=OrderedDict(b=1)), {"a.b": 1}),
    ],
)
def test_flatten_dictionary(root: dict, expected: dict[str, Any]) -> None:
    """Verifies the functionality of the flatten_dictionary() function.

    Evaluates the following scenarios:
        0 - Flattening an empty dictionary.
        1 - Flattening a shallow dictionary, which does not change its contents.
        2 - Flattening a deeply nested dictionary.
        3-4 - Keeping empty sections as terminal values instead of omitting them.
        5 - Crawling lists and tuples using element indices as keys.
        6 - Keeping empty lists, empty tuples and strings as terminal values.
        7 - Converting integer keys to strings.
        8 - Flattening other mapping types.
    """
    assert flatten_dictionary(root) == expected


def test_flatten_dictionary_order_and_prefix() -> None:
    """Verifies that flatten_dictionary() preserves the depth-first traversal order and applies the prefix."""
    root = {"z": 1, "a": {"y": 2, "b": {"x": 3}}, "c": 4}
    assert list(flatten_dictionary(root)) == ["z", "a.y", "a.b.x", "c"]
    expected = {"config.z": 1, "config.a.y": 2, "config.a.b.x": 3, "config.c": 4}
    assert flatten_dictionary(root, prefix="config.") == expected


def test_flatten_dictionary_errors() -> None:
    """Verifies the error-handling behavior of the flatten_dictionary() function."""
    message = (
        f"A dictionary 'root' expected when flattening a nested dictionary, but encountered "
        f"'{type([1]).__name__}' instead."
    )
    with pytest.raises(TypeError, match=error_format(message)):
        # noinspection PyTypeChecker
        flatten_dictionary([1])

    message = (
        f"A string 'prefix' expected when flattening a nested dictionary, but encountered '{type(1).__name__}' instead."
    )
    with pytest.raises(TypeError, match=error_format(message)):
        # noinspection PyTypeChecker
        flatten_dictionary({"a": 1}, prefix=1)


@pytest.mark.parametrize(
    "flat, expected",
    [
        ({}, {}),
        ({"a": 1}, {"a": 1}),
        ({"a.b.c": 1, "a.b.d": 2, "e": 3}, {"a": {"b": {"c": 1, "d": 2}}, "e": 3}),
        ({"a": {}}, {"a": {}}),
        ({"a": 1, "a.b": 2}, {"a": {"b": 2}}),
        ({"a.b": 2, "a": 1}, {"a": 1}),
        ({1: "x", "2.3": "y"}, {"1": "x", "2": {"3": "y"}}),
    ],
)
def test_unflatten_dictionary(flat: dict, expected: dict[str, Any]) -> None:
    """Verifies the functionality of the unflatten_dictionary() function.

    Evaluates the following scenarios:
        0-1 - Unflattening empty and shallow dictionaries.
        2 - Unflattening multiple paths that share sections.
        3 - Keeping empty sections.
        4-5 - Resolving overlapping paths, where the key processed later wins.
        6 - Converting non-string keys to strings.
    """
    assert unflatten_dictionary(flat) == expected


def test_unflatten_dictionary_error() -> None:
    """Verifies that unflatten_dictionary() rejects non-mapping inputs."""
    message = (
        f"A dictionary 'flat' expected when unflattening a dot path dictionary, but encountered "
        f"'{type('a.b').__name__}' instead."
    )
    with pytest.raises(TypeError, match=error_format(message)):
        # noinspection PyTypeChecker
        unflatten_dictionary("a.b")


@pytest.mark.parametrize(
    "root",
    [
        {"a": 1},
        {"a": {"b": 1, "c": {"d": "text", "e": None}}, "f": 2.5},
        {"experiment": {"animal": {"id": "A1", "weight": 21.5}, "rig": {"name": "rig_1"}}, "valid": True},
    ],
)
def test_flatten_unflatten_round_trip(root: dict[str, Any]) -> None:
    """Verifies that unflattening a flattened dictionary restores the original dictionary and that every flattened
    path can be used to read the original value.
    """
    flat = flatten_dictionary(root)
    assert unflatten_dictionary(flat) == root
    for path, value in flat.items():
        assert dot_get(root, path) == value


def test_flatten_unflatten_lists() -> None:
    """Verifies that flattened list elements can be read using their dot paths and that unflattening them produces
    dictionaries keyed by element indices.
    """
    root = {"sessions": [{"id": 1, "trials": [5, 7]}, {"id": 2}]}
    flat = flatten_dictionary(root)
    assert flat == {"sessions.0.id": 1, "sessions.0.trials.0": 5, "sessions.0.trials.1": 7, "sessions.1.id": 2}
    for path, value in flat.items():
        assert dot_get(root, path) == value

    expected = {"sessions": {"0": {"id": 1, "trials": {"0": 5, "1": 7}}, "1": {"id": 2}}}
    assert unflatten_dictionary(flat) == expected
