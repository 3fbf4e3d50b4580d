"""Provides the functions used to convert nested dictionaries into single-level dictionaries with dot path keys and
back.
"""

from typing import Any
from collections.abc import Mapping, Sequence

from ataraxis_base_utilities import console

from .path_methods import dot_set


def flatten_dictionary(root: Mapping, prefix: str = "") -> dict[str, Any]:
    """Crawls the nested dictionary and converts it into a single-level dictionary that maps the dot path of each
    terminal value to that value.

    Notes:
        Lists and tuples are crawled the same way as dictionaries, using the decimal string of each element's index as
        its key. Empty sections (empty dictionaries, lists and tuples) are treated as terminal values: they are
        included in the output as-is, rather than being omitted. Since unflatten_dictionary() always creates
        dictionaries, flattening and unflattening a dictionary that contains non-empty lists converts these lists into
        dictionaries keyed by index strings.

        The output preserves the depth-first traversal order of the input dictionary. Non-string keys are converted to
        strings.

        This function uses recursive self-calls to crawl the dictionary, which limits the supported nesting depth to
        the Python recursion limit.

    Args:
        root: The nested dictionary to flatten.
        prefix: The string prepended to every output key. When calling this function directly, this is typically left
            empty.

    Returns:
        The single-level dictionary that maps dot paths to terminal values.

    Raises:
        TypeError: If the root is not a mapping or the prefix is not a string.
    """
    if not isinstance(root, Mapping):
        message = (
            f"A dictionary 'root' expected when flattening a nested dictionary, but encountered "
            f"'{type(root).__name__}' instead."
        )
        console.error(message=message, error=TypeError)
    if not isinstance(prefix, str):
        message = (
            f"A string 'prefix' expected when flattening a nested dictionary, but encountered "
            f"'{type(prefix).__name__}' instead."
        )
        console.error(message=message, error=TypeError)

    def _inner_flatten(section: Mapping | Sequence, current_prefix: str, results: dict[str, Any]) -> None:
        """Performs the recursive flattening procedure, writing discovered values into the shared results dictionary."""
        items = section.items() if isinstance(section, Mapping) else enumerate(section)
        for key, value in items:
            if isinstance(value, (Mapping, Sequence)) and not isinstance(value, (str, bytes, bytearray)) and value:
                _inner_flatten(value, f"{current_prefix}{key}.", results)
            else:
                results[f"{current_prefix}{key}"] = value

    flat: dict[str, Any] = {}
    _inner_flatten(root, prefix, flat)
    return flat


def unflatten_dictionary(flat: Mapping) -> dict[str, Any]:
    """Converts the single-level dictionary with dot path keys into a nested dictionary.

    Each key-value pair is written to the output dictionary using dot_set(). No conflict detection is performed: if two
    keys overlap (for example, 'a' and 'a.b'), the key processed later wins and may replace the value or the section
    written by the earlier key.

    Args:
        flat: The single-level dictionary to unflatten. Non-string keys are converted to strings.

    Returns:
        The new nested dictionary.

    Raises:
        TypeError: If the input is not a mapping.
    """
    if not isinstance(flat, Mapping):
        message = (
            f"A dictionary 'flat' expected when unflattening a dot path dictionary, but encountered "
            f"'{type(flat).__name__}' instead."
        )
        console.error(message=message, error=TypeError)

    results: dict[str, Any] = {}
    for key, value in flat.items():
        # The results dictionary is always accessible, so dot_set never replaces the root here
        dot_set(results, str(key), value)
    return results
