"""Provides the standalone functions used to read, write, check and remove the values stored inside nested
(hierarchical) dictionaries using 'dot notation' paths, such as 'section.subsection.value'.

Notes:
    Each path is split into segments using the '.' delimiter, and each segment addresses one nesting level. Before
    splitting the path, all functions check whether the whole path is a literal key of the top-level container. This
    means that a literal key 'a.b' shadows the value stored under the nested 'a' -> 'b' keys.

    Elements of lists and tuples are addressed by the decimal string of their index, for example, 'items.0.name'.
    Integer dictionary keys are addressed the same way.

    None of these functions raise errors for missing keys or paths that cannot be resolved. Missing values are
    communicated via default values or False, and the functions that modify dictionaries silently skip or overwrite
    unresolvable nodes. Errors are only raised for arguments of an unsupported type.
"""

from typing import Any, Protocol, runtime_checkable
from collections.abc import Mapping, Iterable, Sequence, MutableMapping, MutableSequence, Sized

import numpy as np
from ataraxis_base_utilities import console

_DELIMITER = "."
"""The delimiter used to separate the segments (keys) of dot paths."""

_MISSING = object()
"""The sentinel returned by internal lookups when the requested key does not exist."""


@runtime_checkable
class KeyedContainer(Protocol):
    """Defines the minimal keyed-lookup interface a custom container has to implement to be traversed by dot paths.

    Notes:
        Dictionaries, lists and tuples do not need to implement this protocol, as they are recognized through the
        Mapping and Sequence abstract base classes. The protocol exists to support custom containers that do not
        inherit from these classes. To be modified by write and remove operations, the container also has to implement
        __setitem__ and __delitem__.
    """

    def __getitem__(self, key: Any) -> Any: ...

    def __contains__(self, key: object) -> bool: ...


def is_accessible(value: Any) -> bool:
    """Determines whether the input value is a container that supports keyed lookup.

    Mappings, non-string sequences and any objects that implement the KeyedContainer protocol are accessible. Strings,
    bytes, NumPy arrays, scalars and None are not.

    Args:
        value: The value to evaluate.

    Returns:
        True if the value can be traversed using dot paths, False otherwise.
    """
    if isinstance(value, (str, bytes, bytearray, np.ndarray, type)):
        return False
    return isinstance(value, (Mapping, Sequence, KeyedContainer))


def _resolve_key(container: Any, key: str) -> Any:
    """Resolves the string key to the actual key used by the input accessible container.

    Sequences resolve canonical decimal strings to integer indices. Other containers use the string key as-is and fall
    back to the integer key if the string key is missing and represents a canonical decimal integer.

    Returns:
        The key (or index) to use with the container, or the _MISSING sentinel if the key does not exist.
    """
    is_integer = key.isdecimal() and str(int(key)) == key

    if isinstance(container, Sequence):
        if is_integer and int(key) < len(container):
            return int(key)
        return _MISSING

    try:
        if key in container:
            return key
        if is_integer and int(key) in container:
            return int(key)
    except TypeError:
        # Some custom containers reject membership checks for keys of unexpected types.
        return _MISSING
    return _MISSING


def key_exists(container: Any, key: str) -> bool:
    """Determines whether the key exists at the top level of the input container.

    Unlike the 'in' operator, this function checks list and tuple indices rather than their values, so
    key_exists([10, 20], "1") is True.

    Args:
        container: The container to check.
        key: The literal key to look for. The key is not split into dot path segments.

    Returns:
        True if the container is accessible and contains the key, False otherwise.
    """
    if not isinstance(key, str):
        message = (
            f"A string 'key' expected when checking whether the key exists in the container, but encountered "
            f"'{type(key).__name__}' instead."
        )
        console.error(message=message, error=TypeError)
    return is_accessible(container) and _resolve_key(container, key) is not _MISSING


def _lookup(container: Any, segment: str) -> Any:
    """Returns the value stored under the segment key of the container or _MISSING if it cannot be retrieved."""
    if not is_accessible(container):
        return _MISSING
    key = _resolve_key(container, segment)
    if key is _MISSING:
        return _MISSING
    return container[key]


def _is_empty(value: Any) -> bool:
    """Returns True if the value is a sized container without any elements."""
    return isinstance(value, Sized) and len(value) == 0


def _is_blank(value: Any) -> bool:
    """Returns True if the value is None, False, a numeric zero or an empty sized value."""
    if value is None or _is_empty(value):
        return True
    return isinstance(value, (int, float)) and value == 0


def _iterate_values(container: Any) -> Iterable[Any]:
    """Returns an iterable over the values stored in the accessible container."""
    if isinstance(container, Mapping):
        return container.values()
    if isinstance(container, Sequence):
        return container
    if callable(getattr(container, "values", None)):
        return container.values()
    if isinstance(container, Iterable):
        return (container[key] for key in container)
    return ()


def _can_assign(container: Any, segment: str) -> bool:
    """Determines whether the container can store a value under the segment key without being replaced.

    Mutable mappings (and custom containers that implement __setitem__) accept any key. Mutable sequences only accept
    existing indices, as they cannot grow by assignment.
    """
    if isinstance(container, MutableSequence):
        return _resolve_key(container, segment) is not _MISSING
    if isinstance(container, MutableMapping):
        return True
    return is_accessible(container) and not isinstance(container, Sequence) and hasattr(container, "__setitem__")


def _assign(container: Any, segment: str, value: Any) -> None:
    """Stores the value under the segment key of the container, reusing the container's own key if it exists."""
    key = _resolve_key(container, segment)
    container[segment if key is _MISSING else key] = value


def _delete(container: Any, segment: str) -> None:
    """Deletes the value stored under the segment key of the container if the key exists and the container supports
    deletion.
    """
    if not hasattr(container, "__delitem__"):
        return
    key = _resolve_key(container, segment)
    if key is not _MISSING:
        del container[key]


def _validate_path(path: Any, operation_description: str) -> None:
    """Ensures that the input path is a string or None."""
    if path is not None and not isinstance(path, str):
        message = (
            f"A string or None 'path' expected when {operation_description}, but encountered "
            f"'{type(path).__name__}' instead."
        )
        console.error(message=message, error=TypeError)


def ensure_key_list(keys: Any, operation_description: str = "resolving dot path keys") -> list[str]:
    """Converts the input key or collection of keys to a list of string keys.

    This function is used by all functions that accept either a single key or multiple keys. None is converted to an
    empty list.

    Args:
        keys: A single string key, a list or tuple of string keys, a one-dimensional NumPy array of string keys,
            or None.
        operation_description: The brief description of the operation that called this function. Only used in error
            messages.

    Returns:
        The list of string keys.

    Raises:
        TypeError: If the input is not one of the supported types or contains non-string keys.
        ValueError: If the input is a NumPy array with more than one dimension.
    """
    if keys is None:
        return []
    if isinstance(keys, str):
        return [keys]

    if isinstance(keys, np.ndarray):
        if keys.ndim > 1:
            message = (
                f"A one-dimensional NumPy array of keys expected when {operation_description}, but encountered an "
                f"array with {keys.ndim} dimensions."
            )
            console.error(message=message, error=ValueError)
        keys = keys.ravel().tolist()

    if isinstance(keys, (list, tuple)):
        for key in keys:
            if not isinstance(key, str):
                message = (
                    f"All keys are expected to be strings when {operation_description}, but encountered the key "
                    f"'{key}' of type '{type(key).__name__}'."
                )
                console.error(message=message, error=TypeError)
        return list(keys)

    message = (
        f"A string, list, tuple, NumPy array or None 'keys' expected when {operation_description}, but encountered "
        f"'{type(keys).__name__}' instead."
    )
    console.error(message=message, error=TypeError)
    raise TypeError(message)  # Fallback, should not be reachable


def dot_get(root: Any, path: str | None, default: Any = None) -> Any:
    """Retrieves the value stored under the dot path inside the nested container.

    Args:
        root: The nested container to read the value from.
        path: The dot path to the value, for example, 'section.subsection.value'. If None, the function returns the
            root container itself.
        default: The value to return if the root is not accessible or the path does not exist.

    Returns:
        The value stored under the path or the default value.

    Raises:
        TypeError: If the path is not a string or None.
    """
    _validate_path(path=path, operation_description="reading a value using a dot path")

    if not is_accessible(root):
        return default

    if path is None:
        return root

    # Literal keys take priority over the nested path interpretation
    key = _resolve_key(root, path)
    if key is not _MISSING:
        return root[key]

    current = root
    for segment in path.split(_DELIMITER):
        current = _lookup(current, segment)
        if current is _MISSING:
            return default

    return current


def dot_has(
    root: Any, keys: str | list[str] | tuple[str, ...] | np.ndarray | None, wildcard: str | None = None
) -> bool:
    """Determines whether all input dot paths exist inside the nested container.

    Notes:
        When a wildcard token is provided, any path segment equal to the token matches every key at that nesting level.
        If the wildcard is the last segment of the path, the path is satisfied by any value that is not None, False,
        a numeric zero or an empty container or string. Otherwise, the remaining path segments are checked against each
        value stored at that level, and the path is satisfied if at least one value contains the remaining path.
        Existing keys equal to the wildcard token take priority over wildcard matching.

        The wildcard token is compared to the segments literally. Choose a token that does not collide with the keys
        used by the container.

    Args:
        root: The nested container to check.
        keys: A single dot path or a collection of dot paths to check.
        wildcard: The optional token that matches any key when used as a path segment, for example, '*'.

    Returns:
        True if every path exists, False otherwise. Also returns False if no paths are provided or the root container
        is empty or not accessible.

    Raises:
        TypeError: If the keys or the wildcard are not of a supported type.
    """
    key_list = ensure_key_list(keys=keys, operation_description="checking whether dot paths exist")

    if wildcard is not None and not isinstance(wildcard, str):
        message = (
            f"A string or None 'wildcard' expected when checking whether dot paths exist, but encountered "
            f"'{type(wildcard).__name__}' instead."
        )
        console.error(message=message, error=TypeError)

    if not key_list or not is_accessible(root) or _is_empty(root):
        return False

    for key in key_list:
        if _resolve_key(root, key) is not _MISSING:
            continue

        segments = key.split(_DELIMITER)
        current = root
        for index, segment in enumerate(segments):
            value = _lookup(current, segment)
            if value is not _MISSING:
                current = value
                continue

            if segment == wildcard and not _is_blank(current):
                # Trailing wildcards are satisfied by any non-blank value, including terminal values
                if index + 1 == len(segments):
                    break

                suffix = _DELIMITER.join(segments[index + 1 :])
                if is_accessible(current) and any(
                    dot_has(child, suffix, wildcard) for child in _iterate_values(current)
                ):
                    break

            # A single unresolved path fails the whole check
            return False

    return True


def dot_set(root: Any, path: str | None, value: Any) -> Any:
    """Writes the value to the nested container under the dot path.

    The root container is modified in place. Missing intermediate sections are created as empty dictionaries. If an
    intermediate key points to a value that cannot store the next key (a scalar, a tuple or a list that does not have
    the requested index), that value is silently replaced with an empty dictionary.

    Notes:
        If the root itself cannot store the first key (for example, it is None or a scalar), the function creates a new
        dictionary root. Always use the returned root to account for this case.

    Args:
        root: The nested container to modify.
        path: The dot path to write the value to. If None, the entire root is replaced with the value. If both the root
            and the value are dictionaries, the root is cleared and updated with the value in place.
        value: The value to write.

    Returns:
        The modified root container. This is the same object as the input root unless a new root had to be created.

    Raises:
        TypeError: If the path is not a string or None.
    """
    _validate_path(path=path, operation_description="writing a value using a dot path")

    if path is None:
        if value is root:
            return root
        if isinstance(root, MutableMapping) and isinstance(value, Mapping):
            root.clear()
            root.update(value)
            return root
        return value

    segments = path.split(_DELIMITER)
    if not _can_assign(root, segments[0]):
        root = {}

    current = root
    for index, segment in enumerate(segments[:-1]):
        key = _resolve_key(current, segment)
        child = _MISSING if key is _MISSING else current[key]

        # Replaces missing and unusable intermediate nodes with new sections
        if child is _MISSING or not _can_assign(child, segments[index + 1]):
            child = {}
            current[segment if key is _MISSING else key] = child

        current = child

    _assign(current, segments[-1], value)
    return root


def dot_remove(root: Any, keys: str | list[str] | tuple[str, ...] | np.ndarray | None) -> None:
    """Removes the values stored under one or more dot paths from the nested container.

    The container is modified in place. Paths that do not exist are skipped without errors. Each path is resolved
    against the original root, so the order of paths only matters when they point to elements of the same list, as
    deleting a list element shifts the indices of the elements that follow it.

    Args:
        root: The nested container to modify.
        keys: A single dot path or a collection of dot paths to remove.

    Raises:
        TypeError: If the keys are not of a supported type.
    """
    key_list = ensure_key_list(keys=keys, operation_description="removing values using dot paths")

    if not is_accessible(root) or not key_list:
        return

    for key in key_list:
        if _resolve_key(root, key) is not _MISSING:
            _delete(root, key)
            continue

        segments = key.split(_DELIMITER)
        current = root
        for segment in segments[:-1]:
            child = _lookup(current, segment)
            if child is _MISSING or not is_accessible(child):
                break
            current = child
        else:
            _delete(current, segments[-1])


def dot_pull(root: Any, path: str | None, default: Any = None) -> Any:
    """Retrieves the value stored under the dot path and removes it from the nested container.

    Args:
        root: The nested container to modify.
        path: The dot path to the value.
        default: The value to return if the path does not exist.

    Returns:
        The removed value or the default value.
    """
    value = dot_get(root=root, path=path, default=default)
    dot_remove(root=root, keys=path)
    return value


def dot_only(root: Mapping, keys: str | list[str] | tuple[str, ...] | np.ndarray | None) -> dict[str, Any]:
    """Creates a new nested dictionary that only contains the values stored under the requested dot paths.

    The root is flattened into a single-level dictionary, filtered to the requested paths and unflattened. Since
    flattened dictionaries only contain terminal values, a path that points to a non-empty section does not match
    anything.

    Args:
        root: The nested dictionary to extract the values from. The dictionary is not modified.
        keys: A single dot path or a collection of dot paths to keep.

    Returns:
        The new nested dictionary. Paths that do not exist are absent from the output.
    """
    from .flatten_methods import flatten_dictionary, unflatten_dictionary

    requested = set(ensure_key_list(keys=keys, operation_description="selecting values using dot paths"))
    flat = flatten_dictionary(root)
    return unflatten_dictionary({key: value for key, value in flat.items() if key in requested})
