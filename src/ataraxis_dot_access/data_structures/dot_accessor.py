"""Provides the DotAccessor class, which wraps a nested dictionary and exposes its values through 'dot notation' paths
using the standard Python indexing syntax.
"""

import copy
from enum import StrEnum
from typing import Any
from dataclasses import dataclass
from collections.abc import MutableMapping

from ataraxis_base_utilities import LogLevel, console

from .yaml_config import YamlConfig
from ..dot_methods import dot_get, dot_has, dot_set, dot_remove, is_accessible


class BindingMode(StrEnum):
    """Defines the modes used by DotAccessor instances to bind the wrapped data."""

    COPY = "copy"
    """The accessor wraps a deep copy of the input data. Modifications do not affect the caller's data."""
    REFERENCE = "reference"
    """The accessor wraps the caller's dictionary object. Modifications are visible to every holder of the
    dictionary."""


@dataclass
class AccessorConfig(YamlConfig):
    """Stores the runtime parameters of a DotAccessor instance.

    Since this class inherits from YamlConfig, the parameters can be saved to and loaded from a .yaml file.
    """

    binding: BindingMode = BindingMode.COPY
    """Determines whether the accessor binds a deep copy of the wrapped data or a reference to the caller's
    dictionary."""
    wildcard: str | None = None
    """The token that matches any key when used as a path segment in membership checks. If None, wildcard matching is
    disabled."""
    default: Any = None
    """The value returned when reading a path that does not exist. The value is returned as-is, without copying, so a
    mutable default (for example, a list) is shared by every such read and by this configuration instance."""


class DotAccessor:
    """Wraps a nested (hierarchical) dictionary and provides access to its values using dot paths.

    The accessor translates the standard Python indexing syntax into calls to the dot path functions: 'path in
    accessor' checks whether the path exists, 'accessor[path]' reads the value, 'accessor[path] = value' writes the
    value and 'del accessor[path]' removes the value. The same operations are also available as the contains(), read(),
    write() and delete() methods.

    Notes:
        Reading a missing path returns the configured default value instead of raising a KeyError.

        Only mutable dictionaries can be bound by reference. If the configuration requests reference binding for any
        other container (for example, a list), the accessor binds a deep copy of that container instead.

    Args:
        data: The nested container to wrap. If not provided, the accessor wraps a new empty dictionary.
        config: The AccessorConfig instance that configures the accessor. If not provided, the accessor uses the
            default configuration, which binds a copy of the data and disables wildcard matching.

    Raises:
        TypeError: If the data or the config arguments are not of the supported type.
    """

    def __init__(self, data: Any = None, config: AccessorConfig | None = None) -> None:
        if config is None:
            config = AccessorConfig()
        elif not isinstance(config, AccessorConfig):
            message = (
                f"An AccessorConfig or None 'config' expected when initializing DotAccessor class instance, but "
                f"encountered '{type(config).__name__}' instead."
            )
            console.error(message=message, error=TypeError)

        self._config: AccessorConfig = config
        self._data: Any = {}
        self._binding: BindingMode = BindingMode.COPY

        if data is None:
            return

        if self._config.binding != BindingMode.REFERENCE:
            self.set_data(data)
            return

        # There is no previously bound data to keep, so containers that cannot be bound by reference are copied
        self._verify_data(data=data, operation_description="binding a reference to the data to the DotAccessor")
        if isinstance(data, MutableMapping):
            self.set_reference(data)
        else:
            console.echo(
                message=f"Unable to bind the '{type(data).__name__}' data to the DotAccessor by reference, as only "
                f"mutable dictionaries can be bound by reference. Binding a copy of the data instead.",
                level=LogLevel.WARNING,
            )
            self.set_data(data)

    def __repr__(self) -> str:
        """Returns a string representation of the class instance."""
        return f"DotAccessor(binding={self._binding}, wildcard={self._config.wildcard!r}, data={self._data})"

    @staticmethod
    def _verify_data(data: Any, operation_description: str) -> None:
        """Ensures that the input data is a container that can be traversed using dot paths."""
        if not is_accessible(data):
            message = (
                f"A dictionary or another keyed container 'data' expected when {operation_description}, but "
                f"encountered '{type(data).__name__}' instead."
            )
            console.error(message=message, error=TypeError)

    def set_data(self, data: Any) -> None:
        """Replaces the wrapped data with a deep copy of the input container.

        Args:
            data: The nested container to wrap.

        Raises:
            TypeError: If the data is not an accessible container.
        """
        self._verify_data(data=data, operation_description="binding a copy of the data to the DotAccessor")
        self._data = copy.deepcopy(data)
        self._binding = BindingMode.COPY

    def set_reference(self, data: Any) -> None:
        """Replaces the wrapped data with the input dictionary object, without copying it.

        All later modifications made through the accessor are applied to the input dictionary. If the input is not a
        mutable dictionary, the accessor logs a warning and keeps the currently bound data and binding mode.

        Args:
            data: The nested dictionary to wrap.

        Raises:
            TypeError: If the data is not an accessible container.
        """
        self._verify_data(data=data, operation_description="binding a reference to the data to the DotAccessor")

        if not isinstance(data, MutableMapping):
            console.echo(
                message=f"Unable to bind the '{type(data).__name__}' data to the DotAccessor by reference, as only "
                f"mutable dictionaries can be bound by reference. Keeping the currently bound data.",
                level=LogLevel.WARNING,
            )
            return

        self._data = data
        self._binding = BindingMode.REFERENCE

    @property
    def data(self) -> Any:
        """Returns the wrapped data object."""
        return self._data

    @property
    def binding(self) -> BindingMode:
        """Returns the mode used to bind the wrapped data."""
        return self._binding

    @property
    def config(self) -> AccessorConfig:
        """Returns the AccessorConfig instance used by the accessor."""
        return self._config

    def contains(self, path: str | list[str] | tuple[str, ...]) -> bool:
        """Returns True if the path (or every path of a collection) exists in the wrapped data."""
        return dot_has(root=self._data, keys=path, wildcard=self._config.wildcard)

    def read(self, path: str | None) -> Any:
        """Returns the value stored under the path or the configured default value if the path does not exist.

        The default value is returned without being copied.
        """
        return dot_get(root=self._data, path=path, default=self._config.default)

    def write(self, path: str | None, value: Any) -> None:
        """Writes the value to the wrapped data under the path, creating any missing sections."""
        root = dot_set(root=self._data, path=path, value=value)

        # The bound reference is lost if the root had to be replaced, for example, when writing a scalar to a None path
        if root is not self._data:
            self._data = root
            self._binding = BindingMode.COPY

    def delete(self, path: str | list[str] | tuple[str, ...]) -> None:
        """Removes the value stored under the path (or every path of a collection) from the wrapped data."""
        dot_remove(root=self._data, keys=path)

    def __contains__(self, path: str) -> bool:
        return self.contains(path)

    def __getitem__(self, path: str) -> Any:
        return self.read(path)

    def __setitem__(self, path: str, value: Any) -> None:
        self.write(path, value)

    def __delitem__(self, path: str) -> None:
        self.delete(path)
