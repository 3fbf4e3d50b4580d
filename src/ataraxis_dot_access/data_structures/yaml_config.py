"""Provides the YamlConfig class, which extends the standard Python 'dataclass' class with methods to cache and retrieve
its data from a .yml (YAML) file.
"""

from enum import Enum
from typing import Any, Self
from pathlib import Path
from dataclasses import fields, dataclass, is_dataclass

import yaml
from dacite import Config, from_dict
from ataraxis_base_utilities import console, ensure_directory_exists


def _serialize_value(value: Any) -> Any:
    """Recursively converts a dataclass instance or any nested value into a YAML-safe dictionary tree.

    Args:
        value: The value to serialize. Dataclass instances, Path objects, Enum members, dicts, lists and tuples are
            recursively converted. YAML-native scalars pass through unchanged.

    Returns:
        A YAML-safe representation of the input value.
    """
    # Enum is checked first, since StrEnum and IntEnum members are also str and int instances
    if isinstance(value, Enum):
        return value.value

    if isinstance(value, Path):
        return str(value)

    if is_dataclass(value) and not isinstance(value, type):
        return {data_field.name: _serialize_value(getattr(value, data_field.name)) for data_field in fields(value)}

    if isinstance(value, dict):
        return {_serialize_value(key): _serialize_value(item) for key, item in value.items()}

    if isinstance(value, (list, tuple)):
        return [_serialize_value(item) for item in value]

    return value


def _verify_yaml_path(file_path: Any, operation_description: str) -> None:
    """Ensures that the input file path is a Path object that points to a .yaml or .yml file."""
    if not isinstance(file_path, Path) or file_path.suffix not in {".yaml", ".yml"}:
        message: str = (
            f"Invalid file path provided when {operation_description}. Expected a path ending in the '.yaml' or '.yml' "
            f"extension as 'file_path' argument, but encountered {file_path}."
        )
        console.error(message=message, error=ValueError)


@dataclass
class YamlConfig:
    """Extends the standard Python dataclass with methods to save and load its data from a .yaml (YAML) file.

    Notes:
        This class is designed to be subclassed by custom dataclasses so that they inherit the YAML saving and loading
        functionality. Enum members are saved as their raw values and restored from the values when loading the
        data. Tuples are saved as lists and cast back to tuples when loading the data.
    """

    def to_yaml(self, file_path: Path) -> None:
        """Saves the instance's data as the specified .yaml (YAML) file.

        Args:
            file_path: The path to the .yaml file to write. Missing parent directories are created automatically.

        Raises:
            ValueError: If the file_path does not point to a file with a '.yaml' or '.yml' extension.
        """
        _verify_yaml_path(file_path, "attempting to write the dataclass instance to a .yaml file")

        ensure_directory_exists(file_path)

        # Block style and preserved key order keep the written file readable and editable by hand
        with file_path.open("w") as yaml_file:
            yaml.safe_dump(
                data=_serialize_value(self),
                stream=yaml_file,
                default_flow_style=False,
                sort_keys=False,
                explicit_start=True,
                explicit_end=True,
            )

    @classmethod
    def from_yaml(cls, file_path: Path) -> Self:
        """Instantiates the class using the data loaded from the provided .yaml (YAML) file.

        Args:
            file_path: The path to the .yaml file that stores the instance's data.

        Returns:
            A new class instance that stores the data read from the .yaml file.

        Raises:
            ValueError: If the provided file path does not point to a .yaml or .yml file.
        """
        _verify_yaml_path(file_path, "attempting to create the dataclass instance using the data from a .yaml file")

        with file_path.open() as yml_file:
            data = yaml.safe_load(yml_file)

        # Empty files load as None and are treated as files that do not override any defaults
        data_dictionary: dict[str, Any] = dict(data) if data is not None else {}

        class_config = Config(cast=[tuple, Enum], check_types=False)
        # noinspection PyTypeChecker
        return from_dict(data_class=cls, data=data_dictionary, config=class_config)
