"""This package provides the data structures used to work with nested dictionaries through 'dot notation' paths.

Currently, it exposes the following classes:
    - DotAccessor: A class that wraps a nested Python dictionary and exposes its values through dot paths using the
        standard Python indexing syntax.
    - AccessorConfig: A dataclass that stores the DotAccessor runtime parameters.
    - BindingMode: An enumeration of the modes used by DotAccessor to bind the wrapped data.
    - YamlConfig: A dataclass equipped with methods to save and load itself from a .yaml file.

See individual package modules for more details on each of the exposed classes.
"""

from .yaml_config import YamlConfig
from .dot_accessor import BindingMode, DotAccessor, AccessorConfig

__all__ = ["AccessorConfig", "BindingMode", "DotAccessor", "YamlConfig"]
