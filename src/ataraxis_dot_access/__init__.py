"""A Python library that provides 'dot notation' access to nested dictionaries."""

from .dot_methods import (
    dot_get,
    dot_has,
    dot_set,
    dot_only,
    dot_pull,
    dot_remove,
    flatten_dictionary,
    unflatten_dictionary,
)
from .data_structures import YamlConfig, BindingMode, DotAccessor, AccessorConfig

__all__ = [
    "AccessorConfig",
    "BindingMode",
    "DotAccessor",
    "YamlConfig",
    "dot_get",
    "dot_has",
    "dot_only",
    "dot_pull",
    "dot_remove",
    "dot_set",
    "flatten_dictionary",
    "unflatten_dictionary",
]
