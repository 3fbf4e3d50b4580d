"""This package provides the standalone functions used to access and manipulate nested dictionaries via 'dot notation'
paths. These functions are used by the DotAccessor class and can also be used directly with any dictionary.

See path_methods.py and flatten_methods.py for more details on these functions.
"""

from .path_methods import (
    KeyedContainer,
    dot_get,
    dot_has,
    dot_set,
    dot_only,
    dot_pull,
    key_exists,
    dot_remove,
    is_accessible,
    ensure_key_list,
)
from .flatten_methods import flatten_dictionary, unflatten_dictionary

__all__ = [
    "KeyedContainer",
    "dot_get",
    "dot_has",
    "dot_only",
    "dot_pull",
    "dot_remove",
    "dot_set",
    "ensure_key_list",
    "flatten_dictionary",
    "is_accessible",
    "key_exists",
    "unflatten_dictionary",
]
