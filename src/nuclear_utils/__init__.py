"""nuclear-utils — generic runtime helpers for the reactive-state stack.

This module is the aggregate entry point: it re-exports every helper
under its own name, unchanged.
"""

import logging

from nuclear_utils.exceptions import NotConstructibleError, NuclearUtilsError
from nuclear_utils.utils import (
    MAX_SAFE_INTEGER,
    CollectionKind,
    Factory,
    Partial,
    clone,
    collection_kind,
    each,
    extend,
    is_array,
    is_falsy,
    is_function,
    is_length,
    is_object,
    is_string,
    own_keys,
    partial,
    to_factory,
)
from nuclear_utils.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "MAX_SAFE_INTEGER",
    "CollectionKind",
    "Factory",
    "NotConstructibleError",
    "NuclearUtilsError",
    "Partial",
    "__version__",
    "clone",
    "collection_kind",
    "each",
    "extend",
    "is_array",
    "is_falsy",
    "is_function",
    "is_length",
    "is_object",
    "is_string",
    "own_keys",
    "partial",
    "to_factory",
]
