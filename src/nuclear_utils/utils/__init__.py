"""Generic runtime helpers — pure functions over caller-supplied values.

Rules
-----
* No I/O.
* No knowledge of the store, reactor or UI layers that consume them.
* ``predicates`` is the leaf; ``functional`` depends on no other group.
"""

from nuclear_utils.utils.composition import clone, extend, own_keys
from nuclear_utils.utils.functional import Factory, Partial, partial, to_factory
from nuclear_utils.utils.iteration import CollectionKind, collection_kind, each
from nuclear_utils.utils.predicates import (
    MAX_SAFE_INTEGER,
    is_array,
    is_falsy,
    is_function,
    is_length,
    is_object,
    is_string,
)

__all__: list[str] = [
    "MAX_SAFE_INTEGER",
    "CollectionKind",
    "Factory",
    "Partial",
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
