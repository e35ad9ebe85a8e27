"""Generic iterator over indexed and keyed collections.

:func:`each` walks lists, tuples, strings, mappings and plain objects
with one calling convention, ``iteratee(value, index_or_key, collection)``,
and stops as soon as the iteratee returns ``False``.

How a collection is walked is decided once, up front, as a
:class:`CollectionKind`.  Callers who know better can pass ``kind``
explicitly instead of relying on :func:`collection_kind`.
"""

from __future__ import annotations

import enum
import types
from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypeVar

from nuclear_utils.utils.composition import own_keys
from nuclear_utils.utils.predicates import is_length

C = TypeVar("C")

Iteratee = Callable[[Any, Any, Any], Any]


class CollectionKind(enum.Enum):
    """How :func:`each` traverses a collection."""

    INDEXED = "indexed"
    """Positional access by ``0 .. len - 1``."""

    KEYED = "keyed"
    """Access by each own key, in natural order."""

    ABSENT = "absent"
    """Nothing to traverse."""


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

def _sized_length(collection: object) -> object:
    """``len(collection)`` for indexable sized objects, else ``None``."""
    if not (hasattr(collection, "__len__") and hasattr(collection, "__getitem__")):
        return None
    try:
        return len(collection)  # type: ignore[arg-type]
    except TypeError:
        return None


def collection_kind(collection: object) -> CollectionKind:
    """Classify *collection* for :func:`each`.

    Mappings are always keyed, even when they carry a ``"length"`` key.
    Strings and sequences are indexed, as is any other object that has
    both ``__len__`` and ``__getitem__`` and reports a valid length.
    Everything else is walked by its own keys.
    """
    if collection is None:
        return CollectionKind.ABSENT
    if isinstance(collection, Mapping):
        return CollectionKind.KEYED
    if isinstance(collection, Sequence) or is_length(_sized_length(collection)):
        return CollectionKind.INDEXED
    return CollectionKind.KEYED


# ---------------------------------------------------------------------------
# Element access
# ---------------------------------------------------------------------------

def _item_at(collection: Any, index: int) -> Any:
    # The iteratee may have shrunk the collection since the length was read.
    try:
        return collection[index]
    except IndexError:
        return None


def _value_for(collection: Any, key: Any) -> Any:
    # Keys are snapshotted, so one may have been removed mid-walk.
    if isinstance(collection, Mapping):
        return collection.get(key)
    if isinstance(collection, Sequence):
        return _item_at(collection, key)
    return getattr(collection, key, None)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def each(
    collection: C,
    iteratee: Iteratee,
    context: object = None,
    *,
    kind: CollectionKind | None = None,
) -> C:
    """Invoke *iteratee* for every element of *collection*.

    Parameters
    ----------
    collection:
        A sequence, string, mapping, plain object, or ``None``.
    iteratee:
        Called as ``iteratee(value, index_or_key, collection)``.
        Returning exactly ``False`` ends the walk early; any other value
        (``None``, ``0``, ``""`` included) continues it.
    context:
        When not ``None``, *iteratee* is bound to it as a method, so it
        is called as ``iteratee(context, value, index_or_key, collection)``.
    kind:
        Overrides :func:`collection_kind`.

    Returns
    -------
    The *collection* argument itself, whatever the iteratee did.

    Exceptions raised by *iteratee* propagate unchanged.
    """
    if kind is None:
        kind = collection_kind(collection)

    if context is not None:
        iteratee = types.MethodType(iteratee, context)

    if kind is CollectionKind.INDEXED:
        length = len(collection)  # type: ignore[arg-type]
        for index in range(length):
            if iteratee(_item_at(collection, index), index, collection) is False:
                break
    elif kind is CollectionKind.KEYED:
        for key in own_keys(collection):
            if iteratee(_value_for(collection, key), key, collection) is False:
                break

    return collection
