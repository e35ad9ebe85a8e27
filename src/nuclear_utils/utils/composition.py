"""Object composition — shallow merge and shallow copy.

Values are addressed uniformly through their *own keys*: mapping keys,
sequence indices, or the instance attributes held in ``__dict__`` and
``__slots__``.  Nothing here recurses; nested values are shared by
reference.
"""

from __future__ import annotations

import copy
from collections.abc import Hashable, Mapping, MutableMapping, MutableSequence, Sequence
from typing import Any, TypeVar

from nuclear_utils.utils.predicates import is_array, is_falsy, is_object

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Own-key access
# ---------------------------------------------------------------------------

def _slot_names(obj: object) -> list[str]:
    """Populated ``__slots__`` entries, base classes first."""
    names: list[str] = []
    for klass in reversed(type(obj).__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__") or name in names:
                continue
            if hasattr(obj, name):
                names.append(name)
    return names


def own_keys(obj: object) -> list[Hashable]:
    """Return the own enumerable keys of *obj* in their natural order.

    * mappings — their keys, in iteration order
    * sequences and strings — ``0 .. len - 1``
    * classes — their plain data attributes (methods, properties and
      other descriptors are behaviour, not keys)
    * other objects — populated slots, then public ``__dict__`` entries

    Dunder attributes are never reported.  Values without any of these
    (``None``, numbers) have no own keys.
    """
    if obj is None:
        return []
    if isinstance(obj, Mapping):
        return list(obj.keys())
    if isinstance(obj, Sequence):
        return list(range(len(obj)))

    keys: list[Hashable] = list(_slot_names(obj))
    attrs = getattr(obj, "__dict__", None)
    if isinstance(attrs, Mapping):
        is_class = isinstance(obj, type)
        keys.extend(
            name
            for name, value in attrs.items()
            if not (name.startswith("__") and name.endswith("__"))
            and name not in keys
            and not (is_class and _is_behaviour(value))
        )
    return keys


def _is_behaviour(value: object) -> bool:
    return callable(value) or hasattr(value, "__get__")


def _read(obj: Any, key: Any) -> Any:
    if isinstance(obj, (Mapping, Sequence)):
        return obj[key]
    return getattr(obj, key)


def _write(target: Any, key: Any, value: Any) -> None:
    if isinstance(target, MutableMapping):
        target[key] = value
    elif (
        isinstance(target, MutableSequence)
        and isinstance(key, int)
        and key >= 0
    ):
        # Writing past the end grows the sequence, padding any gap with None.
        if key >= len(target):
            target.extend([None] * (key - len(target)))
            target.append(value)
        else:
            target[key] = value
    else:
        setattr(target, key, value)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extend(target: Any, *sources: Any) -> Any:
    """Copy the own keys of each source onto *target* and return it.

    Sources are applied left to right, so later sources win over earlier
    ones and over keys already on *target*.  ``None`` sources are skipped.
    Mapping targets receive items; other targets receive attributes
    (a frozen or slot-less target raises the usual ``AttributeError``).

    When *target* is falsy (see :func:`is_falsy`) or no sources are given,
    nothing is copied: *target* comes back as-is, or a fresh ``dict``
    when it is falsy.
    """
    if is_falsy(target) or not sources:
        return {} if is_falsy(target) else target

    for source in sources:
        if source is None:
            continue
        for key in own_keys(source):
            _write(target, key, _read(source, key))

    return target


def clone(obj: T) -> T | dict[Any, Any]:
    """Return a shallow copy of *obj*.

    Primitives are returned unchanged.  Sequences get a positional copy
    of the same type; every other object is flattened into a new ``dict``
    of its own keys via ``extend({}, obj)``.
    """
    if not is_object(obj):
        return obj
    if is_array(obj):
        return copy.copy(obj)
    return extend({}, obj)
