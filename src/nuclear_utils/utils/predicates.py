"""Type predicates — leaf-level value classification.

Every predicate takes one arbitrary value, returns a ``bool`` and never
raises, whatever it is handed (``None``, wrappers, proxies, classes).
"""

from __future__ import annotations

import math
from collections import UserString
from collections.abc import Sequence

MAX_SAFE_INTEGER: int = 2**53 - 1
"""Largest length accepted by :func:`is_length`."""

_TEXT_TYPES: tuple[type, ...] = (str, UserString, bytes)

_PRIMITIVE_TYPES: tuple[type, ...] = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
)


# ---------------------------------------------------------------------------
# Public predicates
# ---------------------------------------------------------------------------

def is_string(val: object) -> bool:
    """Return ``True`` for ``str`` values and boxed string-likes.

    Subclasses of ``str`` and :class:`collections.UserString` wrappers
    both count.
    """
    return isinstance(val, (str, UserString))


def is_array(val: object) -> bool:
    """Return ``True`` for ordered, index-addressable sequences.

    Any :class:`collections.abc.Sequence` qualifies (``list``, ``tuple``,
    ``range``, ``UserList``, ``bytearray``, registered virtual subclasses)
    except ``str``, ``UserString`` and immutable ``bytes``, which are
    iterated by index but are not arrays.
    """
    return isinstance(val, Sequence) and not isinstance(val, _TEXT_TYPES)


def is_function(val: object) -> bool:
    """Return ``True`` if *val* can be called."""
    return callable(val)


def is_object(val: object) -> bool:
    """Return ``True`` for callables and every non-primitive value.

    ``None``, booleans, numbers, ``str`` and ``bytes`` are primitives;
    containers, instances, classes and functions are objects.
    """
    return callable(val) or not isinstance(val, _PRIMITIVE_TYPES)


def is_falsy(val: object) -> bool:
    """Loose falsiness used when picking a merge destination.

    ``None``, ``False``, numeric zero, NaN and ``""`` are falsy.  Empty
    containers are not: an empty ``dict`` is a perfectly good target.
    """
    if val is None or val is False:
        return True
    if isinstance(val, str):
        return val == ""
    if isinstance(val, (int, float)):
        return val == 0 or (isinstance(val, float) and math.isnan(val))
    return False


def is_length(val: object) -> bool:
    """Return ``True`` if *val* is a valid array-like length.

    A length is a non-negative integral number no larger than
    :data:`MAX_SAFE_INTEGER`.  Booleans are rejected.
    """
    if isinstance(val, bool) or not isinstance(val, (int, float)):
        return False
    if isinstance(val, float) and not val.is_integer():
        return False
    return -1 < val <= MAX_SAFE_INTEGER
