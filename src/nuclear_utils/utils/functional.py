"""Higher-order helpers: partial application and class factories.

:class:`Partial` differs from :func:`functools.partial` in one respect:
it is a descriptor.  Stored on a class and read through an instance, it
binds to that instance like a plain function would, so the wrapped
function still receives its invocation context.  Only arguments are
pre-bound, never the context.

:class:`Factory` is a callable handle on a class that behaves like the
class itself for construction, attribute lookup, ``isinstance`` /
``issubclass`` checks and subclassing.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from nuclear_utils.exceptions import NotConstructibleError

logger = logging.getLogger(__name__)

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Partial application
# ---------------------------------------------------------------------------

class Partial:
    """Callable that prepends pre-bound arguments to every call.

    Parameters
    ----------
    func:
        The function to delegate to.
    *args, **kwargs:
        Arguments bound at creation time.  Positional arguments go before
        the call-time ones; call-time keywords override bound keywords.
    """

    def __init__(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        # Copy metadata first: wrapping another Partial must not let its
        # __dict__ overwrite the attributes set below.
        functools.update_wrapper(self, func)
        self.func = func
        self.args: tuple[Any, ...] = args
        self.keywords: dict[str, Any] = kwargs

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.func(*self.args, *args, **{**self.keywords, **kwargs})

    def __get__(self, instance: object, owner: type | None = None) -> Any:
        if instance is None:
            return self
        binder = getattr(self.func, "__get__", None)
        if binder is None:
            return self
        return Partial(binder(instance, owner), *self.args, **self.keywords)

    def __repr__(self) -> str:
        bound = [repr(arg) for arg in self.args]
        bound.extend(f"{key}={value!r}" for key, value in self.keywords.items())
        return f"{type(self).__name__}({self.func!r}, {', '.join(bound)})"


def partial(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Partial:
    """Return a :class:`Partial` of *func* with *args* / *kwargs* pre-bound.

    >>> def add(a, b):
    ...     return a + b
    >>> partial(add, 1)(2)
    3
    """
    return Partial(func, *args, **kwargs)


# ---------------------------------------------------------------------------
# Class factories
# ---------------------------------------------------------------------------

class Factory(Generic[T]):
    """Callable stand-in for a class.

    Instances produced by the factory are instances of the wrapped class
    itself, so the method table is shared, never copied, and later
    changes to the class show up on them.
    """

    def __init__(self, klass: type[T]) -> None:
        functools.update_wrapper(self, klass, updated=())

    def __call__(self, *args: Any, **kwargs: Any) -> T:
        return self.__wrapped__(*args, **kwargs)

    def __getattr__(self, name: str) -> Any:
        # Only reached for names not set on the factory: static members.
        if name == "__wrapped__":
            raise AttributeError(name)
        return getattr(self.__wrapped__, name)

    def __instancecheck__(self, instance: object) -> bool:
        return isinstance(instance, self.__wrapped__)

    def __subclasscheck__(self, subclass: type) -> bool:
        return issubclass(subclass, self.__wrapped__)

    def __mro_entries__(self, bases: tuple[object, ...]) -> tuple[type, ...]:
        return (self.__wrapped__,)

    def __repr__(self) -> str:
        return f"<factory for {self.__wrapped__.__qualname__}>"


def to_factory(klass: type[T]) -> Factory[T]:
    """Wrap *klass* in a :class:`Factory`.

    Raises
    ------
    NotConstructibleError
        If *klass* is not a class.
    """
    if not isinstance(klass, type):
        raise NotConstructibleError(
            f"to_factory() expects a class, got {type(klass).__name__}",
            hint="Pass the class itself, not an instance of it.",
        )
    logger.debug("Creating factory for %s.%s", klass.__module__, klass.__qualname__)
    return Factory(klass)
