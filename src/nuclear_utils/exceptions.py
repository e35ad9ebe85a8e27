"""Exception hierarchy for nuclear-utils.

The helpers are deliberately permissive: ``None`` inputs short-circuit
and failures raised by user callbacks (iteratees, partially-applied
functions, constructors) propagate untouched.  The few conditions the
package itself rejects are reported through :class:`NuclearUtilsError`
subclasses.

Hierarchy
---------
NuclearUtilsError
└── NotConstructibleError  (also a ``TypeError``)
"""

from __future__ import annotations


class NuclearUtilsError(Exception):
    """Base exception for all nuclear-utils errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance for the caller."""


class NotConstructibleError(NuclearUtilsError, TypeError):
    """Raised when :func:`~nuclear_utils.utils.to_factory` gets a non-class."""
