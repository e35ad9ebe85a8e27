"""Smoke tests — verify package wiring.

These tests prove that:
* The aggregate entry point re-exports every helper unchanged.
* The exception hierarchy is correctly structured.
* Version is accessible.
"""

from __future__ import annotations

import pytest

import nuclear_utils
from nuclear_utils import __version__
from nuclear_utils import utils as helpers
from nuclear_utils.exceptions import NotConstructibleError, NuclearUtilsError


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    def test_not_constructible_inherits_from_base(self) -> None:
        assert issubclass(NotConstructibleError, NuclearUtilsError)

    def test_not_constructible_is_a_type_error(self) -> None:
        assert issubclass(NotConstructibleError, TypeError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(NuclearUtilsError, Exception)

    def test_hint_is_stored(self) -> None:
        err = NuclearUtilsError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = NuclearUtilsError("boom")
        assert err.hint is None


# ---------------------------------------------------------------------------
# Re-export manifest
# ---------------------------------------------------------------------------

class TestReExports:
    @pytest.mark.parametrize("name", helpers.__all__)
    def test_helper_reexported_unchanged(self, name: str) -> None:
        assert getattr(nuclear_utils, name) is getattr(helpers, name)

    def test_all_names_resolve(self) -> None:
        for name in nuclear_utils.__all__:
            assert hasattr(nuclear_utils, name)

    def test_package_logger_is_silent_by_default(self) -> None:
        import logging

        handlers = logging.getLogger("nuclear_utils").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)
