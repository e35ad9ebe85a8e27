"""Shared pytest fixtures and configuration for the nuclear-utils test suite.

Guidelines
----------
* Every helper is pure — no I/O, no mocking of the helpers themselves.
* Recording iteratees come from :func:`recorder`, not ad hoc lists.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import pytest


class Point:
    """Small class used to exercise factories and attribute copying."""

    ORIGIN_LABEL = "origin"

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def norm2(self) -> int:
        return self.x * self.x + self.y * self.y

    @classmethod
    def origin(cls) -> Point:
        return cls(0, 0)


@dataclass(slots=True)
class SlottedPoint:
    x: int
    y: int


@pytest.fixture()
def recorder() -> Callable[..., tuple[list[tuple[Any, ...]], Callable[..., Any]]]:
    """Build an iteratee that records its calls.

    ``stop_at`` makes the iteratee return ``False`` on that index/key.
    """

    def _build(stop_at: Any = None) -> tuple[list[tuple[Any, ...]], Callable[..., Any]]:
        calls: list[tuple[Any, ...]] = []

        def iteratee(*args: Any) -> Any:
            calls.append(args)
            if stop_at is not None and args[-2] == stop_at:
                return False
            return None

        return calls, iteratee

    return _build


@pytest.fixture()
def point_cls() -> type[Point]:
    return Point


@pytest.fixture()
def slotted_point_cls() -> type[SlottedPoint]:
    return SlottedPoint
