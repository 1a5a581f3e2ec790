"""Typed errors raised by the curve engine."""

from __future__ import annotations

from typing import Any


class CurveError(ValueError):
    """Base class for curve construction and integration failures."""


class OrderViolation(CurveError):
    """A score compared greater than the previous threshold after sorting."""

    def __init__(self, score: Any, previous: Any) -> None:
        super().__init__(f"current score: {score} is not lower than or equal to previous one: {previous}")
        self.score = score
        self.previous = previous


class InsufficientDataError(CurveError):
    """Too few curve points (or an empty class) to define an area."""

    def __init__(self, message: str, count: int = 0) -> None:
        super().__init__(message)
        self.count = count
