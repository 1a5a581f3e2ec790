"""Numeric strategies for curve sweeps and area integration.

A strategy owns every comparison and arithmetic step the curve engine performs,
so the same sweep and integration code runs on native floats or on
fixed-precision decimals.
"""

from __future__ import annotations

import math
from decimal import (
    ROUND_05UP,
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
    Decimal,
    localcontext,
)
from typing import Any, Optional

DEFAULT_SCALE = 10
DEFAULT_ROUNDING = "half_up"

ROUNDING_MODES: dict[str, Optional[str]] = {
    "half_up": ROUND_HALF_UP,
    "half_down": ROUND_HALF_DOWN,
    "half_even": ROUND_HALF_EVEN,
    "up": ROUND_UP,
    "down": ROUND_DOWN,
    "ceiling": ROUND_CEILING,
    "floor": ROUND_FLOOR,
    # exact results only
    "unnecessary": None,
}


class RoundingNecessaryError(ArithmeticError):
    """Raised when the `unnecessary` policy meets an inexact result."""


class _Top:
    """Comparison sentinel above every ordered score, +inf included."""

    def __repr__(self) -> str:
        return "+inf"


TOP = _Top()


def resolve_rounding(name: str) -> Optional[str]:
    key = str(name).lower()
    if key not in ROUNDING_MODES:
        raise ValueError(f"unknown rounding policy: {name!r} (expected one of {sorted(ROUNDING_MODES)})")
    return ROUNDING_MODES[key]


def _quantize(value: Decimal, scale: int, rounding: str) -> Decimal:
    if scale < 0:
        raise ValueError("scale must be >= 0")
    mode = resolve_rounding(rounding)
    exp = Decimal(1).scaleb(-scale)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + scale + 2)
        if mode is None:
            rounded = value.quantize(exp, rounding=ROUND_DOWN)
            if rounded != value:
                raise RoundingNecessaryError(f"{value} cannot be represented exactly at scale {scale}")
            return rounded
        return value.quantize(exp, rounding=mode)


class Arithmetic:
    """Interface shared by the numeric strategies."""

    name = "abstract"

    def coerce(self, value: Any) -> Any:
        raise NotImplementedError

    def is_unordered(self, value: Any) -> bool:
        raise NotImplementedError

    def sort_key(self, value: Any) -> tuple:
        # unordered values sort as a block so the sort itself never fails
        if self.is_unordered(value):
            return (True, 0)
        return (False, value)

    def compare(self, a: Any, b: Any) -> Optional[int]:
        """Return -1, 0 or 1, or None when the operands are unordered."""
        if self.is_unordered(a):
            return None
        if b is TOP:
            return -1
        if self.is_unordered(b):
            return None
        if a < b:
            return -1
        if a > b:
            return 1
        return 0

    @property
    def zero(self) -> Any:
        return self.coerce(0)

    def add(self, a: Any, b: Any) -> Any:
        return a + b

    def subtract(self, a: Any, b: Any) -> Any:
        return a - b

    def multiply(self, a: Any, b: Any) -> Any:
        return a * b

    def divide(self, a: Any, b: Any, scale: Optional[int], rounding: str) -> Any:
        """Quotient rounded to `scale` places, or unrounded when `scale` is None."""
        raise NotImplementedError

    def round(self, value: Any, scale: int, rounding: str) -> Any:
        raise NotImplementedError

    def to_float(self, value: Any) -> float:
        return float(value)


class FloatArithmetic(Arithmetic):
    """Native floating point comparisons; rounding applied on the decimal repr."""

    name = "float"

    def coerce(self, value: Any) -> float:
        return float(value)

    def is_unordered(self, value: Any) -> bool:
        return math.isnan(value)

    def divide(self, a: float, b: float, scale: Optional[int], rounding: str) -> float:
        if b == 0:
            raise ZeroDivisionError("division by zero in curve arithmetic")
        if scale is None:
            return a / b
        return self.round(a / b, scale, rounding)

    def round(self, value: float, scale: int, rounding: str) -> float:
        if not math.isfinite(value):
            return value
        return float(_quantize(Decimal(repr(value)), scale, rounding))


class DecimalArithmetic(Arithmetic):
    """Fixed-precision decimals rounded once, at division."""

    name = "decimal"

    def coerce(self, value: Any) -> Decimal:
        if isinstance(value, Decimal):
            return value
        if isinstance(value, (int, str)):
            return Decimal(value)
        # shortest repr, as BigDecimal.valueOf(double) does
        return Decimal(repr(float(value)))

    def is_unordered(self, value: Any) -> bool:
        return value.is_nan()

    def divide(self, a: Decimal, b: Decimal, scale: Optional[int], rounding: str) -> Decimal:
        if b == 0:
            raise ZeroDivisionError("division by zero in curve arithmetic")
        if scale is None:
            # working precision of the current context
            return a / b
        with localcontext() as ctx:
            # ROUND_05UP keeps the second rounding below exact
            ctx.prec = max(ctx.prec, a.adjusted() - b.adjusted() + scale + 4)
            ctx.rounding = ROUND_05UP
            quotient = a / b
        return _quantize(quotient, scale, rounding)

    def round(self, value: Decimal, scale: int, rounding: str) -> Decimal:
        if not value.is_finite():
            return value
        return _quantize(value, scale, rounding)


FLOAT = FloatArithmetic()
DECIMAL = DecimalArithmetic()

ARITHMETICS: dict[str, Arithmetic] = {FLOAT.name: FLOAT, DECIMAL.name: DECIMAL}


def get_arithmetic(name: str | Arithmetic) -> Arithmetic:
    if isinstance(name, Arithmetic):
        return name
    key = str(name).lower()
    if key not in ARITHMETICS:
        raise ValueError(f"unknown arithmetic: {name!r} (expected one of {sorted(ARITHMETICS)})")
    return ARITHMETICS[key]
