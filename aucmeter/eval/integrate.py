"""Trapezoidal area under an ordered curve."""

from __future__ import annotations

from typing import Any, Sequence

from aucmeter.eval.arithmetic import DECIMAL, DEFAULT_ROUNDING, DEFAULT_SCALE, Arithmetic, get_arithmetic
from aucmeter.eval.errors import InsufficientDataError


def trapezoid_area(
    base1: Any,
    base2: Any,
    height: Any,
    scale: int = DEFAULT_SCALE,
    rounding: str = DEFAULT_ROUNDING,
    arithmetic: Arithmetic | str = DECIMAL,
) -> Any:
    arithmetic = get_arithmetic(arithmetic)
    doubled = arithmetic.multiply(arithmetic.add(base1, base2), height)
    return arithmetic.divide(doubled, arithmetic.coerce(2), scale, rounding)


def integrate(
    points: Sequence[Any],
    scale: int = DEFAULT_SCALE,
    rounding: str = DEFAULT_ROUNDING,
    arithmetic: Arithmetic | str = DECIMAL,
) -> Any:
    """Sum the trapezoids between consecutive points.

    Points expose ``x`` and ``y``. Rounding happens only in each segment's
    division by two; the running sum is kept at full precision.

    Raises:
        InsufficientDataError: fewer than two points.
    """
    if len(points) < 2:
        raise InsufficientDataError(f"at least 2 curve points are required, got {len(points)}", len(points))
    arithmetic = get_arithmetic(arithmetic)
    area = arithmetic.zero
    x = arithmetic.coerce(points[0].x)
    y = arithmetic.coerce(points[0].y)
    for point in points[1:]:
        px = arithmetic.coerce(point.x)
        py = arithmetic.coerce(point.y)
        area = arithmetic.add(area, trapezoid_area(py, y, arithmetic.subtract(px, x), scale, rounding, arithmetic))
        x, y = px, py
    return area
