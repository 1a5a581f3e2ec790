from decimal import Decimal

import pytest

from aucmeter.eval.arithmetic import (
    DECIMAL,
    FLOAT,
    TOP,
    RoundingNecessaryError,
    get_arithmetic,
    resolve_rounding,
)


@pytest.mark.parametrize(
    "rounding, expected",
    [
        ("half_up", "0.6667"),
        ("half_down", "0.6667"),
        ("half_even", "0.6667"),
        ("down", "0.6666"),
        ("up", "0.6667"),
        ("floor", "0.6666"),
        ("ceiling", "0.6667"),
    ],
)
def test_decimal_divide_rounding_modes(rounding, expected):
    assert DECIMAL.divide(Decimal(2), Decimal(3), 4, rounding) == Decimal(expected)


def test_decimal_divide_exact_ties():
    assert DECIMAL.divide(Decimal(1), Decimal(8), 2, "half_even") == Decimal("0.12")
    assert DECIMAL.divide(Decimal(1), Decimal(8), 2, "half_up") == Decimal("0.13")
    assert DECIMAL.divide(Decimal(1), Decimal(8), 2, "half_down") == Decimal("0.12")
    assert DECIMAL.divide(Decimal(-2), Decimal(3), 4, "floor") == Decimal("-0.6667")


def test_decimal_divide_rounds_once():
    # just above one half, beyond the default 28 digits of precision
    a = Decimal(5 * 10**30 + 1)
    b = Decimal(10**31)
    assert DECIMAL.divide(a, b, 0, "half_down") == Decimal(1)
    assert DECIMAL.divide(a, b, 0, "half_even") == Decimal(1)


def test_unnecessary_rounding():
    assert DECIMAL.divide(Decimal(1), Decimal(4), 2, "unnecessary") == Decimal("0.25")
    with pytest.raises(RoundingNecessaryError):
        DECIMAL.divide(Decimal(1), Decimal(3), 4, "unnecessary")


def test_divide_by_zero():
    with pytest.raises(ZeroDivisionError):
        DECIMAL.divide(Decimal(1), Decimal(0), 4, "half_up")
    with pytest.raises(ZeroDivisionError):
        FLOAT.divide(1.0, 0.0, 4, "half_up")


def test_divide_without_scale_is_unrounded():
    assert DECIMAL.divide(Decimal(2), Decimal(3), None, "unnecessary") == Decimal(2) / Decimal(3)
    assert FLOAT.divide(2.0, 3.0, None, "unnecessary") == 2.0 / 3.0


def test_float_divide_rounds_to_scale():
    assert FLOAT.divide(2.0, 3.0, 4, "half_up") == 0.6667
    assert FLOAT.divide(2.0, 3.0, 4, "down") == 0.6666
    assert FLOAT.round(0.125, 2, "half_even") == 0.12


def test_coerce_uses_shortest_float_repr():
    assert DECIMAL.coerce(0.1) == Decimal("0.1")
    assert DECIMAL.coerce(3) == Decimal(3)
    assert DECIMAL.coerce("0.25") == Decimal("0.25")


def test_compare_and_sentinel():
    assert DECIMAL.compare(Decimal("0.5"), Decimal("0.4")) == 1
    assert DECIMAL.compare(Decimal("0.4"), Decimal("0.40")) == 0
    assert DECIMAL.compare(Decimal("Infinity"), TOP) == -1
    assert FLOAT.compare(float("inf"), TOP) == -1
    assert FLOAT.compare(float("nan"), TOP) is None
    assert DECIMAL.compare(Decimal("NaN"), Decimal(1)) is None
    assert DECIMAL.compare(Decimal(1), Decimal("NaN")) is None


def test_resolve_names():
    assert resolve_rounding("HALF_EVEN") == resolve_rounding("half_even")
    assert get_arithmetic("FLOAT") is FLOAT
    assert get_arithmetic(DECIMAL) is DECIMAL
    with pytest.raises(ValueError):
        resolve_rounding("banker")
    with pytest.raises(ValueError):
        get_arithmetic("fixed")


def test_negative_scale_rejected():
    with pytest.raises(ValueError):
        DECIMAL.divide(Decimal(1), Decimal(3), -1, "half_up")
