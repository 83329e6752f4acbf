from __future__ import annotations

import pytest

from fx_ecb.ingestion.models import ExchangeRate
from fx_ecb.utils.rounding import float_to_fixed, rounded_rate


@pytest.mark.parametrize(
    "value, precision, expected",
    [
        (10, 1, 10),
        (10, 4, 10),
        (10, 0, 10),
        (0.4233, 2, 0.42),
        (0.4251, 2, 0.43),
        (0.4251, 1, 0.4),
        (0.4851, 0, 0.5),
        (0.000001, 0, 0),
        (0.425176543, 10, 0.425176543),
        (1.999999999, 10, 1.999999999),
        (0.0000000001, 10, 0.0000000001),
        (2131123123131.222, 3, 2131123123131.222),
    ],
)
def test_float_to_fixed(value: float, precision: int, expected: float) -> None:
    assert float_to_fixed(value, precision) == expected


def test_float_to_fixed_rounds_half_away_from_zero() -> None:
    assert float_to_fixed(0.25, 1) == 0.3
    assert float_to_fixed(-0.25, 1) == -0.3
    assert float_to_fixed(-0.4233, 2) == -0.42


@pytest.mark.parametrize(
    "value, precision",
    [
        (1e300, 10),
        (-1e300, 10),
        (1.7e308, 1),
        (1.5, 400),
        (0.4251, 309),
    ],
)
def test_float_to_fixed_keeps_values_beyond_representable_precision(
    value: float, precision: int
) -> None:
    assert float_to_fixed(value, precision) == value


@pytest.mark.parametrize("precision", [-5, -1, 0])
def test_float_to_fixed_promotes_precision_below_one(precision: int) -> None:
    assert float_to_fixed(3.14159, precision) == float_to_fixed(3.14159, 1) == 3.1


@pytest.mark.parametrize("value", [0.0, 1.23456789, 98765.4321, 0.00049999])
def test_float_to_fixed_is_idempotent(value: float) -> None:
    once = float_to_fixed(value, 4)
    assert float_to_fixed(once, 4) == once


def test_rounded_rate_returns_new_instance() -> None:
    original = ExchangeRate(currency="USD", rate=1.003123142)

    rounded = rounded_rate(original, 4)

    assert rounded == ExchangeRate(currency="USD", rate=1.0031)
    assert rounded is not original
    assert original.rate == 1.003123142
