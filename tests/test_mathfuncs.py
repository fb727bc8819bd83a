import math

import pytest

from jsonnetkit.mathfuncs import (
    acos,
    asin,
    atan,
    bitwise_and,
    bitwise_or,
    bitwise_xor,
    ceil,
    cos,
    exp,
    exponent,
    floor,
    log,
    mantissa,
    power,
    shift_left,
    shift_right,
    sin,
    sqrt,
    tan,
)
from jsonnetkit.operators import EvaluationError


@pytest.mark.parametrize("x", [0.25, 2.0, 9.0, 12345.5])
def test_sqrt_squares_back(x):
    assert sqrt(x) ** 2 == pytest.approx(x)


def test_sqrt_of_negative_is_not_a_number():
    with pytest.raises(EvaluationError, match="Not a number"):
        sqrt(-1)


@pytest.mark.parametrize("x", [2.5, -2.5, 7.0, -0.1])
def test_floor_and_ceil_bracket_value(x):
    assert floor(x) <= x <= ceil(x)
    assert ceil(x) - floor(x) <= 1
    assert floor(x) == int(floor(x))


def test_trig_identities():
    for x in (0.3, 1.2, -0.7):
        assert sin(x) ** 2 + cos(x) ** 2 == pytest.approx(1)
        assert tan(x) == pytest.approx(sin(x) / cos(x))
        assert asin(sin(x)) == pytest.approx(x)
        assert atan(tan(x)) == pytest.approx(x)
    assert acos(cos(1.2)) == pytest.approx(1.2)


def test_asin_outside_domain():
    with pytest.raises(EvaluationError, match="Not a number"):
        asin(2)


def test_log_and_exp_are_inverse():
    for x in (0.5, 1.0, 10.0):
        assert exp(log(x)) == pytest.approx(x)


def test_log_of_zero_overflows():
    with pytest.raises(EvaluationError, match="Overflow"):
        log(0)


def test_log_of_negative_is_not_a_number():
    with pytest.raises(EvaluationError, match="Not a number"):
        log(-3)


def test_exp_overflow():
    with pytest.raises(EvaluationError, match="Overflow"):
        exp(1000)


@pytest.mark.parametrize("x", [1.0, 6.5, -40.25, 1e10])
def test_mantissa_exponent_reconstruct(x):
    m = mantissa(x)
    assert 0.5 <= abs(m) < 1
    assert m * 2 ** exponent(x) == x


def test_mantissa_of_zero():
    assert mantissa(0) == 0
    assert exponent(0) == 0


def test_power_matches_repeated_multiplication():
    assert power(3, 4) == 3 * 3 * 3 * 3
    assert power(2, 0.5) == pytest.approx(sqrt(2))


def test_power_of_zero_to_negative_overflows():
    with pytest.raises(EvaluationError, match="Overflow"):
        power(0, -1)


def test_power_negative_base_fractional_exponent():
    with pytest.raises(EvaluationError, match="Not a number"):
        power(-8, 0.5)


def test_shift_round_trip():
    assert shift_right(shift_left(5, 4), 4) == 5


def test_shift_count_is_modulo_64():
    assert shift_left(3, 64) == shift_left(3, 0)
    assert shift_left(3, 65) == shift_left(3, 1)


def test_shift_by_negative():
    with pytest.raises(EvaluationError, match="Shift by negative exponent."):
        shift_left(1, -1)
    with pytest.raises(EvaluationError, match="Shift by negative exponent."):
        shift_right(1, -1)


def test_shift_right_keeps_sign():
    assert shift_right(-16, 2) < 0


@pytest.mark.parametrize("a,b", [(12, 10), (255, 15), (-7, 3)])
def test_bitwise_relations(a, b):
    assert bitwise_and(a, a) == a
    assert bitwise_or(a, 0) == a
    assert bitwise_xor(a, b) == bitwise_or(a, b) - bitwise_and(a, b)
    assert bitwise_xor(bitwise_xor(a, b), b) == a


def test_bitwise_argument_out_of_range():
    with pytest.raises(EvaluationError, match="outside of range"):
        bitwise_and(1e20, 1)
    with pytest.raises(EvaluationError, match="outside of range"):
        bitwise_or(1, -1e20)


def test_non_number_argument():
    with pytest.raises(EvaluationError, match="expected number"):
        sqrt("4")