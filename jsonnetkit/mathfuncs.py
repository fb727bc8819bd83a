"""Numeric built-ins: elementary functions, powers and bitwise operators."""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Any

from jsonnetkit.operators import EvaluationError, check_number, type_name
from jsonnetkit.text import _go_float

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _number(value: Any) -> float:
    if type_name(value) != "number":
        raise EvaluationError(f"Unexpected type {type_name(value)}, expected number")
    return float(value)


def _lift(f: Callable[[float], float], x: Any) -> float:
    """Apply ``f``, mapping domain errors to NaN and overflows to infinity."""
    n = _number(x)
    try:
        result = f(n)
    except OverflowError:
        result = math.inf
    except ValueError:
        result = math.nan
    return check_number(result)


def sqrt(x: Any) -> float:
    return _lift(math.sqrt, x)


def ceil(x: Any) -> float:
    return _lift(lambda v: float(math.ceil(v)), x)


def floor(x: Any) -> float:
    return _lift(lambda v: float(math.floor(v)), x)


def sin(x: Any) -> float:
    return _lift(math.sin, x)


def cos(x: Any) -> float:
    return _lift(math.cos, x)


def tan(x: Any) -> float:
    return _lift(math.tan, x)


def asin(x: Any) -> float:
    return _lift(math.asin, x)


def acos(x: Any) -> float:
    return _lift(math.acos, x)


def atan(x: Any) -> float:
    return _lift(math.atan, x)


def _log(v: float) -> float:
    if v == 0:
        return -math.inf
    return math.log(v)


def log(x: Any) -> float:
    """Natural logarithm; zero overflows, negatives are not a number."""
    return _lift(_log, x)


def exp(x: Any) -> float:
    return _lift(math.exp, x)


def mantissa(x: Any) -> float:
    """The fraction ``m`` in ``x == m * 2**e`` with ``0.5 <= |m| < 1``."""
    return _lift(lambda v: math.frexp(v)[0], x)


def exponent(x: Any) -> float:
    """The exponent ``e`` in ``x == m * 2**e`` with ``0.5 <= |m| < 1``."""
    return _lift(lambda v: float(math.frexp(v)[1]), x)


def power(x: Any, n: Any) -> float:
    """``x`` raised to the power ``n``."""
    base, exp_value = _number(x), _number(n)
    try:
        result = math.pow(base, exp_value)
    except OverflowError:
        result = math.inf
    except ValueError:
        result = math.inf if base == 0 and exp_value < 0 else math.nan
    return check_number(result)


def _wrap64(v: int) -> int:
    return ((v - _INT64_MIN) % 2**64) + _INT64_MIN


def _bitwise_args(x: Any, y: Any, positive_right: bool) -> tuple[int, int]:
    a, b = _number(x), _number(y)
    for v in (a, b):
        if v < _INT64_MIN or v > float(_INT64_MAX):
            raise EvaluationError(
                f"Bitwise operator argument {_go_float(v)} outside of range "
                f"[{_INT64_MIN}, {_INT64_MAX}]"
            )
    if positive_right and b < 0:
        raise EvaluationError("Shift by negative exponent.")
    return _wrap64(int(a)), _wrap64(int(b))


def shift_left(x: Any, y: Any) -> float:
    """64-bit left shift; the shift count is taken modulo 64."""
    a, b = _bitwise_args(x, y, True)
    return check_number(float(_wrap64(a << (b % 64))))


def shift_right(x: Any, y: Any) -> float:
    """64-bit arithmetic right shift; the shift count is taken modulo 64."""
    a, b = _bitwise_args(x, y, True)
    return check_number(float(a >> (b % 64)))


def bitwise_and(x: Any, y: Any) -> float:
    a, b = _bitwise_args(x, y, False)
    return check_number(float(a & b))


def bitwise_or(x: Any, y: Any) -> float:
    a, b = _bitwise_args(x, y, False)
    return check_number(float(a | b))


def bitwise_xor(x: Any, y: Any) -> float:
    a, b = _bitwise_args(x, y, False)
    return check_number(float(a ^ b))