"""Operators on evaluated values.

Values are plain Python objects: ``None`` for null, ``bool``, ``int`` or
``float`` for numbers, ``str``, ``list`` for arrays, ``dict`` for objects and
any other callable for functions.
"""

from __future__ import annotations

import math
from typing import Any


class EvaluationError(Exception):
    """Raised when an operation fails at run time."""


def type_name(value: Any) -> str:
    """The name of the type of ``value``."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    if callable(value):
        return "function"
    raise EvaluationError(f"Unknown value type {type(value).__name__}")


def _type_error(value: Any, expected: str | None = None) -> EvaluationError:
    if expected is None:
        return EvaluationError(f"Unexpected type {type_name(value)}")
    return EvaluationError(f"Unexpected type {type_name(value)}, expected {expected}")


def _number(value: Any) -> float:
    if type_name(value) != "number":
        raise _type_error(value, "number")
    return float(value)


def _boolean(value: Any) -> bool:
    if type_name(value) != "boolean":
        raise _type_error(value, "boolean")
    return value


def check_number(x: float) -> float:
    """Return ``x`` as a float, rejecting NaN and infinities."""
    if math.isnan(x):
        raise EvaluationError("Not a number")
    if math.isinf(x):
        raise EvaluationError("Overflow")
    return float(x)


def _unparse_number(v: float) -> str:
    if v == math.floor(v):
        return "%.0f" % v
    return "%.17g" % v


_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _unparse_string(s: str) -> str:
    parts = ['"']
    for c in s:
        if c in _ESCAPES:
            parts.append(_ESCAPES[c])
        elif ord(c) < 0x20 or 0x7F <= ord(c) <= 0x9F:
            parts.append(f"\\u{ord(c):04x}")
        else:
            parts.append(c)
    parts.append('"')
    return "".join(parts)


def _serialize(value: Any) -> str:
    kind = type_name(value)
    if kind == "null":
        return "null"
    if kind == "boolean":
        return "true" if value else "false"
    if kind == "number":
        return _unparse_number(float(value))
    if kind == "string":
        return _unparse_string(value)
    if kind == "array":
        if not value:
            return "[ ]"
        return "[" + ", ".join(_serialize(elem) for elem in value) + "]"
    if kind == "object":
        if not value:
            return "{ }"
        fields = (
            f"{_unparse_string(name)}: {_serialize(value[name])}"
            for name in sorted(value)
        )
        return "{" + ", ".join(fields) + "}"
    raise EvaluationError("Tried to manifest function")


def to_string(value: Any) -> str:
    """Strings unchanged; anything else as single-line JSON."""
    if isinstance(value, str):
        return value
    return _serialize(value)


def _sign(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def compare(x: Any, y: Any) -> int:
    """Compare numbers, strings or arrays; return -1, 0 or 1."""
    kind = type_name(x)
    if kind == "number":
        return _sign(float(x), _number(y))
    if kind == "string":
        if not isinstance(y, str):
            raise _type_error(y, "string")
        return _sign(x, y)
    if kind == "array":
        if not isinstance(y, list):
            raise _type_error(y, "array")
        for left, right in zip(x, y):
            result = compare(left, right)
            if result != 0:
                return result
        return _sign(len(x), len(y))
    raise _type_error(x)


def equals(x: Any, y: Any) -> bool:
    """Deep equality; values of different types are never equal."""
    kind = type_name(x)
    if kind != type_name(y):
        return False
    if kind == "number":
        return float(x) == float(y)
    if kind in ("boolean", "string"):
        return x == y
    if kind == "null":
        return True
    if kind == "array":
        return len(x) == len(y) and all(equals(a, b) for a, b in zip(x, y))
    if kind == "object":
        names = sorted(x)
        if names != sorted(y):
            return False
        return all(equals(x[name], y[name]) for name in names)
    raise EvaluationError("Cannot test equality of functions")


def not_equals(x: Any, y: Any) -> bool:
    return not equals(x, y)


def primitive_equals(x: Any, y: Any) -> bool:
    """Equality restricted to null, booleans, numbers and strings."""
    kind = type_name(x)
    if kind != type_name(y):
        return False
    if kind == "number":
        return float(x) == float(y)
    if kind in ("boolean", "string"):
        return x == y
    if kind == "null":
        return True
    if kind == "function":
        raise EvaluationError("Cannot test equality of functions")
    raise EvaluationError(f"primitiveEquals operates on primitive types, got {kind}")


def plus(x: Any, y: Any) -> Any:
    """The ``+`` operator: numeric sum, string, array or object concatenation."""
    if isinstance(y, str):
        return to_string(x) + y
    kind = type_name(x)
    if kind == "number":
        return check_number(float(x) + _number(y))
    if kind == "string":
        return x + to_string(y)
    if kind == "object":
        if not isinstance(y, dict):
            raise _type_error(y, "object")
        return {**x, **y}
    if kind == "array":
        if not isinstance(y, list):
            raise _type_error(y, "array")
        return x + y
    raise _type_error(x)


def minus(x: Any, y: Any) -> float:
    return check_number(_number(x) - _number(y))


def multiply(x: Any, y: Any) -> float:
    return check_number(_number(x) * _number(y))


def divide(x: Any, y: Any) -> float:
    a, b = _number(x), _number(y)
    if b == 0:
        raise EvaluationError("Division by zero.")
    return check_number(a / b)


def modulo(x: Any, y: Any) -> float:
    """Floating remainder with the sign of ``x``."""
    a, b = _number(x), _number(y)
    if b == 0:
        raise EvaluationError("Division by zero.")
    return check_number(math.fmod(a, b))


def less(x: Any, y: Any) -> bool:
    return compare(x, y) == -1


def greater(x: Any, y: Any) -> bool:
    return compare(x, y) == 1


def less_eq(x: Any, y: Any) -> bool:
    return compare(x, y) <= 0


def greater_eq(x: Any, y: Any) -> bool:
    return compare(x, y) >= 0


def logical_not(x: Any) -> bool:
    return not _boolean(x)


def bitwise_not(x: Any) -> float:
    return float(~int(_number(x)))


def unary_plus(x: Any) -> float:
    return _number(x)


def unary_minus(x: Any) -> float:
    return -_number(x)