"""String and byte built-ins: hashing, base64, UTF-8, slicing and splitting."""

from __future__ import annotations

import base64
import binascii
import hashlib
import math
import re
from decimal import Decimal
from typing import Any

from jsonnetkit.operators import EvaluationError, equals, type_name

_CODEPOINT_MAX = 0x10FFFF
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_DECIMAL_INT = re.compile(r"[+-]?[0-9]+")


def _go_float(v: float) -> str:
    """Format a float the way a shortest ``%v`` would."""
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "+Inf" if v > 0 else "-Inf"
    if v == 0:
        return "-0" if math.copysign(1.0, v) < 0 else "0"
    sign = "-" if v < 0 else ""
    _, digit_tuple, exp = Decimal(repr(abs(float(v)))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    nd = len(digits)
    dp = nd + exp
    x = dp - 1
    if x < -4 or x >= 6:
        mantissa = digits[0] + ("." + digits[1:] if nd > 1 else "")
        exp_sign = "-" if x < 0 else "+"
        return f"{sign}{mantissa}e{exp_sign}{abs(x):02d}"
    if dp <= 0:
        return f"{sign}0.{'0' * -dp}{digits}"
    if dp >= nd:
        return f"{sign}{digits}{'0' * (dp - nd)}"
    return f"{sign}{digits[:dp]}.{digits[dp:]}"


def _string(value: Any) -> str:
    if not isinstance(value, str):
        raise EvaluationError(f"Unexpected type {type_name(value)}, expected string")
    return value


def _number(value: Any) -> float:
    if type_name(value) != "number":
        raise EvaluationError(f"Unexpected type {type_name(value)}, expected number")
    return float(value)


def _array(value: Any) -> list:
    if not isinstance(value, list):
        raise EvaluationError(f"Unexpected type {type_name(value)}, expected array")
    return value


def _integer(value: Any) -> int:
    n = _number(value)
    if not math.isfinite(n) or n != math.floor(n):
        raise EvaluationError(f"Expected an integer, but got {_go_float(n)}")
    return int(n)


def _is_integer(value: Any) -> bool:
    if type_name(value) != "number":
        return False
    n = float(value)
    return math.isfinite(n) and n == math.floor(n)


def md5(s: Any) -> str:
    """Hex MD5 digest of the UTF-8 bytes of ``s``."""
    return hashlib.md5(_string(s).encode("utf-8")).hexdigest()


def _check_byte(v: int) -> None:
    if not 0 <= v <= 255:
        raise EvaluationError(
            "base64 encountered invalid codepoint value in the array "
            f"(must be 0 <= X <= 255), got {v}"
        )


def base64_encode(data: Any) -> str:
    """Base64-encode a string (as UTF-8) or an array of byte values."""
    if isinstance(data, str):
        for c in data:
            _check_byte(ord(c))
        raw = data.encode("utf-8")
    elif isinstance(data, list):
        out = bytearray()
        for elem in data:
            if not _is_integer(elem):
                raise EvaluationError(
                    "base64 encountered a non-integer value in the array, "
                    f"got {type_name(elem)}"
                )
            v = int(elem)
            _check_byte(v)
            out.append(v)
        raw = bytes(out)
    else:
        raise EvaluationError(
            "base64 can only base64 encode strings / arrays of single bytes, "
            f"got {type_name(data)}"
        )
    return base64.b64encode(raw).decode("ascii")


def _decode_bytes(s: Any) -> bytes:
    if not isinstance(s, str):
        raise EvaluationError(
            f"base64DecodeBytes requires a string, got {type_name(s)}"
        )
    size = len(s.encode("utf-8"))
    if size % 4 != 0:
        raise EvaluationError(
            "input string appears not to be a base64 encoded string. "
            f"Wrong length found ({size})"
        )
    try:
        return base64.b64decode(s.encode("utf-8"), validate=True)
    except (binascii.Error, ValueError) as err:
        raise EvaluationError(f"failed to decode: {err}") from err


def base64_decode(s: Any) -> str:
    """Decode base64 into a string, replacing invalid UTF-8."""
    return _decode_bytes(s).decode("utf-8", errors="replace")


def base64_decode_bytes(s: Any) -> list[int]:
    """Decode base64 into a list of byte values."""
    return list(_decode_bytes(s))


def encode_utf8(s: Any) -> list[int]:
    """The UTF-8 bytes of ``s`` as a list of numbers."""
    return list(_string(s).encode("utf-8"))


def decode_utf8(arr: Any) -> str:
    """Decode an array of byte values as UTF-8, replacing invalid sequences."""
    out = bytearray()
    for elem in _array(arr):
        v = _integer(elem)
        if not 0 <= v <= 255:
            raise EvaluationError(f"Bytes must be integers in range [0, 255], got {v}")
        out.append(v)
    return bytes(out).decode("utf-8", errors="replace")


def char(n: Any) -> str:
    """The one-character string for codepoint ``n``."""
    value = _number(n)
    if value > _CODEPOINT_MAX:
        raise EvaluationError(f"Invalid unicode codepoint, got {_go_float(value)}")
    if value < 0:
        raise EvaluationError(f"Codepoints must be >= 0, got {_go_float(value)}")
    cp = int(value)
    if 0xD800 <= cp <= 0xDFFF:
        return "\ufffd"
    return chr(cp)


def codepoint(s: Any) -> int:
    """The codepoint of a one-character string."""
    text = _string(s)
    if len(text) != 1:
        raise EvaluationError(
            f"codepoint takes a string of length 1, got length {len(text)}"
        )
    return ord(text)


def substr(s: Any, start: Any, length: Any) -> str:
    """At most ``length`` characters of ``s`` starting at ``start``."""
    if not isinstance(s, str):
        raise EvaluationError(
            f"substr first parameter should be a string, got {type_name(s)}"
        )
    if type_name(start) != "number":
        raise EvaluationError(
            f"substr second parameter should be a number, got {type_name(start)}"
        )
    begin = float(start)
    if math.fmod(begin, 1) != 0:
        raise EvaluationError(
            f"substr second parameter should be an integer, got {begin:f}"
        )
    if begin < 0:
        raise EvaluationError(
            f"substr second parameter should be greater than zero, got {begin:f}"
        )
    if type_name(length) != "number":
        raise EvaluationError(
            f"substr third parameter should be a number, got {type_name(length)}"
        )
    if not _is_integer(length):
        raise EvaluationError(
            f"substr third parameter should be an integer, got {float(length):f}"
        )
    count = int(length)
    if count < 0:
        raise EvaluationError(
            f"substr third parameter should be greater than zero, got {count}"
        )
    first = int(begin)
    if first > len(s):
        return ""
    return s[first : min(first + count, len(s))]


def split_limit(s: Any, sep: Any, max_splits: Any) -> list[str]:
    """Split ``s`` on ``sep`` at most ``max_splits`` times; -1 means no limit."""
    text = _string(s)
    separator = _string(sep)
    limit = _integer(max_splits)
    if limit < -1:
        raise EvaluationError(
            "std.splitLimit third parameter should be -1 or non-negative, "
            f"got {limit}"
        )
    if not separator:
        raise EvaluationError(
            "std.splitLimit second parameter should have length 1 or greater, got 0"
        )
    if limit == -1:
        return text.split(separator)
    return text.split(separator, limit)


def str_replace(s: Any, old: Any, new: Any) -> str:
    """Replace every occurrence of ``old`` in ``s`` with ``new``."""
    text, before, after = _string(s), _string(old), _string(new)
    if not before:
        raise EvaluationError("'from' string must not be zero length.")
    return text.replace(before, after)


def _member(chars: Any, c: str) -> bool:
    if isinstance(chars, str):
        return c in chars
    if isinstance(chars, list):
        return any(equals(elem, c) for elem in chars)
    raise EvaluationError("std.member first argument must be an array or a string")


def _require_text(s: Any) -> str:
    if not isinstance(s, str):
        raise EvaluationError(f"Unexpected type {type_name(s)}, expected string")
    return s


def lstrip_chars(s: Any, chars: Any) -> str:
    """Remove leading characters of ``s`` that are members of ``chars``."""
    text = _require_text(s)
    start = 0
    while start < len(text) and _member(chars, text[start]):
        start += 1
    return text[start:]


def rstrip_chars(s: Any, chars: Any) -> str:
    """Remove trailing characters of ``s`` that are members of ``chars``."""
    text = _require_text(s)
    end = len(text)
    while end > 0 and _member(chars, text[end - 1]):
        end -= 1
    return text[:end]


def strip_chars(s: Any, chars: Any) -> str:
    """Remove leading and trailing members of ``chars`` from ``s``."""
    return rstrip_chars(lstrip_chars(s, chars), chars)


def parse_int(s: Any) -> float:
    """Parse a signed base 10 integer that fits in 64 bits."""
    text = _string(s)
    if _DECIMAL_INT.fullmatch(text) is None:
        raise EvaluationError(f"{text} is not a base 10 integer")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise EvaluationError(f"{text} is not a base 10 integer")
    return float(value)