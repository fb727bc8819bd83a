"""Rendering values as JSON and TOML text."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any

from jsonnetkit.operators import EvaluationError, _unparse_number, type_name

_BARE_KEY_CHARS = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
)

_TOML_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

_JSON_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _require_string(value: Any) -> str:
    if not isinstance(value, str):
        raise EvaluationError(f"Unexpected type {type_name(value)}, expected string")
    return value


def _format_path(path: list[str]) -> str:
    return "[" + " ".join(path) + "]"


def _json_number(v: float) -> str:
    """Shortest decimal form without an exponent."""
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "+Inf" if v > 0 else "-Inf"
    return format(Decimal(repr(float(v))).normalize(), "f")


def _json_string(s: str) -> str:
    parts = ['"']
    for c in s:
        if c in _JSON_ESCAPES:
            parts.append(_JSON_ESCAPES[c])
        elif ord(c) < 0x20:
            parts.append(f"\\u{ord(c):04x}")
        else:
            parts.append(c)
    parts.append('"')
    return "".join(parts)


def manifest_json_ex(
    value: Any, indent: Any, newline: Any = "\n", key_val_sep: Any = ": "
) -> str:
    """Render ``value`` as JSON with the given indent, newline and separator."""
    sindent = _require_string(indent)
    nl = _require_string(newline)
    kv_sep = _require_string(key_val_sep)

    def render(v: Any, path: list[str], cindent: str) -> str:
        kind = type_name(v)
        if kind == "null":
            return "null"
        if kind == "string":
            return _json_string(v)
        if kind == "number":
            return _json_number(float(v))
        if kind == "boolean":
            return "true" if v else "false"
        if kind == "function":
            raise EvaluationError(f"tried to manifest function at {_format_path(path)}")
        new_indent = cindent + sindent
        if kind == "array":
            lines = (
                new_indent + render(elem, [*path, str(index)], new_indent)
                for index, elem in enumerate(v)
            )
            return "[" + nl + ("," + nl).join(lines) + nl + cindent + "]"
        lines = (
            new_indent
            + _json_string(name)
            + kv_sep
            + render(v[name], [*path, name], new_indent)
            for name in sorted(v)
        )
        return "{" + nl + ("," + nl).join(lines) + nl + cindent + "}"

    return render(value, [], "")


def toml_encode_string(s: str) -> str:
    """Quote ``s`` as a TOML basic string."""
    parts = ['"']
    for c in s:
        if c in _TOML_ESCAPES:
            parts.append(_TOML_ESCAPES[c])
        elif ord(c) < 32 or 127 <= ord(c) <= 159:
            parts.append(f"\\u{ord(c):04x}")
        else:
            parts.append(c)
    parts.append('"')
    return "".join(parts)


def toml_encode_key(s: str) -> str:
    """A bare key if allowed, otherwise a quoted one; the empty key is ``''``."""
    if not s:
        return "''"
    if all(c in _BARE_KEY_CHARS for c in s):
        return s
    return toml_encode_string(s)


def _is_section(value: Any) -> bool:
    if isinstance(value, dict):
        return True
    if isinstance(value, list):
        return bool(value) and all(isinstance(elem, dict) for elem in value)
    return False


def _render_value(
    value: Any, sindent: str, path: list[str], inline: bool, cindent: str
) -> str:
    kind = type_name(value)
    if kind == "null":
        raise EvaluationError(f'Tried to manifest "null" at {_format_path(path)}')
    if kind == "boolean":
        return "true" if value else "false"
    if kind == "number":
        return _unparse_number(float(value))
    if kind == "string":
        return toml_encode_string(value)
    if kind == "function":
        raise EvaluationError(f"Tried to manifest function at {_format_path(path)}")
    if kind == "array":
        if not value:
            return "[]"
        new_indent = "" if inline else cindent + sindent
        separator = " " if inline else "\n"
        items = (
            new_indent
            + _render_value(elem, sindent, [*path, str(index)], True, "")
            for index, elem in enumerate(value)
        )
        res = "[" + separator + ("," + separator).join(items) + separator
        if inline:
            res += cindent
        return res + "]"
    fields = (
        toml_encode_key(name)
        + " = "
        + _render_value(value[name], sindent, [*path, name], True, "")
        for name in sorted(value)
    )
    return "{ " + ", ".join(fields) + " }"


def _header(path: list[str]) -> str:
    return ".".join(toml_encode_key(element) for element in path)


def _render_table_array(
    value: list, sindent: str, path: list[str], indexed_path: list[str], cindent: str
) -> str:
    sections = []
    for index, elem in enumerate(value):
        if not isinstance(elem, dict):
            raise EvaluationError(
                f"invalid type for section: {type_name(elem)}"
            )
        section = cindent + "[[" + _header(path) + "]]"
        if elem:
            section += "\n"
        section += _table_internal(
            elem, sindent, path, [*indexed_path, str(index)], cindent + sindent
        )
        sections.append(section)
    return "\n\n".join(sections)


def _render_table(
    value: dict, sindent: str, path: list[str], indexed_path: list[str], cindent: str
) -> str:
    res = cindent + "[" + _header(path) + "]"
    if value:
        res += "\n"
    return res + _table_internal(value, sindent, path, indexed_path, cindent + sindent)


def _table_internal(
    value: dict, sindent: str, path: list[str], indexed_path: list[str], cindent: str
) -> str:
    fields: list[str] = []
    sections: list[str] = [""]
    for name in sorted(value):
        field_value = value[name]
        child_indexed = [*indexed_path, name]
        if _is_section(field_value):
            child_path = [*path, name]
            if isinstance(field_value, dict):
                sections.append(
                    _render_table(field_value, sindent, child_path, child_indexed, cindent)
                )
            else:
                sections.append(
                    _render_table_array(
                        field_value, sindent, child_path, child_indexed, cindent
                    )
                )
        else:
            rendered = _render_value(field_value, sindent, child_indexed, False, "")
            fields.extend((toml_encode_key(name) + " = " + rendered).split("\n"))
    res = cindent if fields else ""
    return res + ("\n" + cindent).join(fields) + "\n\n".join(sections)


def manifest_toml_ex(value: Any, indent: Any) -> str:
    """Render an object as a TOML document, indenting nested tables."""
    sindent = _require_string(indent)
    if not isinstance(value, dict):
        raise EvaluationError(f"TOML body must be an object. Got {type_name(value)}")
    return _table_internal(value, sindent, [], [], "")