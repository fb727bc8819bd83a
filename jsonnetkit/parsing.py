"""Parsing JSON and YAML text into values."""

from __future__ import annotations

import json
import math
from typing import Any

import yaml

from jsonnetkit.operators import EvaluationError, type_name
from jsonnetkit.text import _go_float


class _YamlLoader(yaml.SafeLoader):
    """A safe loader that keeps timestamps as the strings they were written as."""


_YamlLoader.add_constructor(
    "tag:yaml.org,2002:timestamp",
    lambda loader, node: loader.construct_scalar(node),
)


def _require_string(value: Any) -> str:
    if not isinstance(value, str):
        raise EvaluationError(f"Unexpected type {type_name(value)}, expected string")
    return value


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid character '{name[0]}' looking for beginning of value")


def _json_key(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, int):
        return str(key)
    if isinstance(key, float):
        return _go_float(key)
    raise ValueError(f"unsupported map key of type {type(key).__name__}")


def _to_value(data: Any) -> Any:
    """Turn decoded data into a value: numbers become floats, keys strings."""
    if data is None or isinstance(data, (bool, str)):
        return data
    if isinstance(data, (int, float)):
        number = float(data)
        if not math.isfinite(number):
            raise ValueError(f"unsupported value: {_go_float(number)}")
        return number
    if isinstance(data, list):
        return [_to_value(elem) for elem in data]
    if isinstance(data, dict):
        return {_json_key(key): _to_value(val) for key, val in data.items()}
    raise ValueError(f"unsupported value of type {type(data).__name__}")


def parse_json(s: Any) -> Any:
    """Parse a JSON document."""
    text = _require_string(s)
    try:
        data = json.loads(text, parse_constant=_reject_constant)
        return _to_value(data)
    except ValueError as err:
        raise EvaluationError(f"failed to parse JSON: {err}") from err


def parse_yaml(s: Any) -> Any:
    """Parse YAML; a text containing ``---`` gives a list of its documents."""
    text = _require_string(s)
    is_stream = "---" in text
    try:
        documents = [
            _to_value(doc) for doc in yaml.load_all(text, Loader=_YamlLoader)
        ]
    except (yaml.YAMLError, ValueError) as err:
        raise EvaluationError(f"failed to parse YAML: {err}") from err
    if is_stream:
        return documents
    return documents[0] if documents else None