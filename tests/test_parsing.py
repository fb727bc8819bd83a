import pytest

from jsonnetkit.manifest import manifest_json_ex
from jsonnetkit.operators import EvaluationError
from jsonnetkit.parsing import parse_json, parse_yaml


def test_parse_json_object():
    assert parse_json('{"a": [1, 2], "b": null, "c": "x"}') == {
        "a": [1.0, 2.0],
        "b": None,
        "c": "x",
    }


def test_parse_json_numbers_are_floats():
    result = parse_json("[1, 2.5]")
    assert all(isinstance(n, float) for n in result)
    assert result == [1.0, 2.5]


def test_parse_json_invalid():
    with pytest.raises(EvaluationError, match="failed to parse JSON"):
        parse_json("{")


def test_parse_json_rejects_nan():
    with pytest.raises(EvaluationError, match="failed to parse JSON"):
        parse_json("NaN")


def test_parse_json_requires_string():
    with pytest.raises(EvaluationError):
        parse_json(3)


def test_parse_json_round_trip():
    value = {"k": [True, False, None, "s\n"], "n": {"m": 1.5}}
    assert parse_json(manifest_json_ex(value, "  ")) == value


def test_parse_yaml_single_document():
    assert parse_yaml("a: 1\nb:\n  - x\n  - y\n") == {"a": 1.0, "b": ["x", "y"]}


def test_parse_yaml_stream_gives_list():
    assert parse_yaml("---\na: 1\n---\nb: 2\n") == [{"a": 1.0}, {"b": 2.0}]


def test_parse_yaml_timestamp_kept_as_string():
    assert parse_yaml("d: 2001-12-14\n") == {"d": "2001-12-14"}


def test_parse_yaml_keys_become_strings():
    assert parse_yaml("1: x\ntrue: y\n") == {"1": "x", "true": "y"}


def test_parse_yaml_invalid():
    with pytest.raises(EvaluationError, match="failed to parse YAML"):
        parse_yaml("a: [1, 2")


def test_parse_yaml_accepts_json():
    text = '{"a": [1, "b"]}'
    assert parse_yaml(text) == parse_json(text)