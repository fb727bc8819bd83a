import json

import pytest

from jsonnetkit.manifest import (
    manifest_json_ex,
    manifest_toml_ex,
    toml_encode_key,
    toml_encode_string,
)
from jsonnetkit.operators import EvaluationError

SAMPLES = [
    {"a": 1, "b": [1, 2, {"c": None}], "d": "text\nwith \"quotes\""},
    [True, False, None, 1.5, -3, "x"],
    {"nested": {"deep": {"deeper": [[], {}]}}},
    "\u0001control\ttab",
]


@pytest.mark.parametrize("value", SAMPLES)
def test_json_round_trip(value):
    assert json.loads(manifest_json_ex(value, "    ")) == value


@pytest.mark.parametrize("value", SAMPLES)
def test_compact_form_matches_compact_json(value):
    out = manifest_json_ex(value, "", "", ":")
    expected = json.dumps(value, separators=(",", ":"), sort_keys=True, ensure_ascii=False)
    assert out == expected


def test_json_keys_are_sorted_and_indented():
    out = manifest_json_ex({"z": 1, "a": 2}, "  ")
    lines = out.split("\n")
    assert lines[0] == "{"
    assert lines[1].startswith('  "a": ')
    assert lines[2].startswith('  "z": ')
    assert lines[-1] == "}"


def test_json_empty_array_layout():
    assert manifest_json_ex([], "  ") == "[\n\n]"


def test_json_integral_floats_have_no_fraction():
    out = manifest_json_ex([2.0, 100.0], "", "", ":")
    assert json.loads(out) == [2, 100]
    assert "." not in out


def test_json_function_is_rejected_with_path():
    with pytest.raises(EvaluationError, match=r"tried to manifest function at \[a 0\]"):
        manifest_json_ex({"a": [lambda x: x]}, "  ")


def test_json_indent_must_be_string():
    with pytest.raises(EvaluationError):
        manifest_json_ex({}, 4)


def test_toml_encode_key_bare_and_empty():
    assert toml_encode_key("abc-_19") == "abc-_19"
    assert toml_encode_key("") == "''"


def test_toml_encode_key_quotes_when_needed():
    assert toml_encode_key("a b") == toml_encode_string("a b")


def test_toml_encode_string_escapes():
    assert toml_encode_string('a"\n') == '"a\\"\\n"'
    assert json.loads(toml_encode_string("tab\there")) == "tab\there"


def test_toml_simple_fields():
    assert manifest_toml_ex({"b": "x", "a": 1}, "  ") == 'a = 1\nb = "x"'


def test_toml_nested_table():
    assert manifest_toml_ex({"t": {"k": True}}, "  ") == "\n\n[t]\n  k = true"


def test_toml_table_array_headers():
    items = [{"n": 1}, {"n": 2}, {"n": 3}]
    out = manifest_toml_ex({"items": items}, "  ")
    assert out.count("[[items]]") == len(items)


def test_toml_multiline_array_value():
    out = manifest_toml_ex({"a": [1, 2]}, "  ")
    lines = out.split("\n")
    assert lines[0] == "a = ["
    assert lines[-1] == "]"
    assert len(lines) == 4


def test_toml_quoted_key_used_in_output():
    out = manifest_toml_ex({"a b": 1}, "")
    assert out.startswith(toml_encode_key("a b") + " = ")


def test_toml_empty_object_is_empty_document():
    assert manifest_toml_ex({}, "  ") == ""


def test_toml_body_must_be_object():
    with pytest.raises(EvaluationError, match="TOML body must be an object. Got array"):
        manifest_toml_ex([1], "  ")


def test_toml_null_is_rejected_with_path():
    with pytest.raises(EvaluationError, match=r'Tried to manifest "null" at \[a\]'):
        manifest_toml_ex({"a": None}, "  ")


def test_toml_function_is_rejected():
    with pytest.raises(EvaluationError, match="Tried to manifest function"):
        manifest_toml_ex({"f": lambda: 1}, "  ")