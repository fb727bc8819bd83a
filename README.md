# jsonnetkit

Pure-Python building blocks for a Jsonnet interpreter.

## Modules

- `jsonnetkit.location` – `Source`, `Location` and `LocationRange`, with
  `build_source`, `get_snippet`, `line_beginning`, `line_ending`,
  `location_before`, `location_range_between`, `make_location_range` and
  `make_location_range_message`.
- `jsonnetkit.fodder` – whitespace and comment "fodder" kept beside tokens
  (`FodderKind`, `FodderElement`, `make_fodder_element`, `fodder_append`,
  `fodder_concat`, `fodder_move_front`, `ensure_clean_newline`,
  `count_newlines`, ...). Malformed elements raise `ValueError`.
- `jsonnetkit.identifiers` – `IdentifierSet`, a `set` subclass with
  `add_identifiers`, `to_ordered_list`, `is_subset_of` and `is_superset_of`.
- `jsonnetkit.operators` – the binary and unary operators (`plus`, `minus`,
  `multiply`, `divide`, `modulo`, `compare`, `less`, `equals`,
  `primitive_equals`, `logical_not`, `bitwise_not`, ...), plus `type_name`,
  `to_string` and `check_number`.
- `jsonnetkit.text` – string and byte functions: `md5`, `base64_encode`,
  `base64_decode`, `base64_decode_bytes`, `encode_utf8`, `decode_utf8`,
  `char`, `codepoint`, `substr`, `split_limit`, `str_replace`,
  `lstrip_chars`, `rstrip_chars`, `strip_chars`, `parse_int`.
- `jsonnetkit.mathfuncs` – `sqrt`, `ceil`, `floor`, the trigonometric
  functions, `log`, `exp`, `mantissa`, `exponent`, `power` and the 64-bit
  `shift_left`, `shift_right`, `bitwise_and`, `bitwise_or`, `bitwise_xor`.
- `jsonnetkit.manifest` – `manifest_json_ex`, `manifest_toml_ex`,
  `toml_encode_string` and `toml_encode_key`.
- `jsonnetkit.parsing` – `parse_json` and `parse_yaml` (a YAML text that
  contains `---` gives a list of its documents).

## Values and errors

Jsonnet values are plain Python values: `None` for null, `bool`,
`int`/`float` for numbers, `str`, `list` for arrays and `dict` for objects;
any other callable counts as a function. Numeric results are floats, and a
result that is NaN or infinite is rejected. Run-time failures raise
`jsonnetkit.operators.EvaluationError`.

## Install

```
pip install jsonnetkit
```

## Examples

```python
from jsonnetkit import manifest, operators, parsing, text

operators.plus("a", 1)                    # "a1"
operators.plus([1], [2])                  # [1, 2]
operators.compare([1, 2], [1, 3])         # -1
text.split_limit("a,b,c", ",", 1)         # ["a", "b,c"]
text.substr("hello", 1, 3)                # "ell"
parsing.parse_yaml("a: 1")                # {"a": 1.0}

print(manifest.manifest_json_ex({"a": [1, 2]}, "  "))
# {
#   "a": [
#     1,
#     2
#   ]
# }

print(manifest.manifest_toml_ex({"a": 1, "b": {"c": "x"}}, "  "))
# a = 1
#
# [b]
#   c = "x"
```

## What it does not do

The package provides the pieces listed above only. It has no Jsonnet lexer,
parser or evaluator, so it cannot run Jsonnet programs; it has no
higher-order array and object functions (such as sorting, folding or
filtering) and no lookup of functions by their Jsonnet name; and it offers
no command-line tool.

## Running the tests

```
pip install "jsonnetkit[test]"
pytest
```