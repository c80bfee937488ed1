import json

import pytest

from textkit import json_formatter as jf
from textkit.errors import JsonFormatError


def test_format_default_indent():
    assert jf.format_json({"a": [1, 2]}) == '{\n  "a": [\n    1,\n    2\n  ]\n}'


def test_format_sort_keys_recursive():
    data = {"b": 1, "a": {"d": 1, "c": [{"z": 1, "y": 2}]}}
    out = jf.format_json(data, indent=0, sort_keys=True)
    assert out == '{"a":{"c":[{"y":2,"z":1}],"d":1},"b":1}'


def test_format_sort_keys_respects_max_depth():
    data = {"b": {"y": 1, "x": 2}, "a": 0}
    out = jf.format_json(data, indent=0, sort_keys=True, max_depth=1)
    assert out == '{"a":0,"b":{"y":1,"x":2}}'


def test_format_with_type_comments():
    out = jf.format_json({"name": "x", "n": 1.5, "ok": True, "none": None, "list": []}, include_comments=True)
    lines = out.split("\n")
    assert '  "name": "x", // string' in lines
    assert '  "n": 1.5, // number' in lines
    assert '  "ok": true, // boolean' in lines
    assert '  "none": null, // null' in lines
    assert '  "list": []' in lines


def test_format_rejects_unserializable():
    with pytest.raises(JsonFormatError):
        jf.format_json({"s": {1, 2}})
    with pytest.raises(JsonFormatError):
        jf.format_json(float("nan"))


def test_minify():
    assert jf.minify_json({"a": [1, {"b": None}]}) == '{"a":[1,{"b":null}]}'
    assert jf.minify_json({"k": "ñ"}) == '{"k":"ñ"}'
    with pytest.raises(JsonFormatError):
        jf.minify_json(object())


def test_validate():
    ok = jf.validate_json('{"a": 1}')
    assert ok.is_valid and ok.data == {"a": 1} and ok.error is None

    bad = jf.validate_json('{"a": }')
    assert not bad.is_valid
    assert bad.data is None
    assert bad.error


def test_flatten_and_unflatten():
    nested = {"a": {"b": 1, "c": {"d": [1, 2]}}, "e": None, "empty": {}}
    flat = jf.flatten(nested)
    assert flat == {"a.b": 1, "a.c.d": [1, 2], "e": None}
    assert jf.unflatten(flat) == {"a": {"b": 1, "c": {"d": [1, 2]}}, "e": None}
    assert jf.flatten({"a": {"b": 1}}, delimiter="/") == {"a/b": 1}


def test_unflatten_conflict():
    with pytest.raises(JsonFormatError):
        jf.unflatten({"a": 1, "a.b": 2})
    with pytest.raises(JsonFormatError):
        jf.unflatten({"a.b": 2, "a": 1})


def test_merge_is_deep_and_pure():
    left = {"a": {"x": 1, "y": 1}, "list": [1]}
    right = {"a": {"y": 2, "z": 3}, "list": [2]}
    merged = jf.merge(left, right)
    assert merged == {"a": {"x": 1, "y": 2, "z": 3}, "list": [2]}
    assert left == {"a": {"x": 1, "y": 1}, "list": [1]}
    merged["list"].append(3)
    assert right["list"] == [2]
    assert jf.merge() == {}
    assert jf.merge({"a": 1}, {"a": {"b": 2}}) == {"a": {"b": 2}}


def test_extract_schema():
    data = json.loads('{"id": 1, "tags": ["x"], "meta": {"ok": true}, "none": null, "list": []}')
    assert jf.extract_schema(data) == {
        "type": "object",
        "properties": {
            "id": {"type": "number"},
            "tags": {"type": "array", "items": {"type": "string"}},
            "meta": {"type": "object", "properties": {"ok": {"type": "boolean"}}},
            "none": {"type": "null"},
            "list": {"type": "array", "items": {"type": "unknown"}},
        },
    }


def test_extract_schema_rejects_non_json():
    with pytest.raises(JsonFormatError):
        jf.extract_schema({"s": {1}})


@pytest.mark.parametrize("text", ["NaN", "Infinity", '{"a": -Infinity}', "[1, NaN]"])
def test_validate_rejects_non_finite_constants(text):
    result = jf.validate_json(text)
    assert result.is_valid is False
    assert result.data is None
    assert result.error


def test_format_sort_keys_with_mixed_key_types():
    out = jf.format_json({1: "a", "b": 2}, indent=0, sort_keys=True)
    assert out == '{"1":"a","b":2}'
