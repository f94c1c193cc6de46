from workspace_paths.fields import MISSING, get_deep, split_key_path


def test_split_key_path():
    assert split_key_path("main:src") == ("main", "src")
    assert split_key_path("module") == ("module",)


def test_get_deep_nested_value():
    doc = {"a": {"b": {"c": "value"}}}
    assert get_deep(doc, ["a", "b", "c"]) == "value"
    assert get_deep(doc, ["a", "b"]) == {"c": "value"}


def test_get_deep_missing_intermediate_segment():
    assert get_deep({"a": {}}, ["x", "b"]) is MISSING
    assert get_deep({"a": {}}, ["a", "b", "c"]) is MISSING


def test_get_deep_missing_final_segment():
    assert get_deep({"a": {}}, ["a", "b"]) is MISSING


def test_get_deep_returns_falsy_values_as_is():
    doc = {"flags": {"off": False, "zero": 0, "empty": "", "null": None}}
    assert get_deep(doc, ["flags", "off"]) is False
    assert get_deep(doc, ["flags", "zero"]) == 0
    assert get_deep(doc, ["flags", "empty"]) == ""
    assert get_deep(doc, ["flags", "null"]) is None


def test_get_deep_stops_at_non_mapping():
    assert get_deep({"main": "src/index.js"}, ["main", "src"]) is MISSING


def test_get_deep_does_not_mutate_key_path():
    key_path = ["a", "b"]
    get_deep({"a": {"b": 1}}, key_path)
    assert key_path == ["a", "b"]


def test_get_deep_empty_key_path():
    assert get_deep({"a": 1}, []) is MISSING


def test_missing_is_falsy():
    assert not MISSING
    assert repr(MISSING) == "MISSING"
