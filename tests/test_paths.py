"""Tests for attribute path building and nested property access."""

from plot_templates.paths import nested_get, nested_set, next_path, split_path


# ---------------------------------------------------------------------------
# next_path
# ---------------------------------------------------------------------------

class TestNextPath:
    def test_empty_path_uses_key(self):
        assert next_path({}, "marker", "") == "marker"

    def test_empty_path_with_index(self):
        assert next_path([], 0, "") == "0"

    def test_object_parent(self):
        assert next_path({}, "color", "marker") == "marker.color"

    def test_sequence_parent(self):
        assert next_path([{}], 2, "annotations") == "annotations[2]"

    def test_tuple_parent(self):
        assert next_path(({},), 1, "shapes") == "shapes[1]"

    def test_nested(self):
        path = next_path({}, "annotations", "")
        path = next_path([], 0, path)
        path = next_path({}, "font", path)
        assert next_path({}, "size", path) == "annotations[0].font.size"


# ---------------------------------------------------------------------------
# split_path
# ---------------------------------------------------------------------------

class TestSplitPath:
    def test_dotted(self):
        assert split_path("marker.line.color") == ["marker", "line", "color"]

    def test_indices_become_ints(self):
        assert split_path("annotations[2].font.size") == [
            "annotations", 2, "font", "size",
        ]

    def test_consecutive_indices(self):
        assert split_path("a[0][1]") == ["a", 0, 1]

    def test_empty(self):
        assert split_path("") == []


# ---------------------------------------------------------------------------
# nested_get / nested_set
# ---------------------------------------------------------------------------

class TestNestedGet:
    def test_reads_through_lists(self):
        data = {"a": {"b": [{"c": 1}]}}
        assert nested_get(data, "a.b[0].c") == 1

    def test_missing_key(self):
        assert nested_get({"a": {}}, "a.b") is None

    def test_missing_index(self):
        assert nested_get({"a": [{}]}, "a[3]", default="x") == "x"

    def test_wrong_kind(self):
        assert nested_get({"a": 5}, "a.b", default=0) == 0


class TestNestedSet:
    def test_creates_dicts(self):
        out = {}
        nested_set(out, "font.size", 12)
        assert out == {"font": {"size": 12}}

    def test_creates_padded_lists(self):
        out = {}
        nested_set(out, "annotations[1].bgcolor", "red")
        assert out == {"annotations": [{}, {"bgcolor": "red"}]}

    def test_preserves_siblings(self):
        out = {"font": {"family": "Arial"}}
        nested_set(out, "font.size", 12)
        assert out == {"font": {"family": "Arial", "size": 12}}

    def test_overwrites_value(self):
        out = {"font": {"size": 10}}
        nested_set(out, "font.size", 14)
        assert out["font"]["size"] == 14

    def test_replaces_scalar_intermediate(self):
        out = {"font": "Arial"}
        nested_set(out, "font.size", 12)
        assert out == {"font": {"size": 12}}

    def test_empty_path_is_noop(self):
        out = {"a": 1}
        nested_set(out, "", 2)
        assert out == {"a": 1}
