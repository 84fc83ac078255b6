"""Tests for the style-key walker and TemplateExtractor."""

import pytest

from plot_templates.extractor.style_walker import TemplateExtractor, walk_style_keys
from plot_templates.schema.builtin import build_default_plot_schema
from plot_templates.schema.models import AttributeInfo, Figure


@pytest.fixture
def schema():
    return build_default_plot_schema()


@pytest.fixture
def extractor(schema):
    return TemplateExtractor(schema)


# ---------------------------------------------------------------------------
# Trace extraction
# ---------------------------------------------------------------------------

class TestExtractTrace:
    def test_style_only(self, extractor):
        trace = {
            "type": "scatter",
            "x": [1, 2, 3],
            "y": [4, 5, 6],
            "mode": "lines",
            "line": {"color": "blue", "width": 2},
        }
        assert extractor.extract_trace(trace) == (
            "scatter", {"mode": "lines", "line": {"color": "blue", "width": 2}},
        )

    def test_array_ok_list_is_data(self, extractor):
        trace = {"type": "scatter", "marker": {"color": ["red", "blue"], "size": 10}}
        _, template = extractor.extract_trace(trace)
        assert template == {"marker": {"size": 10}}

    def test_array_ok_scalar_is_style(self, extractor):
        trace = {"type": "bar", "marker": {"color": "red", "line": {"width": [1, 2]}}}
        _, template = extractor.extract_trace(trace)
        assert template == {"marker": {"color": "red"}}

    def test_info_attributes_skipped(self, extractor):
        trace = {"type": "scatter", "name": "Series A", "text": "hi", "opacity": 0.5}
        _, template = extractor.extract_trace(trace)
        assert template == {"opacity": 0.5}

    def test_unknown_attributes_skipped(self, extractor):
        trace = {"bogus": 1, "bogusobj": {"color": "red"}, "mode": "markers"}
        assert extractor.extract_trace(trace) == ("scatter", {"mode": "markers"})

    def test_trace_type_resolved(self, extractor):
        assert extractor.extract_trace({"type": "pie", "hole": 0.4}) == ("pie", {"hole": 0.4})
        assert extractor.extract_trace({"type": "unknown"})[0] == "scatter"

    def test_not_a_mapping(self, extractor):
        assert extractor.extract_trace("junk") == ("scatter", {})

    def test_values_are_copied(self, extractor):
        trace = {"type": "scatter", "marker": {"colorscale": [[0, "white"], [1, "black"]]}}
        _, template = extractor.extract_trace(trace)
        trace["marker"]["colorscale"][0][1] = "red"
        assert template["marker"]["colorscale"] == [[0, "white"], [1, "black"]]

    def test_custom_lookup(self):
        template = {}
        walk_style_keys(
            {"a": 1, "b": {"a": 2}},
            template,
            lambda path: AttributeInfo(val_type="number", role="style")
            if path in ("a", "b.a") else AttributeInfo(role="object"),
        )
        assert template == {"a": 1, "b": {"a": 2}}

    def test_empty_key_skipped(self):
        template = {}
        walk_style_keys(
            {"a": 2, "": {"a": 1}},
            template,
            lambda path: AttributeInfo(val_type="number", role="style")
            if path == "a" else None,
        )
        assert template == {"a": 2}

    def test_empty_key_in_layout(self, extractor):
        assert extractor.extract_layout({"": {"font": {"size": 1}}}) == {}


# ---------------------------------------------------------------------------
# Layout extraction
# ---------------------------------------------------------------------------

class TestExtractLayout:
    def test_nested_groups(self, extractor):
        layout = {
            "font": {"family": "Arial", "size": 12},
            "title": {"text": "Revenue", "font": {"size": 20}},
            "width": 800,
            "paper_bgcolor": "#fff",
        }
        assert extractor.extract_layout(layout) == {
            "font": {"family": "Arial", "size": 12},
            "title": {"font": {"size": 20}},
            "paper_bgcolor": "#fff",
        }

    def test_numbered_axes(self, extractor):
        layout = {"xaxis2": {"gridcolor": "#eee", "range": [0, 1]}}
        assert extractor.extract_layout(layout) == {"xaxis2": {"gridcolor": "#eee"}}

    def test_data_arrays_in_layout(self, extractor):
        layout = {"xaxis": {"tickvals": [1, 2], "ticktext": ["a", "b"], "ticks": "outside"}}
        assert extractor.extract_layout(layout) == {"xaxis": {"ticks": "outside"}}

    def test_existing_template_not_copied(self, extractor):
        layout = {"template": {"layout": {"font": {"size": 3}}}, "font": {"size": 12}}
        assert extractor.extract_layout(layout) == {"font": {"size": 12}}

    def test_not_a_mapping(self, extractor):
        assert extractor.extract_layout(None) == {}

    def test_speculative_descent(self):
        template = {}
        walk_style_keys(
            {"wrapper": {"inner": 5, "other": 6}},
            template,
            lambda path: AttributeInfo(val_type="number", role="style")
            if path == "wrapper.inner" else None,
        )
        assert template == {"wrapper": {"inner": 5}}


# ---------------------------------------------------------------------------
# Array-linked groups
# ---------------------------------------------------------------------------

class TestArrayLinked:
    def test_first_name_wins_and_one_default(self, extractor):
        layout = {"annotations": [
            {"name": "a", "arrowcolor": "red"},
            {"name": "a", "arrowcolor": "blue"},
            {"arrowcolor": "green"},
        ]}
        assert extractor.extract_layout(layout) == {
            "annotations": [{"name": "a", "arrowcolor": "red"}],
            "annotationdefaults": {"arrowcolor": "green"},
        }

    def test_only_first_unnamed_item(self, extractor):
        layout = {"shapes": [{"fillcolor": "g"}, {"fillcolor": "h"}]}
        assert extractor.extract_layout(layout) == {"shapedefaults": {"fillcolor": "g"}}

    def test_named_index_skips_unnamed(self, extractor):
        layout = {"annotations": [
            {"bgcolor": "x"},
            {"name": "b", "bgcolor": "y"},
            {"name": "c", "opacity": 0.5},
        ]}
        template = extractor.extract_layout(layout)
        assert template["annotations"] == [
            {"name": "b", "bgcolor": "y"},
            {"name": "c", "opacity": 0.5},
        ]
        assert template["annotationdefaults"] == {"bgcolor": "x"}

    def test_name_recorded_first(self, extractor):
        layout = {"annotations": [{"bgcolor": "y", "name": "b"}]}
        template = extractor.extract_layout(layout)
        assert list(template["annotations"][0]) == ["name", "bgcolor"]

    def test_non_mapping_items_ignored(self, extractor):
        layout = {"annotations": ["junk", None, {"name": "a", "bgcolor": "y"}]}
        assert extractor.extract_layout(layout) == {
            "annotations": [{"name": "a", "bgcolor": "y"}],
        }

    def test_empty_name_is_unnamed(self, extractor):
        layout = {"annotations": [{"name": "", "bgcolor": "y"}]}
        template = extractor.extract_layout(layout)
        assert "annotations" not in template
        assert template["annotationdefaults"]["bgcolor"] == "y"

    def test_default_without_style(self, extractor):
        layout = {"annotations": [{"text": "hello", "x": 1, "y": 2}]}
        assert extractor.extract_layout(layout) == {}

    def test_item_data_skipped(self, extractor):
        layout = {"annotations": [{"text": "peak", "showarrow": True, "font": {"size": 9}}]}
        assert extractor.extract_layout(layout) == {
            "annotationdefaults": {"showarrow": True, "font": {"size": 9}},
        }


# ---------------------------------------------------------------------------
# Whole figures
# ---------------------------------------------------------------------------

class TestExtractFigure:
    def test_traces_bucketed_by_type(self, extractor):
        figure = Figure(
            data=[
                {"type": "scatter", "mode": "lines"},
                {"type": "bar", "opacity": 0.8},
                {"mode": "markers"},
            ],
            layout={"font": {"size": 12}},
        )
        template = extractor.extract(figure)
        assert template.data == {
            "scatter": [{"mode": "lines"}, {"mode": "markers"}],
            "bar": [{"opacity": 0.8}],
        }
        assert template.layout == {"font": {"size": 12}}

    def test_trace_without_style_gives_empty_entry(self, extractor):
        template = extractor.extract(Figure(data=[{"type": "bar", "x": [1]}]))
        assert template.data == {"bar": [{}]}

    def test_default_schema_used(self):
        assert TemplateExtractor().extract_trace({"type": "pie", "hole": 0.3}) == (
            "pie", {"hole": 0.3},
        )
