"""Style-key walker — copies the stylistic attributes of a figure into a template.

Walks a trace or layout mapping in insertion order, asks the attribute
schema what each path is, and writes only style leaves into the output
template. Values are copied verbatim; they are not validated here, since a
value valid in the source figure may be invalid once applied to another
figure and is re-checked when the template is applied.

Array-linked groups (annotations, shapes, ...) are reduced to:
    - one template entry per distinct item ``name``, in first-occurrence
      order, addressed by a running named index;
    - one default entry, from the first unnamed item, stored under the
      group's default key (``annotationdefaults``).
Later unnamed items and repeated names contribute nothing.
"""

from __future__ import annotations

import copy
from functools import partial
from typing import Any, Callable

from plot_templates.paths import nested_set, next_path
from plot_templates.schema.builtin import build_default_plot_schema
from plot_templates.schema.models import (
    AttributeInfo,
    Figure,
    FigureTemplate,
    ValueKind,
    value_kind,
)
from plot_templates.schema.plot_schema import AttributeSchema, array_default_key

InfoLookup = Callable[[str], "AttributeInfo | None"]


def _item_name(item: dict) -> str | None:
    """The item's name if it makes the item a named item, else None."""
    name = item.get("name")
    if isinstance(name, str) and name:
        return name
    return None


def walk_style_keys(
    parent: dict,
    template_out: dict,
    get_info: InfoLookup,
    path: str = "",
    default_key: Callable[[str], str] = array_default_key,
) -> None:
    """Copy every style leaf under ``parent`` into ``template_out``.

    ``get_info`` maps a path to its AttributeInfo (None for unknown paths).
    ``template_out`` is written at the same paths the values were read from.
    """
    for key, child in parent.items():
        child_path = next_path(parent, key, path)
        if not child_path:
            continue
        info = get_info(child_path)
        kind = value_kind(child)

        if info is None:
            # Unknown container: keep looking for known paths beneath it
            if kind is ValueKind.OBJECT:
                walk_style_keys(child, template_out, get_info, child_path, default_key)
            continue

        if info.holds_data(child):
            continue

        if info.is_container and kind is ValueKind.OBJECT:
            walk_style_keys(child, template_out, get_info, child_path, default_key)
        elif info.is_linked_to_array and kind is ValueKind.SEQUENCE:
            _walk_linked_items(parent, key, child, template_out, get_info,
                               path, default_key)
        elif info.is_style:
            nested_set(template_out, child_path, copy.deepcopy(child))


def _walk_linked_items(
    parent: dict,
    key: str,
    items: list,
    template_out: dict,
    get_info: InfoLookup,
    path: str,
    default_key: Callable[[str], str],
) -> None:
    """Extract named entries and the default entry of an array-linked group."""
    items_path = next_path(parent, key, path)
    seen_names: set[str] = set()
    default_done = False

    for item in items:
        if value_kind(item) is not ValueKind.OBJECT:
            continue
        name = _item_name(item)
        if name is not None:
            if name in seen_names:
                continue
            item_path = next_path(items, len(seen_names), items_path)
            seen_names.add(name)
            # Name goes in first so entries can be matched by name later
            nested_set(template_out, next_path(item, "name", item_path), name)
            walk_style_keys(item, template_out, get_info, item_path, default_key)
        elif not default_done:
            default_done = True
            default_path = next_path(parent, default_key(key), path)
            walk_style_keys(item, template_out, get_info, default_path, default_key)


# ---------------------------------------------------------------------------
# TemplateExtractor
# ---------------------------------------------------------------------------

class TemplateExtractor:
    """Extracts style-only templates from traces, layouts, and figures.

    Uses the given AttributeSchema, or the built-in schema when none is
    supplied. Extraction alone does not merge with a figure's existing
    template; see ``make_template`` for that.
    """

    def __init__(self, schema: AttributeSchema | None = None):
        self.schema = schema if schema is not None else build_default_plot_schema()

    def extract_trace(self, trace: Any) -> tuple[str, dict]:
        """Return ``(trace_type, trace_template)`` for one trace."""
        trace_template: dict = {}
        if value_kind(trace) is ValueKind.OBJECT:
            walk_style_keys(
                trace,
                trace_template,
                partial(self.schema.trace_attribute_info, trace),
                default_key=self.schema.array_default_key,
            )
        return self.schema.trace_type(trace), trace_template

    def extract_layout(self, layout: Any) -> dict:
        """Return the layout template for one layout mapping."""
        layout_template: dict = {}
        if value_kind(layout) is ValueKind.OBJECT:
            walk_style_keys(
                layout,
                layout_template,
                partial(self.schema.layout_attribute_info, layout),
                default_key=self.schema.array_default_key,
            )
        return layout_template

    def extract(self, figure: Figure) -> FigureTemplate:
        """Extract a fresh template from every trace and the layout."""
        template = FigureTemplate()
        for trace in figure.data:
            trace_type, trace_template = self.extract_trace(trace)
            template.data.setdefault(trace_type, []).append(trace_template)
        template.layout = self.extract_layout(figure.layout)
        return template
