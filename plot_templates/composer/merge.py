"""Template composer — merges an older template into a freshly extracted one.

New values always win. The old template only fills gaps: keys the new
template lacks, nested containers present in both, and array entries
resolved by the array templater.

One known limitation: if the figure holds an invalid value where the old
template holds a valid one, the figure's value wins here even though the
figure itself rendered with the old template's value. Valid options depend
on context, so no single value could be chosen correctly in general.
"""

from __future__ import annotations

import copy

from plot_templates.schema.models import FigureTemplate, ValueKind, value_kind

from .array_templater import reconcile_arrays


def merge_templates(old_template: dict, new_template: dict) -> None:
    """Fill ``new_template`` in place with values from ``old_template``.

    The old template is deep-copied first, so nothing in the result is
    shared with it and it is never modified.
    """
    old_template = copy.deepcopy(old_template)

    # Sorted so default keys (annotationdefaults) come before their
    # collections (annotations)
    for key in sorted(old_template, key=str):
        old_val = old_template[key]
        if key not in new_template:
            new_template[key] = old_val
            continue

        new_val = new_template[key]
        old_kind = value_kind(old_val)
        new_kind = value_kind(new_val)
        if old_kind is ValueKind.OBJECT and new_kind is ValueKind.OBJECT:
            merge_templates(old_val, new_val)
        elif old_kind is ValueKind.SEQUENCE and new_kind is ValueKind.SEQUENCE:
            if not isinstance(new_val, list):
                new_val = new_template[key] = list(new_val)
            reconcile_arrays(old_val, new_val, merge_templates)


def merge_data_templates(old_data: dict, new_data: dict[str, list]) -> None:
    """Merge per-trace-type template lists.

    Trace templates pair up by position only, cycling over the old list;
    trace types only present in the old template are copied over.
    """
    for trace_type, new_items in new_data.items():
        old_items = old_data.get(trace_type)
        if value_kind(old_items) is ValueKind.SEQUENCE:
            reconcile_arrays(old_items, new_items, merge_templates,
                             match_names=False)

    for trace_type, old_items in old_data.items():
        if trace_type not in new_data and value_kind(old_items) is ValueKind.SEQUENCE:
            new_data[trace_type] = copy.deepcopy(list(old_items))


def compose_templates(old_template: dict, new_template: FigureTemplate) -> None:
    """Merge a raw prior template (``{"data": ..., "layout": ...}``) into ``new_template``."""
    old_layout = old_template.get("layout")
    if value_kind(old_layout) is ValueKind.OBJECT:
        merge_templates(old_layout, new_template.layout)

    old_data = old_template.get("data")
    if value_kind(old_data) is ValueKind.OBJECT:
        merge_data_templates(old_data, new_template.data)
