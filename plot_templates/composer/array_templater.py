"""Array templater — pairs live array items with entries of an older template array.

Used when both the old and the new template hold a list at the same key
(array-linked groups such as ``annotations``, and the per-type trace
template lists). For each new item the templater resolves the old entry to
merge into it:

    1. for a named item (name matching enabled), the old entry with the
       same ``name`` (first occurrence), or nothing if no old entry has it;
    2. for an unnamed item, the old entry at ``index % len(old_items)``, so
       a short template is reused cyclically across a longer array.

Old entries the new array does not use are carried over as extra template
variants: unnamed ones past the end of the new array, and named ones whose
name the new array lacks.
"""

from __future__ import annotations

import copy
from typing import Any, Callable

from plot_templates.schema.models import ValueKind, value_kind


def _item_name(item: Any) -> str | None:
    if value_kind(item) is not ValueKind.OBJECT:
        return None
    name = item.get("name")
    if isinstance(name, str) and name:
        return name
    return None


class ArrayTemplater:
    """Resolves the old template entry for each item of a new array."""

    def __init__(self, old_items: list, match_names: bool = True):
        self.old_items = list(old_items)
        self.match_names = match_names
        self._by_name: dict[str, Any] = {}
        if match_names:
            for item in self.old_items:
                name = _item_name(item)
                if name is not None and name not in self._by_name:
                    self._by_name[name] = item

    def template_for(self, index: int, item: Any) -> dict | None:
        """Old entry to merge into new item ``index``, or None.

        A named item only ever takes the old entry of the same name; it
        gets None when there is none.
        """
        name = _item_name(item) if self.match_names else None
        if name is not None:
            match = self._by_name.get(name)
        elif self.old_items:
            match = self.old_items[index % len(self.old_items)]
        else:
            match = None
        return match if value_kind(match) is ValueKind.OBJECT else None

    def leftover_items(self, new_items: list) -> list:
        """Deep copies of the old entries the new array does not cover.

        These are the entries past the end of the new array, plus (with name
        matching on) named entries whose name no new item carries. An old
        name is never carried over twice.
        """
        new_length = len(new_items)
        if not self.match_names:
            return [copy.deepcopy(item) for item in self.old_items[new_length:]]

        taken = {_item_name(item) for item in new_items}
        taken.discard(None)
        leftovers = []
        for index, item in enumerate(self.old_items):
            name = _item_name(item)
            if name is None:
                if index >= new_length:
                    leftovers.append(copy.deepcopy(item))
            elif name not in taken:
                taken.add(name)
                leftovers.append(copy.deepcopy(item))
        return leftovers


def reconcile_arrays(
    old_items: list,
    new_items: list,
    merge: Callable[[dict, dict], None],
    match_names: bool = True,
) -> None:
    """Merge old entries into ``new_items`` in place, then append leftovers.

    ``merge(old, new)`` fills gaps in ``new`` from ``old`` without aliasing
    ``old``; new values always win.
    """
    templater = ArrayTemplater(old_items, match_names=match_names)
    for index, item in enumerate(new_items):
        if value_kind(item) is not ValueKind.OBJECT:
            continue
        old_item = templater.template_for(index, item)
        if old_item is not None:
            merge(old_item, item)
    new_items.extend(templater.leftover_items(new_items))
