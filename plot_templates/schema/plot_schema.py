"""Attribute schema — classifies figure attribute paths for the extractor.

The extractor never inspects trace types or attribute names itself; it asks
an ``AttributeSchema`` what a path is (style leaf, data payload, container,
array-linked group) and acts on the answer.

``PlotSchema`` is the shipped implementation. It reads a nested attribute
dictionary in which leaves carry a ``valType`` and every other mapping is a
container::

    default_trace_type: scatter
    trace_common:
      opacity: {valType: number, role: style}
    traces:
      scatter:
        attributes:
          x: {valType: data_array}
          marker:
            color: {valType: color, role: style, arrayOk: true}
    layout:
      attributes:
        xaxis:
          _isSubplotObj: true
          gridcolor: {valType: color, role: style}
        annotations:
          _isLinkedToArray: annotation
          text: {valType: string, role: info}

Default-variant keys: an array-linked group ``annotations`` stores its
default item under ``array_default_key("annotations")`` ==
``"annotationdefaults"``. Any naming convention must return a key that
sorts before the group key, because the composer relies on processing the
defaults entry first.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any

from ..paths import split_path
from .models import AttributeInfo

# Keys inside an attribute container that describe it rather than name a child
_META_KEYS = {"role", "description", "editType"}

# Numbered subplot ids: xaxis2, scene3, ...
_SUBPLOT_ID_RE = re.compile(r"^([a-z]+?)([2-9]|[1-9][0-9]+)$")

DEFAULT_TRACE_TYPE = "scatter"


def array_default_key(name: str) -> str:
    """Key holding the default item of an array-linked group.

    ``annotations`` -> ``annotationdefaults``.
    """
    if name.endswith("s"):
        name = name[:-1]
    return name + "defaults"


def _is_meta(key: Any) -> bool:
    return not isinstance(key, str) or key.startswith("_") or key in _META_KEYS


def _is_leaf(node: dict) -> bool:
    return "valType" in node


def _is_linked(node: dict) -> bool:
    return bool(node.get("_isLinkedToArray"))


# ---------------------------------------------------------------------------
# AttributeSchema — the interface the extractor depends on
# ---------------------------------------------------------------------------

class AttributeSchema(ABC):
    """Classifies attribute paths of traces and layouts."""

    @abstractmethod
    def trace_attribute_info(self, trace: dict, path: str) -> AttributeInfo | None:
        """Metadata for ``path`` inside ``trace``, or None if unknown."""

    @abstractmethod
    def layout_attribute_info(self, layout: dict, path: str) -> AttributeInfo | None:
        """Metadata for ``path`` inside ``layout``, or None if unknown."""

    @abstractmethod
    def trace_type(self, trace: dict) -> str:
        """Resolve a trace's type, falling back to the default trace type."""

    def array_default_key(self, name: str) -> str:
        return array_default_key(name)


# ---------------------------------------------------------------------------
# PlotSchema — dictionary-backed implementation
# ---------------------------------------------------------------------------

class PlotSchema(AttributeSchema):
    """AttributeSchema over a nested attribute dictionary (see module docs)."""

    def __init__(
        self,
        traces: dict[str, dict],
        layout_attributes: dict[str, Any],
        trace_common: dict[str, Any] | None = None,
        default_trace_type: str = DEFAULT_TRACE_TYPE,
    ):
        self.layout_attributes = layout_attributes
        self.default_trace_type = default_trace_type
        # Common trace attributes are shared; type-specific ones override them
        self.trace_attributes: dict[str, dict] = {
            name: {**(trace_common or {}), **attrs}
            for name, attrs in traces.items()
        }

    # -- AttributeSchema ----------------------------------------------------

    def trace_type(self, trace: dict) -> str:
        trace_type = trace.get("type") if isinstance(trace, dict) else None
        if isinstance(trace_type, str) and trace_type in self.trace_attributes:
            return trace_type
        return self.default_trace_type

    def trace_attribute_info(self, trace: dict, path: str) -> AttributeInfo | None:
        attributes = self.trace_attributes.get(self.trace_type(trace))
        if attributes is None:
            return None
        return self._resolve(attributes, path)

    def layout_attribute_info(self, layout: dict, path: str) -> AttributeInfo | None:
        return self._resolve(self.layout_attributes, path)

    # -- Resolution ---------------------------------------------------------

    def _resolve(self, root: dict, path: str) -> AttributeInfo | None:
        parts = split_path(path)
        if not parts:
            return None

        node = root
        # True while `node` is an array-linked group addressed by its own key,
        # i.e. the next part must be an item index
        at_group = False
        for part in parts:
            if isinstance(part, int):
                if not at_group:
                    return None
                at_group = False
                continue
            if at_group or _is_leaf(node):
                return None
            child, is_item = self._child(node, part)
            if child is None:
                return None
            node = child
            at_group = _is_linked(node) and not is_item

        return self._info(node, at_group)

    def _child(self, node: dict, key: str) -> tuple[dict | None, bool]:
        """Look up ``key`` in a container; the flag marks an item schema."""
        if _is_meta(key):
            return None, False

        child = node.get(key)
        if isinstance(child, dict):
            return child, False

        for name, group in node.items():
            if (not _is_meta(name) and isinstance(group, dict)
                    and _is_linked(group)
                    and self.array_default_key(name) == key):
                return group, True

        match = _SUBPLOT_ID_RE.match(key)
        if match:
            base = node.get(match.group(1))
            if isinstance(base, dict) and base.get("_isSubplotObj"):
                return base, False

        return None, False

    @staticmethod
    def _info(node: dict, at_group: bool) -> AttributeInfo:
        if _is_leaf(node):
            return AttributeInfo(
                val_type=node["valType"],
                array_ok=bool(node.get("arrayOk", False)),
                role=node.get("role"),
            )
        return AttributeInfo(
            role=node.get("role", "object"),
            is_linked_to_array=at_group,
        )

    # -- Construction -------------------------------------------------------

    def to_dict(self) -> dict:
        return {
            "default_trace_type": self.default_trace_type,
            "traces": {
                name: {"attributes": attrs}
                for name, attrs in self.trace_attributes.items()
            },
            "layout": {"attributes": self.layout_attributes},
        }

    @classmethod
    def from_dict(cls, d: Any) -> "PlotSchema":
        """Build from a schema document; raises ValueError if malformed."""
        if not isinstance(d, dict):
            raise ValueError("Plot schema must be a mapping")

        traces = d.get("traces", {})
        if not isinstance(traces, dict):
            raise ValueError("Plot schema 'traces' must be a mapping")
        trace_attrs: dict[str, dict] = {}
        for name, trace in traces.items():
            attrs = trace.get("attributes") if isinstance(trace, dict) else None
            if not isinstance(attrs, dict):
                raise ValueError(
                    f"Trace type {name!r} must define an 'attributes' mapping"
                )
            trace_attrs[name] = attrs

        layout = d.get("layout", {})
        layout_attrs = layout.get("attributes", {}) if isinstance(layout, dict) else None
        if not isinstance(layout_attrs, dict):
            raise ValueError("Plot schema 'layout.attributes' must be a mapping")

        trace_common = d.get("trace_common", {})
        if not isinstance(trace_common, dict):
            raise ValueError("Plot schema 'trace_common' must be a mapping")

        return cls(
            traces=trace_attrs,
            layout_attributes=layout_attrs,
            trace_common=trace_common,
            default_trace_type=d.get("default_trace_type", DEFAULT_TRACE_TYPE),
        )
