"""Template models - the contract between the attribute schema, extractor, and composer.

Defines the figure being read, the per-path attribute metadata the schema
hands back, and the style template produced from a figure.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class ValueKind(Enum):
    """Structural kind of a figure or template value."""
    SCALAR = "scalar"        # Strings, numbers, booleans, None
    OBJECT = "object"        # Plain mapping (attribute container)
    SEQUENCE = "sequence"    # Ordered list (data, or array-linked items)


class Role(Enum):
    """Attribute roles as declared in the attribute schema."""
    STYLE = "style"
    INFO = "info"
    DATA = "data"
    OBJECT = "object"


DATA_ARRAY = "data_array"


def value_kind(value: Any) -> ValueKind:
    """Classify a value for traversal and merge dispatch."""
    if isinstance(value, dict):
        return ValueKind.OBJECT
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    return ValueKind.SCALAR


# ---------------------------------------------------------------------------
# AttributeInfo — schema metadata for one attribute path
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AttributeInfo:
    """Classification of a single attribute path.

    Containers (attribute groups such as ``marker`` or ``font``) have no
    ``val_type``. Leaves carry a ``val_type``; ``"data_array"`` marks raw
    data, and ``array_ok`` leaves hold data whenever their value is a list.
    """
    val_type: str | None = None
    array_ok: bool = False
    role: str | None = None
    is_linked_to_array: bool = False

    @property
    def is_container(self) -> bool:
        return self.val_type is None

    @property
    def is_data_array(self) -> bool:
        return self.val_type == DATA_ARRAY

    @property
    def is_style(self) -> bool:
        return self.role == Role.STYLE.value

    def holds_data(self, value: Any) -> bool:
        """True if ``value`` at this attribute is a data payload, not style."""
        if self.is_data_array:
            return True
        return self.array_ok and value_kind(value) is ValueKind.SEQUENCE


# ---------------------------------------------------------------------------
# Figure — the input being templated
# ---------------------------------------------------------------------------

@dataclass
class Figure:
    """A figure: ordered traces plus a layout."""
    data: list[dict] = field(default_factory=list)
    layout: dict = field(default_factory=dict)

    @property
    def prior_template(self) -> dict | None:
        """The figure's existing ``layout.template``, if it is a mapping."""
        template = self.layout.get("template")
        return template if isinstance(template, dict) else None

    @classmethod
    def from_dict(cls, d: Any) -> "Figure":
        """Wrap a raw figure mapping; malformed parts become empty."""
        if not isinstance(d, dict):
            return cls()
        data = d.get("data")
        layout = d.get("layout")
        return cls(
            data=list(data) if isinstance(data, (list, tuple)) else [],
            layout=layout if isinstance(layout, dict) else {},
        )


# ---------------------------------------------------------------------------
# FigureTemplate — the extracted style template
# ---------------------------------------------------------------------------

@dataclass
class FigureTemplate:
    """Style-only template: per-trace-type templates plus a layout template.

    ``data`` maps a trace type name to the ordered list of trace templates
    extracted for that type. ``layout`` mirrors the stylistic subset of the
    source layout.
    """
    data: dict[str, list[dict]] = field(default_factory=dict)
    layout: dict[str, Any] = field(default_factory=dict)

    def trace_types(self) -> list[str]:
        return list(self.data)

    def trace_template_count(self) -> int:
        """Total number of trace templates across all trace types."""
        return sum(len(items) for items in self.data.values())

    def to_dict(self) -> dict:
        return {"data": self.data, "layout": self.layout}

    @classmethod
    def from_dict(cls, d: Any) -> "FigureTemplate":
        """Build from a raw template mapping; malformed parts become empty."""
        if not isinstance(d, dict):
            return cls()
        raw_data = d.get("data")
        raw_layout = d.get("layout")
        data: dict[str, list[dict]] = {}
        if isinstance(raw_data, dict):
            for trace_type, items in raw_data.items():
                if isinstance(items, (list, tuple)):
                    data[trace_type] = list(items)
        return cls(
            data=data,
            layout=raw_layout if isinstance(raw_layout, dict) else {},
        )
