"""Template schema package — models and attribute schemas for style templates.

Provides the contract between figures, the attribute schema, the extractor,
and the composer:

- models.py: Core dataclasses (Figure, FigureTemplate, AttributeInfo, ValueKind)
- plot_schema.py: AttributeSchema interface and the dict-backed PlotSchema
- builtin.py: The built-in attribute schema
- loader.py: YAML/JSON serialization and deserialization
"""

from .builtin import build_default_plot_schema
from .loader import (
    dump_document,
    load_figure,
    load_plot_schema,
    load_template,
    save_template,
)
from .models import (
    AttributeInfo,
    Figure,
    FigureTemplate,
    Role,
    ValueKind,
    value_kind,
)
from .plot_schema import AttributeSchema, PlotSchema, array_default_key

__all__ = [
    # Models
    "AttributeInfo",
    "Figure",
    "FigureTemplate",
    "Role",
    "ValueKind",
    "value_kind",
    # Schemas
    "AttributeSchema",
    "PlotSchema",
    "array_default_key",
    "build_default_plot_schema",
    # Loader
    "dump_document",
    "load_figure",
    "load_plot_schema",
    "load_template",
    "save_template",
]
