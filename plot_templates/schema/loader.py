"""Template loader — YAML/JSON serialization for templates, figures, and schemas.

Templates are saved as YAML by default so they can be reviewed, diffed, and
version-controlled; a ``.json`` suffix selects JSON instead. Key order is
preserved on save so repeated extractions produce identical files.
"""

import json
from pathlib import Path
from typing import Any

import yaml

from .models import Figure, FigureTemplate
from .plot_schema import PlotSchema

_JSON_SUFFIXES = {".json"}


def _read_document(path: Path) -> Any:
    """Parse a JSON or YAML file; parse errors are raised as ValueError."""
    with open(path) as f:
        if path.suffix.lower() in _JSON_SUFFIXES:
            return json.load(f)
        try:
            return yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Could not parse {path}: {e}") from e


def _write_document(data: Any, path: Path, fmt: str | None = None) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fmt = fmt or ("json" if path.suffix.lower() in _JSON_SUFFIXES else "yaml")
    with open(path, "w") as f:
        f.write(dump_document(data, fmt))


def dump_document(data: Any, fmt: str = "yaml") -> str:
    """Render a plain document as YAML or JSON text."""
    if fmt == "json":
        return json.dumps(data, indent=2) + "\n"
    return yaml.dump(data, default_flow_style=False, sort_keys=False,
                     allow_unicode=True, width=120)


def save_template(template: FigureTemplate, path: str | Path,
                  fmt: str | None = None) -> None:
    """Serialize a FigureTemplate to a YAML (or JSON) file."""
    _write_document(template.to_dict(), Path(path), fmt)


def load_template(path: str | Path) -> FigureTemplate:
    """Deserialize a FigureTemplate from a YAML or JSON file."""
    path = Path(path)
    data = _read_document(path)
    if not isinstance(data, dict):
        raise ValueError(f"Template file {path} does not contain a mapping")
    return FigureTemplate.from_dict(data)


def load_figure(path: str | Path) -> Figure:
    """Read a figure (``{"data": [...], "layout": {...}}``) from JSON or YAML."""
    path = Path(path)
    data = _read_document(path)
    if not isinstance(data, dict):
        raise ValueError(f"Figure file {path} does not contain a mapping")
    return Figure.from_dict(data)


def load_plot_schema(path: str | Path) -> PlotSchema:
    """Deserialize a PlotSchema from a YAML or JSON file."""
    return PlotSchema.from_dict(_read_document(Path(path)))
