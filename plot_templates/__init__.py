"""Plot templates — extract reusable style templates from chart figures.

Usage::

    from plot_templates import make_template

    template = make_template({"data": [...], "layout": {...}})
    other_figure["layout"]["template"] = template.to_dict()
"""

from .composer import merge_templates
from .extractor import TemplateExtractor, make_template
from .schema import Figure, FigureTemplate, PlotSchema, build_default_plot_schema

__all__ = [
    "Figure",
    "FigureTemplate",
    "PlotSchema",
    "TemplateExtractor",
    "build_default_plot_schema",
    "make_template",
    "merge_templates",
]
