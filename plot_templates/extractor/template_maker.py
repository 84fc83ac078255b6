"""make_template — extract a reusable style template from a figure.

The result can be used as ``layout.template`` in another figure. If the
source figure already carries a template in ``layout.template``, the new
template is composed with it: the figure's own style wins, and the old
template fills whatever the figure does not set.
"""

from __future__ import annotations

from typing import Any

from plot_templates.composer.merge import compose_templates
from plot_templates.schema.models import Figure, FigureTemplate
from plot_templates.schema.plot_schema import AttributeSchema

from .style_walker import TemplateExtractor


def make_template(
    figure: Figure | dict[str, Any],
    schema: AttributeSchema | None = None,
    base_template: dict | FigureTemplate | None = None,
) -> FigureTemplate:
    """Create a template from ``figure``.

    Args:
        figure: A Figure, or a raw ``{"data": [...], "layout": {...}}``
            mapping. Missing or malformed parts are treated as empty.
        schema: Attribute schema; defaults to the built-in schema.
        base_template: Prior template to compose with instead of the
            figure's ``layout.template``.

    Returns:
        A freshly built FigureTemplate sharing no mutable state with the
        inputs.
    """
    if not isinstance(figure, Figure):
        figure = Figure.from_dict(figure)

    template = TemplateExtractor(schema).extract(figure)

    prior = base_template if base_template is not None else figure.prior_template
    if isinstance(prior, FigureTemplate):
        prior = prior.to_dict()
    if isinstance(prior, dict):
        compose_templates(prior, template)

    return template
