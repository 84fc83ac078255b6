"""Template extraction engine — derives style templates from figures.

Walks traces and layout with the attribute schema, keeps only style
attributes, and composes the result with any template the figure already
carries.
"""

from .style_walker import TemplateExtractor, walk_style_keys
from .template_maker import make_template

__all__ = ["TemplateExtractor", "make_template", "walk_style_keys"]
