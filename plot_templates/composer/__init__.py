"""Template composer package — merges an old template into a new one."""

from .array_templater import ArrayTemplater, reconcile_arrays
from .merge import compose_templates, merge_data_templates, merge_templates

__all__ = [
    "ArrayTemplater",
    "compose_templates",
    "merge_data_templates",
    "merge_templates",
    "reconcile_arrays",
]
