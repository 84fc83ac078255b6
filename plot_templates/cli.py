"""CLI entry point for Plot Templates.

Extracts style templates from figure files, merges saved templates, and
summarises what a template contains.

Usage::

    # Extract a template from a figure (JSON or YAML)
    plot-templates make figure.json -o templates/house.yaml

    # Extract with a custom attribute schema, composing with a saved template
    plot-templates make figure.json \\
        --schema schemas/plot_schema.yaml \\
        --base-template templates/house.yaml \\
        -o templates/house_v2.yaml

    # Merge two saved templates (NEW wins, OLD fills gaps)
    plot-templates merge templates/old.yaml templates/new.yaml -o merged.yaml

    # Inspect a template
    plot-templates inspect templates/house.yaml -v
"""

import argparse
import sys
from pathlib import Path

from plot_templates.composer.merge import compose_templates
from plot_templates.extractor.template_maker import make_template
from plot_templates.paths import next_path
from plot_templates.schema.builtin import build_default_plot_schema
from plot_templates.schema.loader import (
    dump_document,
    load_figure,
    load_plot_schema,
    load_template,
    save_template,
)
from plot_templates.schema.models import FigureTemplate, ValueKind, value_kind


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def _require_file(path_str):
    path = Path(path_str)
    if not path.exists():
        _error(f"File not found: {path}")
    return path


def _load_schema(args):
    """Load the attribute schema from --schema, or the built-in one."""
    if getattr(args, "schema", None):
        path = _require_file(args.schema)
        try:
            return load_plot_schema(path)
        except ValueError as e:
            _error(f"Invalid schema {path}: {e}")
    return build_default_plot_schema()


def _load_template_arg(path_str):
    path = _require_file(path_str)
    try:
        return load_template(path)
    except ValueError as e:
        _error(str(e))


def _write_output(template, args):
    """Save to --output, or print to stdout when no output is given."""
    if args.output:
        output = Path(args.output)
        save_template(template, output, fmt=args.format)
        _info(f"Written: {output}")
    else:
        sys.stdout.write(dump_document(template.to_dict(), args.format or "yaml"))


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_make(args):
    """Extract a template from a figure file."""
    figure_path = _require_file(args.figure)
    try:
        figure = load_figure(figure_path)
    except ValueError as e:
        _error(str(e))

    schema = _load_schema(args)
    base = _load_template_arg(args.base_template) if args.base_template else None

    if not figure.data and not figure.layout:
        _warn(f"{figure_path} has no data or layout, template will be empty")
    if base is not None:
        _info(f"Composing with base template {args.base_template}")
    elif figure.prior_template is not None:
        _info("Composing with the figure's layout.template")

    template = make_template(figure, schema=schema, base_template=base)
    _info(f"Extracted {template.trace_template_count()} trace template(s) "
          f"across {len(template.data)} trace type(s)")
    _write_output(template, args)


def cmd_merge(args):
    """Merge two saved templates: NEW wins, OLD fills the gaps."""
    old = _load_template_arg(args.old)
    new = _load_template_arg(args.new)

    compose_templates(old.to_dict(), new)
    _info(f"Merged {args.old} into {args.new}")
    _write_output(new, args)


def cmd_inspect(args):
    """Show what a template contains."""
    template = _load_template_arg(args.template)

    print(f"Template:    {args.template}")
    print(f"Trace types: {len(template.data)}")
    for trace_type in template.trace_types():
        print(f"  {trace_type:12s} {len(template.data[trace_type])} template(s)")
    print(f"Layout keys: {len(template.layout)}")

    if args.verbose:
        print()
        for path in style_paths(template):
            print(f"  {path}")


def style_paths(template: FigureTemplate) -> list[str]:
    """Every leaf path in a template, data first, in template order."""
    paths: list[str] = []
    for trace_type, items in template.data.items():
        _collect_leaves(items, next_path(template.data, trace_type, "data"), paths)
    _collect_leaves(template.layout, "layout", paths)
    return paths


def _collect_leaves(node, path, out):
    kind = value_kind(node)
    if kind is ValueKind.OBJECT:
        for key, child in node.items():
            _collect_leaves(child, next_path(node, key, path), out)
    elif kind is ValueKind.SEQUENCE and node and all(
            value_kind(item) is ValueKind.OBJECT for item in node):
        for index, item in enumerate(node):
            _collect_leaves(item, next_path(node, index, path), out)
    else:
        out.append(path)


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------

def _info(msg):
    print(f"  {msg}", file=sys.stderr)


def _warn(msg):
    print(f"  WARNING: {msg}", file=sys.stderr)


def _error(msg):
    print(f"  ERROR: {msg}", file=sys.stderr)
    sys.exit(1)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="plot-templates",
        description="Extract and merge reusable style templates for chart figures.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # ---- make ----
    make = subparsers.add_parser(
        "make",
        help="Extract a style template from a figure file.",
    )
    make.add_argument(
        "figure",
        help="Figure file (.json, or YAML) with 'data' and 'layout'.",
    )
    make.add_argument(
        "--schema",
        help="Attribute schema file (default: built-in schema).",
    )
    make.add_argument(
        "--base-template",
        dest="base_template",
        help="Template to compose with, instead of the figure's layout.template.",
    )
    _add_output_args(make)
    make.set_defaults(func=cmd_make)

    # ---- merge ----
    merge = subparsers.add_parser(
        "merge",
        help="Merge two saved templates (NEW wins, OLD fills gaps).",
    )
    merge.add_argument("old", help="Older template file.")
    merge.add_argument("new", help="Newer template file.")
    _add_output_args(merge)
    merge.set_defaults(func=cmd_merge)

    # ---- inspect ----
    insp = subparsers.add_parser(
        "inspect",
        help="Show the trace types and layout keys of a template.",
    )
    insp.add_argument("template", help="Template file.")
    insp.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=False,
        help="List every style path in the template.",
    )
    insp.set_defaults(func=cmd_inspect)

    return parser


def _add_output_args(parser):
    """Add -o / -f args to a subparser."""
    parser.add_argument(
        "-o", "--output",
        help="Output template file (default: print to stdout).",
    )
    parser.add_argument(
        "-f", "--format",
        choices=["yaml", "json"],
        default=None,
        help="Output format (default: from the output suffix, else yaml).",
    )


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv=None):
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
