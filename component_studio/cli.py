"""Command line interface for Component Studio.

Examples::

    python -m component_studio kinds
    python -m component_studio generate button --set fontSize=20 --set backgroundColor=blue-500
    python -m component_studio generate card --config card.json --output ./components
    python -m component_studio preview alert --viewport mobile --html preview.html
    python -m component_studio submit button --name "Primary CTA"
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any

from rich.table import Table
from rich.tree import Tree

from .api_client import ComponentsClient, build_submission
from .codegen.export import export_component
from .codegen.generator import CodeGenerator
from .config import StudioConfig
from .models import DEFAULT_CONFIG, ComponentConfig
from .preview.html import to_html
from .preview.renderer import PreviewRenderer
from .preview.tree import RenderNode
from .registry import default_registry
from .store import ConfigStore
from .utils import (
    console,
    load_json,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
    write_text_file,
)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="component-studio",
        description="Component Studio -- configure, preview and generate UI components",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Examples::", 1)[1] if __doc__ else None,
    )
    parser.add_argument(
        "--settings",
        default=None,
        help="JSON settings file (defaults to STUDIO_* environment variables)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("kinds", help="List the component kinds")

    gen = sub.add_parser("generate", help="Generate component source")
    _add_config_arguments(gen)
    gen.add_argument("--output", "-o", default=None, help="Write <Name>.<ext> into this directory")

    prev = sub.add_parser("preview", help="Render the preview tree")
    _add_config_arguments(prev)
    prev.add_argument("--viewport", default=None, help="desktop, tablet or mobile")
    prev.add_argument("--zoom", type=int, default=100, help="Canvas scale percent (25-200)")
    prev.add_argument("--html", default=None, help="Write a standalone HTML preview to this file")

    submit = sub.add_parser("submit", help="Submit generated code to the Components API")
    _add_config_arguments(submit)
    submit.add_argument("--name", default=None, help="Component name (defaults to the kind)")
    submit.add_argument("--category", default=None)
    submit.add_argument("--description", default=None)
    submit.add_argument("--tag", action="append", default=[], dest="tags")

    return parser


def _add_config_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("kind", nargs="?", default=None, help="Component kind, e.g. button")
    parser.add_argument(
        "--set",
        action="append",
        default=[],
        dest="assignments",
        metavar="FIELD=VALUE",
        help="Set a config field (repeatable); VALUE is parsed as JSON when possible",
    )
    parser.add_argument("--config", default=None, help="JSON file with a ComponentConfig")


def parse_assignment(text: str) -> tuple[str, Any]:
    """Split ``field=value``; the value is decoded as JSON when it parses."""
    key, sep, raw = text.partition("=")
    if not sep or not key.strip():
        raise ValueError(f"Expected FIELD=VALUE, got {text!r}")
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        value = raw
    return key.strip(), value


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _build_config(args: argparse.Namespace) -> ComponentConfig:
    initial = DEFAULT_CONFIG
    if args.config:
        initial = ComponentConfig.model_validate(load_json(args.config))
    store = ConfigStore(initial)
    store.update(dict(parse_assignment(a) for a in args.assignments))
    return store.get()


def _resolve_kind(args: argparse.Namespace, settings: StudioConfig) -> str:
    kind = args.kind or settings.default_kind.value
    if not default_registry().is_known(kind):
        print_warning(f"Unknown kind {kind!r}; using the generic component template.")
    return kind


def cmd_kinds(args: argparse.Namespace, settings: StudioConfig) -> int:
    registry = default_registry()
    table = Table(title="Component kinds", show_header=True, header_style="bold cyan")
    table.add_column("Kind", no_wrap=True)
    table.add_column("Component")
    table.add_column("Category", style="dim")
    table.add_column("Template", style="dim")
    for spec in registry:
        table.add_row(spec.kind, spec.component_name, spec.category, spec.template)
    console.print(table)
    return EXIT_OK


def cmd_generate(args: argparse.Namespace, settings: StudioConfig) -> int:
    kind = _resolve_kind(args, settings)
    config = _build_config(args)
    if args.output:
        result = asyncio.run(
            export_component(kind, config, args.output, extension=settings.source_extension)
        )
        print_success(f"Wrote {result.component_name} to {result.path}")
        return EXIT_OK
    sys.stdout.write(CodeGenerator().generate(kind, config))
    return EXIT_OK


def cmd_preview(args: argparse.Namespace, settings: StudioConfig) -> int:
    kind = _resolve_kind(args, settings)
    config = _build_config(args)
    viewport = args.viewport or settings.default_viewport
    tree = PreviewRenderer().render(kind, config, viewport, canvas_scale=args.zoom)
    if args.html:
        write_text_file(Path(args.html), to_html(tree, full_page=True, title=f"{kind} preview"))
        print_success(f"Wrote preview to {args.html}")
        return EXIT_OK

    size = "fluid" if tree.frame_width is None else f"{tree.frame_width}x{tree.frame_height}"
    print_summary_table(
        {
            "Viewport": tree.viewport.value,
            "Frame": size,
            "Zoom": f"{tree.canvas_scale}%",
            **{key: str(value) for key, value in tree.component.style.items()},
        },
        title=f"Preview: {kind}",
    )
    console.print(_rich_tree(tree.root))
    return EXIT_OK


def cmd_submit(args: argparse.Namespace, settings: StudioConfig) -> int:
    kind = _resolve_kind(args, settings)
    config = _build_config(args)
    submission = build_submission(
        kind,
        config,
        name=args.name,
        category=args.category,
        description=args.description,
        tags=args.tags or None,
    )
    client = ComponentsClient(
        settings.api.base_url, token=settings.api.token, timeout=settings.api.timeout
    )
    result = asyncio.run(client.create_component(submission))
    if not result.success:
        print_error(f"Submission failed: {result.error}")
        return EXIT_FAILURE
    print_success(f"Submitted {submission.name} (id: {result.component_id or 'unknown'})")
    return EXIT_OK


def _rich_tree(node: RenderNode, parent: Tree | None = None) -> Tree:
    label = f"[bold]{node.tag}[/bold]"
    if node.role:
        label += f" [cyan]({node.role})[/cyan]"
    if node.text:
        label += f' "{node.text}"'
    branch = Tree(label) if parent is None else parent.add(label)
    for child in node.children:
        _rich_tree(child, branch)
    return branch


COMMANDS = {
    "kinds": cmd_kinds,
    "generate": cmd_generate,
    "preview": cmd_preview,
    "submit": cmd_submit,
}


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> int:
    """Parse *argv*, run the selected command and return its exit code."""
    args = build_parser().parse_args(argv)
    try:
        settings = StudioConfig.load(Path(args.settings)) if args.settings else StudioConfig.from_env()
        return COMMANDS[args.command](args, settings)
    except ValueError as exc:
        print_error(str(exc))
        return EXIT_USAGE
    except OSError as exc:
        print_error(f"File error: {exc}")
        return EXIT_FAILURE
