"""Jinja2 template rendering for component source emission.

Provides the TemplateRenderer class which loads the per-kind ``.tsx.j2``
templates from the ``component_studio/codegen/templates/`` directory and
renders them with the resolved-style context built by the code generator.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from ..style import format_number


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for generated components.

    Templates are plain source files with a ``.j2`` suffix. Whitespace
    control (``trim_blocks`` / ``lstrip_blocks``) keeps the emitted code
    indented exactly as written in the template.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.env.filters["pascal_case"] = pascal_case
        self.env.filters["jsx_style"] = jsx_style

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"button.tsx.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with the provided context."""
        template = self.env.from_string(template_string)
        return template.render(**context)

    def list_templates(self) -> list[str]:
        """Return a sorted list of all ``.j2`` template names."""
        if not self.template_dir.is_dir():
            return []
        return sorted(p.name for p in self.template_dir.glob("*.j2"))


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------


def pascal_case(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``SomeThing``."""
    parts = re.split(r"[^A-Za-z0-9]+", value)
    return "".join(word[:1].upper() + word[1:] for word in parts if word)


def jsx_style(style: Mapping[str, Any], indent: int = 0) -> str:
    """Render a style mapping as a JSX ``style={{...}}`` attribute.

    The first line carries no indentation (the template provides it); the
    properties are indented by *indent* + 2 and the closing braces by
    *indent*. Strings are quoted, numbers are emitted bare.
    """
    pad = " " * indent
    entries = []
    for key, value in style.items():
        if isinstance(value, str):
            literal = f'"{value}"'
        else:
            literal = format_number(value)
        entries.append(f"{pad}  {key}: {literal}")
    body = ",\n".join(entries)
    return "style={{\n" + body + "\n" + pad + "}}"
