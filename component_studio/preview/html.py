"""Static HTML serialisation of preview trees.

Used to hand a preview to a browser (or any HTML-capable surface) without a
build step. Utility classes are resolved client-side by the Tailwind CDN
script included in full-page output.
"""

from __future__ import annotations

from html import escape

from ..style import style_to_css
from .tree import RenderNode, RenderTree

VOID_TAGS = frozenset({"input", "img", "br", "hr"})

TAILWIND_CDN = "https://cdn.tailwindcss.com"


def node_to_html(node: RenderNode, indent: int = 0) -> str:
    """Serialise *node* and its descendants as indented HTML."""
    pad = "  " * indent
    attrs = _attributes(node)
    if node.tag in VOID_TAGS:
        return f"{pad}<{node.tag}{attrs} />"
    if not node.children:
        return f"{pad}<{node.tag}{attrs}>{escape(node.text)}</{node.tag}>"

    lines = [f"{pad}<{node.tag}{attrs}>"]
    if node.text:
        lines.append(f"{pad}  {escape(node.text)}")
    lines.extend(node_to_html(child, indent + 1) for child in node.children)
    lines.append(f"{pad}</{node.tag}>")
    return "\n".join(lines)


def to_html(tree: RenderTree, *, full_page: bool = False, title: str = "Preview") -> str:
    """Serialise *tree*; with *full_page* wrap it in a standalone document."""
    body = _canvas(tree)
    if not full_page:
        return body + "\n"
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="UTF-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f"<title>{escape(title)}</title>\n"
        f'<script src="{TAILWIND_CDN}"></script>\n'
        "</head>\n"
        '<body class="bg-gray-50 p-8">\n'
        f"{body}\n"
        "</body>\n"
        "</html>\n"
    )


def _canvas(tree: RenderTree) -> str:
    inner = node_to_html(tree.root, indent=1)
    style = f"transform: {tree.canvas_transform}; transform-origin: top center"
    return f'<div class="rounded-xl overflow-hidden" style="{escape(style)}">\n{inner}\n</div>'


def _attributes(node: RenderNode) -> str:
    parts: list[str] = []
    if node.class_name:
        parts.append(f'class="{escape(node.class_name)}"')
    if node.style:
        parts.append(f'style="{escape(style_to_css(node.style))}"')
    for key, value in node.attrs.items():
        parts.append(f'{escape(key)}="{escape(value)}"')
    return (" " + " ".join(parts)) if parts else ""
