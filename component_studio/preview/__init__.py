"""Live preview of configured components.

Quick usage::

    from component_studio.preview import PreviewRenderer

    tree = PreviewRenderer().render("card", config, "mobile")
    print(tree.component.style["borderRadius"])
"""

from component_studio.preview.html import to_html
from component_studio.preview.renderer import PreviewRenderer, render
from component_studio.preview.tree import RenderNode, RenderTree

__all__ = [
    "PreviewRenderer",
    "RenderNode",
    "RenderTree",
    "render",
    "to_html",
]
