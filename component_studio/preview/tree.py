"""Render tree models produced by the preview renderer.

A ``RenderTree`` is a description of what to draw, not a drawing: nodes carry
a tag, utility classes, an inline style mapping and text, and the rendering
surface that consumes the tree decides how to paint them.
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, Field

from ..models import ViewportMode


class RenderNode(BaseModel):
    """One element of a preview tree."""

    tag: str = Field(..., description="Element name, e.g. 'div', 'button'")
    role: str = Field(default="", description="Structural role within the kind skeleton")
    class_name: str = Field(default="")
    style: dict[str, str | int | float] = Field(default_factory=dict)
    text: str = Field(default="")
    attrs: dict[str, str] = Field(default_factory=dict)
    children: list[RenderNode] = Field(default_factory=list)

    def walk(self) -> Iterator[RenderNode]:
        """Yield this node and every descendant, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, role: str) -> RenderNode | None:
        """Return the first node (depth first) with the given *role*."""
        return next((node for node in self.walk() if node.role == role), None)

    def find_all(self, role: str) -> list[RenderNode]:
        return [node for node in self.walk() if node.role == role]


class RenderTree(BaseModel):
    """A component preview nested inside its viewport frame."""

    viewport: ViewportMode
    frame_width: int | None = Field(default=None, description="Logical px, None when fluid")
    frame_height: int | None = Field(default=None, description="Logical px, None when fluid")
    canvas_scale: int = Field(default=100, description="Canvas zoom in percent")
    root: RenderNode

    @property
    def canvas_transform(self) -> str:
        scale = self.canvas_scale / 100
        return f"scale({scale:g})"

    @property
    def component(self) -> RenderNode:
        """The styled element carrying the resolved component style."""
        node = self.root.find("component")
        if node is None:
            raise LookupError("Render tree has no component node")
        return node

    def walk(self) -> Iterator[RenderNode]:
        """Yield every node of the tree, frame first."""
        return self.root.walk()

    def find(self, role: str) -> RenderNode | None:
        """Return the first node in the tree with the given *role*."""
        return self.root.find(role)
