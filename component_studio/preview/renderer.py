"""Live preview renderer.

Turns ``(kind, config, viewport)`` into a ``RenderTree``: the kind's skeleton
built from the shared resolved style, nested inside a frame sized for the
selected viewport. The viewport only affects the frame, never the component.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from ..models import ComponentConfig, NumericRange, ViewportMode, parse_viewport
from ..registry import KindRegistry, default_registry
from ..style import join_classes, resolve_visual_attributes
from .tree import RenderNode, RenderTree


# ---------------------------------------------------------------------------
# Frame geometry
# ---------------------------------------------------------------------------

FRAME_SIZES: dict[ViewportMode, tuple[int | None, int | None]] = {
    ViewportMode.DESKTOP: (None, None),
    ViewportMode.TABLET: (768, 1024),
    ViewportMode.MOBILE: (375, 667),
}

FRAME_CLASSES = (
    "bg-white dark:bg-slate-950 border-2 border-dashed border-gray-300 "
    "dark:border-gray-600 mx-auto flex items-center justify-center p-8 "
    "transition-all duration-300"
)

CANVAS_SCALE = NumericRange(25, 200, 25)


def frame_size_class(viewport: ViewportMode) -> str:
    width, height = FRAME_SIZES[viewport]
    if width is None or height is None:
        return "w-full h-full"
    return f"w-[{width}px] h-[{height}px]"


# ---------------------------------------------------------------------------
# PreviewRenderer
# ---------------------------------------------------------------------------


class PreviewRenderer:
    """Builds preview trees from the kind registry."""

    def __init__(self, registry: KindRegistry | None = None) -> None:
        self.registry = registry if registry is not None else default_registry()

    def render(
        self,
        kind: str | Enum | None,
        config: ComponentConfig | Mapping[str, Any],
        viewport: str | ViewportMode | None = ViewportMode.DESKTOP,
        canvas_scale: Any = 100,
    ) -> RenderTree:
        """Render *kind* with *config* inside the *viewport* frame.

        Unknown kinds use the fallback skeleton and unknown viewports use the
        desktop frame; neither raises.
        """
        if not isinstance(config, ComponentConfig):
            config = ComponentConfig.model_validate(config)
        mode = parse_viewport(viewport)
        spec = self.registry.get(kind)
        style = resolve_visual_attributes(config)
        component = spec.build_preview(style, spec)

        width, height = FRAME_SIZES[mode]
        frame_style: dict[str, str | int | float] = {}
        if width is not None and height is not None:
            frame_style = {"width": f"{width}px", "height": f"{height}px"}
        frame = RenderNode(
            tag="div",
            role="frame",
            class_name=join_classes(frame_size_class(mode), FRAME_CLASSES),
            style=frame_style,
            attrs={"data-viewport": mode.value, "data-kind": spec.kind},
            children=[component],
        )
        return RenderTree(
            viewport=mode,
            frame_width=width,
            frame_height=height,
            canvas_scale=_canvas_scale(canvas_scale),
            root=frame,
        )


def _canvas_scale(value: Any) -> int:
    try:
        return CANVAS_SCALE.clamp(value)
    except TypeError:
        return 100


_default_renderer: PreviewRenderer | None = None


def render(
    kind: str | Enum | None,
    config: ComponentConfig | Mapping[str, Any],
    viewport: str | ViewportMode | None = ViewportMode.DESKTOP,
) -> RenderTree:
    """Render with a shared ``PreviewRenderer`` over the default registry."""
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = PreviewRenderer()
    return _default_renderer.render(kind, config, viewport)
