"""Per-kind preview skeletons.

Each builder mirrors the structure of the matching ``.tsx.j2`` template: the
element that receives the resolved classes and inline style is tagged with
role ``component``; everything around and inside it is fixed per kind.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..style import ResolvedStyle, join_classes
from .tree import RenderNode

if TYPE_CHECKING:
    from ..registry import KindSpec


def _styled(
    tag: str,
    style: ResolvedStyle,
    spec: KindSpec,
    *,
    text: str = "",
    attrs: dict[str, str] | None = None,
    children: list[RenderNode] | None = None,
) -> RenderNode:
    return RenderNode(
        tag=tag,
        role="component",
        class_name=style.class_name(spec.extra_classes),
        style=style.inline_style(),
        text=text,
        attrs=attrs or {},
        children=children or [],
    )


def build_button(style: ResolvedStyle, spec: KindSpec) -> RenderNode:
    return _styled("button", style, spec, text=spec.label, attrs={"type": "button"})


def build_card(style: ResolvedStyle, spec: KindSpec) -> RenderNode:
    header = RenderNode(
        tag="div",
        role="header",
        children=[
            RenderNode(tag="h3", role="title", class_name="font-semibold",
                       text=spec.texts.get("title", "")),
        ],
    )
    body = RenderNode(
        tag="div",
        role="body",
        children=[
            RenderNode(tag="p", role="description", class_name="text-sm opacity-70",
                       text=spec.texts.get("body", "")),
        ],
    )
    return _styled("div", style, spec, children=[header, body])


def build_badge(style: ResolvedStyle, spec: KindSpec) -> RenderNode:
    return _styled("span", style, spec, text=spec.label)


def build_input(style: ResolvedStyle, spec: KindSpec) -> RenderNode:
    return _styled("input", style, spec, attrs={"type": "text", "placeholder": spec.label})


def build_avatar(style: ResolvedStyle, spec: KindSpec) -> RenderNode:
    fallback = RenderNode(tag="span", role="fallback", class_name="text-white font-bold",
                          text=spec.label)
    return _styled("div", style, spec, children=[fallback])


def build_progress(style: ResolvedStyle, spec: KindSpec) -> RenderNode:
    value = spec.texts.get("value", "0")
    indicator = RenderNode(
        tag="div",
        role="indicator",
        class_name="bg-primary h-full transition-all duration-500",
        style={"width": f"{value}%"},
    )
    return _styled(
        "div", style, spec,
        attrs={"role": "progressbar", "aria-valuenow": value},
        children=[indicator],
    )


def build_toggle(style: ResolvedStyle, spec: KindSpec) -> RenderNode:
    knob = RenderNode(
        tag="div",
        role="knob",
        class_name="w-4 h-4 bg-white rounded-full shadow transform transition-transform",
    )
    track = _styled("div", style, spec, attrs={"role": "switch"}, children=[knob])
    return RenderNode(
        tag="label",
        role="wrapper",
        class_name="flex items-center space-x-2",
        children=[track, RenderNode(tag="span", role="label", text=spec.label)],
    )


def build_alert(style: ResolvedStyle, spec: KindSpec) -> RenderNode:
    content = RenderNode(
        tag="div",
        role="content",
        class_name="flex-1",
        children=[
            RenderNode(tag="p", role="title", class_name="font-medium",
                       text=spec.texts.get("title", "")),
            RenderNode(tag="p", role="description", class_name="text-sm opacity-70",
                       text=spec.texts.get("body", "")),
        ],
    )
    return _styled("div", style, spec, attrs={"role": "alert"}, children=[content])


def build_skeleton(style: ResolvedStyle, spec: KindSpec) -> RenderNode:
    bars = RenderNode(
        tag="div",
        role="bars",
        class_name="space-y-2",
        children=[
            RenderNode(tag="div", role="bar", class_name=join_classes(_BAR_CLASSES, width))
            for width in SKELETON_BAR_WIDTHS
        ],
    )
    return _styled("div", style, spec, children=[bars])


def build_default(style: ResolvedStyle, spec: KindSpec) -> RenderNode:
    label = RenderNode(tag="span", role="label", class_name="text-sm", text=spec.label)
    return _styled("div", style, spec, children=[label])


_BAR_CLASSES = "h-4 bg-gray-300 rounded"

SKELETON_BAR_WIDTHS = ("w-3/4", "w-1/2")
