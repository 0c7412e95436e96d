"""Shared derivation of resolved visual attributes.

Both the code generator and the preview renderer read their styling from
``resolve_visual_attributes`` so the emitted source text and the live preview
always describe the same spacing, radius, opacity and transform.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict

from .models import CATALOGS, RANGES, ComponentConfig, round_half_up

SPACING_UNIT = 4  # px per framework spacing step

TRANSITION_CLASSES = "transition-all duration-200"


class ResolvedStyle(BaseModel):
    """Unit-concrete visual attributes derived from a ``ComponentConfig``."""

    model_config = ConfigDict(frozen=True)

    padding_x: int
    padding_y: int
    margin_x: int
    margin_y: int
    width_class: str
    height_class: str
    font_size: int
    font_weight_class: str
    background_class: str
    text_class: str
    shadow_class: str
    border_width: int
    border_radius: int
    opacity_percent: int
    scale_percent: int
    rotate: int
    position: str
    animation: str
    hover_shadow: str

    # -- Derived fractions -------------------------------------------------

    @property
    def opacity(self) -> float:
        return self.opacity_percent / 100

    @property
    def scale(self) -> float:
        return self.scale_percent / 100

    @property
    def radius_bucket(self) -> int:
        return round_half_up(self.border_radius / SPACING_UNIT)

    @property
    def transform(self) -> str:
        return f"scale({format_number(self.scale)}) rotate({self.rotate}deg)"

    # -- Class tokens ------------------------------------------------------

    @property
    def spacing_classes(self) -> str:
        return (
            f"px-{self.padding_x // SPACING_UNIT} py-{self.padding_y // SPACING_UNIT} "
            f"mx-{self.margin_x // SPACING_UNIT} my-{self.margin_y // SPACING_UNIT}"
        )

    @property
    def border_class(self) -> str:
        return f"border-{self.border_width}" if self.border_width > 0 else ""

    @property
    def rotate_class(self) -> str:
        # Negative utilities carry the sign as a prefix: -rotate-45.
        if self.rotate < 0:
            return f"-rotate-{-self.rotate}"
        return f"rotate-{self.rotate}"

    def class_tokens(self) -> list[str]:
        """Every utility-class token in emission order, empty ones dropped."""
        tokens = [
            self.spacing_classes,
            self.width_class,
            self.height_class,
            self.background_class,
            self.text_class,
            self.font_weight_class,
            self.shadow_class,
            self.border_class,
            f"rounded-{self.radius_bucket}",
            f"opacity-{self.opacity_percent}",
            self.animation,
            self.hover_shadow,
            f"scale-{self.scale_percent}",
            self.rotate_class,
            self.position,
            TRANSITION_CLASSES,
        ]
        return [t for t in tokens if t]

    def class_name(self, extra: str = "") -> str:
        """Space-joined class list, with *extra* kind-specific classes appended."""
        return join_classes(*self.class_tokens(), extra)

    # -- Inline style ------------------------------------------------------

    def inline_style(self) -> dict[str, str | int | float]:
        """Ordered css-in-js style mapping shared by generator and preview."""
        return {
            "fontSize": f"{self.font_size}px",
            "padding": f"{self.padding_y}px {self.padding_x}px",
            "margin": f"{self.margin_y}px {self.margin_x}px",
            "borderRadius": f"{self.border_radius}px",
            "borderWidth": f"{self.border_width}px",
            "opacity": _plain_number(self.opacity),
            "transform": self.transform,
        }


def resolve_visual_attributes(config: ComponentConfig) -> ResolvedStyle:
    """Compute the resolved style for *config*.

    Values are re-clamped so configs built with ``model_construct`` (which
    skips validation) still resolve to legal attributes.
    """
    pad_x, pad_y = _pair("padding", config.padding)
    mar_x, mar_y = _pair("margin", config.margin)
    return ResolvedStyle(
        padding_x=pad_x,
        padding_y=pad_y,
        margin_x=mar_x,
        margin_y=mar_y,
        width_class=_token("width", config.width),
        height_class=_token("height", config.height),
        font_size=_number("font_size", config.font_size),
        font_weight_class=_token("font_weight", config.font_weight),
        background_class=_token("background_color", config.background_color),
        text_class=_token("text_color", config.text_color),
        shadow_class=_token("box_shadow", config.box_shadow),
        border_width=_number("border_width", config.border_width),
        border_radius=_number("border_radius", config.border_radius),
        opacity_percent=_number("opacity", config.opacity),
        scale_percent=_number("scale", config.scale),
        rotate=_number("rotate", config.rotate),
        position=_token("position", config.position),
        animation=_token("animation", config.animation),
        hover_shadow=_token("hover_shadow", config.hover_shadow),
    )


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_number(value: float) -> str:
    """Format a number without trailing zeros (``1``, ``0.5``, ``1.05``)."""
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def join_classes(*parts: str) -> str:
    """Join class fragments with single spaces, dropping empty ones."""
    return " ".join(" ".join(parts).split())


def style_to_css(style: Mapping[str, Any]) -> str:
    """Render a css-in-js mapping as a CSS declaration list."""
    declarations = []
    for key, value in style.items():
        prop = "".join(f"-{c.lower()}" if c.isupper() else c for c in key)
        declarations.append(f"{prop}: {value}")
    return "; ".join(declarations)


def _plain_number(value: float) -> int | float:
    return int(value) if float(value).is_integer() else float(format_number(value))


def _number(name: str, value: Any) -> int:
    try:
        return RANGES[name].clamp(value)
    except TypeError:
        return ComponentConfig.model_fields[name].default


def _pair(name: str, value: Any) -> tuple[int, int]:
    numeric = RANGES[name]
    try:
        first, second = value
        return numeric.clamp(first), numeric.clamp(second)
    except (TypeError, ValueError):
        return ComponentConfig.model_fields[name].default


def _token(name: str, value: Any) -> str:
    catalog = CATALOGS[name]
    token = catalog.resolve(value)
    return catalog.default if token is None else token
