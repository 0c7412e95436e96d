"""Pydantic v2 models and catalogs for the component editor.

Defines the ``ComponentConfig`` value edited by the property panel, the closed
catalogs of utility-class tokens each enumerated field may hold, the numeric
ranges each numeric field is clamped to, and the kind / viewport enumerations
shared by the code generator and the preview renderer.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class InvalidFieldValue(ValueError):
    """Raised when a field receives a value outside its declared catalog."""

    def __init__(self, field_name: str, value: Any, message: str = "") -> None:
        self.field = field_name
        self.value = value
        super().__init__(message or f"Invalid value for {field_name!r}: {value!r}")


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class ComponentKind(str, Enum):
    """Previewable / generatable component archetypes."""

    BUTTON = "button"
    CARD = "card"
    BADGE = "badge"
    INPUT = "input"
    AVATAR = "avatar"
    PROGRESS = "progress"
    TOGGLE = "toggle"
    ALERT = "alert"
    SKELETON = "skeleton"
    DEFAULT = "default"


class ViewportMode(str, Enum):
    """Preview frame sizes."""

    DESKTOP = "desktop"
    TABLET = "tablet"
    MOBILE = "mobile"


def parse_kind(value: str | ComponentKind | None) -> ComponentKind:
    """Map *value* to a ``ComponentKind``, falling back to ``DEFAULT``."""
    if isinstance(value, ComponentKind):
        return value
    try:
        return ComponentKind(str(value or "").strip().lower())
    except ValueError:
        return ComponentKind.DEFAULT


def parse_viewport(value: str | ViewportMode | None) -> ViewportMode:
    """Map *value* to a ``ViewportMode``, falling back to ``DESKTOP``."""
    if isinstance(value, ViewportMode):
        return value
    try:
        return ViewportMode(str(value or "").strip().lower())
    except ValueError:
        return ViewportMode.DESKTOP


# ---------------------------------------------------------------------------
# Catalogs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TokenCatalog:
    """The closed set of tokens an enumerated field may hold."""

    tokens: tuple[str, ...]
    default: str
    aliases: Mapping[str, str] = field(default_factory=dict)

    def resolve(self, value: Any) -> str | None:
        """Return the catalog token for *value*, or ``None`` if it is unknown."""
        if not isinstance(value, str):
            return None
        token = value.strip()
        if token in self.tokens:
            return token
        return self.aliases.get(token)


@dataclass(frozen=True)
class NumericRange:
    """Inclusive range and step grid for a numeric field."""

    minimum: int
    maximum: int
    step: int = 1

    def clamp(self, value: Any) -> int:
        """Clamp *value* into range and snap it to the step grid.

        Raises ``TypeError`` when *value* is not a real number.
        """
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"expected a number, got {type(value).__name__}")
        if math.isnan(value):
            raise TypeError("expected a number, got NaN")
        bounded = min(max(value, self.minimum), self.maximum)
        steps = round_half_up((bounded - self.minimum) / self.step)
        return min(self.minimum + steps * self.step, self.maximum)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""
    return int(math.floor(value + 0.5))


def _prefix_aliases(tokens: tuple[str, ...], prefix: str) -> dict[str, str]:
    return {t[len(prefix):]: t for t in tokens if t.startswith(prefix) and len(t) > len(prefix)}


def _size_aliases(prefix: str) -> dict[str, str]:
    return {
        "auto": f"{prefix}-auto",
        "fit": f"{prefix}-fit",
        "fixed-128px": f"{prefix}-32",
        "fixed-192px": f"{prefix}-48",
        "fixed-256px": f"{prefix}-64",
        "full": f"{prefix}-full",
    }


WIDTH_TOKENS = ("w-auto", "w-fit", "w-32", "w-48", "w-64", "w-full")
HEIGHT_TOKENS = ("h-auto", "h-fit", "h-32", "h-48", "h-64", "h-full")
FONT_WEIGHT_TOKENS = (
    "font-thin",
    "font-light",
    "font-normal",
    "font-medium",
    "font-semibold",
    "font-bold",
    "font-extrabold",
)
BACKGROUND_TOKENS = ("bg-primary",) + tuple(
    f"bg-{hue}-500"
    for hue in ("slate", "red", "orange", "yellow", "green", "blue", "indigo", "purple", "pink", "cyan")
)
TEXT_COLOR_TOKENS = (
    "text-white",
    "text-black",
    "text-primary",
    "text-secondary",
    "text-muted-foreground",
    "text-primary-foreground",
)
SHADOW_TOKENS = (
    "shadow-none",
    "shadow-sm",
    "shadow-md",
    "shadow-lg",
    "shadow-xl",
    "shadow-2xl",
    "shadow-inner",
)
POSITION_TOKENS = ("static", "relative", "absolute", "fixed", "sticky")
ANIMATION_TOKENS = (
    "",
    "hover:scale-105",
    "hover:scale-110",
    "hover:shadow-xl",
    "hover:-translate-y-1",
    "hover:rotate-1",
    "animate-pulse",
    "animate-bounce",
)
HOVER_SHADOW_TOKENS = (
    "",
    "hover:shadow-sm",
    "hover:shadow-md",
    "hover:shadow-lg",
    "hover:shadow-xl",
    "hover:shadow-2xl",
)


CATALOGS: dict[str, TokenCatalog] = {
    "width": TokenCatalog(WIDTH_TOKENS, "w-fit", _size_aliases("w")),
    "height": TokenCatalog(HEIGHT_TOKENS, "h-fit", _size_aliases("h")),
    "font_weight": TokenCatalog(
        FONT_WEIGHT_TOKENS, "font-medium", _prefix_aliases(FONT_WEIGHT_TOKENS, "font-")
    ),
    "background_color": TokenCatalog(
        BACKGROUND_TOKENS, "bg-primary", _prefix_aliases(BACKGROUND_TOKENS, "bg-")
    ),
    "text_color": TokenCatalog(
        TEXT_COLOR_TOKENS,
        "text-primary-foreground",
        _prefix_aliases(TEXT_COLOR_TOKENS, "text-"),
    ),
    "box_shadow": TokenCatalog(
        SHADOW_TOKENS, "shadow-sm", _prefix_aliases(SHADOW_TOKENS, "shadow-")
    ),
    "position": TokenCatalog(POSITION_TOKENS, "relative"),
    "animation": TokenCatalog(ANIMATION_TOKENS, "", {"none": ""}),
    "hover_shadow": TokenCatalog(
        HOVER_SHADOW_TOKENS,
        "",
        {"none": "", **_prefix_aliases(HOVER_SHADOW_TOKENS, "hover:shadow-")},
    ),
}

RANGES: dict[str, NumericRange] = {
    "padding": NumericRange(0, 64, 4),
    "margin": NumericRange(0, 64, 4),
    "font_size": NumericRange(8, 72),
    "border_width": NumericRange(0, 8),
    "border_radius": NumericRange(0, 64),
    "opacity": NumericRange(0, 100),
    "scale": NumericRange(50, 200),
    "rotate": NumericRange(-180, 180, 15),
}

PAIR_FIELDS = frozenset({"padding", "margin"})


# ---------------------------------------------------------------------------
# ComponentConfig
# ---------------------------------------------------------------------------


class ComponentConfig(BaseModel):
    """The flat record of visual style properties edited by the user.

    Attributes use snake_case; the camelCase aliases (``fontSize``,
    ``backgroundColor``...) match the JSON shape the editor exchanges.
    Construction is lenient: numbers are clamped and unknown tokens are
    replaced by the field default.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )

    width: str = Field(default="w-fit")
    height: str = Field(default="h-fit")
    padding: tuple[int, int] = Field(default=(16, 16), description="Horizontal / vertical px")
    margin: tuple[int, int] = Field(default=(0, 0), description="Horizontal / vertical px")
    font_size: int = Field(default=16)
    font_weight: str = Field(default="font-medium")
    background_color: str = Field(default="bg-primary")
    text_color: str = Field(default="text-primary-foreground")
    border_width: int = Field(default=0)
    border_radius: int = Field(default=8)
    box_shadow: str = Field(default="shadow-sm")
    opacity: int = Field(default=100, description="Percent")
    scale: int = Field(default=100, description="Percent")
    rotate: int = Field(default=0, description="Degrees")
    position: str = Field(default="relative")
    animation: str = Field(default="")
    hover_shadow: str = Field(default="")

    @model_validator(mode="before")
    @classmethod
    def _normalise(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        normalised: dict[str, Any] = {}
        for key, value in data.items():
            name = FIELD_ALIASES.get(key)
            if name is None:
                continue
            normalised[name] = coerce_lenient(name, value)
        return normalised

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase JSON-compatible representation."""
        return self.model_dump(mode="json", by_alias=True)


FIELD_NAMES: tuple[str, ...] = tuple(ComponentConfig.model_fields)

# Every accepted spelling (snake_case and camelCase) -> attribute name.
FIELD_ALIASES: dict[str, str] = {
    **{name: name for name in FIELD_NAMES},
    **{to_camel(name): name for name in FIELD_NAMES},
}

DEFAULT_CONFIG = ComponentConfig()


# ---------------------------------------------------------------------------
# Field coercion
# ---------------------------------------------------------------------------


def canonical_field(key: str) -> str:
    """Return the attribute name for *key* (either spelling)."""
    try:
        return FIELD_ALIASES[key]
    except (KeyError, TypeError):
        raise InvalidFieldValue(str(key), None, f"Unknown field: {key!r}") from None


def coerce_field(key: str, value: Any) -> tuple[str, Any]:
    """Validate *value* for field *key*.

    Numbers are clamped to the nearest legal value. Unknown tokens, unknown
    field names and non-numeric values for numeric fields raise
    ``InvalidFieldValue``.

    Returns:
        A ``(attribute_name, coerced_value)`` tuple.
    """
    name = canonical_field(key)
    if name in CATALOGS:
        token = CATALOGS[name].resolve(value)
        if token is None:
            raise InvalidFieldValue(name, value)
        return name, token

    numeric = RANGES[name]
    try:
        if name in PAIR_FIELDS:
            return name, _coerce_pair(numeric, value)
        return name, numeric.clamp(value)
    except TypeError as exc:
        raise InvalidFieldValue(name, value, f"Invalid value for {name!r}: {exc}") from exc


def coerce_lenient(key: str, value: Any) -> Any:
    """Like ``coerce_field`` but falls back to the field default instead of raising."""
    name = canonical_field(key)
    try:
        return coerce_field(name, value)[1]
    except InvalidFieldValue:
        return ComponentConfig.model_fields[name].default


def _coerce_pair(numeric: NumericRange, value: Any) -> tuple[int, int]:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        single = numeric.clamp(value)
        return (single, single)
    if isinstance(value, (list, tuple)) and len(value) == 2:
        return (numeric.clamp(value[0]), numeric.clamp(value[1]))
    raise TypeError("expected a number or a pair of numbers")
