"""Closed catalog of component kinds.

Each ``KindSpec`` bundles everything the generator and the preview renderer
need for one kind: the Jinja2 template that emits its source text, the
function that builds its preview tree, and the kind-specific classes both of
them append to the styled element. Unknown kinds resolve to the mandatory
fallback entry, so lookups never fail.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Mapping

from .models import ComponentKind

if TYPE_CHECKING:
    from .preview.tree import RenderNode
    from .style import ResolvedStyle


PreviewBuilder = Callable[["ResolvedStyle", "KindSpec"], "RenderNode"]


@dataclass(frozen=True)
class KindSpec:
    """Generation and preview recipe for one component kind."""

    kind: str
    display_name: str
    category: str
    template: str
    build_preview: PreviewBuilder
    label: str = ""
    extra_classes: str = ""
    texts: Mapping[str, str] = field(default_factory=dict)

    @property
    def component_name(self) -> str:
        """Name of the exported component in generated code."""
        return f"Custom{self.display_name}"


def normalise_kind(kind: str | Enum | None) -> str:
    """Return the lookup key for *kind*."""
    if isinstance(kind, Enum):
        kind = kind.value
    return str(kind or "").strip().lower()


class KindRegistry:
    """Lookup table of ``KindSpec`` entries with a mandatory fallback."""

    def __init__(self, fallback: KindSpec) -> None:
        self.fallback = fallback
        self._specs: dict[str, KindSpec] = {}

    def register(self, spec: KindSpec, *, replace: bool = False) -> None:
        """Add *spec* to the registry.

        Raises ``ValueError`` if the kind is already registered and
        *replace* is false.
        """
        key = normalise_kind(spec.kind)
        if not key:
            raise ValueError("Kind name must not be empty")
        if key in self._specs and not replace:
            raise ValueError(f"Kind {key!r} is already registered")
        self._specs[key] = spec

    def get(self, kind: str | Enum | None) -> KindSpec:
        """Return the ``KindSpec`` for *kind*, or the fallback entry if it is unknown."""
        return self._specs.get(normalise_kind(kind), self.fallback)

    def is_known(self, kind: str | Enum | None) -> bool:
        return normalise_kind(kind) in self._specs

    def kinds(self) -> list[str]:
        """Registered kind names in registration order (fallback excluded)."""
        return list(self._specs)

    def __contains__(self, kind: object) -> bool:
        return isinstance(kind, (str, Enum)) and self.is_known(kind)

    def __iter__(self) -> Iterator[KindSpec]:
        return iter(self._specs.values())

    def __len__(self) -> int:
        return len(self._specs)


_default_registry: KindRegistry | None = None


def default_registry() -> KindRegistry:
    """Return the shared registry holding the built-in kind catalog."""
    global _default_registry
    if _default_registry is None:
        _default_registry = build_default_registry()
    return _default_registry


def build_default_registry() -> KindRegistry:
    """Build a fresh registry with every built-in kind."""
    # Imported here: the preview package itself depends on this module.
    from .preview import skeletons

    fallback = KindSpec(
        kind=ComponentKind.DEFAULT.value,
        display_name="Component",
        category="layout",
        template="default.tsx.j2",
        build_preview=skeletons.build_default,
        label="Custom Component",
        extra_classes="flex items-center justify-center",
    )
    registry = KindRegistry(fallback)
    for spec in (
        KindSpec("button", "Button", "buttons", "button.tsx.j2", skeletons.build_button,
                 label="Click me"),
        KindSpec("card", "Card", "cards", "card.tsx.j2", skeletons.build_card,
                 extra_classes="border",
                 texts={"title": "Card Title", "body": "Card description goes here"}),
        KindSpec("badge", "Badge", "data-display", "badge.tsx.j2", skeletons.build_badge,
                 label="Badge"),
        KindSpec("input", "Input", "forms", "input.tsx.j2", skeletons.build_input,
                 label="Enter text...", extra_classes="border"),
        KindSpec("avatar", "Avatar", "data-display", "avatar.tsx.j2", skeletons.build_avatar,
                 label="A", extra_classes="rounded-full flex items-center justify-center"),
        KindSpec("progress", "Progress", "feedback", "progress.tsx.j2",
                 skeletons.build_progress,
                 extra_classes="bg-gray-200 rounded-full overflow-hidden",
                 texts={"value": "75"}),
        KindSpec("toggle", "Toggle", "forms", "toggle.tsx.j2", skeletons.build_toggle,
                 label="Toggle", extra_classes="rounded-full"),
        KindSpec("alert", "Alert", "feedback", "alert.tsx.j2", skeletons.build_alert,
                 extra_classes="border-l-4 border-yellow-500",
                 texts={"title": "Alert Title", "body": "This is an alert message"}),
        KindSpec("skeleton", "Skeleton", "feedback", "skeleton.tsx.j2",
                 skeletons.build_skeleton, extra_classes="animate-pulse"),
    ):
        registry.register(spec)
    return registry
