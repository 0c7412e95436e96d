"""Component source generation.

Maps ``(kind, config)`` to emittable source text. The resolved style comes
from ``resolve_visual_attributes`` (shared with the preview renderer) and is
embedded into the kind's fixed skeleton by its Jinja2 template. Generation
is deterministic and total: unknown kinds render the fallback template.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from ..models import ComponentConfig
from ..preview.skeletons import SKELETON_BAR_WIDTHS
from ..registry import KindRegistry, KindSpec, default_registry
from ..style import ResolvedStyle, resolve_visual_attributes
from .templates import TemplateRenderer


class CodeGenerator:
    """Renders per-kind templates from the kind registry."""

    def __init__(
        self,
        registry: KindRegistry | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.registry = registry if registry is not None else default_registry()
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def generate(
        self,
        kind: str | Enum | None,
        config: ComponentConfig | Mapping[str, Any],
    ) -> str:
        """Generate the source text for *kind* configured by *config*.

        Args:
            kind: A registered kind name; anything else uses the fallback.
            config: A ``ComponentConfig`` or raw mapping (validated leniently).

        Returns:
            The complete source of a single exported component.
        """
        if not isinstance(config, ComponentConfig):
            config = ComponentConfig.model_validate(config)
        spec = self.registry.get(kind)
        style = resolve_visual_attributes(config)
        return self.renderer.render(spec.template, self.build_context(spec, style))

    def component_name(self, kind: str | Enum | None) -> str:
        """Name of the component exported by ``generate(kind, ...)``."""
        return self.registry.get(kind).component_name

    # -- Context building --------------------------------------------------

    @staticmethod
    def build_context(spec: KindSpec, style: ResolvedStyle) -> dict[str, Any]:
        """Build the template context for *spec* from a resolved style."""
        return {
            "kind": spec.kind,
            "component_name": spec.component_name,
            "class_name": style.class_name(spec.extra_classes),
            "style": style.inline_style(),
            "label": spec.label,
            "texts": dict(spec.texts),
            "bar_widths": list(SKELETON_BAR_WIDTHS),
        }


_default_generator: CodeGenerator | None = None


def generate(kind: str | Enum | None, config: ComponentConfig | Mapping[str, Any]) -> str:
    """Generate with a shared ``CodeGenerator`` over the default registry."""
    global _default_generator
    if _default_generator is None:
        _default_generator = CodeGenerator()
    return _default_generator.generate(kind, config)
