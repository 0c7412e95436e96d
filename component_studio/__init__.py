"""Component Studio -- visual component configuration and code generation.

Holds the editable ``ComponentConfig`` in an observable ``ConfigStore``,
derives one shared resolved style from it, and feeds that style both to the
``CodeGenerator`` (emittable source text) and to the ``PreviewRenderer``
(a render tree for live feedback).

Quick usage::

    from component_studio import ConfigStore, CodeGenerator, PreviewRenderer

    store = ConfigStore()
    store.set("fontSize", 20)
    code = CodeGenerator().generate("button", store.get())
    tree = PreviewRenderer().render("button", store.get(), "mobile")
"""

from component_studio.codegen import CodeGenerator, export_component, generate
from component_studio.models import (
    DEFAULT_CONFIG,
    ComponentConfig,
    ComponentKind,
    InvalidFieldValue,
    ViewportMode,
)
from component_studio.preview import PreviewRenderer, RenderNode, RenderTree, render
from component_studio.registry import KindRegistry, KindSpec, default_registry
from component_studio.store import ConfigChange, ConfigStore
from component_studio.style import ResolvedStyle, resolve_visual_attributes

__version__ = "0.1.0"

__all__ = [
    "CodeGenerator",
    "ComponentConfig",
    "ComponentKind",
    "ConfigChange",
    "ConfigStore",
    "DEFAULT_CONFIG",
    "InvalidFieldValue",
    "KindRegistry",
    "KindSpec",
    "PreviewRenderer",
    "RenderNode",
    "RenderTree",
    "ResolvedStyle",
    "ViewportMode",
    "default_registry",
    "export_component",
    "generate",
    "render",
    "resolve_visual_attributes",
]
