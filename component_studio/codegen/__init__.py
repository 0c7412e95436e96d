"""Component Studio code generation -- turns a configuration into source text.

Quick usage::

    from component_studio.codegen import CodeGenerator

    code = CodeGenerator().generate("button", {"fontSize": 18})
"""

from component_studio.codegen.export import ExportResult, component_filename, export_component
from component_studio.codegen.generator import CodeGenerator, generate
from component_studio.codegen.templates import TemplateRenderer

__all__ = [
    "CodeGenerator",
    "ExportResult",
    "TemplateRenderer",
    "component_filename",
    "export_component",
    "generate",
]
