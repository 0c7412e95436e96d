"""File export of generated components.

Writes the text produced by ``CodeGenerator.generate`` verbatim to a file
named ``<ComponentName>.<extension>``, the same artefact the editor offers as
a download.
"""

from __future__ import annotations

import asyncio
from enum import Enum
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, Field

from ..models import ComponentConfig
from ..registry import KindRegistry, default_registry, normalise_kind
from ..utils import ensure_dir, write_text_file
from .generator import CodeGenerator
from .templates import pascal_case

DEFAULT_EXTENSION = "tsx"


class ExportResult(BaseModel):
    """Outcome of a single component export."""

    path: Path = Field(..., description="Written file")
    kind: str = Field(..., description="Kind actually rendered (fallback for unknown kinds)")
    component_name: str = Field(..., description="Exported component identifier")
    bytes_written: int = Field(default=0, ge=0)
    fallback: bool = Field(default=False, description="True when the fallback template was used")


def component_filename(
    kind: str | Enum | None,
    extension: str = DEFAULT_EXTENSION,
    registry: KindRegistry | None = None,
) -> str:
    """Return the download filename for *kind*.

    Known kinds use their display name (``Button.tsx``); unknown kinds are
    pascal-cased from the raw name, or use the fallback display name when
    nothing usable is left.
    """
    registry = registry if registry is not None else default_registry()
    if registry.is_known(kind):
        stem = registry.get(kind).display_name
    else:
        stem = pascal_case(normalise_kind(kind)) or registry.fallback.display_name
    return f"{stem}.{extension.lstrip('.')}"


async def export_component(
    kind: str | Enum | None,
    config: ComponentConfig | Mapping[str, Any],
    output_dir: str | Path,
    *,
    extension: str = DEFAULT_EXTENSION,
    generator: CodeGenerator | None = None,
) -> ExportResult:
    """Generate *kind* with *config* and write it into *output_dir*.

    The output directory is created when missing; an existing non-directory
    path raises ``NotADirectoryError``. File system work runs in worker
    threads so callers running an event loop are not blocked.
    """
    generator = generator or CodeGenerator()
    code = generator.generate(kind, config)
    spec = generator.registry.get(kind)
    filename = component_filename(kind, extension, generator.registry)
    directory = await asyncio.to_thread(ensure_dir, output_dir)
    out = directory / filename
    written = await asyncio.to_thread(write_text_file, out, code)
    return ExportResult(
        path=out,
        kind=spec.kind,
        component_name=spec.component_name,
        bytes_written=written,
        fallback=not generator.registry.is_known(kind),
    )
