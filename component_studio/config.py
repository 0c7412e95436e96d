"""Component Studio configuration.

Centralised, typed settings for the command line and the Components API
client. All settings use Pydantic v2 models so they can be validated at
construction time and serialised to/from JSON or environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from .models import ComponentKind, ViewportMode


class ApiConfig(BaseModel):
    """Connection settings for the external Components REST API."""

    base_url: str = Field(default="http://localhost:3001/api")
    token: str = Field(default="", description="Bearer token; empty for anonymous calls")
    timeout: int = Field(default=30, ge=1, description="Per-request timeout in seconds")

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


class StudioConfig(BaseModel):
    """Global Component Studio configuration."""

    default_kind: ComponentKind = Field(default=ComponentKind.BUTTON)
    default_viewport: ViewportMode = Field(default=ViewportMode.DESKTOP)
    source_extension: str = Field(default="tsx", min_length=1)
    export_dir: Path = Field(default=Path("./components"))
    api: ApiConfig = Field(default_factory=ApiConfig)

    @field_validator("source_extension")
    @classmethod
    def _strip_dot(cls, value: str) -> str:
        return value.lstrip(".")

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "StudioConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "StudioConfig":
        """Build a ``StudioConfig`` from environment variables.

        Recognised variables (all optional):
            STUDIO_DEFAULT_KIND, STUDIO_DEFAULT_VIEWPORT, STUDIO_SOURCE_EXTENSION,
            STUDIO_EXPORT_DIR, STUDIO_API_URL, STUDIO_API_TOKEN, STUDIO_API_TIMEOUT.
        """
        api_kwargs: dict[str, Any] = {}
        if os.environ.get("STUDIO_API_URL"):
            api_kwargs["base_url"] = os.environ["STUDIO_API_URL"]
        if os.environ.get("STUDIO_API_TOKEN"):
            api_kwargs["token"] = os.environ["STUDIO_API_TOKEN"]
        if os.environ.get("STUDIO_API_TIMEOUT"):
            api_kwargs["timeout"] = int(os.environ["STUDIO_API_TIMEOUT"])

        kwargs: dict[str, Any] = {}
        if os.environ.get("STUDIO_DEFAULT_KIND"):
            kwargs["default_kind"] = os.environ["STUDIO_DEFAULT_KIND"]
        if os.environ.get("STUDIO_DEFAULT_VIEWPORT"):
            kwargs["default_viewport"] = os.environ["STUDIO_DEFAULT_VIEWPORT"]
        if os.environ.get("STUDIO_SOURCE_EXTENSION"):
            kwargs["source_extension"] = os.environ["STUDIO_SOURCE_EXTENSION"]
        if os.environ.get("STUDIO_EXPORT_DIR"):
            kwargs["export_dir"] = Path(os.environ["STUDIO_EXPORT_DIR"])

        return cls(api=ApiConfig(**api_kwargs), **kwargs)
