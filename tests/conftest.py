"""Shared pytest fixtures for the Component Studio test suite.

Provides reusable fixtures for:
- Default and customised component configurations
- A fresh ConfigStore per test
- Generator / renderer instances over the default registry
- A parser for the inline style block of generated source
"""

from __future__ import annotations

import re
from collections.abc import Callable

import pytest

from component_studio.codegen.generator import CodeGenerator
from component_studio.models import DEFAULT_CONFIG, ComponentConfig
from component_studio.preview.renderer import PreviewRenderer
from component_studio.store import ConfigStore

ALL_KINDS = [
    "button",
    "card",
    "badge",
    "input",
    "avatar",
    "progress",
    "toggle",
    "alert",
    "skeleton",
]


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------


@pytest.fixture
def default_config() -> ComponentConfig:
    """The documented default configuration."""
    return DEFAULT_CONFIG


@pytest.fixture
def custom_config() -> ComponentConfig:
    """A configuration touching every field with non-default values."""
    return ComponentConfig(
        width="w-64",
        height="h-32",
        padding=(24, 8),
        margin=(4, 12),
        fontSize=20,
        fontWeight="font-bold",
        backgroundColor="bg-blue-500",
        textColor="text-white",
        borderWidth=2,
        borderRadius=10,
        boxShadow="shadow-lg",
        opacity=35,
        scale=150,
        rotate=-45,
        position="absolute",
        animation="hover:scale-105",
        hoverShadow="hover:shadow-xl",
    )


@pytest.fixture
def store() -> ConfigStore:
    """A fresh store holding the default configuration."""
    return ConfigStore()


# ---------------------------------------------------------------------------
# Generator / renderer
# ---------------------------------------------------------------------------


@pytest.fixture
def generator() -> CodeGenerator:
    return CodeGenerator()


@pytest.fixture
def renderer() -> PreviewRenderer:
    return PreviewRenderer()


@pytest.fixture
def inline_style_of() -> Callable[[str], dict[str, str]]:
    """Return a parser extracting the first ``style={{...}}`` block of generated code."""

    def _parse(code: str) -> dict[str, str]:
        match = re.search(r"style=\{\{\n(.*?)\n\s*\}\}", code, re.S)
        assert match, "generated code has no inline style block"
        style: dict[str, str] = {}
        for line in match.group(1).splitlines():
            key, _, value = line.strip().rstrip(",").partition(": ")
            style[key] = value.strip('"')
        return style

    return _parse
