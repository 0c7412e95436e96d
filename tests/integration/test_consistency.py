"""Cross-checks between generated source and the live preview.

For every kind and a spread of configurations, the class list and inline
style embedded in the generated code must match the preview's component node.
"""

from __future__ import annotations

import re

import pytest

from component_studio.models import ComponentConfig
from component_studio.style import format_number

from conftest import ALL_KINDS

pytestmark = pytest.mark.integration

CONFIGS = {
    "default": {},
    "spacious": {"padding": [64, 32], "margin": [8, 4], "fontSize": 24},
    "faded": {"opacity": 35, "borderWidth": 3, "borderRadius": 14},
    "transformed": {"scale": 175, "rotate": -90, "position": "absolute"},
    "clamped": {"fontSize": 999, "opacity": -5, "scale": 10, "rotate": 500},
    "tokens": {
        "backgroundColor": "purple-500",
        "textColor": "white",
        "boxShadow": "2xl",
        "animation": "animate-bounce",
        "hoverShadow": "md",
    },
}


def _class_name_of(code: str) -> str:
    match = re.search(r'className="([^"]*transition-all[^"]*)"', code)
    assert match, "generated code has no styled element"
    return match.group(1)


@pytest.mark.parametrize("config_name", sorted(CONFIGS))
@pytest.mark.parametrize("kind", ALL_KINDS + ["not-a-real-kind"])
def test_generated_code_matches_preview(
    generator, renderer, inline_style_of, kind, config_name
):
    config = ComponentConfig.model_validate(CONFIGS[config_name])
    code = generator.generate(kind, config)
    component = renderer.render(kind, config, "mobile").component

    expected_style = {
        key: value if isinstance(value, str) else format_number(value)
        for key, value in component.style.items()
    }
    assert inline_style_of(code) == expected_style
    assert _class_name_of(code) == component.class_name


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_store_edits_flow_to_both_outputs(generator, renderer, inline_style_of, store, kind):
    store.update(fontSize=30, opacity=50, rotate=45)
    code = generator.generate(kind, store.get())
    component = renderer.render(kind, store.get()).component

    style = inline_style_of(code)
    assert style["fontSize"] == component.style["fontSize"] == "30px"
    assert style["opacity"] == "0.5"
    assert component.style["opacity"] == 0.5
    assert style["transform"] == component.style["transform"] == "scale(1) rotate(45deg)"
