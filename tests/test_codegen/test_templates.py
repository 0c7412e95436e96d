"""Tests for component_studio.codegen.templates -- TemplateRenderer and filters."""

from __future__ import annotations

import jinja2
import pytest

from component_studio.codegen.templates import TemplateRenderer, jsx_style, pascal_case

pytestmark = pytest.mark.unit


class TestTemplateRenderer:
    def test_lists_bundled_templates(self):
        names = TemplateRenderer().list_templates()
        assert names == sorted(
            f"{kind}.tsx.j2"
            for kind in (
                "alert",
                "avatar",
                "badge",
                "button",
                "card",
                "default",
                "input",
                "progress",
                "skeleton",
                "toggle",
            )
        )

    def test_render_string_with_filter(self):
        result = TemplateRenderer().render_string("{{ name | pascal_case }}", {"name": "big-button"})
        assert result == "BigButton"

    def test_undefined_variable_raises(self):
        with pytest.raises(jinja2.UndefinedError):
            TemplateRenderer().render_string("{{ missing }}", {})

    def test_custom_template_dir(self, tmp_path):
        (tmp_path / "chip.tsx.j2").write_text("export const {{ component_name }} = 1\n")
        renderer = TemplateRenderer(tmp_path)
        assert renderer.list_templates() == ["chip.tsx.j2"]
        assert renderer.render("chip.tsx.j2", {"component_name": "Chip"}) == (
            "export const Chip = 1\n"
        )

    def test_missing_dir_lists_nothing(self, tmp_path):
        assert TemplateRenderer(tmp_path / "nope").list_templates() == []


class TestFilters:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("fancy-thing", "FancyThing"),
            ("my_widget v2", "MyWidgetV2"),
            ("button", "Button"),
            ("", ""),
            ("!!!", ""),
        ],
    )
    def test_pascal_case(self, value, expected):
        assert pascal_case(value) == expected

    def test_jsx_style(self):
        assert jsx_style({"fontSize": "16px", "opacity": 0.5}, 2) == (
            'style={{\n    fontSize: "16px",\n    opacity: 0.5\n  }}'
        )

    def test_jsx_style_integer_values_are_bare(self):
        assert "opacity: 1\n" in jsx_style({"opacity": 1})
