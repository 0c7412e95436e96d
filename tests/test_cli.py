"""Tests for component_studio.cli -- argument parsing and command dispatch."""

from __future__ import annotations

import json
import os
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from component_studio.api_client import SubmissionResult
from component_studio.cli import EXIT_FAILURE, EXIT_OK, EXIT_USAGE, main, parse_assignment
from component_studio.config import StudioConfig
from component_studio.models import ComponentKind

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep STUDIO_* variables from the outer environment out of the CLI."""
    for key in list(os.environ):
        if key.startswith("STUDIO_"):
            monkeypatch.delenv(key)


# ---------------------------------------------------------------------------
# parse_assignment
# ---------------------------------------------------------------------------


class TestParseAssignment:
    def test_number(self):
        assert parse_assignment("fontSize=20") == ("fontSize", 20)

    def test_json_list(self):
        assert parse_assignment("padding=[8,12]") == ("padding", [8, 12])

    def test_plain_string(self):
        assert parse_assignment("backgroundColor=blue-500") == ("backgroundColor", "blue-500")

    def test_empty_value(self):
        assert parse_assignment("animation=") == ("animation", "")

    def test_missing_equals(self):
        with pytest.raises(ValueError):
            parse_assignment("fontSize")

    def test_missing_key(self):
        with pytest.raises(ValueError):
            parse_assignment("=20")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


class TestKinds:
    def test_lists_kinds(self, capsys):
        assert main(["kinds"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "CustomButton" in out
        assert "skeleton" in out


class TestGenerate:
    def test_writes_code_to_stdout(self, capsys):
        assert main(["generate", "button", "--set", "fontSize=20"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "export function CustomButton()" in out
        assert 'fontSize: "20px"' in out

    def test_default_kind_from_settings(self, capsys, tmp_path):
        settings = StudioConfig(default_kind=ComponentKind.CARD).save(tmp_path / "studio.json")
        assert main(["--settings", str(settings), "generate"]) == EXIT_OK
        assert "export function CustomCard()" in capsys.readouterr().out

    def test_config_file(self, capsys, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"fontSize": 30, "backgroundColor": "not-a-colour"}))
        assert main(["generate", "badge", "--config", str(path)]) == EXIT_OK
        out = capsys.readouterr().out
        assert 'fontSize: "30px"' in out
        assert "bg-primary" in out

    def test_set_overrides_config_file(self, capsys, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"fontSize": 30}))
        assert main(["generate", "badge", "--config", str(path), "--set", "fontSize=12"]) == 0
        assert 'fontSize: "12px"' in capsys.readouterr().out

    def test_unknown_kind_warns_and_falls_back(self, capsys):
        assert main(["generate", "spaceship"]) == EXIT_OK
        captured = capsys.readouterr()
        assert "export function CustomComponent()" in captured.out
        assert "spaceship" in captured.err

    def test_output_directory(self, tmp_path, capsys):
        assert main(["generate", "card", "--output", str(tmp_path)]) == EXIT_OK
        written = tmp_path / "Card.tsx"
        assert written.exists()
        assert "export function CustomCard()" in written.read_text(encoding="utf-8")

    def test_output_path_that_is_a_file(self, tmp_path):
        target = tmp_path / "components"
        target.write_text("occupied")
        assert main(["generate", "card", "--output", str(target)]) == EXIT_FAILURE

    def test_invalid_token_is_usage_error(self, capsys):
        assert main(["generate", "button", "--set", "backgroundColor=magenta"]) == EXIT_USAGE
        assert "magenta" in capsys.readouterr().err

    def test_malformed_assignment_is_usage_error(self):
        assert main(["generate", "button", "--set", "oops"]) == EXIT_USAGE

    def test_unknown_field_is_usage_error(self):
        assert main(["generate", "button", "--set", "colour=red"]) == EXIT_USAGE

    def test_missing_config_file(self, tmp_path):
        assert main(["generate", "button", "--config", str(tmp_path / "none.json")]) == EXIT_FAILURE

    def test_unknown_command(self):
        with pytest.raises(SystemExit):
            main(["frobnicate"])


class TestPreview:
    def test_summary(self, capsys):
        assert main(["preview", "button", "--viewport", "mobile"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "375x667" in out
        assert "component" in out

    def test_html_output(self, tmp_path):
        target = tmp_path / "preview.html"
        assert main(["preview", "alert", "--viewport", "mobile", "--html", str(target)]) == 0
        html = target.read_text(encoding="utf-8")
        assert html.startswith("<!DOCTYPE html>")
        assert "w-[375px]" in html
        assert "border-l-4" in html

    def test_zoom(self, tmp_path):
        target = tmp_path / "preview.html"
        assert main(["preview", "badge", "--zoom", "150", "--html", str(target)]) == EXIT_OK
        assert "scale(1.5)" in target.read_text(encoding="utf-8")


class TestSubmit:
    def test_success(self, capsys):
        with patch("component_studio.cli.ComponentsClient") as client_cls:
            client_cls.return_value.create_component = AsyncMock(
                return_value=SubmissionResult(success=True, component_id="cmp_1")
            )
            code = main(["submit", "button", "--name", "Primary CTA", "--tag", "cta"])

        assert code == EXIT_OK
        submission = client_cls.return_value.create_component.call_args[0][0]
        assert submission.name == "Primary CTA"
        assert submission.tags == ["cta"]
        assert "cmp_1" in capsys.readouterr().out

    def test_failure(self, capsys):
        with patch("component_studio.cli.ComponentsClient") as client_cls:
            client_cls.return_value.create_component = AsyncMock(
                return_value=SubmissionResult(success=False, error="Cannot connect")
            )
            code = main(["submit", "card"])

        assert code == EXIT_FAILURE
        assert "Cannot connect" in capsys.readouterr().err

    def test_network_read_failure_exits_with_failure(self, capsys):
        mock_client = AsyncMock()
        mock_client.post = AsyncMock(side_effect=httpx.ReadError("reset"))
        mock_client.__aenter__ = AsyncMock(return_value=mock_client)
        mock_client.__aexit__ = AsyncMock(return_value=False)

        with patch("httpx.AsyncClient", return_value=mock_client):
            code = main(["submit", "button"])

        assert code == EXIT_FAILURE
        assert "Submission failed" in capsys.readouterr().err

    def test_client_uses_settings(self, tmp_path):
        settings = StudioConfig.model_validate(
            {"api": {"base_url": "https://api.example.com", "token": "tok", "timeout": 7}}
        ).save(tmp_path / "studio.json")
        with patch("component_studio.cli.ComponentsClient") as client_cls:
            client_cls.return_value.create_component = AsyncMock(
                return_value=SubmissionResult(success=True)
            )
            main(["--settings", str(settings), "submit", "badge"])

        client_cls.assert_called_once_with("https://api.example.com", token="tok", timeout=7)
