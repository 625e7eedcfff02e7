from __future__ import annotations

from pathlib import Path
import textwrap

import pytest
from typer.testing import CliRunner

from wprig.cli import app


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    path = tmp_path / "theme.yml"
    path.write_text(
        textwrap.dedent(
            """
            options:
              colorscheme: dark
              page_layout: one-column
              panel_1: 5
            styles:
              wprig-singular:
                src: https://example.com/css/singular.css
                version: "1.0"
              wprig-print-styles:
                src: https://example.com/css/print.css
                version: "1.0"
            scripts:
              wprig-navigation:
                src: https://example.com/js/navigation.js
                version: "1.0"
                defer: true
            page:
              is_page: true
              is_singular: true
            """
        ).strip()
        + "\n",
        encoding="utf-8",
    )
    return path


def test_body_class_command(config_path: Path) -> None:
    result = CliRunner().invoke(app, ["body-class", str(config_path), "-c", "page"])
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "page page-one-column colors-dark"


def test_head_command(config_path: Path) -> None:
    result = CliRunner().invoke(app, ["head", str(config_path)])
    assert result.exit_code == 0, result.output
    lines = result.stdout.splitlines()
    assert lines[0] == (
        '<link rel="preload" id="wprig-singular-preload" '
        'href="https://example.com/css/singular.css?ver=1.0" as="style" />'
    )
    assert lines[-1] == (
        '<link id="print-styles" href="https://example.com/css/print.css?ver=1.0" media="print" />'
    )
    assert len(lines) == 2


def test_script_tag_command(config_path: Path) -> None:
    result = CliRunner().invoke(app, ["script-tag", str(config_path), "wprig-navigation"])
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == (
        '<script src="https://example.com/js/navigation.js?ver=1.0" '
        'id="wprig-navigation-js" defer></script>'
    )


def test_script_tag_unknown_handle(config_path: Path) -> None:
    result = CliRunner().invoke(app, ["script-tag", str(config_path), "missing"])
    assert result.exit_code == 1


def test_panels_command(config_path: Path) -> None:
    result = CliRunner().invoke(app, ["panels", str(config_path)])
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "1"


def test_hooks_command_lists_callbacks(config_path: Path) -> None:
    result = CliRunner().invoke(app, ["hooks", str(config_path)])
    assert result.exit_code == 0, result.output
    assert "head_print_stylesheet" in result.stdout
    assert "script_loader_tag" in result.stdout


def test_invalid_config_exits_with_error(tmp_path: Path) -> None:
    path = tmp_path / "broken.yml"
    path.write_text("unknown: true\n", encoding="utf-8")
    result = CliRunner().invoke(app, ["body-class", str(path)])
    assert result.exit_code == 1


def test_missing_config_is_rejected(tmp_path: Path) -> None:
    result = CliRunner().invoke(app, ["head", str(tmp_path / "absent.yml")])
    assert result.exit_code != 0


def test_error_report_shows_cause_when_verbose(tmp_path: Path) -> None:
    path = tmp_path / "broken.yml"
    path.write_text("options: [unclosed\n", encoding="utf-8")

    quiet = CliRunner().invoke(app, ["body-class", str(path)])
    verbose = CliRunner().invoke(app, ["-v", "body-class", str(path)])

    assert quiet.exit_code == verbose.exit_code == 1
    assert "error: Invalid YAML" in quiet.output
    assert "caused by:" not in quiet.output
    assert "caused by:" in verbose.output
