"""Tests for the themelint CLI commands."""
from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from themelint import __version__
from themelint.cli.lint import collect_files
from themelint.cli.main import cli

FIXTURES = Path(__file__).parent.parent / "fixtures"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _write_theme(root: Path, component: str, fixture: str) -> Path:
    """Copy a fixture to ``<root>/src/material/<component>/_<component>-theme.scss``."""
    directory = root / "src" / "material" / component
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"_{component}-theme.scss"
    path.write_text((FIXTURES / fixture).read_text())
    return path


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_cli_group_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "theme mixins" in result.output

    def test_cli_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert "lint" in result.output
        assert "inspect" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# lint command
# ---------------------------------------------------------------------------


class TestLintCommand:
    def test_clean_file(self, tmp_path) -> None:
        path = _write_theme(tmp_path, "button", "button-theme.scss")
        result = CliRunner().invoke(cli, ["lint", str(path)])
        assert result.exit_code == 0
        assert "Summary: 0 error(s), 0 warning(s)" in result.output

    def test_reports_problems(self, tmp_path) -> None:
        path = _write_theme(tmp_path, "chips", "chips-theme.scss")
        result = CliRunner().invoke(cli, ["lint", str(path)])
        assert result.exit_code == 1
        assert (
            f"{path}:6:1: ERROR: Expected first mixin argument to be called "
            "`$config-or-theme`. [material/theme-mixin-api]"
        ) in result.output
        assert "Summary: 8 error(s), 0 warning(s)" in result.output

    def test_warn_does_not_fail(self, tmp_path) -> None:
        path = _write_theme(tmp_path, "chips", "chips-theme.scss")
        result = CliRunner().invoke(cli, ["lint", "--warn", str(path)])
        assert result.exit_code == 0
        assert ": WARNING: " in result.output
        assert "Summary: 0 error(s), 8 warning(s)" in result.output

    def test_disable(self, tmp_path) -> None:
        path = _write_theme(tmp_path, "chips", "chips-theme.scss")
        result = CliRunner().invoke(cli, ["lint", "--disable", str(path)])
        assert result.exit_code == 0
        assert "Summary: 0 error(s), 0 warning(s)" in result.output

    def test_fix_rewrites_file(self, tmp_path) -> None:
        path = _write_theme(tmp_path, "chips", "chips-theme.scss")
        result = CliRunner().invoke(cli, ["lint", "--fix", str(path)])
        # Three problems cannot be fixed automatically.
        assert result.exit_code == 1
        assert "Summary: 3 error(s), 0 warning(s), 1 file(s) fixed" in result.output
        text = path.read_text()
        assert "@mixin color($config-or-theme) {" in text
        assert "theming.private-check-duplicate-theme-styles($theme, 'mat-chips');" in text

    def test_fix_leaves_clean_files_alone(self, tmp_path) -> None:
        path = _write_theme(tmp_path, "button", "button-theme.scss")
        before = path.stat().st_mtime_ns
        result = CliRunner().invoke(cli, ["lint", "--fix", str(path)])
        assert result.exit_code == 0
        assert "0 file(s) fixed" in result.output
        assert path.stat().st_mtime_ns == before

    def test_fix_then_lint_is_clean(self, tmp_path) -> None:
        directory = tmp_path / "src" / "material" / "card"
        directory.mkdir(parents=True)
        path = directory / "_card-theme.scss"
        path.write_text("@mixin theme($theme) {}\n\n@mixin color($c) {\n  $x: 1;\n}\n")
        runner = CliRunner()
        assert runner.invoke(cli, ["lint", "--fix", str(path)]).exit_code == 0
        result = runner.invoke(cli, ["lint", str(path)])
        assert result.exit_code == 0

    def test_directory(self, tmp_path) -> None:
        _write_theme(tmp_path, "button", "button-theme.scss")
        _write_theme(tmp_path, "chips", "chips-theme.scss")
        (tmp_path / "src" / "layout.scss").write_text("@mixin theme($x) { top: 0; }\n")
        result = CliRunner().invoke(cli, ["lint", str(tmp_path)])
        assert result.exit_code == 1
        assert "Summary: 8 error(s), 0 warning(s)" in result.output

    def test_parse_error(self, tmp_path) -> None:
        directory = tmp_path / "src" / "material" / "menu"
        directory.mkdir(parents=True)
        path = directory / "_menu-theme.scss"
        path.write_text("@mixin theme($theme-or-color-config) {\n")
        result = CliRunner().invoke(cli, ["lint", str(path)])
        assert result.exit_code == 1
        assert "parse error" in result.output
        assert "1 file(s) could not be parsed" in result.output

    def test_requires_paths(self) -> None:
        result = CliRunner().invoke(cli, ["lint"])
        assert result.exit_code != 0


class TestCollectFiles:
    def test_directories_are_expanded_and_sorted(self, tmp_path) -> None:
        (tmp_path / "b").mkdir()
        (tmp_path / "b" / "_b-theme.scss").write_text("")
        (tmp_path / "_a-theme.scss").write_text("")
        (tmp_path / "notes.txt").write_text("")
        files = collect_files((str(tmp_path),))
        assert [f.name for f in files] == ["_a-theme.scss", "_b-theme.scss"]

    def test_files_are_kept(self, tmp_path) -> None:
        path = tmp_path / "x.scss"
        path.write_text("")
        assert collect_files((str(path),)) == [path]


# ---------------------------------------------------------------------------
# inspect command
# ---------------------------------------------------------------------------


class TestInspectCommand:
    def test_lists_mixins(self, tmp_path) -> None:
        path = _write_theme(tmp_path, "button", "button-theme.scss")
        result = CliRunner().invoke(cli, ["inspect", str(path)])
        assert result.exit_code == 0
        assert "Component: mat-button" in result.output
        assert "Mixins:    4" in result.output
        assert "theme  line=30  args=($theme-or-color-config)  statements=2" in result.output

    def test_not_a_theme_file(self, tmp_path) -> None:
        path = tmp_path / "layout.scss"
        path.write_text(".a { top: 0; }\n")
        result = CliRunner().invoke(cli, ["inspect", str(path)])
        assert result.exit_code == 0
        assert "(not a theme file)" in result.output
        assert "Mixins:    0" in result.output

    def test_parse_error(self, tmp_path) -> None:
        path = tmp_path / "broken.scss"
        path.write_text("}")
        result = CliRunner().invoke(cli, ["inspect", str(path)])
        assert result.exit_code == 1
        assert "Parse error" in result.output


@pytest.mark.parametrize("command", ["lint", "inspect"])
def test_subcommand_help(command: str) -> None:
    result = CliRunner().invoke(cli, [command, "--help"])
    assert result.exit_code == 0
    assert "Usage" in result.output
