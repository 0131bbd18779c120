"""Unit tests for the command-line entry point (create_uikit.cli).

Tests cover:
- run() exit codes for success, existing target, generation errors and
  install failures
- show_success output for both project kinds
- main() wiring of argv and environment settings
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from create_uikit import cli
from create_uikit.config import ProjectKind, ScaffoldConfig, Settings


# ---------------------------------------------------------------------------
# run
# ---------------------------------------------------------------------------


class TestRun:
    @pytest.mark.unit
    async def test_success(self, jsx_app_config, output_dir, mock_run_command):
        code = await cli.run(jsx_app_config, Settings(), base_dir=output_dir)
        assert code == 0
        assert (output_dir / "my-app" / "package.json").is_file()
        mock_run_command.assert_awaited_once()
        assert mock_run_command.await_args.kwargs["cwd"] == (output_dir / "my-app").resolve()

    @pytest.mark.unit
    async def test_existing_directory(self, jsx_app_config, output_dir, mock_run_command, capsys):
        (output_dir / "my-app").mkdir()
        code = await cli.run(jsx_app_config, Settings(), base_dir=output_dir)
        assert code == 1
        assert "already exists" in capsys.readouterr().out
        assert list((output_dir / "my-app").iterdir()) == []
        mock_run_command.assert_not_awaited()

    @pytest.mark.unit
    async def test_generation_error(
        self, app_config, output_dir, template_copy, mock_run_command, capsys
    ):
        (template_copy / "app" / "index.html.j2").unlink()
        settings = Settings(template_dir=template_copy)
        code = await cli.run(app_config, settings, base_dir=output_dir)
        assert code == 1
        assert "Template file not found" in capsys.readouterr().out
        mock_run_command.assert_not_awaited()

    @pytest.mark.unit
    async def test_unexpected_error(self, jsx_app_config, output_dir, capsys):
        with patch.object(
            cli.ProjectGenerator, "generate", side_effect=PermissionError("denied")
        ):
            code = await cli.run(jsx_app_config, Settings(), base_dir=output_dir)
        assert code == 1
        assert "Error: denied" in capsys.readouterr().out

    @pytest.mark.unit
    async def test_install_failure_keeps_files(
        self, jsx_app_config, output_dir, failing_run_command, capsys
    ):
        code = await cli.run(jsx_app_config, Settings(), base_dir=output_dir)
        assert code == 1
        out = capsys.readouterr().out
        assert "Failed to install dependencies" in out
        assert "Project created successfully" in out
        assert (output_dir / "my-app" / "src" / "App.jsx").is_file()

    @pytest.mark.unit
    async def test_skip_install(self, jsx_app_config, output_dir, mock_run_command):
        code = await cli.run(jsx_app_config, Settings(skip_install=True), base_dir=output_dir)
        assert code == 0
        mock_run_command.assert_not_awaited()

    @pytest.mark.unit
    async def test_path_with_closing_tag(self, output_dir, mock_run_command, capsys):
        config = ScaffoldConfig(target_path="demo[/x]", use_jsx=True)
        code = await cli.run(config, Settings(skip_install=True), base_dir=output_dir)
        assert code == 0
        assert (output_dir / "demo[/x]" / "package.json").is_file()
        out = capsys.readouterr().out
        assert "demo[/x]" in out
        assert "cd demo[/x]" in out

    @pytest.mark.unit
    async def test_existing_path_with_brackets(self, output_dir, mock_run_command, capsys):
        (output_dir / "demo[/x]").mkdir(parents=True)
        config = ScaffoldConfig(target_path="demo[/x]", use_jsx=True)
        code = await cli.run(config, Settings(), base_dir=output_dir)
        assert code == 1
        assert "Directory demo[/x] already exists!" in capsys.readouterr().out

    @pytest.mark.unit
    async def test_error_message_with_brackets(self, jsx_app_config, output_dir, capsys):
        with patch.object(
            cli.ProjectGenerator, "generate", side_effect=OSError("bad [/red] path")
        ):
            code = await cli.run(jsx_app_config, Settings(), base_dir=output_dir)
        assert code == 1
        assert "Error: bad [/red] path" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# show_success
# ---------------------------------------------------------------------------


class TestShowSuccess:
    @pytest.mark.unit
    def test_app_next_steps(self, capsys):
        cli.show_success(ScaffoldConfig(target_path="my-app"))
        out = capsys.readouterr().out
        assert "cd my-app" in out
        assert "npm run dev" in out
        assert "TypeScript" in out
        assert "Themes" in out
        assert "Components" in out

    @pytest.mark.unit
    def test_bracketed_path_kept_in_next_steps(self, capsys):
        cli.show_success(ScaffoldConfig(target_path="apps/[beta]/web"))
        assert "cd apps/[beta]/web" in capsys.readouterr().out

    @pytest.mark.unit
    def test_extension_next_steps(self, capsys):
        cli.show_success(
            ScaffoldConfig(target_path="ext", use_jsx=True, kind=ProjectKind.EXTENSION)
        )
        out = capsys.readouterr().out
        assert "cd ext" in out
        assert "npm run package" in out
        assert "chrome://extensions/" in out
        assert "JSX" in out


# ---------------------------------------------------------------------------
# main
# ---------------------------------------------------------------------------


class TestMain:
    @pytest.mark.unit
    def test_main_passes_config_and_env_settings(self):
        run_mock = AsyncMock(return_value=0)
        env = {"CREATE_UIKIT_SKIP_INSTALL": "1"}
        with patch.object(cli, "run", run_mock), patch.dict(os.environ, env, clear=True):
            assert cli.main(["tools/x", "-e", "--jsx"]) == 0

        config, settings = run_mock.await_args.args
        assert config == ScaffoldConfig(
            target_path="tools/x", use_jsx=True, kind=ProjectKind.EXTENSION
        )
        assert settings.skip_install is True

    @pytest.mark.unit
    def test_main_returns_run_exit_code(self):
        with patch.object(cli, "run", AsyncMock(return_value=1)):
            assert cli.main(["my-app"]) == 1

    @pytest.mark.unit
    def test_main_help(self):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--help"])
        assert exc_info.value.code == 0

    @pytest.mark.unit
    def test_main_creates_in_cwd(self, output_dir, monkeypatch, mock_run_command):
        monkeypatch.chdir(output_dir)
        with patch.dict(os.environ, {}, clear=True):
            assert cli.main(["nested/app", "--jsx"]) == 0
        assert (output_dir / "nested" / "app" / "src" / "main.jsx").is_file()
        assert Path.cwd().resolve() == output_dir.resolve()
