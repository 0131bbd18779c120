"""create-uikit command-line entry point.

Runs the whole flow once: resolve arguments, generate the project, install
dependencies, report.

Usage::

    create-uikit my-app
    create-uikit tools/page-analyzer --extension --jsx
    python -m create_uikit --help
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Sequence

from create_uikit.args import parse_arguments
from create_uikit.config import ScaffoldConfig, Settings
from create_uikit.errors import DirectoryExistsError
from create_uikit.scaffolder import ProjectGenerator
from create_uikit.utils import console, print_error, print_panel, print_success

DOCS_URL = "https://voilajsx.github.io/uikit/"


def show_success(config: ScaffoldConfig) -> None:
    """Print the completion message with next steps for *config*."""
    print_success("\n✅ Project created successfully!")

    if config.is_extension:
        lines = [
            f"cd {config.target_path}",
            "npm run build",
            "npm run package",
            "",
            "1. Build the extension",
            "2. Open chrome://extensions/",
            '3. Enable "Developer mode"',
            "4. Click \"Load unpacked\" and select the dist/ folder",
        ]
        print_panel(lines, title="🔌 Chrome Extension Commands", style="magenta")
    else:
        lines = [f"cd {config.target_path}", "npm run dev"]
        print_panel(lines, title="🚀 Get started with", style="blue")

    console.print(f"[green]📖 Documentation: {DOCS_URL}[/green]")
    console.print("[green]🎨 Themes: 6 professional themes included[/green]")
    console.print("[green]🧱 Components: 35+ shadcn/ui components enhanced[/green]")
    console.print(f"[cyan]⚛️  Files: {config.file_type_label} format[/cyan]")


async def run(
    config: ScaffoldConfig,
    settings: Settings | None = None,
    base_dir: str | Path | None = None,
) -> int:
    """Generate and install the project described by *config*.

    Returns:
        The process exit code: 0 on success, 1 when the target exists,
        generation fails, or dependency installation fails.
    """
    generator = ProjectGenerator(config, settings)
    try:
        project_root = generator.generate(base_dir)
    except DirectoryExistsError as exc:
        print_error(f"❌ {exc}")
        return 1
    except Exception as exc:
        print_error(f"❌ Error: {exc}")
        return 1

    installed = await generator.install_dependencies(project_root)
    show_success(config)
    return 0 if installed else 1


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for ``create-uikit`` and ``python -m create_uikit``."""
    config = parse_arguments(argv)
    return asyncio.run(run(config, Settings.from_env()))


if __name__ == "__main__":
    sys.exit(main())
