"""Shared utility functions for create-uikit.

Provides async command execution, file-system helpers and Rich-based console
reporting.  All user-facing output goes through the module-level ``console``
so tests can capture it in one place.  Messages passed to the ``print_*``
helpers are plain text: user paths such as ``apps/[beta]/web`` are printed
as-is rather than parsed as Rich markup.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: str,
    cwd: str | Path | None = None,
    capture: bool = True,
) -> tuple[int, str, str]:
    """Run a shell command asynchronously and wait for it to exit.

    Args:
        cmd: Shell command string.
        cwd: Working directory for the child process.
        capture: Whether to capture stdout/stderr (if ``False`` they inherit
            the parent's streams).

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  If *capture* is ``False``
        the stdout/stderr strings will be empty.
    """
    stdout_pipe = asyncio.subprocess.PIPE if capture else None
    stderr_pipe = asyncio.subprocess.PIPE if capture else None

    process = await asyncio.create_subprocess_shell(
        cmd,
        stdout=stdout_pipe,
        stderr=stderr_pipe,
        cwd=str(cwd) if cwd else None,
    )
    stdout_bytes, stderr_bytes = await process.communicate()

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def write_text(path: str | Path, content: str) -> Path:
    """Write *content* to *path*, creating parent directories first."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding="utf-8")
    return file_path


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Returns:
        The ``Path`` object for the directory.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def _styled(message: str, style: str) -> Text:
    return Text(message, style=style)


def print_step(message: str) -> None:
    """Print a yellow progress line for one generation step."""
    console.print(_styled(message, "yellow"))


def print_info(message: str) -> None:
    """Print a blue informational line."""
    console.print(_styled(message, "blue"))


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(_styled(message, "bold green"))


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(_styled(message, "bold red"))


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(_styled(message, "bold yellow"))


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.  Values are shown verbatim.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, Text(str(value)))

    console.print(table)
    console.print()


def print_panel(lines: list[str], title: str, style: str = "green") -> None:
    """Print *lines* verbatim inside a titled Rich panel."""
    body = Text("\n".join(lines))
    console.print(Panel(body, title=escape(title), border_style=style, expand=False))
