"""Exceptions raised while scaffolding a project.

Fatal errors (``DirectoryExistsError``, ``MissingTemplateError``,
``TemplateRenderingError``) abort generation.  ``DependencyInstallError`` is
raised by the installer helper and downgraded to a warning by the CLI, since
the project files are already on disk by then.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every error raised by create-uikit."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else None
        super().__init__(message)


class DirectoryExistsError(ScaffoldError):
    """Raised when the target project directory is already present."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(f"Directory {path} already exists!", path)


class MissingTemplateError(ScaffoldError):
    """Raised when a template referenced by a template set is absent."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(f"Template file not found: {path}", path)


class TemplateRenderingError(ScaffoldError):
    """Raised when a template uses a placeholder with no value."""


class DependencyInstallError(ScaffoldError):
    """Raised when the package-manager install command fails."""

    def __init__(self, command: str, returncode: int, cwd: str | Path) -> None:
        self.command = command
        self.returncode = returncode
        super().__init__(
            f"'{command}' exited with status {returncode}",
            cwd,
        )
