"""Shared pytest fixtures for the create-uikit test suite.

Provides reusable fixtures for:
- Resolved configurations for each project kind / syntax combination
- Settings that never reach the real package manager
- A writable copy of the packaged template tree
- A fake install runner that records calls instead of spawning npm
"""

from __future__ import annotations

import re
import shutil
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from create_uikit.config import ProjectKind, ScaffoldConfig, Settings
from create_uikit.scaffolder.templates import DEFAULT_TEMPLATE_DIR

PLACEHOLDER_RE = re.compile(r"\{\{\s*[A-Za-z_][A-Za-z0-9_]*\s*\}\}")


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------


@pytest.fixture
def app_config() -> ScaffoldConfig:
    """TypeScript React application at a nested path."""
    return ScaffoldConfig(target_path="apps/auth/core")


@pytest.fixture
def jsx_app_config() -> ScaffoldConfig:
    """JSX React application."""
    return ScaffoldConfig(target_path="my-app", use_jsx=True)


@pytest.fixture
def extension_config() -> ScaffoldConfig:
    """TypeScript Chrome extension."""
    return ScaffoldConfig(target_path="tools/page-analyzer", kind=ProjectKind.EXTENSION)


@pytest.fixture
def jsx_extension_config() -> ScaffoldConfig:
    """JSX Chrome extension."""
    return ScaffoldConfig(
        target_path="extensions/word-scout", use_jsx=True, kind=ProjectKind.EXTENSION
    )


# ---------------------------------------------------------------------------
# Settings & templates
# ---------------------------------------------------------------------------


@pytest.fixture
def settings() -> Settings:
    """Default settings with installation disabled."""
    return Settings(skip_install=True)


@pytest.fixture
def template_copy(tmp_path: Path) -> Path:
    """Writable copy of the packaged templates, for deleting files in tests."""
    target = tmp_path / "templates-copy"
    shutil.copytree(DEFAULT_TEMPLATE_DIR, target)
    return target


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Empty directory that generated projects are resolved against."""
    out = tmp_path / "output"
    out.mkdir()
    return out


# ---------------------------------------------------------------------------
# Subprocess helpers
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_run_command(monkeypatch: pytest.MonkeyPatch) -> AsyncMock:
    """Replace the generator's ``run_command`` with a successful AsyncMock."""
    mock = AsyncMock(return_value=(0, "", ""))
    monkeypatch.setattr("create_uikit.scaffolder.generator.run_command", mock)
    return mock


@pytest.fixture
def failing_run_command(monkeypatch: pytest.MonkeyPatch) -> AsyncMock:
    """Replace the generator's ``run_command`` with one that exits 1."""
    mock = AsyncMock(return_value=(1, "", ""))
    monkeypatch.setattr("create_uikit.scaffolder.generator.run_command", mock)
    return mock


def find_placeholders(root: Path) -> dict[str, list[str]]:
    """Return ``{relative_path: [tokens]}`` for files with leftover placeholders."""
    leftovers: dict[str, list[str]] = {}
    for path in root.rglob("*"):
        if not path.is_file() or path.suffix == ".png":
            continue
        tokens = PLACEHOLDER_RE.findall(path.read_text(encoding="utf-8"))
        if tokens:
            leftovers[path.relative_to(root).as_posix()] = tokens
    return leftovers


@pytest.fixture
def placeholder_scan():
    """The :func:`find_placeholders` helper, exposed as a fixture."""
    return find_placeholders
