"""Main scaffolding orchestrator.

Takes a ``ScaffoldConfig`` and generates a complete UIKit React application
or Chrome extension directory from the packaged template sets, then runs the
package manager inside it.
"""

from __future__ import annotations

import json
import shutil
from pathlib import Path
from typing import Any

from create_uikit.config import ScaffoldConfig, Settings, TemplateVariables
from create_uikit.errors import DependencyInstallError, DirectoryExistsError
from create_uikit.utils import (
    ensure_dir,
    print_error,
    print_info,
    print_step,
    print_summary_table,
    print_warning,
    run_command,
    write_text,
)

from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Static (non-templated) content
# ---------------------------------------------------------------------------

GITIGNORE = """\
# Logs
logs
*.log
npm-debug.log*
yarn-debug.log*
yarn-error.log*
pnpm-debug.log*

# Dependencies
node_modules

# Build output
dist
dist-ssr
*.local
*.zip

# Editor directories and files
.vscode/*
!.vscode/extensions.json
.idea
.DS_Store
*.suo
*.sw?
"""

INDEX_CSS = '@import "tailwindcss";'

ICON_FILES: tuple[str, ...] = (
    "icon-16.png",
    "icon-32.png",
    "icon-48.png",
    "icon-128.png",
)

ICON_README = """\
# Extension Icons

These are template icons for your Chrome extension.

## Required Sizes:
- icon-16.png (16x16) - Extension toolbar icon
- icon-32.png (32x32) - Windows favicon
- icon-48.png (48x48) - Extension management page
- icon-128.png (128x128) - Chrome Web Store

## Customizing Icons:
1. Replace these PNG files with your own designs
2. Keep the same file names and sizes
3. Use PNG format with transparent background
4. Test in Chrome to ensure they look good

Generated by create-uikit
"""

EXTENSION_SOURCE_DIRS: tuple[str, ...] = (
    "popup",
    "options",
    "content",
    "background",
    "shared",
)

APP_TSCONFIG: dict[str, Any] = {
    "compilerOptions": {
        "target": "ES2020",
        "useDefineForClassFields": True,
        "lib": ["ES2020", "DOM", "DOM.Iterable"],
        "module": "ESNext",
        "skipLibCheck": True,
        "moduleResolution": "bundler",
        "allowImportingTsExtensions": True,
        "resolveJsonModule": True,
        "isolatedModules": True,
        "noEmit": True,
        "jsx": "react-jsx",
        "strict": True,
        "noUnusedLocals": True,
        "noUnusedParameters": True,
        "noFallthroughCasesInSwitch": True,
    },
    "include": ["src"],
    "references": [{"path": "./tsconfig.node.json"}],
}

APP_TSCONFIG_NODE: dict[str, Any] = {
    "compilerOptions": {
        "composite": True,
        "skipLibCheck": True,
        "module": "ESNext",
        "moduleResolution": "bundler",
        "allowSyntheticDefaultImports": True,
    },
    "include": ["vite.config.ts"],
}

EXTENSION_TSCONFIG: dict[str, Any] = {
    "compilerOptions": {
        "target": "ES2020",
        "lib": ["ES2020", "DOM", "DOM.Iterable"],
        "module": "ESNext",
        "skipLibCheck": True,
        "moduleResolution": "bundler",
        "resolveJsonModule": True,
        "isolatedModules": True,
        "noEmit": True,
        "jsx": "react-jsx",
        "strict": True,
        "allowJs": True,
        "types": ["chrome"],
    },
    "include": ["src"],
}


# ---------------------------------------------------------------------------
# Template sets
# ---------------------------------------------------------------------------


def app_template_files(config: ScaffoldConfig) -> list[tuple[str, str]]:
    """Return ``(template, output)`` pairs for the React application.

    Output paths are relative to the project root.
    """
    ext = config.source_extension
    return [
        ("app/package.json.j2", "package.json"),
        ("app/vite.config.j2", f"vite.config.{config.script_extension}"),
        ("app/index.html.j2", "index.html"),
        (f"app/main.{ext}.j2", f"src/main.{ext}"),
        (f"app/App.{ext}.j2", f"src/App.{ext}"),
    ]


def extension_template_files(config: ScaffoldConfig) -> list[tuple[str, str]]:
    """Return ``(template, output)`` pairs for the Chrome extension."""
    ext = config.source_extension
    files: list[tuple[str, str]] = [
        ("extension/package.json.j2", "package.json"),
        ("extension/vite.config.j2", "vite.config.js"),
        ("extension/manifest.json.j2", "manifest.json"),
        ("extension/README.md.j2", "README.md"),
    ]
    for page, component in (("popup", "PopupApp"), ("options", "OptionsApp")):
        for name in ("index.html", f"{page}.{ext}", f"{component}.{ext}"):
            files.append((f"extension/src/{page}/{name}.j2", f"src/{page}/{name}"))
    files.append(("extension/src/content/content.js.j2", "src/content/content.js"))
    files.append(("extension/src/background/background.js.j2", "src/background/background.js"))
    for name in ("config.js", "utils.js", "api.js"):
        files.append((f"extension/src/shared/{name}.j2", f"src/shared/{name}"))
    return files


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Main scaffolding orchestrator.

    Given a ``ScaffoldConfig``, generates either:
    - a UIKit React application (Vite, Tailwind, optional TypeScript config)
    - a Chrome Manifest V3 extension with popup, options, content and
      background entry points plus shared helpers and icons

    Every write goes to an explicit path under the resolved project root;
    the process working directory is never changed.
    """

    def __init__(
        self,
        config: ScaffoldConfig,
        settings: Settings | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.settings = settings or Settings()
        self.renderer = renderer or TemplateRenderer(self.settings.template_dir)
        self.variables = TemplateVariables.from_config(config, author=self.settings.author)

    # -- Public API --------------------------------------------------------

    def resolve_target(self, base_dir: str | Path | None = None) -> Path:
        """Return the absolute project root for ``config.target_path``.

        The target is always taken relative to *base_dir* (default: the
        current directory), so ``/dashboard/admin`` lands in
        ``<base_dir>/dashboard/admin``.
        """
        base = Path(base_dir) if base_dir is not None else Path.cwd()
        return (base / self.config.target_path.lstrip("/\\")).resolve()

    def generate(self, base_dir: str | Path | None = None) -> Path:
        """Generate the complete project structure.

        Args:
            base_dir: Directory the target path is resolved against.

        Returns:
            Path to the generated project root.

        Raises:
            DirectoryExistsError: The project root already exists.  Nothing
                has been written when this is raised.
            MissingTemplateError: A template of the active set is absent.
        """
        project_root = self.resolve_target(base_dir)
        if project_root.exists():
            raise DirectoryExistsError(self.config.target_path)

        if self.config.is_extension:
            print_step("🔌 Creating Chrome Extension project...")
        else:
            print_step("🚀 Creating UIKit React project...")
        print_summary_table(
            {
                "Project path": self.config.target_path,
                "Project name": self.variables.project_name,
                "Project type": self.config.kind.description,
                "File type": self.config.file_type_label,
            },
            title="create-uikit",
        )

        project_root.mkdir(parents=True)

        if self.config.is_extension:
            self._generate_extension(project_root)
        else:
            self._generate_app(project_root)

        return project_root

    async def install_dependencies(self, project_root: Path) -> bool:
        """Run the package manager inside *project_root*.

        A failed install is reported on the console and returned as
        ``False``; it never raises.
        """
        command = self.settings.install_command
        if self.settings.skip_install:
            print_warning("Skipping dependency installation")
            print_info(f'Run "{command}" in the project directory when ready')
            return True

        print_step("📥 Installing dependencies...")
        print_info("   This may take a few minutes...")
        try:
            await run_install(command, project_root)
        except DependencyInstallError:
            print_error("❌ Failed to install dependencies")
            print_warning(f'Run "{command}" manually in the project directory')
            return False
        return True

    # -- Application -------------------------------------------------------

    def _generate_app(self, root: Path) -> None:
        files = dict(app_template_files(self.config))

        print_step("📦 Creating package.json...")
        self._render("app/package.json.j2", root / files["app/package.json.j2"])

        print_step("⚡ Setting up Vite config...")
        self._render("app/vite.config.j2", root / files["app/vite.config.j2"])

        if not self.config.use_jsx:
            print_step("📝 Setting up TypeScript...")
            _write_json(root / "tsconfig.json", APP_TSCONFIG)
            _write_json(root / "tsconfig.node.json", APP_TSCONFIG_NODE)

        ensure_dir(root / "src")
        write_text(root / "src" / "index.css", INDEX_CSS)

        print_step("🌐 Creating HTML template...")
        self._render("app/index.html.j2", root / files["app/index.html.j2"])

        print_step(f"⚛️  Creating React app ({self.config.file_type_label})...")
        ext = self.config.source_extension
        for template in (f"app/main.{ext}.j2", f"app/App.{ext}.j2"):
            self._render(template, root / files[template])

        write_text(root / ".gitignore", GITIGNORE)

    # -- Extension ---------------------------------------------------------

    def _generate_extension(self, root: Path) -> None:
        files = extension_template_files(self.config)
        root_files = [(t, o) for t, o in files if "/" not in o]
        source_files = [(t, o) for t, o in files if "/" in o]

        for template, output in root_files:
            print_step(f"📄 Creating {output}...")
            self._render(template, root / output)

        write_text(root / ".gitignore", GITIGNORE)

        if not self.config.use_jsx:
            print_step("📝 Setting up TypeScript...")
            _write_json(root / "tsconfig.json", EXTENSION_TSCONFIG)

        for directory in EXTENSION_SOURCE_DIRS:
            ensure_dir(root / "src" / directory)

        print_step("🎨 Copying extension icons...")
        self.copy_icons(root)
        write_text(root / "public" / "icons" / "README.md", ICON_README)

        current_dir = ""
        for template, output in source_files:
            section = output.split("/")[1]
            if section != current_dir:
                print_step(f"🛠️  Creating {section} files...")
                current_dir = section
            self._render(template, root / output)

    def copy_icons(self, root: Path) -> list[Path]:
        """Copy the bundled PNG icons into ``public/icons``.

        Missing source icons are reported and skipped.

        Returns:
            The icon paths that were written.
        """
        source_dir = self.renderer.template_dir / "extension" / "icons"
        target_dir = ensure_dir(root / "public" / "icons")

        copied: list[Path] = []
        for icon in ICON_FILES:
            source = source_dir / icon
            if not source.is_file():
                print_warning(f"⚠️  Missing template: {icon}")
                continue
            target = target_dir / icon
            shutil.copyfile(source, target)
            print_info(f"📋 Copied {icon}")
            copied.append(target)
        return copied

    # -- Internal helpers --------------------------------------------------

    def _render(self, template: str, output_path: Path) -> Path:
        return self.renderer.render_to_file(template, output_path, self.variables.as_dict())


# ---------------------------------------------------------------------------
# Installer
# ---------------------------------------------------------------------------


async def run_install(command: str, cwd: Path) -> None:
    """Run the install *command* in *cwd* with inherited standard streams.

    Raises:
        DependencyInstallError: The command could not be started or exited
            with a non-zero status.
    """
    try:
        returncode, _, _ = await run_command(command, cwd=cwd, capture=False)
    except OSError as exc:
        raise DependencyInstallError(command, -1, cwd) from exc
    if returncode != 0:
        raise DependencyInstallError(command, returncode, cwd)


def _write_json(path: Path, data: dict[str, Any]) -> Path:
    return write_text(path, json.dumps(data, indent=2))
