"""create-uikit configuration.

Typed models for everything a single run needs: the resolved CLI
configuration, the template variable map derived from it, and the ambient
settings read from the environment.  All models are Pydantic v2 so they are
validated at construction time.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from create_uikit.naming import generate_project_name

DEFAULT_APP_PATH = "voilajs-uikit-app"
DEFAULT_EXTENSION_PATH = "voilajs-uikit-extension"
DEFAULT_AUTHOR = "VoilaJSX"
DEFAULT_INSTALL_COMMAND = "npm install --legacy-peer-deps"

_TRUTHY = {"1", "true", "yes", "on"}


class ProjectKind(str, Enum):
    """Which of the two output shapes to produce."""

    APP = "app"
    EXTENSION = "extension"

    @property
    def default_path(self) -> str:
        """Target path used when none is given on the command line."""
        if self is ProjectKind.EXTENSION:
            return DEFAULT_EXTENSION_PATH
        return DEFAULT_APP_PATH

    @property
    def description(self) -> str:
        if self is ProjectKind.EXTENSION:
            return "Chrome extension built with UIKit"
        return "UIKit React application"


class ScaffoldConfig(BaseModel):
    """Resolved command-line configuration.  Immutable once parsed."""

    model_config = ConfigDict(frozen=True)

    target_path: str = Field(default=DEFAULT_APP_PATH, description="Where to create the project")
    use_jsx: bool = Field(default=False, description="Emit .jsx/.js instead of .tsx/.ts")
    kind: ProjectKind = Field(default=ProjectKind.APP)

    @property
    def is_extension(self) -> bool:
        return self.kind is ProjectKind.EXTENSION

    @property
    def package_name(self) -> str:
        """npm package name derived from :attr:`target_path`."""
        return generate_project_name(self.target_path)

    @property
    def source_extension(self) -> str:
        """Component file extension (``jsx`` or ``tsx``)."""
        return "jsx" if self.use_jsx else "tsx"

    @property
    def script_extension(self) -> str:
        """Plain script file extension (``js`` or ``ts``)."""
        return "js" if self.use_jsx else "ts"

    @property
    def file_type_label(self) -> str:
        return "JSX" if self.use_jsx else "TypeScript"


class TemplateVariables(BaseModel):
    """The substitution table applied to every template in one run."""

    model_config = ConfigDict(frozen=True)

    project_name: str
    package_name: str
    extension: str
    file_extension: str
    description: str
    author: str = DEFAULT_AUTHOR

    @classmethod
    def from_config(cls, config: ScaffoldConfig, author: str = DEFAULT_AUTHOR) -> "TemplateVariables":
        """Build the variable map for *config*."""
        name = config.package_name
        return cls(
            project_name=name,
            package_name=name,
            extension=config.source_extension,
            file_extension=config.script_extension,
            description=config.kind.description,
            author=author,
        )

    def as_dict(self) -> dict[str, str]:
        """Return the ``{PLACEHOLDER: value}`` mapping used by templates."""
        return {
            "PROJECT_NAME": self.project_name,
            "PACKAGE_NAME": self.package_name,
            "EXTENSION": self.extension,
            "FILE_EXTENSION": self.file_extension,
            "DESCRIPTION": self.description,
            "AUTHOR": self.author,
        }


class Settings(BaseModel):
    """Ambient settings that are not part of the command line."""

    install_command: str = Field(default=DEFAULT_INSTALL_COMMAND)
    skip_install: bool = Field(default=False, description="Skip the package-manager step")
    author: str = Field(default=DEFAULT_AUTHOR)
    template_dir: Path | None = Field(
        default=None, description="Override the packaged template directory"
    )

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            CREATE_UIKIT_INSTALL_COMMAND, CREATE_UIKIT_SKIP_INSTALL,
            CREATE_UIKIT_AUTHOR, CREATE_UIKIT_TEMPLATE_DIR.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CREATE_UIKIT_INSTALL_COMMAND"):
            kwargs["install_command"] = os.environ["CREATE_UIKIT_INSTALL_COMMAND"]
        if os.environ.get("CREATE_UIKIT_SKIP_INSTALL"):
            kwargs["skip_install"] = (
                os.environ["CREATE_UIKIT_SKIP_INSTALL"].strip().lower() in _TRUTHY
            )
        if os.environ.get("CREATE_UIKIT_AUTHOR"):
            kwargs["author"] = os.environ["CREATE_UIKIT_AUTHOR"]
        if os.environ.get("CREATE_UIKIT_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["CREATE_UIKIT_TEMPLATE_DIR"])
        return cls(**kwargs)
