"""create-uikit scaffolder -- generates UIKit React apps and Chrome extensions.

This module takes a ``ScaffoldConfig`` and renders the matching template set
(``templates/app`` or ``templates/extension``) into a new project directory.

Quick usage::

    from create_uikit.config import ScaffoldConfig, ProjectKind
    from create_uikit.scaffolder import ProjectGenerator

    config = ScaffoldConfig(target_path="tools/word-scout", kind=ProjectKind.EXTENSION)
    generator = ProjectGenerator(config)
    project_path = generator.generate("/tmp/output")
"""

from create_uikit.scaffolder.generator import ProjectGenerator
from create_uikit.scaffolder.templates import TemplateRenderer

__all__ = [
    "ProjectGenerator",
    "TemplateRenderer",
]
