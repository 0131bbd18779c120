"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``create_uikit/scaffolder/templates/`` directory and renders them with the
run's variable map.  Placeholders use the ``{{KEY}}`` form; a key missing
from the map is an error rather than an empty string, so a rendered file
never carries a leftover placeholder.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from create_uikit.errors import MissingTemplateError, TemplateRenderingError
from create_uikit.utils import write_text


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

TEMPLATE_SUFFIX = ".j2"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    The renderer resolves ``.j2`` template files under a configurable
    template directory.  Existence is checked before Jinja2 is involved so
    a missing file surfaces as :class:`MissingTemplateError` with the full
    path.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    # -- Single template rendering -----------------------------------------

    def template_path(self, template_name: str) -> Path:
        """Return the on-disk path for *template_name*."""
        return self.template_dir / template_name

    def render(self, template_name: str, context: Mapping[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_name: Path relative to the template directory (e.g.
                ``"app/package.json.j2"``).
            context: Placeholder values, keyed by placeholder name.

        Returns:
            The rendered template content as a string.

        Raises:
            MissingTemplateError: The template file does not exist.
            TemplateRenderingError: The template references an unknown key
                or is not valid template syntax.
        """
        path = self.template_path(template_name)
        if not path.is_file():
            raise MissingTemplateError(path)
        try:
            template = self.env.get_template(template_name)
            return template.render(**context)
        except TemplateError as exc:
            raise TemplateRenderingError(f"{template_name}: {exc}", path) from exc

    # -- File-based rendering ----------------------------------------------

    def render_to_file(
        self,
        template_name: str,
        output_path: str | Path,
        context: Mapping[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        Parent directories are created automatically.  Returns the output
        path.
        """
        content = self.render(template_name, context)
        return write_text(output_path, content)

    # -- Utility -----------------------------------------------------------

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of all ``.j2`` template paths under *prefix*.

        Paths are relative to the template root directory and always use
        forward slashes.
        """
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in search_dir.rglob(f"*{TEMPLATE_SUFFIX}")
        )

