"""Package-name derivation for generated projects."""

from __future__ import annotations

import re

DEFAULT_PACKAGE_NAME = "voilajs-uikit-app"

_EDGE_SLASHES = re.compile(r"^/+|/+$")
_SLASHES = re.compile(r"/+")
_INVALID_CHARS = re.compile(r"[^a-z0-9-]")
_DASH_RUNS = re.compile(r"-+")


def generate_project_name(project_path: str) -> str:
    """Convert a (possibly nested) project path into an npm package name.

    * Strips leading/trailing slashes and turns inner slashes into dashes.
    * Lowercases and drops anything outside ``[a-z0-9-]``.
    * Collapses consecutive dashes and strips leading/trailing dashes.

    Falls back to :data:`DEFAULT_PACKAGE_NAME` when nothing usable remains.

    Examples::

        generate_project_name("apps/auth/core") -> "apps-auth-core"
        generate_project_name("/dashboard/admin") -> "dashboard-admin"
    """
    result = _EDGE_SLASHES.sub("", project_path)
    result = _SLASHES.sub("-", result)
    result = _INVALID_CHARS.sub("", result.lower())
    result = _DASH_RUNS.sub("-", result)
    result = result.strip("-")
    return result or DEFAULT_PACKAGE_NAME
