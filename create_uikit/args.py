"""Command-line argument resolution.

Turns raw argv tokens into an immutable ``ScaffoldConfig``.  Tokens that
exactly match a known flag are handled by argparse.  Of the rest, the first
one that is not a flag becomes the target path and everything else (unknown
flags included) is ignored.
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from create_uikit.config import ProjectKind, ScaffoldConfig

EPILOG = """\
React app examples:
  create-uikit my-app
  create-uikit apps/auth/core --jsx
  create-uikit /dashboard/admin

Chrome extension examples:
  create-uikit my-extension --extension
  create-uikit tools/page-analyzer --extension --jsx
  create-uikit extensions/word-scout --extension

Path-based naming:
  /apps/auth/core  ->  apps-auth-core
  auth/dashboard   ->  auth-dashboard
  my-app           ->  my-app

Project types:
  React app:   Complete UIKit React application
  Extension:   Chrome Manifest V3 extension with UIKit
"""

FLAG_TOKENS = frozenset({"--jsx", "-j", "--extension", "-e", "--help", "-h"})


def build_parser() -> argparse.ArgumentParser:
    """Return the parser for the known create-uikit flags."""
    parser = argparse.ArgumentParser(
        prog="create-uikit",
        usage="%(prog)s [path] [options]",
        description="Scaffold a UIKit React app or Chrome extension.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
        allow_abbrev=False,
    )
    parser.add_argument(
        "--jsx", "-j",
        action="store_true",
        help="Use JSX instead of TypeScript",
    )
    parser.add_argument(
        "--extension", "-e",
        action="store_true",
        help="Create a Chrome extension instead of a React app",
    )
    return parser


def parse_arguments(argv: Sequence[str] | None = None) -> ScaffoldConfig:
    """Resolve *argv* (default: ``sys.argv[1:]``) into a ``ScaffoldConfig``.

    Only tokens that exactly match a known flag reach argparse, so variants
    such as ``--jsx=1`` or ``-je`` are ignored like any other unknown flag.
    ``--help``/``-h`` prints usage and exits with status 0.
    """
    if argv is None:
        argv = sys.argv[1:]
    tokens = list(argv)

    args = build_parser().parse_args([t for t in tokens if t in FLAG_TOKENS])
    kind = ProjectKind.EXTENSION if args.extension else ProjectKind.APP

    positionals = [token for token in tokens if not token.startswith("-")]
    target_path = positionals[0] if positionals else kind.default_path

    return ScaffoldConfig(target_path=target_path, use_jsx=args.jsx, kind=kind)
