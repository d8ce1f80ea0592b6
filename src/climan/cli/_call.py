"""``climan call``: invoke a path-tree handler by dotted path."""

import argparse
import sys
from typing import cast

from climan.cli._resolve import apply_cli_config, resolve_registry
from climan.config import DispatchConfig
from climan.dispatch.tree import PathTree
from climan.errors import ConfigurationError, PathNotFound


def run_call(args: argparse.Namespace, config: DispatchConfig) -> None:
    """Resolve ``args.target`` to a PathTree and call ``args.path`` on it."""
    try:
        tree = cast(PathTree, resolve_registry(args.target, (PathTree,), "registry"))
    except (ModuleNotFoundError, AttributeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    apply_cli_config(tree, config)

    try:
        tree.call_function(args.path)
    except PathNotFound as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
