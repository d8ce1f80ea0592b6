"""``climan routes``: list registered handlers.

Works for both registry kinds: a Dispatcher prints ACTION / RESOURCE /
HANDLER, a PathTree prints PATH / HANDLER.
"""

import argparse
import sys
from collections.abc import Sequence

from climan.cli._resolve import resolve_registry
from climan.dispatch.dispatcher import Dispatcher
from climan.dispatch.tree import PathTree
from climan.errors import ConfigurationError


def run_routes(args: argparse.Namespace) -> None:
    """List registered handlers for a Dispatcher or PathTree."""
    try:
        registry = resolve_registry(args.target, (Dispatcher, PathTree), "dispatcher")
    except (ModuleNotFoundError, AttributeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if isinstance(registry, Dispatcher):
        headers: tuple[str, ...] = ("ACTION", "RESOURCE", "HANDLER")
        rows = [
            (str(entry.action), str(entry.resource), _handler_name(entry.handler))
            for entry in registry.registrations
        ]
    else:
        headers = ("PATH", "HANDLER")
        rows = [(path, _handler_name(handler)) for path, handler in registry.handlers]

    if not rows:
        print("No handlers registered.")
        return

    _print_table(headers, rows)


def _handler_name(handler: object) -> str:
    return getattr(handler, "__qualname__", None) or getattr(handler, "__name__", str(handler))


def _print_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
    # Every column but the last is padded to its widest cell (or header)
    widths = [
        max(len(headers[i]), *(len(row[i]) for row in rows)) for i in range(len(headers) - 1)
    ]
    fmt = "  ".join(f"{{:<{w}}}" for w in widths) + "  {}"
    print(fmt.format(*headers))
    sep_len = sum(widths) + 2 * len(widths) + max(len(row[-1]) for row in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
