"""climan CLI: dispatch commands into a registry from the shell.

Entry point registered as ``climan`` in ``pyproject.toml``::

    [project.scripts]
    climan = "climan.cli:main"
"""

import argparse
import logging
import os
import sys

from climan.cli._command import build_command_parser, parse_command
from climan.config import DispatchConfig
from climan.errors import ConfigurationError

__all__ = ["main", "parse_command"]

_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``climan`` command."""
    parser = argparse.ArgumentParser(
        prog="climan",
        description="climan: dispatch command-line actions to registered handlers.",
    )
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        default=None,
        help="Log level for dispatch diagnostics (default: $CLIMAN_LOG_LEVEL or warning)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- climan run -------------------------------------------------------
    # The command part is re-parsed on its own so options can sit anywhere
    # among the values.
    run_parser = subparsers.add_parser(
        "run",
        help="Execute an action on a resource",
        usage="climan run TARGET ACTION RESOURCE [VALUES ...] [options]",
        epilog=build_command_parser("climan run TARGET").format_help(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    run_parser.add_argument("target", help="Import string (e.g. mytool:dispatcher)")
    run_parser.add_argument(
        "command_argv",
        nargs=argparse.REMAINDER,
        metavar="ACTION RESOURCE [VALUES ...]",
        help="The command to execute, with its options",
    )

    # -- climan exec ------------------------------------------------------
    exec_parser = subparsers.add_parser("exec", help="Execute a command given as one string")
    exec_parser.add_argument("target", help="Import string (e.g. mytool:dispatcher)")
    exec_parser.add_argument("command_line", help='Command string (e.g. "add numbers 1 2 3")')

    # -- climan call ------------------------------------------------------
    call_parser = subparsers.add_parser("call", help="Invoke a path-tree handler")
    call_parser.add_argument("target", help="Import string (e.g. mytool:registry)")
    call_parser.add_argument("path", help="Dot-separated path (e.g. layer.node)")

    # -- climan routes ----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered handlers")
    routes_parser.add_argument("target", help="Import string (e.g. mytool:dispatcher)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    config = _load_config(args.log_level)
    logging.basicConfig(level=config.log_level_number, format="%(levelname)s: %(message)s")

    if args.command == "run":
        from climan.cli._run import run_command

        run_command(args, config)
    elif args.command == "exec":
        from climan.cli._run import run_command_string

        run_command_string(args, config)
    elif args.command == "call":
        from climan.cli._call import run_call

        run_call(args, config)
    elif args.command == "routes":
        from climan.cli._routes import run_routes

        run_routes(args)


def _load_config(level_name: str | None) -> DispatchConfig:
    """Read ``CLIMAN_*`` settings. ``--log-level`` wins over ``CLIMAN_LOG_LEVEL``."""
    env = dict(os.environ)
    if level_name is not None:
        env["CLIMAN_LOG_LEVEL"] = level_name
    try:
        return DispatchConfig.from_env(env)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
