"""The command grammar shared by ``climan run`` and ``climan exec``.

``ACTION RESOURCE [VALUES...]`` plus the optional flags every handler
can read from ``CommandArgs``. Flags left off stay ``None`` so handlers
can tell "not provided" from an explicit value.
"""

import argparse
import shlex
from collections.abc import Sequence

from climan.args import CommandArgs
from climan.enums import Action, Resource


def add_command_arguments(parser: argparse.ArgumentParser) -> None:
    """Attach the action/resource positionals and option flags to *parser*."""
    parser.add_argument(
        "action", type=Action, choices=list(Action), help="The action to perform."
    )
    parser.add_argument(
        "resource",
        type=Resource,
        choices=list(Resource),
        help="The resource to perform the action on.",
    )
    parser.add_argument("values", nargs="*", help="The values to use in the action.")
    parser.add_argument("-d", "--data", default=None, help="Optional data string.")
    parser.add_argument("-p", "--page", type=int, default=None, help="Optional page number.")
    parser.add_argument("--skip", type=int, default=None, help="Optional skip count.")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Enable verbose output.",
    )
    parser.add_argument("-o", "--output", default=None, help="Optional output string.")
    parser.add_argument(
        "-s", "--silent", action="store_true", help="Suppress all output."
    )


def build_command_parser(prog: str = "climan exec") -> argparse.ArgumentParser:
    """Standalone parser for a single command."""
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Perform an action on a resource.",
    )
    add_command_arguments(parser)
    return parser


def parse_command(command: str | Sequence[str], prog: str = "climan exec") -> CommandArgs:
    """Parse a command string (``"add numbers 1 2"``) or argv list.

    Strings are split with ``shlex`` so quoted values survive. Options may
    appear before, between, or after the values
    (``"add numbers -p 2 1 2 3"``). Invalid input exits through
    ``argparse`` with status 2.
    """
    argv = shlex.split(command) if isinstance(command, str) else list(command)
    namespace = build_command_parser(prog).parse_intermixed_args(argv)
    return CommandArgs.from_namespace(namespace)
