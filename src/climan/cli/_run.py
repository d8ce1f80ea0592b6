"""``climan run`` / ``climan exec``: dispatch one command.

Resolves an import string to a Dispatcher, builds ``CommandArgs`` and
executes it. ``run`` takes the command as separate arguments, ``exec``
takes it as a single string.
"""

import argparse
import sys
from typing import cast

from climan.args import CommandArgs
from climan.cli._command import parse_command
from climan.cli._resolve import apply_cli_config, resolve_registry
from climan.config import DispatchConfig
from climan.dispatch.dispatcher import Dispatcher
from climan.errors import ConfigurationError, UnregisteredPair


def run_command(args: argparse.Namespace, config: DispatchConfig) -> None:
    """Execute the command given as separate CLI arguments."""
    command = parse_command(args.command_argv, prog=f"climan run {args.target}")
    dispatch(_load_dispatcher(args.target, config), command)


def run_command_string(args: argparse.Namespace, config: DispatchConfig) -> None:
    """Execute the command given as one string, e.g. ``"add numbers 1 2 3"``."""
    command = parse_command(args.command_line)
    dispatch(_load_dispatcher(args.target, config), command)


def dispatch(dispatcher: Dispatcher, command: CommandArgs) -> None:
    """Execute *command* and print its result.

    Unless the command is silent, echoes the command first (when the
    dispatcher's config allows it) and prints any non-``None`` result.
    A strict-mode miss exits with status 1.
    """
    if dispatcher.config.echo_commands and not command.silent:
        print(
            f"Running command with action: {command.action}, "
            f"resource: {command.resource}, values: {list(command.values)}"
        )
    try:
        result = dispatcher.execute(command)
    except UnregisteredPair as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if result is not None and not command.silent:
        print(result)


def _load_dispatcher(target: str, config: DispatchConfig) -> Dispatcher:
    try:
        dispatcher = cast(Dispatcher, resolve_registry(target, (Dispatcher,), "dispatcher"))
    except (ModuleNotFoundError, AttributeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    apply_cli_config(dispatcher, config)
    return dispatcher
