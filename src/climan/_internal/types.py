"""Shared type aliases used across climan modules."""

from collections.abc import Callable, Sequence
from enum import Enum
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from climan.args import CommandArgs

# Dispatcher handler: receives the parsed command, returns an optional result
Handler: TypeAlias = Callable[["CommandArgs"], Any]

# Path-tree handler: called with no arguments, return value is discarded
PathHandler: TypeAlias = Callable[[], Any]

# Anything normalize_path() understands
PathInput: TypeAlias = str | Sequence[str | Enum]
