"""climan exception hierarchy.

Shared across the dispatcher, the path tree, and the CLI so every module
raises and catches the same types.
"""

from collections.abc import Sequence
from dataclasses import dataclass


class ClimanError(Exception):
    """Base for all climan-specific errors."""


class ConfigurationError(ClimanError):
    """Raised when configuration or a registry import string is invalid."""


@dataclass(frozen=True, slots=True)
class DispatchMiss(ClimanError):
    """A lookup that found no handler.

    Registries report these through the ``climan.dispatch`` logger and
    return ``None``. They are only raised when the registry runs with
    ``DispatchConfig(strict=True)``.
    """

    detail: str
    key: tuple[str, ...] = ()

    def __str__(self) -> str:
        return self.detail


class UnregisteredPair(DispatchMiss):
    """No handler registered for an (action, resource) pair."""

    def __init__(self, action: str, resource: str) -> None:
        super().__init__(
            detail=f"No function registered for {action} {resource}",
            key=(str(action), str(resource)),
        )

    @property
    def action(self) -> str:
        return self.key[0]

    @property
    def resource(self) -> str:
        return self.key[1]


class PathNotFound(DispatchMiss):
    """A path that does not resolve to a handler in the path tree."""

    def __init__(self, segments: Sequence[str]) -> None:
        joined = ".".join(segments)
        super().__init__(
            detail=f"Function not found for path: {joined}",
            key=tuple(segments),
        )

    @property
    def path(self) -> str:
        return ".".join(self.key)
