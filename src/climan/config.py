"""Dispatch configuration.

DispatchConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from climan.errors import ConfigurationError

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_DEFAULT_LOG_LEVEL = "warning"


@dataclass(frozen=True, slots=True)
class DispatchConfig:
    """Registry and CLI configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = DispatchConfig(strict=True, log_level="debug")
    """

    # Raise DispatchMiss subclasses instead of logging them
    strict: bool = False

    # Level the CLI passes to logging.basicConfig()
    log_level: str = _DEFAULT_LOG_LEVEL

    # CLI prints "Running command with action: ..." before executing
    echo_commands: bool = True

    def __post_init__(self) -> None:
        self.log_level_number  # noqa: B018 (rejects unknown level names early)

    @property
    def log_level_number(self) -> int:
        """Numeric logging level for ``log_level``.

        Raises ``ConfigurationError`` for names the logging module does
        not know.
        """
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            msg = f"Unknown log level {self.log_level!r}"
            raise ConfigurationError(msg)
        return level

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DispatchConfig:
        """Build a config from ``CLIMAN_*`` environment variables.

        ``CLIMAN_STRICT`` enables strict mode for any of ``1``, ``true``,
        ``yes``, ``on``. ``CLIMAN_LOG_LEVEL`` sets the log level.
        """
        env = os.environ if environ is None else environ
        return cls(
            strict=env.get("CLIMAN_STRICT", "").strip().lower() in _TRUTHY,
            log_level=env.get("CLIMAN_LOG_LEVEL", _DEFAULT_LOG_LEVEL).strip().lower(),
        )
