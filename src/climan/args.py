"""CommandArgs: the argument bundle every dispatcher handler receives.

Frozen after creation. ``None`` on an optional field means "not
provided", which is distinct from an empty string, zero, or ``False``.
"""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from climan.enums import Action, Resource


@dataclass(frozen=True, slots=True)
class CommandArgs:
    """Parsed command handed to a handler by ``Dispatcher.execute()``.

    ``action`` and ``resource`` accept enum members or their string
    names; strings are coerced so the fields always hold enum members::

        args = CommandArgs("add", "numbers", ("2", "3"))
        assert args.action is Action.ADD
    """

    action: Action
    resource: Resource
    values: tuple[str, ...] = ()
    data: str | None = None
    page: int | None = None
    skip: int | None = None
    verbose: bool | None = None
    output: str | None = None
    silent: bool = False

    def __post_init__(self) -> None:
        # Action(None) / Resource(None) raise ValueError, which keeps both
        # discriminators mandatory.
        object.__setattr__(self, "action", Action(self.action))
        object.__setattr__(self, "resource", Resource(self.resource))
        object.__setattr__(self, "values", tuple(self.values))

    @classmethod
    def from_namespace(cls, namespace: argparse.Namespace) -> CommandArgs:
        """Build from an ``argparse.Namespace`` produced by the command parser.

        Missing attributes fall back to the field defaults, so a namespace
        from a narrower parser still converts.
        """
        fields: dict[str, Any] = {
            name: getattr(namespace, name)
            for name in ("data", "page", "skip", "verbose", "output")
            if getattr(namespace, name, None) is not None
        }
        values: Iterable[str] = getattr(namespace, "values", None) or ()
        return cls(
            action=namespace.action,
            resource=namespace.resource,
            values=tuple(values),
            silent=bool(getattr(namespace, "silent", False)),
            **fields,
        )
