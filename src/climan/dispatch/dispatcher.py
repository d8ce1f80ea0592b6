"""Fixed-key dispatcher: (action, resource) -> handler.

Handlers are registered during setup and looked up once per command.
A lookup miss is reported, not raised, so a table-driven CLI degrades
gracefully on combinations nobody implemented.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from climan._internal.types import Handler
from climan.args import CommandArgs
from climan.config import DispatchConfig
from climan.dispatch._report import report_miss
from climan.enums import Action, Resource
from climan.errors import UnregisteredPair


@dataclass(frozen=True, slots=True)
class Registration:
    """One entry of the dispatch table, for introspection."""

    action: Action
    resource: Resource
    handler: Handler


class Dispatcher:
    """Two-level dispatch table keyed by ``Action`` then ``Resource``.

    Usage::

        dispatcher = Dispatcher()

        @dispatcher.operation(Action.ADD, Resource.NUMBERS)
        def add_numbers(args: CommandArgs) -> int:
            return sum(int(v) for v in args.values)

        dispatcher.execute(CommandArgs(Action.ADD, Resource.NUMBERS, ("2", "3")))  # 5

    Not thread-safe. Hosts that dispatch from several threads must
    serialize access themselves.
    """

    __slots__ = ("_handlers", "config")

    def __init__(self, config: DispatchConfig | None = None) -> None:
        self.config: DispatchConfig = config or DispatchConfig()
        self._handlers: dict[Action, dict[Resource, Handler]] = {}

    # -- Registration --

    def register(
        self,
        action: Action | str,
        resource: Resource | str,
        handler: Handler,
    ) -> None:
        """Register *handler* for the pair. Replaces any previous handler."""
        resources = self._handlers.setdefault(Action(action), {})
        resources[Resource(resource)] = handler

    def operation(
        self, action: Action | str, resource: Resource | str
    ) -> Callable[[Handler], Handler]:
        """Register a handler via decorator. Returns the function unchanged."""

        def decorator(func: Handler) -> Handler:
            self.register(action, resource, func)
            return func

        return decorator

    def register_all(
        self,
        handler: Handler,
        actions: Iterable[Action | str] | None = None,
        resources: Iterable[Resource | str] | None = None,
    ) -> None:
        """Register one handler for every combination of actions and resources.

        Defaults to every member of ``Action`` and ``Resource``.
        """
        action_list = list(Action if actions is None else actions)
        resource_list = list(Resource if resources is None else resources)
        for action in action_list:
            for resource in resource_list:
                self.register(action, resource, handler)

    # -- Lookup --

    def handler_for(self, action: Action | str, resource: Resource | str) -> Handler | None:
        """Return the registered handler, or ``None``. Never reports a miss."""
        resources = self._handlers.get(Action(action))
        if resources is None:
            return None
        return resources.get(Resource(resource))

    def execute(self, args: CommandArgs) -> Any:
        """Call the handler registered for ``(args.action, args.resource)``.

        Returns whatever the handler returns. When no handler is
        registered the miss is logged and ``None`` is returned; with
        ``strict=True`` an ``UnregisteredPair`` is raised instead.
        Exceptions raised by the handler propagate unchanged.
        """
        handler = self.handler_for(args.action, args.resource)
        if handler is None:
            report_miss(UnregisteredPair(args.action, args.resource), self.config)
            return None
        return handler(args)

    # -- Introspection --

    @property
    def registrations(self) -> list[Registration]:
        """Every registered pair, in enum declaration order."""
        return [
            Registration(action, resource, self._handlers[action][resource])
            for action in Action
            if action in self._handlers
            for resource in Resource
            if resource in self._handlers[action]
        ]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        try:
            return self.handler_for(*key) is not None
        except ValueError:
            return False

    def __len__(self) -> int:
        return sum(len(resources) for resources in self._handlers.values())

    def __repr__(self) -> str:
        return f"Dispatcher({len(self)} operations, strict={self.config.strict})"
