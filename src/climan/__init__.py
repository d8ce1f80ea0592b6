"""climan: command dispatch for command-line tools.

Two registries: a fixed (action, resource) table and a dotted-path tree.

Action/resource dispatch::

    from climan import Action, CommandArgs, Dispatcher, Resource

    dispatcher = Dispatcher()

    @dispatcher.operation(Action.ADD, Resource.NUMBERS)
    def add_numbers(args: CommandArgs) -> int:
        return sum(int(v) for v in args.values)

    dispatcher.execute(CommandArgs(Action.ADD, Resource.NUMBERS, ("2", "3")))  # 5

Path-tree dispatch::

    from climan import PathTree

    registry = PathTree()
    registry.set_function("layer.node", lambda: print("Hello from layer.node!"))
    registry.call_function(["layer", "node"])
"""

import importlib

__version__ = "0.1.0"
__all__ = [
    "Action",
    "ClimanError",
    "CommandArgs",
    "ConfigurationError",
    "DispatchConfig",
    "DispatchMiss",
    "Dispatcher",
    "PathNotFound",
    "PathTree",
    "Resource",
    "UnregisteredPair",
    "normalize_path",
]


# Public name -> defining module, resolved on first attribute access
_LAZY_IMPORTS: dict[str, str] = {
    "Action": "climan.enums",
    "Resource": "climan.enums",
    "CommandArgs": "climan.args",
    "DispatchConfig": "climan.config",
    "Dispatcher": "climan.dispatch.dispatcher",
    "PathTree": "climan.dispatch.tree",
    "normalize_path": "climan.dispatch.path",
    "ClimanError": "climan.errors",
    "ConfigurationError": "climan.errors",
    "DispatchMiss": "climan.errors",
    "PathNotFound": "climan.errors",
    "UnregisteredPair": "climan.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import climan`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_path), name)
