"""Registry import resolution: ``"module:attribute"`` strings to registries.

Shared utilities used by every subcommand to locate the Dispatcher or
PathTree a user's tool builds and apply the CLI's settings to it.
"""

import dataclasses
import importlib

from climan.config import DispatchConfig
from climan.dispatch.dispatcher import Dispatcher
from climan.dispatch.tree import PathTree
from climan.errors import ConfigurationError


def resolve_registry(
    import_string: str,
    kinds: tuple[type, ...] = (Dispatcher,),
    default_attr: str = "dispatcher",
) -> Dispatcher | PathTree:
    """Resolve an import string to a registry instance.

    Accepts ``"module:attribute"`` format. When the attribute portion is
    omitted, defaults to *default_attr* (e.g. ``"mytool"`` resolves to
    ``mytool.dispatcher``).

    Supports factory functions: if the resolved object is callable and
    not one of *kinds*, it is called with no arguments.

    Args:
        import_string: Dotted module path with optional ``:attribute``
            suffix (e.g. ``"mytool:dispatcher"``, ``"mytool.cli:build"``).
        kinds: Registry types the caller accepts.
        default_attr: Attribute used when the import string has none.

    Returns:
        The resolved registry.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        ConfigurationError: If a factory fails or the object is not one
            of *kinds*.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = default_attr

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, kinds):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise ConfigurationError(msg) from exc

    if not isinstance(obj, kinds):
        expected = " or ".join(kind.__name__ for kind in kinds)
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a {expected} instance"
        raise ConfigurationError(msg)

    return obj


def apply_cli_config(registry: Dispatcher | PathTree, config: DispatchConfig) -> None:
    """Turn on strict mode for *registry* when the CLI config asks for it.

    Only ever tightens: a registry built with ``strict=True`` stays strict
    when ``CLIMAN_STRICT`` is unset.
    """
    if config.strict and not registry.config.strict:
        registry.config = dataclasses.replace(registry.config, strict=True)
