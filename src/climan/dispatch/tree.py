"""Path tree: dotted paths of any depth mapped to handlers.

Every node is either a ``Branch`` (more segments follow) or a ``Leaf``
(a handler). Nodes are immutable: registering a path builds a new spine
of branches and swaps the root in one assignment, so a reader never sees
a half-updated tree.

Two behaviors callers must know about:

- A leaf on a path prefix is a catch-all. With ``"deploy"`` registered,
  ``call_function("deploy.prod.eu")`` runs the ``"deploy"`` handler and
  ignores the trailing segments.
- Registration shadows silently. Registering ``"a.b.c"`` while ``"a.b"``
  is a leaf turns ``"a.b"`` into a branch and drops its handler;
  registering ``"a.b"`` while it is a branch drops everything below it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import TypeAlias

from climan._internal.types import PathHandler, PathInput
from climan.config import DispatchConfig
from climan.dispatch._report import report_miss
from climan.dispatch.path import join_path, normalize_path
from climan.errors import PathNotFound

logger = logging.getLogger("climan.dispatch")


@dataclass(frozen=True, slots=True)
class Leaf:
    """Terminal node holding a handler."""

    handler: PathHandler


@dataclass(frozen=True, slots=True)
class Branch:
    """Interior node. ``children`` is a read-only view and never mutated."""

    children: Mapping[str, Node]

    def with_child(self, segment: str, node: Node) -> Branch:
        """Return a copy of this branch with *segment* set to *node*."""
        return Branch(MappingProxyType({**self.children, segment: node}))


Node: TypeAlias = "Branch | Leaf"

_EMPTY = Branch(MappingProxyType({}))


def _splice(branch: Branch, segments: Sequence[str], handler: PathHandler) -> Branch:
    """Build the replacement for *branch* with *handler* stored at *segments*."""
    head, rest = segments[0], segments[1:]
    current = branch.children.get(head)

    if not rest:
        if isinstance(current, Branch):
            logger.debug("Replacing branch %r with a handler", head)
        return branch.with_child(head, Leaf(handler))

    match current:
        case Branch():
            subtree = current
        case Leaf():
            logger.debug("Replacing handler at %r with a branch", head)
            subtree = _EMPTY
        case _:
            subtree = _EMPTY
    return branch.with_child(head, _splice(subtree, rest, handler))


class PathTree:
    """Registry of handlers addressed by hierarchical paths.

    Paths may be dotted strings, sequences of strings, or sequences of
    string-valued enum members; all three address the same node::

        tree = PathTree()
        tree.set_function("layer.node", lambda: print("hi"))
        tree.call_function(["layer", "node"])  # hi

    Not thread-safe beyond the atomic root swap in ``set_function()``.
    """

    __slots__ = ("_root", "config")

    def __init__(self, config: DispatchConfig | None = None) -> None:
        self.config: DispatchConfig = config or DispatchConfig()
        self._root: Branch = _EMPTY

    # -- Registration --

    def set_function(self, path: PathInput, handler: PathHandler) -> None:
        """Store *handler* at *path*. Empty or unrecognized paths are ignored."""
        segments = normalize_path(path)
        if not segments:
            logger.debug("Ignoring registration for empty path %r", path)
            return
        self._root = _splice(self._root, segments, handler)

    def command(self, path: PathInput) -> Callable[[PathHandler], PathHandler]:
        """Register a handler via decorator. Returns the function unchanged."""

        def decorator(func: PathHandler) -> PathHandler:
            self.set_function(path, func)
            return func

        return decorator

    # -- Lookup --

    def resolve(self, path: PathInput) -> PathHandler | None:
        """Return the handler *path* would invoke, or ``None``.

        Follows the same walk as ``call_function()``, including prefix
        catch-alls, but never invokes or reports anything.
        """
        return self._resolve(normalize_path(path))

    def _resolve(self, segments: Sequence[str]) -> PathHandler | None:
        if not segments:
            return None
        node: Node = self._root
        for segment in segments:
            match node:
                case Leaf(handler):
                    return handler
                case Branch(children):
                    child = children.get(segment)
                    if child is None:
                        return None
                    node = child
        return node.handler if isinstance(node, Leaf) else None

    def call_function(self, path: PathInput) -> None:
        """Invoke the handler registered at *path*.

        A missing path is logged at WARNING (raised as ``PathNotFound`` in
        strict mode). Empty or unrecognized paths are ignored. The
        handler's return value is discarded.
        """
        segments = normalize_path(path)
        if not segments:
            logger.debug("Ignoring call for empty path %r", path)
            return
        handler = self._resolve(segments)
        if handler is None:
            report_miss(PathNotFound(segments), self.config)
            return
        handler()

    # -- Introspection --

    @property
    def paths(self) -> list[str]:
        """Dotted path of every leaf, depth-first in registration order."""
        return [path for path, _ in self.handlers]

    def _walk(
        self, branch: Branch, prefix: tuple[str, ...]
    ) -> Iterator[tuple[tuple[str, ...], PathHandler]]:
        """Recursively yield ``(segments, handler)`` for every leaf."""
        for segment, node in branch.children.items():
            segments = (*prefix, segment)
            if isinstance(node, Leaf):
                yield segments, node.handler
            else:
                yield from self._walk(node, segments)

    @property
    def handlers(self) -> list[tuple[str, PathHandler]]:
        """``(dotted path, handler)`` for every leaf, same order as ``paths``."""
        return [(join_path(segments), handler) for segments, handler in self._walk(self._root, ())]

    def __contains__(self, path: object) -> bool:
        return self.resolve(path) is not None

    def __len__(self) -> int:
        return sum(1 for _ in self._walk(self._root, ()))

    def __repr__(self) -> str:
        return f"PathTree({len(self)} paths, strict={self.config.strict})"
