"""Path normalization for the path tree.

Callers name a tree position however is convenient for them::

    "layer.node"                    -> ["layer", "node"]
    ["layer", "node"]               -> ["layer", "node"]
    [Route.LAYER, Route.NODE]       -> ["layer", "node"]   (str-valued Enum)
    "a..b"                          -> ["a", "", "b"]
    ""                              -> []

Everything downstream only ever sees ``list[str]``.
"""

from collections.abc import Sequence
from enum import Enum
from typing import Any


def normalize_path(path: Any) -> list[str]:
    """Convert any accepted path shape into a list of segment names.

    - ``str``: split on ``"."``. Empty segments between dots are kept and
      are ordinary keys. The empty string yields ``[]``.
    - Sequence of ``str`` and/or ``Enum`` members: strings are kept as-is,
      enum members contribute their value when it is a string and are
      dropped otherwise.
    - Anything else yields ``[]``, which registries treat as a no-op.
    """
    if isinstance(path, str):
        return path.split(".") if path else []

    if isinstance(path, bytes | bytearray) or not isinstance(path, Sequence):
        return []

    segments: list[str] = []
    for item in path:
        # Check Enum before str: StrEnum members are both.
        if isinstance(item, Enum):
            if isinstance(item.value, str):
                segments.append(item.value)
        elif isinstance(item, str):
            segments.append(item)
        else:
            return []
    return segments


def join_path(segments: Sequence[str]) -> str:
    """Dotted display form of a normalized path."""
    return ".".join(segments)
