"""Miss reporting shared by both registries.

A miss is logged and swallowed unless the registry runs in strict mode,
in which case the ``DispatchMiss`` is raised to the caller.
"""

import logging

from climan.config import DispatchConfig
from climan.errors import DispatchMiss

logger = logging.getLogger("climan.dispatch")


def report_miss(miss: DispatchMiss, config: DispatchConfig) -> None:
    """Log *miss* at WARNING, or raise it when ``config.strict`` is set."""
    if config.strict:
        raise miss
    logger.warning("%s", miss.detail)
