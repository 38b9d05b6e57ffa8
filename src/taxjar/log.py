"""Package logging.

Every module logs through ``logging.getLogger(__name__)`` under the
``taxjar`` namespace, at debug level only: one line per dispatched request
and one per response status.  API keys are never logged.

The library installs a :class:`logging.NullHandler` so nothing is printed
unless the application configures logging.  For interactive debugging,
:func:`enable_debug_logging` attaches a Rich handler writing to stderr.
"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger("taxjar")
logger.addHandler(logging.NullHandler())


def enable_debug_logging(level: int = logging.DEBUG) -> logging.Handler:
    """Send ``taxjar`` log records to stderr through Rich.

    Colour is disabled when ``NO_COLOR`` is set or ``TERM=dumb``.

    Args:
        level: Minimum level to emit.

    Returns:
        The installed handler, so callers can remove it again.
    """
    console = Console(stderr=True, no_color=_should_disable_color())
    handler = RichHandler(console=console, show_path=False, markup=False)
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler


def _should_disable_color() -> bool:
    """Return True when NO_COLOR is set (any value) or TERM=dumb."""
    if os.environ.get("NO_COLOR") is not None:
        return True
    if os.environ.get("TERM") == "dumb":
        return True
    return False
