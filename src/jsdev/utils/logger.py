"""Logging helpers for JSDev.

Every module logs under the ``jsdev`` namespace. Output channels stay
clean: the transformed program goes to the output sink, diagnostics and
traces go to stderr.

Example:
    >>> from jsdev.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Expanding macro %r", "log")
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

ROOT_LOGGER = "jsdev"
TRACE_FORMAT = "%(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the ``jsdev`` namespace.

    Example:
        >>> get_logger("mymodule").name
        'jsdev.mymodule'
        >>> get_logger("jsdev.scanner.core").name
        'jsdev.scanner.core'
    """
    if not (name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}.")):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(verbose: bool = False, stream: TextIO | None = None) -> logging.Handler:
    """Attach a stderr handler to the ``jsdev`` logger.

    Verbose mode traces each expansion and echoed unregistered comment at
    DEBUG; otherwise only warnings pass. Calling it again replaces the
    handler installed by the previous call, so repeated CLI runs in one
    process never duplicate lines.

    Args:
        verbose: Log at DEBUG instead of WARNING
        stream: Destination (default: the current sys.stderr)

    Returns:
        The installed handler
    """
    root = logging.getLogger(ROOT_LOGGER)
    for handler in list(root.handlers):
        if getattr(handler, "_jsdev_cli", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(TRACE_FORMAT))
    handler._jsdev_cli = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.propagate = False
    return handler
