"""Logger lookup for Tagsmith modules.

Every module logs under the ``tagsmith`` namespace so applications can
tune the whole library with one ``logging.getLogger("tagsmith")`` call.
The library only emits DEBUG records and attaches a ``NullHandler`` to
the namespace root, so nothing is printed unless the application
configures logging.
"""

from __future__ import annotations

import logging

_ROOT = "tagsmith"

logging.getLogger(_ROOT).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the ``tagsmith`` namespace.

    Example:
        >>> get_logger("tagsmith.node").name
        'tagsmith.node'
        >>> get_logger("plugins").name
        'tagsmith.plugins'
    """
    if name != _ROOT and not name.startswith(f"{_ROOT}."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
