"""Logger lookup for htmlreflow modules.

Every module logs under the "htmlreflow" namespace, so an application can
silence or enable the whole formatter with one logger. Messages are debug
level only and report lenient-input paths such as a stray end tag. No
handler is ever attached here.

Example:
    >>> import logging
    >>> logging.getLogger("htmlreflow").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the namespaced logger for a module.

    Args:
        name: Module name, usually __name__; "htmlreflow." is prepended
            when missing

    Example:
        >>> get_logger("htmlreflow.printer").name
        'htmlreflow.printer'
        >>> get_logger("plugins.minify").name
        'htmlreflow.plugins.minify'
    """
    if name != "htmlreflow" and not name.startswith("htmlreflow."):
        name = f"htmlreflow.{name}"
    return logging.getLogger(name)
