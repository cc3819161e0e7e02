"""Utility modules for htmlreflow.

Provides:
- logger: get_logger for namespaced logging
"""

from htmlreflow.utils.logger import get_logger

__all__ = [
    "get_logger",
]
