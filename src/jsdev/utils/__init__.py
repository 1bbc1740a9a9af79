"""Utility modules for JSDev.

Provides:
- logger: get_logger for logging
"""

from jsdev.utils.logger import get_logger

__all__ = [
    "get_logger",
]
