"""Utility modules for Tagsmith.

Provides:
- logger: get_logger for logging
"""

from tagsmith.utils.logger import get_logger

__all__ = [
    "get_logger",
]
