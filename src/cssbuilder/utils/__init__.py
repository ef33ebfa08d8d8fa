"""Utility modules for cssbuilder.

Provides:
- logger: get_logger for logging
"""

from cssbuilder.utils.logger import get_logger

__all__ = [
    "get_logger",
]
