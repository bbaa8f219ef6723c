"""
Utilities package for the formatting helpers.

Exports shared logging helpers. Keep this package lightweight and free of
formatting logic.
"""

from src.utils.logging import JsonFormatter, configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "JsonFormatter",
]
