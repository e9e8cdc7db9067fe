"""Utility functions for fontgroups.

This module provides logging setup and configuration.
"""

from fontgroups.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
