"""Utility functions for draftcore.

This module provides utility functions including:

- Logging setup and configuration
"""

from draftcore.utils.logging import configure_logging

__all__ = [
    "configure_logging",
]
