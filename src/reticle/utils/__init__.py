"""Utility functions for reticle.

This module provides utility functions including:

- Logging setup and configuration
"""

from reticle.utils.logging import configure_logging

__all__ = [
    "configure_logging",
]
