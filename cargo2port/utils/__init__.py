"""
Shared utility functions.

This package contains utility code used across multiple stages.
"""

from .logging import setup_logging

__all__ = ["setup_logging"]
