"""
Core domain models and merge logic.

This package contains the data types shared by every stage and the
lockfile merge step.
"""

from .types import AlignmentMode, Lockfile, Package
from .merge import resolve_lockfile_packages

__all__ = [
    "AlignmentMode",
    "Lockfile",
    "Package",
    "resolve_lockfile_packages",
]
