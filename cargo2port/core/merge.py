"""
Merging of several lockfiles into one package list.

Packages are taken in source order and then document order. Only packages
with a checksum are kept, and each (name, version) appears once.
"""

from __future__ import annotations

import logging
from typing import Iterable

from ..errors import MergeError
from .types import Lockfile, Package

logger = logging.getLogger(__name__)


def resolve_lockfile_packages(lockfiles: Iterable[Lockfile]) -> list[Package]:
    """Merge lockfiles into a deduplicated list of checksummed packages.

    Checksum-less packages (git and path dependencies) are dropped before
    deduplication, so they never hide a checksummed entry with the same
    identity. The first occurrence of each identity wins and first-seen
    order is preserved; nothing is re-sorted. A later occurrence with a
    different checksum is logged and skipped.

    Args:
        lockfiles: Parsed lockfiles in the order their sources were given

    Returns:
        Packages ready for rendering

    Raises:
        MergeError: If a package record has an empty name or version
    """
    seen: dict[tuple[str, str], Package] = {}
    kept: list[Package] = []
    total = 0

    for lockfile in lockfiles:
        for package in lockfile.packages:
            total += 1
            if not package.name or not package.version:
                raise MergeError(f"package record without name or version: {package!r}")
            if not package.checksum:
                continue
            existing = seen.get(package.identity)
            if existing is not None:
                if existing.checksum != package.checksum:
                    logger.warning(
                        "Keeping first checksum for %s %s (%s), ignoring %s",
                        package.name,
                        package.version,
                        existing.checksum,
                        package.checksum,
                    )
                continue
            seen[package.identity] = package
            kept.append(package)

    logger.debug("Merged %d package entries into %d crates", total, len(kept))
    return kept
