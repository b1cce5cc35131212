"""
Remote crate retrieval.

This package downloads crates from the registry and extracts the
Cargo.lock they ship.
"""

from .archive import ArchiveEntry, ArchiveReader, TarGzReader, extract_lockfile
from .registry import RegistryClient, crate_download_url

__all__ = [
    "ArchiveEntry",
    "ArchiveReader",
    "TarGzReader",
    "extract_lockfile",
    "RegistryClient",
    "crate_download_url",
]
