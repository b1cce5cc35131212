"""
Input handling.

Parses Cargo.lock files and resolves command-line sources (paths, stdin,
crate specifiers) into lockfiles.
"""

from .lockfile import lockfile_from_bytes, lockfile_from_path, lockfile_from_stdin, lockfile_from_str
from .sources import SourceKind, check_source, classify_source, parse_crate_spec, resolve_lockfile

__all__ = [
    "lockfile_from_bytes",
    "lockfile_from_path",
    "lockfile_from_stdin",
    "lockfile_from_str",
    "SourceKind",
    "check_source",
    "classify_source",
    "parse_crate_spec",
    "resolve_lockfile",
]
