"""
cargo2port - MacPorts cargo.crates generator.

This package reads Cargo.lock files (from disk, stdin, or a crate
downloaded from crates.io), merges their packages, and renders an aligned
``cargo.crates`` block for a MacPorts Portfile.

Main entry point is the CLI via the `cargo2port` command.

Example:
    $ cargo2port --align=maxlen path/to/project ripgrep@14.1.0
"""

__all__ = [
    "__version__",
    "AlignmentMode",
    "Lockfile",
    "Package",
    "format_cargo_crates",
    "resolve_lockfile",
    "resolve_lockfile_packages",
]
__version__ = "0.1.0"

from .core.types import AlignmentMode, Lockfile, Package
from .core.merge import resolve_lockfile_packages
from .input.sources import resolve_lockfile
from .output.formatter import format_cargo_crates
