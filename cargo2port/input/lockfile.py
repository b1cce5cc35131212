"""TOML parser for Cargo.lock files.

A Cargo.lock lists every locked crate as a ``[[package]]`` table:

    version = 3

    [[package]]
    name = "adler"
    version = "1.0.2"
    source = "registry+https://github.com/rust-lang/crates.io-index"
    checksum = "f26201604c87b1e01bd3d98f8d5d9a8fcbb815e8cedb41ffccbeb4bf593a35fe"

Format v1 lockfiles keep the checksums in a trailing ``[metadata]`` table
instead, keyed ``"checksum <name> <version> (<source>)"``.
"""

from __future__ import annotations

import logging
from pathlib import Path
import sys
import tomllib
from typing import Any, BinaryIO

from ..core.types import Lockfile, Package
from ..errors import ManifestError

logger = logging.getLogger(__name__)


def lockfile_from_str(text: str) -> Lockfile:
    """Parse Cargo.lock text into a Lockfile.

    Args:
        text: The full lockfile content

    Returns:
        Lockfile with packages in document order

    Raises:
        ManifestError: If the text is not valid TOML or a package table is malformed
    """
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ManifestError(f"invalid Cargo.lock: {exc}") from exc

    raw_packages = data.get("package", [])
    if not isinstance(raw_packages, list):
        raise ManifestError("invalid Cargo.lock: 'package' must be an array of tables")

    metadata = data.get("metadata", {})
    if not isinstance(metadata, dict):
        metadata = {}

    packages = [_parse_package(item, metadata) for item in raw_packages]
    version = data.get("version")
    return Lockfile(packages=packages, version=version if isinstance(version, int) else None)


def lockfile_from_bytes(raw: bytes) -> Lockfile:
    """Decode UTF-8 lockfile bytes and parse them."""
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ManifestError(f"invalid Cargo.lock: {exc}") from exc
    return lockfile_from_str(text)


def lockfile_from_path(path: str | Path) -> Lockfile:
    """Read and parse the lockfile at ``path``."""
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise ManifestError(f"cannot read {path}: {exc.strerror or exc}") from exc
    logger.debug("Read %d bytes from %s", len(raw), path)
    return lockfile_from_bytes(raw)


def lockfile_from_stdin(stream: BinaryIO | None = None) -> Lockfile:
    """Read and parse a lockfile from standard input."""
    stream = stream if stream is not None else sys.stdin.buffer
    try:
        raw = stream.read()
    except OSError as exc:
        raise ManifestError(f"cannot read standard input: {exc.strerror or exc}") from exc
    logger.debug("Read %d bytes from standard input", len(raw))
    return lockfile_from_bytes(raw)


def _parse_package(item: Any, metadata: dict[str, Any]) -> Package:
    if not isinstance(item, dict):
        raise ManifestError("invalid Cargo.lock: [[package]] entry is not a table")

    name = item.get("name")
    version = item.get("version")
    if not isinstance(name, str) or not isinstance(version, str):
        raise ManifestError("invalid Cargo.lock: package is missing 'name' or 'version'")

    source = item.get("source")
    checksum = item.get("checksum")
    if checksum is None and source:
        # v1 lockfiles
        checksum = metadata.get(f"checksum {name} {version} ({source})")
    if checksum == "<none>":
        checksum = None

    return Package(
        name=name,
        version=version,
        checksum=checksum if isinstance(checksum, str) else None,
        source=source if isinstance(source, str) else None,
    )
