"""
Resolution of source identifiers into lockfiles.

A source identifier is one of:
- ``-``: read the lockfile from standard input
- ``name@version``: download the crate from the registry and use its Cargo.lock
- anything else: a filesystem path to a lockfile (or a directory holding one)

Classification is purely syntactic.
"""

from __future__ import annotations

from enum import Enum
import logging
from pathlib import Path
from typing import BinaryIO

from ..core.types import Lockfile
from ..errors import SourceNotFoundError, SpecError
from ..fetch.registry import RegistryClient
from .lockfile import lockfile_from_path, lockfile_from_stdin, lockfile_from_str

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"
SPEC_SEPARATOR = "@"


class SourceKind(str, Enum):
    STDIN = "stdin"
    REMOTE = "remote"
    PATH = "path"


def classify_source(identifier: str) -> SourceKind:
    if identifier == STDIN_MARKER:
        return SourceKind.STDIN
    if SPEC_SEPARATOR in identifier:
        return SourceKind.REMOTE
    return SourceKind.PATH


def parse_crate_spec(spec: str) -> tuple[str, str]:
    """Split a ``name@version`` specifier.

    Anything after a second ``@`` is ignored, so ``a@b@c`` yields
    ``("a", "b")``.

    Raises:
        SpecError: If there is no ``@`` or the name or version is empty
    """
    parts = spec.split(SPEC_SEPARATOR)
    if len(parts) < 2 or not parts[0] or not parts[1]:
        raise SpecError(spec)
    return parts[0], parts[1]


def lockfile_from_crates_io(spec: str, registry: RegistryClient) -> Lockfile:
    """Fetch the crate named by ``spec`` and parse the Cargo.lock it ships."""
    name, version = parse_crate_spec(spec)
    text = registry.fetch_lockfile_text(name, version)
    return lockfile_from_str(text)


def resolve_lockfile(
    identifier: str,
    registry: RegistryClient,
    stdin: BinaryIO | None = None,
) -> Lockfile:
    """Turn a source identifier into a parsed Lockfile.

    Args:
        identifier: Stdin marker, crate specifier, or filesystem path
        registry: Client used for crate specifiers
        stdin: Stream to read for the stdin marker (defaults to sys.stdin)

    Raises:
        ManifestError: If the lockfile text cannot be read or parsed
        SpecError: If a crate specifier is malformed
        FetchError: If the crate download fails
        ExtractionError: If the crate archive cannot be decoded
        MissingManifestError: If the crate archive has no Cargo.lock
    """
    kind = classify_source(identifier)
    logger.info("Resolving %s source %s", kind.value, identifier)
    if kind is SourceKind.STDIN:
        return lockfile_from_stdin(stdin)
    if kind is SourceKind.REMOTE:
        return lockfile_from_crates_io(identifier, registry)
    return lockfile_from_path(identifier)


def check_source(arg: str, manifest_filename: str = "Cargo.lock") -> str:
    """Validate a command-line source before any resolution happens.

    Stdin markers and crate specifiers pass through untouched. A directory
    is replaced by the lockfile inside it, which must exist in turn.

    Raises:
        SourceNotFoundError: If the path (or the lockfile in the directory) does not exist
    """
    if classify_source(arg) is not SourceKind.PATH:
        return arg

    path = Path(arg)
    if not path.exists():
        raise SourceNotFoundError(arg)
    if path.is_dir():
        return check_source(str(path / manifest_filename), manifest_filename)
    return str(path)
