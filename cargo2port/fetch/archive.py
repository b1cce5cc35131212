"""
Extraction of Cargo.lock from a crate archive.

Crates are published as gzip-compressed tarballs. Decoding is behind the
ArchiveReader protocol so the lookup logic can run against in-memory
archives; TarGzReader is the real implementation on top of tarfile.
"""

from __future__ import annotations

import errno
import io
import logging
from pathlib import PurePosixPath
import tarfile
from typing import Iterator, Protocol
import zlib

from ..errors import ExtractionError, MissingManifestError

logger = logging.getLogger(__name__)


class ArchiveEntry(Protocol):
    """One member of an archive."""

    path: str

    def read_text(self) -> str:
        """Return the member's full contents decoded as UTF-8."""
        ...


class ArchiveReader(Protocol):
    """Decodes archive bytes into entries, in archive order."""

    def entries(self, data: bytes) -> Iterator[ArchiveEntry]:
        ...


class _TarEntry:
    def __init__(self, archive: tarfile.TarFile, member: tarfile.TarInfo):
        self._archive = archive
        self._member = member
        self.path = member.name

    def read_text(self) -> str:
        handle = self._archive.extractfile(self._member)
        if handle is None:
            return ""
        with handle:
            return handle.read().decode("utf-8")


class TarGzReader:
    """ArchiveReader for ``.tar.gz`` data such as ``.crate`` files.

    Members are streamed in archive order; only regular files are yielded.
    """

    def entries(self, data: bytes) -> Iterator[ArchiveEntry]:
        with tarfile.open(fileobj=io.BytesIO(data), mode="r:gz") as archive:
            for member in archive:
                if member.isfile():
                    yield _TarEntry(archive, member)


def extract_lockfile(data: bytes, filename: str = "Cargo.lock", reader: ArchiveReader | None = None) -> str:
    """Return the text of the first archive member named ``filename``.

    A member matches when the last component of its path equals
    ``filename``, wherever it sits in the archive. Iteration stops at the
    first match.

    Args:
        data: Raw archive bytes
        filename: Lockfile name to look for
        reader: Archive decoder (defaults to TarGzReader)

    Returns:
        The matching member's contents as text

    Raises:
        ExtractionError: If the archive cannot be decoded or read
        MissingManifestError: If no member matches
    """
    reader = reader or TarGzReader()
    try:
        for entry in reader.entries(data):
            if PurePosixPath(entry.path).name == filename:
                logger.debug("Found %s in crate archive", entry.path)
                return entry.read_text()
    except (tarfile.TarError, OSError, EOFError, zlib.error, UnicodeDecodeError) as exc:
        raise ExtractionError(_error_kind(exc)) from exc

    raise MissingManifestError(filename)


def _error_kind(exc: BaseException) -> str:
    """Reduce an exception to a platform-independent category name."""
    if isinstance(exc, UnicodeDecodeError):
        return "InvalidData"
    if isinstance(exc, EOFError):
        return "UnexpectedEof"
    if isinstance(exc, OSError) and exc.errno in errno.errorcode:
        return errno.errorcode[exc.errno]
    return type(exc).__name__
