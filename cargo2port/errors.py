"""Exception hierarchy for cargo2port.

Every failure that crosses a component boundary is re-raised as one of
these, so the CLI only needs to catch ``Cargo2PortError``.
"""

from __future__ import annotations


class Cargo2PortError(Exception):
    """Base class for all errors raised by cargo2port."""


class ManifestError(Cargo2PortError):
    """Raised when a Cargo.lock cannot be read or parsed."""


class FetchError(Cargo2PortError):
    """Raised when a crate download fails (transport error or non-2xx status)."""


class ExtractionError(Cargo2PortError):
    """Raised when a crate archive cannot be decoded.

    Only the category of the underlying error is kept so the message is
    the same on every platform.

    Attributes:
        kind: Error category, e.g. "ReadError" or "UnexpectedEof"
    """

    def __init__(self, kind: str):
        super().__init__(kind)
        self.kind = kind

    def __str__(self) -> str:
        return f"failed to extract crate archive: {self.kind}"


class MissingManifestError(Cargo2PortError):
    """Raised when a crate archive has no Cargo.lock member."""

    def __init__(self, filename: str = "Cargo.lock"):
        super().__init__(filename)
        self.filename = filename

    def __str__(self) -> str:
        return f"crate missing {self.filename} file"


class SpecError(Cargo2PortError):
    """Raised for a crate specifier that is not ``name@version``.

    Attributes:
        spec: The specifier exactly as given
    """

    def __init__(self, spec: str):
        super().__init__(spec)
        self.spec = spec

    def __str__(self) -> str:
        return f"invalid crate specifier: {self.spec}"


class MergeError(Cargo2PortError):
    """Raised when lockfiles disagree about a package."""


class ConfigError(Cargo2PortError):
    """Raised for a configuration or option value that is not recognised."""


class SourceNotFoundError(Cargo2PortError):
    """Raised when a source path given on the command line does not exist."""

    def __init__(self, path: str):
        super().__init__(path)
        self.path = path

    def __str__(self) -> str:
        return f"Error: cannot find file {self.path}"


__all__ = [
    "Cargo2PortError",
    "ManifestError",
    "FetchError",
    "ExtractionError",
    "MissingManifestError",
    "SpecError",
    "MergeError",
    "SourceNotFoundError",
    "ConfigError",
]
