"""
Core data types for cargo2port.

- Package: One locked crate (name, version, optional checksum)
- Lockfile: The ordered packages parsed from one Cargo.lock
- AlignmentMode: Layout policy for the rendered cargo.crates block
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..errors import ConfigError


@dataclass(frozen=True)
class Package:
    """A single ``[[package]]`` entry of a Cargo.lock.

    Attributes:
        name: Crate name
        version: Locked version string
        checksum: SHA-256 of the crate archive; None for git/path dependencies
        source: Where the crate comes from (registry+..., git+...), if recorded
    """
    name: str
    version: str
    checksum: str | None = None
    source: str | None = None

    @property
    def identity(self) -> tuple[str, str]:
        return (self.name, self.version)


@dataclass
class Lockfile:
    """Packages of one Cargo.lock, in document order.

    Attributes:
        packages: Package records as they appear in the file
        version: Lockfile format version, when the file declares one
    """
    packages: list[Package] = field(default_factory=list)
    version: int | None = None


class AlignmentMode(str, Enum):
    """Column layout used when rendering packages."""

    NORMAL = "plain"
    MAXLEN = "maxlen"
    MULTILINE = "multiline"
    JUSTIFY = "justify"

    @classmethod
    def from_name(cls, value: str) -> AlignmentMode:
        """Look up a mode by name, ignoring case and surrounding whitespace.

        Raises:
            ConfigError: If the name is not one of the modes
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(mode.value for mode in cls)
            raise ConfigError(f"invalid alignment mode: {value} (expected one of {choices})") from None
