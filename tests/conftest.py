"""Shared fixtures: sample lockfiles and in-memory crate archives."""

from __future__ import annotations

import io
import tarfile

import pytest

ADLER_SUM = "f26201604c87b1e01bd3d98f8d5d9a8fcbb815e8cedb41ffccbeb4bf593a35fe"
AHO_SUM = "8e60d3430d3a69478ad0993f19238d2df97c507009a52b3c10addcd7f6bcb916"
MEMCHR_SUM = "78ca9ab1a0babb1e7d5695e3530886289c18cf2f87ec19a575a0abdce112e3a3"

REGISTRY = "registry+https://github.com/rust-lang/crates.io-index"

SAMPLE_LOCK = f"""# This file is automatically @generated by Cargo.
# It is not intended for manual editing.
version = 3

[[package]]
name = "adler"
version = "1.0.2"
source = "{REGISTRY}"
checksum = "{ADLER_SUM}"

[[package]]
name = "aho-corasick"
version = "1.1.3"
source = "{REGISTRY}"
checksum = "{AHO_SUM}"
dependencies = [
 "memchr",
]

[[package]]
name = "demo"
version = "0.1.0"
dependencies = [
 "aho-corasick",
]

[[package]]
name = "memchr"
version = "2.7.4"
source = "{REGISTRY}"
checksum = "{MEMCHR_SUM}"
"""

NO_CHECKSUM_LOCK = """version = 3

[[package]]
name = "demo"
version = "0.1.0"

[[package]]
name = "local-helper"
version = "0.2.0"
"""


def build_crate(members: dict[str, bytes]) -> bytes:
    """Build a .crate style tar.gz holding ``members`` in insertion order."""
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as archive:
        for name, payload in members.items():
            info = tarfile.TarInfo(name)
            info.size = len(payload)
            archive.addfile(info, io.BytesIO(payload))
    return buffer.getvalue()


@pytest.fixture
def sample_lock_path(tmp_path):
    path = tmp_path / "Cargo.lock"
    path.write_text(SAMPLE_LOCK, encoding="utf-8")
    return path


@pytest.fixture
def crate_bytes():
    return build_crate(
        {
            "ripgrep-14.1.0/Cargo.toml": b"[package]\nname = \"ripgrep\"\n",
            "ripgrep-14.1.0/src/main.rs": b"fn main() {}\n",
            "ripgrep-14.1.0/Cargo.lock": SAMPLE_LOCK.encode("utf-8"),
        }
    )
