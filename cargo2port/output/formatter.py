"""
Rendering of packages as a MacPorts ``cargo.crates`` block.

The block is a single Portfile option spread over several lines with Tcl
continuations:

    cargo.crates \\
        adler              1.0.2  f26201604c87b1e01bd3d98f8d5d9a8fcbb815e8cedb41ffccbeb4bf593a35fe \\
        aho-corasick       1.1.3  8e60d3430d3a69478ad0993f19238d2df97c507009a52b3c10addcd7f6bcb916

Alignment modes:
- plain: fields separated by a single space
- maxlen: name and version columns padded to their widest value
- multiline: maxlen, with overflowing rows wrapped before the checksum
- justify: versions right-aligned against a shared checksum column, wrapped like multiline

Widths are counted in code points.
"""

from __future__ import annotations

from typing import Sequence

from ..core.types import AlignmentMode, Package

HEADER = "cargo.crates"
CONTINUATION = " \\"
COLUMN_GAP = "  "


def format_cargo_crates(
    packages: Sequence[Package],
    mode: AlignmentMode,
    line_width: int = 80,
    indent: int = 4,
) -> str:
    """Render packages as a ``cargo.crates`` block.

    Rows keep the order of ``packages``. An empty sequence renders as the
    bare ``cargo.crates`` keyword.

    Args:
        packages: Packages to render, normally the merged list
        mode: Alignment mode
        line_width: Row width above which multiline/justify wrap the checksum
        indent: Spaces before each row

    Returns:
        The block without a trailing newline
    """
    pad = " " * indent
    lines = [HEADER]

    if mode is AlignmentMode.NORMAL:
        lines.extend(f"{pad}{p.name} {p.version} {p.checksum or ''}" for p in packages)
        return (CONTINUATION + "\n").join(lines)

    name_width = max((len(p.name) for p in packages), default=0)
    version_width = max((len(p.version) for p in packages), default=0)
    pair_width = max((len(p.name) + len(p.version) for p in packages), default=0)
    wrap = mode in (AlignmentMode.MULTILINE, AlignmentMode.JUSTIFY)

    for package in packages:
        if mode is AlignmentMode.JUSTIFY:
            lead = _justified_lead(package, pair_width)
        else:
            lead = f"{package.name:<{name_width}}{COLUMN_GAP}{package.version:<{version_width}}{COLUMN_GAP}"
        checksum = package.checksum or ""
        row_width = len(pad) + len(lead) + len(checksum) + len(CONTINUATION)
        if wrap and row_width > line_width:
            lines.append(pad + lead.rstrip())
            lines.append(pad + " " * len(lead) + checksum)
        else:
            lines.append(pad + lead + checksum)

    return (CONTINUATION + "\n").join(lines)


def _justified_lead(package: Package, pair_width: int) -> str:
    """Name flush left, version flush right, then the gap before the checksum."""
    gap = pair_width - len(package.name) - len(package.version) + len(COLUMN_GAP)
    return f"{package.name}{' ' * gap}{package.version}{COLUMN_GAP}"
