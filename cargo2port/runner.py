"""
Pipeline orchestration for cargo2port.

This module coordinates the workflow:
1. Resolve every source into a lockfile, in order
2. Merge the lockfiles into one list of checksummed packages
3. Render the cargo.crates block

Sources are resolved one at a time and the first failure aborts the run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import BinaryIO, Sequence

from .config import AppConfig
from .core.merge import resolve_lockfile_packages
from .core.types import AlignmentMode, Lockfile, Package
from .fetch.registry import RegistryClient
from .input.sources import resolve_lockfile
from .output.formatter import format_cargo_crates

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Outcome of a successful run.

    Attributes:
        packages: Merged packages that carry a checksum
        output: Rendered cargo.crates block, or None when there is nothing to render
    """
    packages: list[Package] = field(default_factory=list)
    output: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.packages


def run_pipeline(
    sources: Sequence[str],
    cfg: AppConfig,
    mode: AlignmentMode | None = None,
    registry: RegistryClient | None = None,
    stdin: BinaryIO | None = None,
) -> RunResult:
    """Resolve, merge and render the given sources.

    Args:
        sources: Checked source identifiers; empty means the configured default source
        cfg: Application configuration
        mode: Alignment mode (defaults to ``cfg.output.align``)
        registry: Client for crate specifiers (built from ``cfg.registry`` if None)
        stdin: Stream for the ``-`` source (defaults to sys.stdin)

    Returns:
        RunResult with the merged packages and the rendered block

    Raises:
        Cargo2PortError: On an unknown alignment mode, or the first source that fails to resolve
    """
    mode = mode or AlignmentMode.from_name(cfg.output.align)
    registry = registry or RegistryClient(cfg.registry, manifest_filename=cfg.manifest.filename)
    sources = list(sources) or [cfg.manifest.default_source]

    lockfiles: list[Lockfile] = []
    for source in sources:
        lockfile = resolve_lockfile(source, registry, stdin=stdin)
        logger.info("Loaded %d packages from %s", len(lockfile.packages), source)
        lockfiles.append(lockfile)

    packages = resolve_lockfile_packages(lockfiles)
    if not packages:
        return RunResult(packages=[], output=None)

    output = format_cargo_crates(
        packages,
        mode,
        line_width=cfg.output.line_width,
        indent=cfg.output.indent,
    )
    return RunResult(packages=packages, output=output)
