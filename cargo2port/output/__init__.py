"""Output rendering for the cargo.crates block."""

from .formatter import format_cargo_crates

__all__ = ["format_cargo_crates"]
