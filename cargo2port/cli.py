"""
Command-line interface for cargo2port.

Uses Typer to read lockfile sources and the alignment mode, then prints
the cargo.crates block to stdout. All diagnostics go to stderr.
"""

from __future__ import annotations

from pathlib import Path

import click
import typer
from rich.console import Console

from .config import load_config
from .core.types import AlignmentMode
from .errors import Cargo2PortError
from .input.sources import check_source
from .runner import run_pipeline
from .utils.logging import setup_logging

app = typer.Typer(add_completion=False)
err_console = Console(stderr=True)


def _print_help(ctx: typer.Context, value: bool) -> None:
    """Write plain help text to stderr and stop."""
    if not value or ctx.resilient_parsing:
        return
    formatter = ctx.make_formatter()
    click.Command.format_help(ctx.command, ctx, formatter)
    typer.echo(formatter.getvalue().rstrip("\n"), err=True)
    raise typer.Exit(code=0)


@app.command(add_help_option=False)
def run(
    sources: list[str] | None = typer.Argument(
        None,
        metavar="[SOURCE]...",
        help="Cargo.lock paths or directories, '-' for stdin, or name@version from crates.io.",
        show_default=False,
    ),
    align: str | None = typer.Option(
        None,
        "--align",
        metavar="[plain|maxlen|multiline|justify]",
        help="Column layout (default: justify).",
    ),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True, dir_okay=False),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    show_help: bool = typer.Option(
        False,
        "--help",
        "-h",
        "-?",
        callback=_print_help,
        is_eager=True,
        expose_value=False,
        help="Show this message and exit.",
    ),
):
    """Print a MacPorts cargo.crates block for one or more Cargo.lock sources.

    Packages from every source are merged in order; duplicates and
    packages without a checksum are dropped.

    Args:
        sources: Lockfile sources, resolved left to right
        align: Alignment mode for the rendered block
        config: Optional path to a YAML config file
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    cfg = load_config(str(config) if config else None)

    # Override with CLI options
    if log_level:
        cfg.logging.level = log_level
    if align is not None:
        cfg.output.align = align

    setup_logging(cfg.logging, err_console)

    try:
        mode = AlignmentMode.from_name(cfg.output.align)
        checked = [check_source(arg, cfg.manifest.filename) for arg in sources or [] if arg]
        result = run_pipeline(checked, cfg, mode)
    except Cargo2PortError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    if result.is_empty:
        typer.echo("No packages with checksums found.", err=True)
        raise typer.Exit(code=0)

    print(result.output)


if __name__ == "__main__":
    app()
