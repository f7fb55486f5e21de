"""AeroTable command-line interface.

Entry point for the ``aerotable`` CLI tool.
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from aerotable import __app_name__, __version__

console = Console()


def _setup_logging(verbose: bool) -> None:
    """Route the package logger through rich; library modules never do this."""
    logger = logging.getLogger("aerotable")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=console, show_path=False))


@click.group()
@click.version_option(version=__version__, prog_name=__app_name__)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """AeroTable — Mach sweep aerodynamic tables.

    Builds drag, centre of pressure and normal force coefficient tables
    over a Mach range for comparison with reference data.
    """
    ctx.ensure_object(dict)
    ctx.obj["console"] = console
    _setup_logging(verbose)


# Import and register sub-commands
from aerotable.cli.design_cmd import design  # noqa: E402
from aerotable.cli.sweep_cmd import sweep  # noqa: E402

cli.add_command(design)
cli.add_command(sweep)


def main() -> None:
    """Convenience wrapper for entry-point scripts."""
    cli()
