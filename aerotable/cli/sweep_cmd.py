"""CLI command for building and writing a Mach sweep table."""

from __future__ import annotations

import math

import click
from rich.console import Console
from rich.table import Table

from aerotable.core.calculator import CalculatorFailure
from aerotable.core.config import load_design_json
from aerotable.core.registry import get_calculator, list_calculators
from aerotable.core.sweep import InvalidRangeError, build_table
from aerotable.reports.table_report import write_report
from aerotable.utils.constants import DEG_TO_RAD


@click.command("sweep")
@click.option(
    "--design",
    type=click.Path(exists=True),
    required=True,
    help="Input design JSON.",
)
@click.option("--start", type=float, default=None, help="First Mach number.")
@click.option("--stop", type=float, default=None, help="Exclusive upper Mach bound.")
@click.option("--step", type=float, default=None, help="Mach increment.")
@click.option("--aoa", type=float, default=None, help="Angle of attack [deg].")
@click.option(
    "--calculator",
    type=click.Choice(list_calculators(), case_sensitive=False),
    default=None,
    help="Aerodynamic calculator (default from design file).",
)
@click.option(
    "--output", "-o",
    type=click.Path(),
    default="aerotable.csv",
    show_default=True,
    help="Output report file (overwritten).",
)
@click.option(
    "--preview",
    type=int,
    default=10,
    show_default=True,
    help="Number of rows to print (0 to disable).",
)
@click.pass_context
def sweep(
    ctx: click.Context,
    design: str,
    start: float | None,
    stop: float | None,
    step: float | None,
    aoa: float | None,
    calculator: str | None,
    output: str,
    preview: int,
) -> None:
    """Sweep Mach number and write an aerodynamic coefficient table."""
    console: Console = ctx.obj.get("console", Console())

    try:
        state = load_design_json(design)
    except ValueError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1)

    settings = state.sweep
    if start is not None:
        settings.mach_start = start
    if stop is not None:
        settings.mach_stop = stop
    if step is not None:
        settings.mach_step = step
    if aoa is not None:
        settings.aoa = aoa
    if calculator is not None:
        settings.calculator = calculator

    try:
        calc = get_calculator(settings.calculator)
    except KeyError as exc:
        console.print(f"[red]Error:[/red] {exc.args[0]}")
        raise SystemExit(1)

    try:
        table = build_table(
            state.vehicle,
            calc,
            settings.mach_start,
            settings.mach_stop,
            settings.mach_step,
            aoa=settings.aoa * DEG_TO_RAD,
        )
    except (InvalidRangeError, CalculatorFailure) as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1)

    try:
        write_report(table, output)
    except OSError as exc:
        console.print(f"[red]Error:[/red] Cannot write {output}: {exc}")
        raise SystemExit(1)

    console.print(f"\n[bold]AeroTable — {state.vehicle.name}[/bold]\n")

    if preview > 0 and len(table) > 0:
        stride = math.ceil(len(table) / preview)
        view = Table(title=f"Mach Sweep ({settings.calculator}, AOA {settings.aoa:.1f} deg)")
        view.add_column("Mach", style="cyan", justify="right")
        view.add_column("CD", style="green", justify="right")
        view.add_column("CP [m]", justify="right")
        view.add_column("CN", justify="right")
        view.add_column("CNa [1/rad]", justify="right")
        for row in table.rows[::stride]:
            mach, cd, cp, cn, cna = row
            view.add_row(f"{mach:.3f}", f"{cd:.4f}", f"{cp:.4f}", f"{cn:.4f}", f"{cna:.4f}")
        console.print(view)

    console.print(f"[green]Report saved:[/green] {output} ({len(table)} rows)")
