"""CLI commands for creating, inspecting and checking design files."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from aerotable.core.config import DesignState, ProjectMeta, load_design_json, save_design_json
from aerotable.core.vehicle import example_configuration
from aerotable.utils.validation import Severity, validate_vehicle


@click.group("design")
@click.pass_context
def design(ctx: click.Context) -> None:
    """Create, inspect and check design files."""
    pass


@design.command("new")
@click.option("--name", default="Example 54mm", show_default=True, help="Design name.")
@click.option("--output", "-o", type=click.Path(), required=True, help="Output design JSON.")
@click.pass_context
def design_new(ctx: click.Context, name: str, output: str) -> None:
    """Write an example design to start from."""
    console: Console = ctx.obj.get("console", Console())
    state = DesignState(meta=ProjectMeta(name=name), vehicle=example_configuration(name))
    save_design_json(state, output)
    console.print(f"[green]Design saved:[/green] {output}")


@design.command("show")
@click.argument("path", type=click.Path(exists=True))
@click.pass_context
def design_show(ctx: click.Context, path: str) -> None:
    """Display summary of a design file."""
    console: Console = ctx.obj.get("console", Console())
    state = load_design_json(path)
    vehicle = state.vehicle

    tree = Tree(f"[bold]{state.meta.name}[/bold]")
    meta = tree.add("[cyan]Metadata[/cyan]")
    meta.add(f"Author: {state.meta.author or '—'}")
    meta.add(f"Version: {state.meta.version}")
    meta.add(f"Modified: {state.meta.modified or '—'}")

    veh = tree.add(f"[cyan]Vehicle[/cyan] {vehicle.name}")
    veh.add(f"Length: {vehicle.length * 1e3:.1f} mm")
    veh.add(f"Reference diameter: {vehicle.reference_diameter * 1e3:.1f} mm")
    nose = veh.add("Nose cone")
    nose.add(f"Shape: {vehicle.nose.shape.value}")
    nose.add(f"Length: {vehicle.nose.length * 1e3:.1f} mm")
    body = veh.add("Body tube")
    body.add(f"Length: {vehicle.body.length * 1e3:.1f} mm")
    body.add(f"Diameter: {vehicle.body.diameter * 1e3:.1f} mm")
    if vehicle.fins is not None:
        fins = veh.add(f"Fin set ({vehicle.fins.count} fins)")
        fins.add(f"Root chord: {vehicle.fins.root_chord * 1e3:.1f} mm")
        fins.add(f"Tip chord: {vehicle.fins.tip_chord * 1e3:.1f} mm")
        fins.add(f"Semi-span: {vehicle.fins.semi_span * 1e3:.1f} mm")
        fins.add(f"Position: {vehicle.fin_position * 1e3:.1f} mm")

    sw = tree.add("[cyan]Sweep[/cyan]")
    sw.add(f"Mach: {state.sweep.mach_start} to {state.sweep.mach_stop} (exclusive)")
    sw.add(f"Step: {state.sweep.mach_step}")
    sw.add(f"AOA: {state.sweep.aoa} deg")
    sw.add(f"Calculator: {state.sweep.calculator}")

    console.print(tree)


@design.command("check")
@click.argument("path", type=click.Path(exists=True))
@click.pass_context
def design_check(ctx: click.Context, path: str) -> None:
    """Run design rule checks on a design file."""
    console: Console = ctx.obj.get("console", Console())
    state = load_design_json(path)
    result = validate_vehicle(state.vehicle)

    if not result.messages:
        console.print("[green]No issues found.[/green]")
        return

    styles = {Severity.ERROR: "red", Severity.WARNING: "yellow", Severity.INFO: "dim"}
    table = Table(title=f"Design Check — {state.meta.name}")
    table.add_column("Severity")
    table.add_column("Parameter", style="cyan")
    table.add_column("Message")
    for msg in result:
        style = styles[msg.severity]
        table.add_row(f"[{style}]{msg.severity.value}[/{style}]", msg.parameter, msg.message)
    console.print(table)

    if not result.is_valid:
        raise SystemExit(1)
