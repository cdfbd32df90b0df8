"""Typer CLI entrypoints."""

from __future__ import annotations

from typing import Annotated

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from small_step_simple.builders import Literal, lift
from small_step_simple.config.settings import load_settings
from small_step_simple.core.ast import Expression
from small_step_simple.core.environment import Environment
from small_step_simple.core.errors import SimpleError
from small_step_simple.eval.machine import Machine, run_bounded
from small_step_simple.logging_utils import configure_logging
from small_step_simple.programs import PROGRAMS, get_program

app = typer.Typer(name="small-step-simple", help="Small-step evaluator for the SIMPLE language", add_completion=False)
console = Console()


def _parse_binding(raw: str) -> tuple[str, Literal]:
    name, sep, text = raw.partition("=")
    name, text = name.strip(), text.strip().lower()
    if not sep or not name or not text:
        raise typer.BadParameter(f"expected name=value, got {raw!r}", param_hint="--set")
    if text in ("true", "false"):
        return name, text == "true"
    try:
        return name, int(text)
    except ValueError:
        raise typer.BadParameter(f"value for {name!r} must be an integer or true/false", param_hint="--set") from None


def _parse_bindings(values: list[str] | None) -> dict[str, Expression]:
    bindings: dict[str, Expression] = {}
    for raw in values or []:
        name, value = _parse_binding(raw)
        bindings[name] = lift(value)
    return bindings


def _print_step(expression: Expression, environment: Environment) -> None:
    console.print(f"{expression}  [dim]{environment}[/dim]", highlight=False)


def _print_environment(bindings: dict[str, Expression]) -> None:
    table = Table(title="Final environment")
    table.add_column("name")
    table.add_column("value")
    for name in sorted(bindings):
        table.add_row(name, str(bindings[name]))
    console.print(table)


@app.command("programs")
def list_programs() -> None:
    """List the bundled example programs."""
    table = Table(title="Programs")
    table.add_column("name", style="bold", no_wrap=True)
    table.add_column("description")
    table.add_column("program")
    for program in PROGRAMS.values():
        table.add_row(program.name, program.description, str(program.expression))
    console.print(table)


@app.command()
def run(
    name: Annotated[str, typer.Argument(help="Program name, see `programs`")],
    bindings: Annotated[
        list[str] | None,
        typer.Option("--set", "-s", help="Initial binding name=value (repeatable), overrides the program's own."),
    ] = None,
    max_steps: Annotated[int | None, typer.Option("--max-steps", min=1, help="Give up after this many steps.")] = None,
    trace: Annotated[
        bool | None, typer.Option("--trace/--no-trace", help="Print every intermediate expression.")
    ] = None,
) -> None:
    """Run an example program to completion and print the final bindings."""

    configure_logging(profile="cli")
    settings = load_settings(trace=trace, max_steps=max_steps)
    try:
        program = get_program(name)
    except KeyError as exc:
        raise typer.BadParameter(exc.args[0], param_hint="NAME") from None

    initial = {**program.environment, **_parse_bindings(bindings)}
    logger.info("run.start program={} max_steps={}", name, settings.max_steps or "<unbounded>")
    try:
        machine = Machine(program.expression, initial, trace=_print_step if settings.trace else None)
        if settings.max_steps is None:
            machine.run()
        else:
            run_bounded(machine, settings.max_steps)
    except SimpleError as exc:
        logger.error("run.failed program={} error={}", name, exc)
        console.print(f"[red]Error:[/red] {exc}", highlight=False)
        raise typer.Exit(code=1) from None

    logger.info("run.done program={} steps={}", name, machine.steps)
    console.print(f"[green]Halted[/green] after {machine.steps} steps: {machine.expression}", highlight=False)
    _print_environment(machine.current_environment())
