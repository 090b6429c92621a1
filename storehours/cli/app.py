"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Optional, Annotated

import pendulum
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from ..adapters.translation import CatalogTranslator
from ..config import StoreHoursConfig, get_default_config_path
from ..domain.exceptions import ConfigurationError
from ..services.schedule_evaluator import ScheduleEvaluator

app = typer.Typer(
    name="storehours",
    help="Show a store's opening hours and whether it is open right now",
    add_completion=False
)

console = Console()

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Path to config file. Defaults to ./storehours.yaml")
]
AtOption = Annotated[
    Optional[str],
    typer.Option("--at", help="Evaluate at this local time (YYYY-MM-DD HH:mm) instead of now")
]
TranslationsOption = Annotated[
    Optional[Path],
    typer.Option("--translations", "-t", help="YAML message catalog used instead of the configured translations")
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Show debug logging")
]


def _configure_logging(verbose: bool) -> None:
    """Route library logging through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=verbose)],
        force=True,
    )


def _build_evaluator(
    config_file: Optional[Path],
    at: Optional[str],
    translations_file: Optional[Path] = None,
) -> ScheduleEvaluator:
    """
    Load the configuration and create the evaluator.

    Exits with code 1 on configuration or argument errors.
    """
    try:
        config_path = config_file or get_default_config_path()
        config = StoreHoursConfig.load_from_yaml(config_path)
        translator = CatalogTranslator.load_from_yaml(translations_file) if translations_file else None
    except (FileNotFoundError, ConfigurationError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    clock = None
    if at:
        try:
            fixed = pendulum.from_format(at, "YYYY-MM-DD HH:mm", tz=config.timezone)
        except ValueError as e:
            console.print(f"[red]Could not parse --at value '{at}': {e}[/red]")
            raise typer.Exit(1)
        clock = lambda: fixed  # noqa: E731

    return ScheduleEvaluator(config=config, translator=translator, clock=clock)


@app.command()
def status(
    config_file: ConfigOption = None,
    at: AtOption = None,
    translations_file: TranslationsOption = None,
    verbose: VerboseOption = False,
):
    """
    Show whether the store is open and today's hours.

    Examples:

        storehours status
        storehours status --at "2024-11-25 17:45"
    """
    _configure_logging(verbose)
    evaluator = _build_evaluator(config_file, at, translations_file)
    result = evaluator.get_status()

    if result.is_nearly_closed:
        style = "bold yellow"
    elif result.is_open_now:
        style = "bold green"
    else:
        style = "bold red"

    lines = [f"[{style}]{result.label}[/{style}]", ""]
    lines.append(f"[bold]Today:[/bold] {result.today_opening_hours or evaluator.extract_opening_times([])}")
    if result.next_close_time:
        lines.append(f"[bold]Closes at:[/bold] {result.next_close_time}")

    console.print()
    console.print(Panel.fit(
        "\n".join(lines),
        title=result.now.format("dddd, YYYY-MM-DD HH:mm", locale="en")
    ))
    console.print()


@app.command()
def hours(
    config_file: ConfigOption = None,
    at: AtOption = None,
    translations_file: TranslationsOption = None,
    verbose: VerboseOption = False,
):
    """
    List the regular weekly hours and any special opening hours.
    """
    _configure_logging(verbose)
    evaluator = _build_evaluator(config_file, at, translations_file)

    table = Table(
        title="Opening hours",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Day", style="bold yellow")
    table.add_column("Hours")

    for row in evaluator.opening_hours_list:
        style = "bold green" if evaluator.is_current_day(row.day) else None
        table.add_row(row.day, row.hours, style=style)

    console.print()
    console.print(table)

    if evaluator.has_special_opening_hours():
        special_table = Table(
            title="Special opening hours",
            show_header=True,
            header_style="bold cyan"
        )
        special_table.add_column("Date", style="bold yellow")
        special_table.add_column("Hours")
        special_table.add_column("Note", style="dim")

        for row in evaluator.special_opening_hours_list:
            special_table.add_row(row.day, row.hours, row.description)

        console.print()
        console.print(special_table)

    console.print()


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]storehours[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
