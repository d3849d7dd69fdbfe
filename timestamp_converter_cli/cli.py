"""Typer-based command line interface for the timestamp converter."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .errors import ConversionError, FormatError, MissingInputError
from .formatters import FORMATTERS
from .models import TimestampFormat
from .services import ConversionService, build_service

app = typer.Typer(
    help="Convert a timestamp between RFC 3339 and Unix epoch formats.",
    add_completion=False,
)


@dataclass(slots=True)
class AppState:
    console: Console
    err_console: Console
    service: ConversionService


def build_state(verbose: bool = False) -> AppState:
    err_console = Console(stderr=True)
    _configure_logging(err_console, verbose)
    return AppState(
        console=Console(),
        err_console=err_console,
        service=build_service(),
    )


def _configure_logging(console: Console, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _render_format_table(service: ConversionService) -> Table:
    table = Table(title="Formats", show_lines=False)
    table.add_column("Format", style="cyan")
    table.add_column("Input", style="green", justify="center")
    table.add_column("Output", style="magenta", justify="center")
    inputs = service.input_formats()
    outputs = service.output_formats()
    for name in dict.fromkeys(inputs + outputs):
        table.add_row(
            name,
            "yes" if name in inputs else "-",
            "yes" if name in outputs else "-",
        )
    return table


@app.command()
def convert(
    value: Optional[str] = typer.Option(
        None,
        "--input",
        help="Input date/time string.",
        show_default=False,
    ),
    in_format: str = typer.Option(
        "date",
        "--in-format",
        help=f"Input format: {', '.join(TimestampFormat.list())}.",
    ),
    out_format: str = typer.Option(
        "rfc3339",
        "--out-format",
        help=f"Output format: {', '.join(FORMATTERS)}.",
    ),
    list_formats: bool = typer.Option(
        False, "--list-formats", help="List the supported formats and exit."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log conversion steps to stderr."),
) -> None:
    state = build_state(verbose)
    if list_formats:
        state.console.print(_render_format_table(state.service))
        return
    try:
        if not value:
            raise MissingInputError()
        result = state.service.convert(value, in_format, out_format)
    except FormatError as exc:
        state.err_console.print(f"[red]Error parsing input:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)
    except ConversionError as exc:
        state.err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)
    state.console.print(result, markup=False, highlight=False, soft_wrap=True)
