"""Command-line interface for personnel-guard."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from . import ConfigError, __version__, check_file, configure_logging, load_grammar_config, scan_file
from .backends import BackendFactory
from .utils.reporting import rows_table

app = typer.Typer(
    name="personnel-guard",
    help="personnel-guard: validate delimited personnel records before import",
    add_completion=False,
)
console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

USAGE_ERROR = "File and configuration paths are required."


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"personnel-guard version {__version__}")
        raise typer.Exit()


def fail(message: str) -> typer.Exit:
    err_console.print(escape(message), style="red", highlight=False)
    return typer.Exit(1)


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """personnel-guard: strict pre-import validation of personnel records."""
    pass


@app.command()
def validate(
    file: Optional[Path] = typer.Argument(None, help="Record file to validate"),
    config: Optional[Path] = typer.Argument(None, help="Grammar configuration JSON file"),
    backend: str = typer.Option(
        "native",
        "--backend",
        "-b",
        help=f"Validation backend ({', '.join(BackendFactory.available())})",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write a JSON report to this file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Print a run summary and the parsed rows",
    ),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        help="Log level for diagnostics written to stderr",
    ),
    json_logs: bool = typer.Option(
        False,
        "--json-logs",
        help="Emit logs as JSON",
    ),
) -> None:
    """
    Validate a record file against its grammar and the personnel schema.

    Example:
        personnel-guard validate people.csv grammar.json --output report.json
    """
    if file is None or config is None:
        raise fail(USAGE_ERROR)

    configure_logging(level=log_level, json_logs=json_logs)
    if backend.lower() not in BackendFactory.available():
        raise fail(f"Unknown backend '{backend}'")

    try:
        report = check_file(file, config, backend=backend)
    except ConfigError as e:
        raise fail(str(e))
    except FileNotFoundError as e:
        raise fail(f"Error: File not found: {e.filename}")
    except UnicodeDecodeError as e:
        raise fail(f"Error: {file} is not valid UTF-8 text: {e.reason}")

    if output is not None:
        report.to_json(output)
        if verbose:
            console.print(f"[green]✓[/green] Report saved to {escape(str(output))}")

    if verbose:
        report.to_console(console, verbose=True)

    if not report.is_valid:
        raise fail(report.error_message or "Validation failed.")

    console.print("CSV data is valid.")


@app.command()
def scan(
    file: Path = typer.Argument(..., help="Record file to scan"),
    config: Path = typer.Argument(..., help="Grammar configuration JSON file"),
) -> None:
    """
    Scan a record file and print the rows it contains, without schema checks.

    Example:
        personnel-guard scan people.csv grammar.json
    """
    try:
        grammar = load_grammar_config(config)
        result = scan_file(file, grammar)
    except ConfigError as e:
        raise fail(str(e))
    except FileNotFoundError as e:
        raise fail(f"Error: File not found: {e.filename}")
    except UnicodeDecodeError as e:
        raise fail(f"Error: {file} is not valid UTF-8 text: {e.reason}")

    if not result.is_valid:
        raise fail(result.error.message)

    console.print(rows_table(result, title=str(file)))
    console.print(f"{result.rows} rows")


if __name__ == "__main__":
    app()
