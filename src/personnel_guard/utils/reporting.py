"""Summaries of a validation run for the console and for JSON export."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.grammar import GrammarConfig
from ..core.scanner import ScanResult
from ..core.validator import ValidationResult


@dataclass(frozen=True)
class ValidationReport:
    """Everything known about one run: inputs, scan outcome and schema outcome.

    ``validation`` is ``None`` when scanning failed and the schema was never
    consulted.
    """

    data_path: str
    grammar: GrammarConfig
    scan: ScanResult
    validation: Optional[ValidationResult] = None

    @property
    def is_valid(self) -> bool:
        return self.scan.is_valid and self.validation is not None and self.validation.is_valid

    @property
    def error_message(self) -> str | None:
        if self.scan.error is not None:
            return self.scan.error.message
        if self.validation is not None and self.validation.error is not None:
            return self.validation.error.message
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "data_path": self.data_path,
            "is_valid": self.is_valid,
            "grammar": self.grammar.to_dict(),
            "scan": self.scan.to_dict(),
            "validation": self.validation.to_dict() if self.validation else None,
        }

    def to_json(self, path: str | Path) -> Path:
        output = Path(path)
        output.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
        return output

    def to_console(self, console: Console | None = None, verbose: bool = False) -> None:
        console = console or Console()
        status = "[green]PASSED[/green]" if self.is_valid else "[red]FAILED[/red]"
        console.print(f"Validation {status} for {escape(self.data_path)}")
        console.print(f"Rows scanned: {self.scan.rows}")
        if self.validation is not None:
            console.print(f"Data rows checked: {self.validation.rows_checked} ({self.validation.backend} backend)")
        if self.error_message:
            console.print(f"[red]{escape(self.error_message)}[/red]", highlight=False)
        if verbose and self.scan.is_valid:
            console.print(rows_table(self.scan))


def rows_table(scan: ScanResult, title: str = "Parsed rows") -> Table:
    """Render the scanned document as a table, one line per row."""
    table = Table(title=title)
    table.add_column("#", justify="right")
    width = max((len(row) for row in scan.document), default=0)
    for index in range(width):
        table.add_column(f"Field {index + 1}")
    for number, row in enumerate(scan.document, start=1):
        cells = [escape(cell) for cell in row] + [""] * (width - len(row))
        table.add_row(str(number), *cells)
    return table
