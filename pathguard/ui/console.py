"""Console output for the pathguard CLI.

Renders path check results as a Rich table, or as one JSON object per line
when machine-readable output is requested.
"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ..errors import PathViolation


@dataclass
class PathReport:
    """Outcome of checking one input path."""

    path: str
    result: Optional[str] = None
    violation: Optional[PathViolation] = None

    @property
    def ok(self) -> bool:
        return self.violation is None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data: Dict[str, Any] = {"path": self.path, "ok": self.ok}
        if self.result is not None:
            data["result"] = self.result
        if self.violation is not None:
            data["violation"] = self.violation.to_dict()
        return data


@dataclass
class ConsoleManager:
    """Manages CLI output with Rich or JSON rendering."""

    verbose: bool = False
    json_output: bool = False
    console: Console = field(default_factory=Console)
    error_console: Console = field(default_factory=lambda: Console(stderr=True))

    def logging_handler(self) -> logging.Handler:
        """Build the console handler for the package logger."""
        if self.json_output:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter("%(message)s"))
            return handler
        return RichHandler(
            console=self.error_console,
            show_time=True,
            show_path=self.verbose,
            rich_tracebacks=True,
        )

    def print_reports(self, title: str, reports: List[PathReport]) -> None:
        """Print a batch of path reports."""
        if self.json_output:
            for report in reports:
                print(json.dumps(report.to_dict()))
            return

        table = Table(title=title)
        table.add_column("Path", style="cyan", overflow="fold")
        table.add_column("Status", style="bold", no_wrap=True)
        table.add_column("Kind", no_wrap=True)
        table.add_column("Detail", overflow="fold")

        for report in reports:
            if report.ok:
                table.add_row(
                    escape(repr(report.path)),
                    "[green]ok[/green]",
                    "",
                    escape(report.result or ""),
                )
            else:
                table.add_row(
                    escape(repr(report.path)),
                    "[red]rejected[/red]",
                    report.violation.kind.value,
                    escape(str(report.violation)),
                )

        self.console.print(table)

    def print_error(self, message: str) -> None:
        """Print an error that is not tied to a single path."""
        if self.json_output:
            print(json.dumps({"error": message}), file=sys.stderr)
        else:
            self.error_console.print(f"[bold red]Error:[/bold red] {escape(message)}")
