"""Concrete renderers selected by --format.

The console renderer draws to the terminal. The markdown and json renderers
write the report to stdout and everything else to stderr, so
``codemedic bom --format md > bom.md`` produces a clean file.
"""

from __future__ import annotations

import json
import sys
from typing import Any, Awaitable, Callable, TextIO, TypeVar

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from codemedic_cli import __version__
from codemedic_core.report import Report, ReportTable

T = TypeVar("T")

CODEMEDIC_BANNER = r"""
   ___          _        __  __          _ _
  / __|___   __| | ___  |  \/  | ___  __| (_) ___
 | (__/ _ \ / _` |/ -_) | |\/| |/ -_)/ _` | |/ __|
  \___\___/ \__,_|\___| |_|  |_|\___|\__,_|_|\___|
"""

FORMATS = ("console", "markdown", "md", "json")


class UnknownFormatError(ValueError):
    """Raised for a --format value with no renderer."""


def _as_mapping(report: Any) -> Any:
    to_dict = getattr(report, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return report


class ConsoleRenderer:
    """Rich terminal output with a spinner while the analysis runs."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_banner(self) -> None:
        self.console.print(f"[bold cyan]{CODEMEDIC_BANNER}[/bold cyan]", highlight=False)
        self.console.print(f"  CodeMedic v{__version__} - repository health toolkit\n")

    def render_section_header(self, text: str) -> None:
        self.console.rule(f"[bold]{escape(text)}[/bold]")

    async def render_wait(self, message: str, action: Callable[[], Awaitable[T]]) -> T:
        with self.console.status(escape(message), spinner="dots"):
            result = await action()
        self.console.print(f"[green]\u2713[/green] {escape(message.rstrip('.'))}")
        return result

    def render_report(self, report: Any) -> None:
        if not isinstance(report, Report):
            self.console.print(_as_mapping(report), markup=False)
            return

        summary = Table(title=escape(report.title), show_header=True, header_style="bold magenta")
        summary.add_column("Metric", style="dim")
        summary.add_column("Value", justify="right")
        for key, value in report.summary.items():
            summary.add_row(escape(str(key)), escape(str(value)))
        self.console.print(summary)
        self.console.print()

        for section in report.tables:
            self.console.print(self._table(section))
            self.console.print()

    @staticmethod
    def _table(section: ReportTable) -> Table:
        table = Table(title=escape(section.title), show_header=True, header_style="bold green")
        for column in section.columns:
            table.add_column(escape(column))
        if not section.rows:
            table.add_row(*(["(none)"] + [""] * (len(section.columns) - 1)))
        for row in section.rows:
            table.add_row(*(escape(str(cell)) for cell in row))
        return table


def _escape_cell(value: Any) -> str:
    return str(value).replace("|", "\\|").replace("\n", " ")


class MarkdownRenderer:
    """Markdown document on ``out``; progress messages on ``err``."""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def _write(self, text: str = "") -> None:
        print(text, file=self.out)

    def render_banner(self) -> None:
        self._write(f"# CodeMedic v{__version__}")
        self._write()

    def render_section_header(self, text: str) -> None:
        self._write(f"## {text}")
        self._write()

    async def render_wait(self, message: str, action: Callable[[], Awaitable[T]]) -> T:
        print(message, file=self.err, flush=True)
        return await action()

    def render_report(self, report: Any) -> None:
        if not isinstance(report, Report):
            self._write("```json")
            self._write(json.dumps(_as_mapping(report), indent=2, default=str))
            self._write("```")
            return

        self._write("| Metric | Value |")
        self._write("| --- | --- |")
        for key, value in report.summary.items():
            self._write(f"| {_escape_cell(key)} | {_escape_cell(value)} |")
        self._write()

        for section in report.tables:
            self._write(f"### {section.title}")
            self._write()
            if not section.rows:
                self._write("_None found._")
                self._write()
                continue
            self._write("| " + " | ".join(_escape_cell(c) for c in section.columns) + " |")
            self._write("|" + " --- |" * len(section.columns))
            for row in section.rows:
                self._write("| " + " | ".join(_escape_cell(c) for c in row) + " |")
            self._write()


class JsonRenderer:
    """Only the report goes to ``out``, as JSON."""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def render_banner(self) -> None:
        print(f"CodeMedic v{__version__}", file=self.err)

    def render_section_header(self, text: str) -> None:
        print(text, file=self.err)

    async def render_wait(self, message: str, action: Callable[[], Awaitable[T]]) -> T:
        print(message, file=self.err, flush=True)
        return await action()

    def render_report(self, report: Any) -> None:
        print(json.dumps(_as_mapping(report), indent=2, default=str), file=self.out)


def create_renderer(fmt: str):
    """Return the renderer for a --format value.

    Raises:
        UnknownFormatError: If ``fmt`` is not one of FORMATS.
    """
    fmt = fmt.lower()
    if fmt == "console":
        return ConsoleRenderer()
    if fmt in ("markdown", "md"):
        return MarkdownRenderer()
    if fmt == "json":
        return JsonRenderer()
    raise UnknownFormatError(
        f"Unknown format '{fmt}'. Choose one of: {', '.join(FORMATS)}"
    )
