"""Generic report container handed to renderers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ReportTable:
    """A titled table of string cells."""

    title: str
    columns: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "columns": list(self.columns),
            "rows": [list(row) for row in self.rows],
        }


@dataclass
class Report:
    """Result of an analysis command.

    Attributes:
        title: Report title.
        summary: Ordered key/value overview (must be JSON-serializable).
        tables: Detail tables.
    """

    title: str
    summary: dict[str, Any] = field(default_factory=dict)
    tables: list[ReportTable] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "summary": dict(self.summary),
            "tables": [table.to_dict() for table in self.tables],
        }
