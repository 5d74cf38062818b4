"""Rich table rendering helpers."""

from __future__ import annotations

import json
from typing import Any, Sequence

from rich.table import Table


def cell(value: Any) -> str:
    """Render one table cell; nested API objects are shown as compact JSON."""
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False, default=str)
    return str(value)


def make_table(
    title: str | None,
    columns: Sequence[str],
    rows: Sequence[Sequence[Any]],
) -> Table:
    """Build a Rich Table from column headers and row data."""
    table = Table(title=title)
    for col in columns:
        table.add_column(col, no_wrap=False)
    for row in rows:
        table.add_row(*(cell(value) for value in row))
    return table


def kv_table(data: dict[str, Any], *, title: str | None = None) -> Table:
    """Render a resource as a two-column table, one row per top-level field."""
    table = Table(title=title, show_header=False)
    table.add_column("Field", style="bold cyan", no_wrap=True)
    table.add_column("Value")
    for key, value in data.items():
        table.add_row(key, cell(value))
    return table
