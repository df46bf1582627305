"""Render catalog records as a table, JSON, YAML, or CSV.

Commands hand over records (a model, a list of models, a list of names,
or a plain dict) plus an optional :class:`Columns` projection. JSON and
YAML always serialize the full record through :func:`to_plain`; tables and
CSV use the projection to pick one row per record.
"""

from __future__ import annotations

import csv
import io
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

import yaml
from pydantic import BaseModel
from rich.console import Console

from ptcg_cli.output.tables import kv_table, make_table

console = Console()

FORMATS = ("table", "json", "yaml", "csv")


@dataclass(frozen=True)
class Columns:
    """Column headers plus the function that turns one record into a row."""

    headers: Sequence[str]
    row: Callable[[Any], Sequence[Any]]

    def rows(self, data: Any) -> list[Sequence[Any]]:
        records = data if isinstance(data, list) else [data]
        return [self.row(record) for record in records]


def to_plain(data: Any) -> Any:
    """Convert models (or lists of models) to JSON-compatible data."""
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", exclude_none=True)
    if isinstance(data, list):
        return [to_plain(item) for item in data]
    return data


def _json(data: Any, columns: Columns | None, title: str | None) -> None:
    console.print_json(data=to_plain(data), default=str)


def _yaml(data: Any, columns: Columns | None, title: str | None) -> None:
    text = yaml.safe_dump(
        to_plain(data), default_flow_style=False, sort_keys=False, allow_unicode=True
    )
    console.print(text, end="")


def _csv(data: Any, columns: Columns | None, title: str | None) -> None:
    # Without a projection there is no row shape; nested records stay readable as JSON.
    if columns is None:
        _json(data, columns, title)
        return
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(columns.headers)
    for row in columns.rows(data):
        writer.writerow(["" if v is None else v for v in row])
    console.print(buf.getvalue(), end="")


def _table(data: Any, columns: Columns | None, title: str | None) -> None:
    if columns is not None:
        console.print(make_table(title, columns.headers, columns.rows(data)))
        return
    plain = to_plain(data)
    if isinstance(plain, dict):
        console.print(kv_table(plain, title=title))
    else:
        console.print(plain)


_RENDERERS: dict[str, Callable[[Any, Columns | None, str | None], None]] = {
    "table": _table,
    "json": _json,
    "yaml": _yaml,
    "csv": _csv,
}


def render(
    data: Any,
    fmt: str = "table",
    *,
    columns: Columns | None = None,
    title: str | None = None,
) -> None:
    """Print *data* in *fmt*; raises ValueError for an unknown format."""
    try:
        renderer = _RENDERERS[fmt]
    except KeyError:
        raise ValueError(
            f"Unknown output format '{fmt}' (expected one of: {', '.join(FORMATS)})"
        ) from None
    renderer(data, columns, title)
