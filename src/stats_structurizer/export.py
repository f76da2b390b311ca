"""Serialization and clipboard-style exports for parsed tables.

- JSON: lossless camelCase dump of every field.
- TSV + HTML: the two halves of a spreadsheet paste (plain text and markup).
- DataFrame: pandas view with the row keys as index.
"""
from __future__ import annotations

import html
import json
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from ._types import Table

DEFAULT_FIRST_COLUMN_HEADER = "Metric"

# Header labels that name an entity (team/player) rather than a statistic
ENTITY_COLUMN_KEYWORDS = (
    "squad", "team", "club", "equipa", "time", "clube",
    "seleção", "player", "jogador", "atleta", "nome",
)

EXPORT_FORMATS = ("json", "tsv", "html")

_TH_STYLE = "background-color: #f9fafb; font-weight: bold; padding: 5px;"
_TD_KEY_STYLE = "padding: 5px; white-space: nowrap;"
_TD_VALUE_STYLE = "padding: 5px; text-align: center;"


def is_entity_column(header: str) -> bool:
    """True if *header* looks like an entity-name column (exact or substring match)."""
    h = header.lower().strip()
    return any(h == k or k in h for k in ENTITY_COLUMN_KEYWORDS)


def first_column_label(table: Table) -> str:
    """Label for the row-key column, falling back to the display default."""
    if table.first_column_header is None:
        return DEFAULT_FIRST_COLUMN_HEADER
    return table.first_column_header


def table_to_dict(table: Table) -> Dict[str, Any]:
    """Plain dict with camelCase keys; optional fields are omitted when unset."""
    return table.model_dump(mode="json", by_alias=True, exclude_none=True)


def tables_to_json(tables: Sequence[Table], indent: Optional[int] = 2) -> str:
    """Serialize *tables* to a JSON array."""
    return json.dumps(
        [table_to_dict(t) for t in tables], indent=indent, ensure_ascii=False
    )


def table_to_tsv(table: Table) -> str:
    """Tab-separated text: header row, then one line per row."""
    lines = ["\t".join([first_column_label(table), *table.headers])]
    for row in table.rows:
        lines.append("\t".join([row.metric, *row.values]))
    return "\n".join(lines)


def table_to_html(table: Table) -> str:
    """Bordered HTML table suitable for pasting into a spreadsheet."""
    esc = html.escape
    parts = [
        '<html><head><meta charset="utf-8"></head><body>',
        '<table border="1" style="border-collapse: collapse;">',
        "<thead><tr>",
    ]
    for header in [first_column_label(table), *table.headers]:
        parts.append(f'<th style="{_TH_STYLE}">{esc(header)}</th>')
    parts.append("</tr></thead><tbody>")

    for row in table.rows:
        parts.append("<tr>")
        parts.append(f'<td style="{_TD_KEY_STYLE}">{esc(row.metric)}</td>')
        for value in row.values:
            parts.append(f'<td style="{_TD_VALUE_STYLE}">{esc(value)}</td>')
        parts.append("</tr>")

    parts.append("</tbody></table></body></html>")
    return "".join(parts)


def column_group_labels(table: Table) -> List[str]:
    """Group title for each header column ("" where ungrouped)."""
    labels = [""] * len(table.headers)
    # Offsets count the row-key column, headers do not
    position = 0
    for group in table.column_groups or []:
        position += group.offset
        for col in range(position, position + group.col_span):
            if 1 <= col <= len(labels):
                labels[col - 1] = group.title
        position += group.col_span
    return labels


def table_to_dataframe(table: Table) -> pd.DataFrame:
    """Build a DataFrame indexed by row key with one column per header.

    Rows are padded with None or truncated to the header width. Grouped
    tables get two-level columns (group, metric).
    """
    width = len(table.headers)
    data = [
        (list(row.values) + [None] * width)[:width]
        for row in table.rows
    ]
    index = pd.Index([row.metric for row in table.rows], name=first_column_label(table))

    if table.column_groups:
        columns = pd.MultiIndex.from_arrays([column_group_labels(table), table.headers])
    else:
        columns = pd.Index(table.headers)

    return pd.DataFrame(data, index=index, columns=columns, dtype=object)


def export_table(table: Table, fmt: str) -> str:
    """Render one table in *fmt* ('json', 'tsv' or 'html').

    Raises:
        ValueError: If *fmt* is not a supported format.
    """
    if fmt == "json":
        return json.dumps(table_to_dict(table), indent=2, ensure_ascii=False)
    if fmt == "tsv":
        return table_to_tsv(table)
    if fmt == "html":
        return table_to_html(table)
    raise ValueError(f"Unsupported export format: {fmt} (choose from {', '.join(EXPORT_FORMATS)})")
