"""Tables whose group names are already folded into each header cell.

Example::

    Squad   Playing Time MP   Performance Gls   Per 90 Minutes Gls
    Arsenal 22                37                1.68
"""
from __future__ import annotations

import logging
from typing import List

from .._types import DataRow, Table
from ._signature import is_flattened_header
from ._tokens import TAB, content_lines, detect_delimiter, split_cells

logger = logging.getLogger(__name__)

FLATTENED_TITLE = "Team Stats"


def parse_flattened_table(text: str) -> List[Table]:
    """Parse a single-header-row table with "<Group> <Metric>" header cells."""
    lines = content_lines(text, strip=False)

    header_index = next(
        (i for i, line in enumerate(lines) if is_flattened_header(line)), -1
    )
    if header_index == -1:
        return []

    header_line = lines[header_index].strip()
    delimiter = detect_delimiter(header_line)
    header_cells = [c.strip() for c in split_cells(header_line, delimiter)]

    rows: List[DataRow] = []
    for line in lines[header_index + 1:]:
        # Tab rows keep empty edge cells; space-aligned rows lose their padding
        cells = split_cells(line if delimiter == TAB else line.strip(), delimiter)
        rows.append(DataRow(metric=cells[0].strip(), values=cells[1:]))

    logger.debug(
        "Flattened table: %d headers, %d rows", len(header_cells) - 1, len(rows)
    )
    return [Table(
        title=FLATTENED_TITLE,
        first_column_header=header_cells[0],
        headers=header_cells[1:],
        rows=rows,
    )]
