"""Line-by-line parser for several small titled tables pasted back to back.

Header lines end in a known column tuple ("Casa Fora Global"). Data rows are
read right-to-left: exactly one value per header is peeled off the end of the
line, and whatever is left is the metric name. This keeps metric names with
spaces and digits intact and supports composite values such as "1 em 3".
"""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .._types import DataRow, Table
from ._tokens import content_lines, tokenize
from ._vocab import ROW_HEADER_TUPLES, TRAILING_VALUE_RE

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Stats Table"


def match_trailing_header(
    tokens: Sequence[str],
    header_tuples: Sequence[Sequence[str]] = ROW_HEADER_TUPLES,
) -> Optional[List[str]]:
    """Return the first header tuple equal (case-insensitively) to the line's tail."""
    for candidate in header_tuples:
        if len(tokens) < len(candidate):
            continue
        tail = tokens[-len(candidate):]
        if all(t.lower() == h.lower() for t, h in zip(tail, candidate)):
            return list(candidate)
    return None


def strip_trailing_values(line: str, count: int) -> Optional[DataRow]:
    """Peel *count* value-shaped tokens off the end of *line*.

    Returns None unless all *count* values were found and a metric name remains.
    """
    values: List[str] = []
    remainder = line
    for _ in range(count):
        match = TRAILING_VALUE_RE.search(remainder)
        if not match:
            return None
        values.insert(0, match.group(2))
        remainder = remainder[:match.start()].strip()

    if not remainder:
        return None
    return DataRow(metric=remainder, values=values)


class RowBasedParser:
    """Sequential fold over lines; the attributes are the per-call state."""

    def __init__(self) -> None:
        self.tables: List[Table] = []
        self.current: Optional[Table] = None
        self.pending_title: Optional[str] = None

    def parse(self, text: str) -> List[Table]:
        for line in content_lines(text):
            self._consume(line)
        self._flush()
        logger.debug("Row-based parser produced %d tables", len(self.tables))
        return self.tables

    def _consume(self, line: str) -> None:
        headers = match_trailing_header(tokenize(line))
        if headers:
            self._flush()
            self.current = Table(
                title=self.pending_title or DEFAULT_TITLE,
                first_column_header="",
                headers=headers,
            )
            self.pending_title = None
            return

        if self.current is not None:
            row = strip_trailing_values(line, len(self.current.headers))
            if row is not None:
                self.current.rows.append(row)
                self.pending_title = None
                return

        # Only the most recent unmatched line is kept as the next title
        self.pending_title = line

    def _flush(self) -> None:
        if self.current is not None:
            self.tables.append(self.current)
            self.current = None


def parse_row_based_tables(text: str) -> List[Table]:
    """Parse every header-led mini table in *text*."""
    return RowBasedParser().parse(text)
