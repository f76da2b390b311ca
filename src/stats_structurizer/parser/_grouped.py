"""Tables with "super headers" (grouped columns).

Example::

    Playing Time      Performance
    Squad   MP   Min  Gls  Ast
    Arsenal 20   1800 30   20

Group spans cannot be recovered from plain text alignment, so only the
known "Standard Stats" layout gets exact boundaries; anything else gets a
rough equal-width split or no groups at all.
"""
from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence

from .._types import ColumnGroup, DataRow, Table
from ._tokens import content_lines, split_strongest, tokenize
from ._vocab import ENTITY_HEADER_STARTS, STANDARD_LAYOUT

logger = logging.getLogger(__name__)

GROUPED_TITLE = "Team Stats Overview"
PLACEHOLDER_HEADER = "-"
MIN_ROW_VALUES = 4

# Leading name (no digits) followed by the stats run
_NAME_STATS_RE = re.compile(r"^([^\d]+)(.*)$")
_SUPER_SEGMENT_RE = re.compile(r"\t{2,}")


def _find_index(
    headers: Sequence[str], labels: Sequence[str], after: int
) -> int:
    """Index of the first header past *after* that is one of *labels*, else -1."""
    for i in range(after + 1, len(headers)):
        if headers[i] in labels:
            return i
    return -1


def _standard_layout_groups(headers: List[str]) -> List[ColumnGroup]:
    """Resolve the Playing Time / Performance / Per 90 Minutes spans.

    *headers* still includes the entity column at index 0.
    """
    groups: List[ColumnGroup] = []
    playing = STANDARD_LAYOUT["playing_time"]
    current = 1  # after the entity column

    pt_start = _find_index(headers, playing["starts"], 0)
    pt_end = _find_index(headers, playing["ends"], pt_start) if pt_start != -1 else -1
    if pt_start != -1 and pt_end != -1:
        groups.append(ColumnGroup(
            title=playing["title"],
            col_span=pt_end - pt_start + 1,
            offset=pt_start,
        ))
        current = pt_end + 1

    perf_end = -1
    for label in STANDARD_LAYOUT["performance"]["ends"]:
        perf_end = _find_index(headers, (label,), current)
        if perf_end != -1:
            break
    if current < len(headers) and perf_end != -1:
        groups.append(ColumnGroup(
            title=STANDARD_LAYOUT["performance"]["title"],
            col_span=perf_end - current + 1,
            offset=0 if groups else current,
        ))
        current = perf_end + 1

    if current < len(headers):
        groups.append(ColumnGroup(
            title=STANDARD_LAYOUT["per_90"]["title"],
            col_span=len(headers) - current,
            offset=0 if groups else current,
        ))
    return groups


def _equal_width_groups(super_line: str, headers: List[str]) -> List[ColumnGroup]:
    segments = [s.strip() for s in _SUPER_SEGMENT_RE.split(super_line) if s.strip()]
    if not 1 < len(segments) < len(headers):
        return []
    span = (len(headers) - 1) // len(segments)
    if span < 1:
        return []
    return [
        ColumnGroup(title=title, col_span=span, offset=1 if i == 0 else 0)
        for i, title in enumerate(segments)
    ]


def resolve_column_groups(super_line: str, headers: List[str]) -> List[ColumnGroup]:
    """Build column groups from the line sitting above the metric header row."""
    if all(label in super_line for label in STANDARD_LAYOUT["requires"]):
        return _standard_layout_groups(headers)
    return _equal_width_groups(super_line, headers)


def parse_grouped_table(text: str) -> List[Table]:
    """Parse a two-row-header table (category row above a metric row)."""
    lines = content_lines(text)

    header_index = -1
    entity_label: Optional[str] = None
    headers: List[str] = []
    for i, line in enumerate(lines):
        label = next((m for m in ENTITY_HEADER_STARTS if line.startswith(m)), None)
        if label:
            header_index, entity_label = i, label
            headers = split_strongest(line, min_tokens=3)
            break

    if header_index == -1:
        logger.debug("No grouped header row found")
        return []

    rows: List[DataRow] = []
    for line in lines[header_index + 1:]:
        match = _NAME_STATS_RE.match(line)
        if not match:
            continue
        stats = tokenize(match.group(2))
        if len(stats) < MIN_ROW_VALUES:
            logger.debug("Dropping short grouped row: %r", line)
            continue
        rows.append(DataRow(metric=match.group(1).strip(), values=stats))

    groups: List[ColumnGroup] = []
    if header_index > 0:
        groups = resolve_column_groups(lines[header_index - 1], headers)

    # Row data decides the column count
    widest = max((len(r.values) for r in rows), default=0)
    if len(headers) < widest + 1:
        headers.extend([PLACEHOLDER_HEADER] * (widest + 1 - len(headers)))

    return [Table(
        title=GROUPED_TITLE,
        first_column_header=entity_label,
        headers=headers[1:],
        rows=rows,
        column_groups=groups or None,
    )]
