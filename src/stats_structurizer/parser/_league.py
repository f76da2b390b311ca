"""League tables: rank, multi-word club name, then a run of numbers.

Example (the crest placeholder is pasted in by some sites)::

    Rk  Squad  MP  W  D  L  GF  GA  GD  Pts  Pts/MP
    1   Club Crest Manchester City  11  8  2  1  27  8  +19  26  2.36
"""
from __future__ import annotations

import logging
import re
from typing import List, Optional

from .._types import DataRow, Table
from ._tokens import TAB, content_lines, tokenize
from ._vocab import (
    CREST_MARKER,
    ENTITY_COLUMN_MARKERS,
    NUMBER_RE,
    QUALIFIED_METRICS,
    RANK_MARKERS,
    VENUE_QUALIFIERS,
)

logger = logging.getLogger(__name__)

LEAGUE_TITLE = "League Table"
DEFAULT_RANK_HEADER = "Rk"

_CREST_RE = re.compile(re.escape(CREST_MARKER), re.IGNORECASE)


def _is_header_line(line: str) -> bool:
    return line.startswith(RANK_MARKERS) and any(
        m in line for m in ENTITY_COLUMN_MARKERS
    )


def join_venue_qualifiers(tokens: List[str]) -> List[str]:
    """Re-join "Home"/"Away" with the metric that follows it.

    ``["Home", "MP", "Away", "Pts"]`` -> ``["Home MP", "Away Pts"]``
    """
    joined: List[str] = []
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if (
            token in VENUE_QUALIFIERS
            and i + 1 < len(tokens)
            and tokens[i + 1] in QUALIFIED_METRICS
        ):
            joined.append(f"{token} {tokens[i + 1]}")
            i += 2
            continue
        joined.append(token)
        i += 1
    return joined


def split_header_line(line: str) -> List[str]:
    """Split a league header row, tabs first, plain spaces as a fallback."""
    if TAB in line:
        return [c.strip() for c in line.split(TAB) if c.strip()]
    return join_venue_qualifiers(tokenize(line))


def parse_league_row(line: str) -> Optional[DataRow]:
    """Split ``<rank> <name words...> <numbers...>`` into a row, or None."""
    tokens = tokenize(line)
    if len(tokens) < 3 or not NUMBER_RE.match(tokens[0]):
        return None

    stats_start = next(
        (i for i in range(1, len(tokens)) if NUMBER_RE.match(tokens[i])), -1
    )
    if stats_start == -1:
        return None

    name = " ".join(tokens[1:stats_start])
    return DataRow(metric=tokens[0], values=[name, *tokens[stats_start:]])


def parse_league_table(text: str) -> List[Table]:
    """Parse a ranked league table into a single Table."""
    rows: List[DataRow] = []
    headers: List[str] = []
    first_column_header = DEFAULT_RANK_HEADER

    for raw in content_lines(text):
        line = _CREST_RE.sub("", raw).strip()

        if _is_header_line(line):
            header_tokens = split_header_line(line)
            entity_index = next(
                (i for i, t in enumerate(header_tokens) if t in ENTITY_COLUMN_MARKERS),
                -1,
            )
            first_column_header = header_tokens[0]
            headers = header_tokens[entity_index:] if entity_index != -1 else header_tokens[2:]
            continue

        row = parse_league_row(line)
        if row is None:
            logger.debug("Dropping non-league line: %r", line)
            continue
        rows.append(row)

    if rows and not headers:
        width = max(len(r.values) for r in rows)
        headers = [f"Col {i + 1}" for i in range(width)]

    return [Table(
        title=LEAGUE_TITLE,
        first_column_header=first_column_header,
        headers=headers,
        rows=rows,
    )]
