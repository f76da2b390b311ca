"""Marker scan that decides which parsing strategy applies.

Pure substring checks over the raw text, no scoring.
"""
from __future__ import annotations

from typing import Iterable, List

from .._types import Signature
from ._tokens import MULTI_SPACE, TAB, detect_delimiter, split_cells
from ._vocab import (
    CREST_MARKER,
    ENTITY_COLUMN_MARKERS,
    FLATTENED_CELL_RE,
    GROUP_CATEGORIES,
    RANK_MARKERS,
)


def _contains_any(line: str, needles: Iterable[str]) -> bool:
    return any(n in line for n in needles)


def is_flattened_header(line: str) -> bool:
    """True if *line* is a header row whose cells already read "<Group> <Metric>"."""
    line = line.strip()
    if TAB not in line and MULTI_SPACE not in line:
        return False
    cells = [c.strip() for c in split_cells(line, detect_delimiter(line))]
    has_entity = any(c in ENTITY_COLUMN_MARKERS for c in cells)
    return has_entity and any(FLATTENED_CELL_RE.match(c) for c in cells)


def detect_signature(text: str) -> Signature:
    """Scan every line of *text* for the markers each strategy keys on."""
    lines: List[str] = [line for line in text.split("\n") if line.strip()]

    return Signature(
        has_entity_column=any(_contains_any(line, ENTITY_COLUMN_MARKERS) for line in lines),
        has_rank_marker=any(line.strip().startswith(RANK_MARKERS) for line in lines),
        has_group_headers=any(_contains_any(line, GROUP_CATEGORIES) for line in lines),
        has_flattened_headers=any(is_flattened_header(line) for line in lines),
        has_crest_marker=CREST_MARKER in text,
    )
