"""Deterministic text-to-table extraction for pasted sports statistics.

Public API
----------
- ``parse(text)`` — every table found in *text* (possibly empty, never raises)
- ``detect_signature(text)`` — the marker flags the dispatcher keys on
- ``select_strategy(signature)`` — name of the first strategy that would run

Strategies are tried in a fixed order. The first three commit once their
markers are present, even when they extract nothing; the row-based parser
falls through to the token-stream parser when it finds no tables.
"""
from __future__ import annotations

import logging
from typing import Callable, List, NamedTuple

from .._types import Signature, Table
from ._flattened import parse_flattened_table
from ._grouped import parse_grouped_table
from ._league import parse_league_table
from ._row_based import parse_row_based_tables
from ._signature import detect_signature
from ._token_stream import parse_token_stream_tables

logger = logging.getLogger(__name__)

__all__ = [
    "parse",
    "detect_signature",
    "select_strategy",
    "STRATEGIES",
    "parse_flattened_table",
    "parse_grouped_table",
    "parse_league_table",
    "parse_row_based_tables",
    "parse_token_stream_tables",
]


class Strategy(NamedTuple):
    name: str
    applies: Callable[[Signature], bool]
    run: Callable[[str], List[Table]]
    commits: bool  # return the result even when empty


STRATEGIES = (
    Strategy(
        "flattened",
        lambda s: s.has_flattened_headers,
        parse_flattened_table,
        True,
    ),
    Strategy(
        "grouped",
        lambda s: s.has_entity_column and s.has_group_headers,
        parse_grouped_table,
        True,
    ),
    Strategy(
        "league",
        lambda s: (s.has_rank_marker and s.has_entity_column) or s.has_crest_marker,
        parse_league_table,
        True,
    ),
    Strategy("row_based", lambda s: True, parse_row_based_tables, False),
    Strategy("token_stream", lambda s: True, parse_token_stream_tables, True),
)


def select_strategy(signature: Signature) -> str:
    """Name of the first strategy whose markers match *signature*."""
    return next(s.name for s in STRATEGIES if s.applies(signature))


def _run(strategy: Strategy, text: str) -> List[Table]:
    try:
        return strategy.run(text)
    except Exception:
        logger.exception("Strategy %s failed; treating as no tables", strategy.name)
        return []


def parse(text: str) -> List[Table]:
    """Convert pasted statistics text into tables.

    Args:
        text: Raw copy-pasted text.

    Returns:
        List of Table, empty when nothing recognizable was found.
    """
    if not text or not text.strip():
        return []

    signature = detect_signature(text)
    for strategy in STRATEGIES:
        if not strategy.applies(signature):
            continue
        tables = _run(strategy, text)
        if tables or strategy.commits:
            logger.debug("Strategy %s produced %d tables", strategy.name, len(tables))
            return tables
        logger.debug("Strategy %s found nothing, falling through", strategy.name)
    return []
