"""Fixed vocabularies used by the detection and parsing heuristics.

Extend these tables to teach the parser a new source layout; the strategies
only ever read them.
"""
from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------
ENTITY_COLUMN_MARKERS = ("Squad", "Equipa")

# Lines that open a grouped-header table's metric row
ENTITY_HEADER_STARTS = ("Squad", "Team", "Equipa")

RANK_MARKERS = ("Rk", "#")

GROUP_CATEGORIES = ("Playing Time", "Performance", "Per 90 Minutes")

CREST_MARKER = "Club Crest"

FOOTER_MARKERS = ("Lê mais em", "Read more at")

# ---------------------------------------------------------------------------
# Header tuples
# ---------------------------------------------------------------------------
# Line-anchored tuples, longest first so "Casa Fora Global" wins over "Casa Global"
ROW_HEADER_TUPLES = tuple(sorted(
    [
        ("Casa", "Fora", "Global"),
        ("Casa", "Global"),
        ("Home", "Away", "Global"),
        ("Home", "Away", "Total"),
        ("Home", "Total"),
        ("C", "F", "G"),
    ],
    key=len,
    reverse=True,
))

STREAM_HEADER_TUPLES = (
    ("Casa", "Fora", "Global"),
    ("Home", "Away", "Total"),
    ("C", "F", "G"),
    ("C", "F", "T"),
    ("H", "A", "T"),
)

# ---------------------------------------------------------------------------
# Known grouped layout ("Standard Stats")
# ---------------------------------------------------------------------------
STANDARD_LAYOUT = {
    "requires": GROUP_CATEGORIES,
    "playing_time": {
        "title": "Playing Time",
        "starts": ("# Pl", "MP", "Age"),
        "ends": ("90s",),
    },
    "performance": {
        "title": "Performance",
        "ends": ("CrdR", "CrdY"),  # checked in order
    },
    "per_90": {"title": "Per 90 Minutes"},
}

# ---------------------------------------------------------------------------
# League headers written with plain spaces
# ---------------------------------------------------------------------------
VENUE_QUALIFIERS = ("Home", "Away")

QUALIFIED_METRICS = frozenset([
    "MP", "W", "D", "L", "GF", "GA", "GD", "Pts", "Pts/MP",
    "xG", "xGA", "xGD", "xGD/90", "Attendance",
])

# ---------------------------------------------------------------------------
# Value shapes
# ---------------------------------------------------------------------------
CONNECTOR_WORDS = ("em", "of", "de", "in")

NUMBER_RE = re.compile(r"^[-+]?[\d.,]+$")

STREAM_VALUE_RE = re.compile(r"^(?:[-+]?[\d.,]+%?|-)$")

TRAILING_VALUE_RE = re.compile(
    r"(?<!\s)(\s+)([-+]?[\d.,]+\s?%?|-|\d+\s+(?:" + "|".join(CONNECTOR_WORDS) + r")\s+\d+)$",
    re.IGNORECASE,
)

FOOTER_LINE_RE = re.compile(
    r"^(?:" + "|".join(re.escape(m) for m in FOOTER_MARKERS) + r")",
    re.IGNORECASE,
)

# Footer marker through end of text
FOOTER_TAIL_RE = re.compile(
    r"(?:" + "|".join(re.escape(m) for m in FOOTER_MARKERS) + r").*",
    re.IGNORECASE | re.DOTALL,
)

FLATTENED_CELL_RE = re.compile(
    r"^(?:" + "|".join(re.escape(c) for c in GROUP_CATEGORIES) + r")\s+\S"
)
