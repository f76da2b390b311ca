"""Line and token splitting shared by every strategy."""
from __future__ import annotations

import re
from typing import List

from ._vocab import FOOTER_LINE_RE

TAB = "\t"
MULTI_SPACE = "  "

_SPLIT_PATTERNS = {
    TAB: re.compile(r"\t"),
    MULTI_SPACE: re.compile(r" {2,}"),
}

# Tab runs or 2+ spaces (mixed freely), then any whitespace
_FALLBACK_PATTERNS = (
    re.compile(r"\t+| {2,}"),
    re.compile(r"\s+"),
)


def content_lines(
    text: str, skip_footer: bool = True, strip: bool = True
) -> List[str]:
    """Return the non-blank lines of *text*, stripped unless *strip* is False.

    Footer lines ("Read more at ...") are dropped unless *skip_footer* is False.
    Unstripped lines only lose their line ending, so edge cells survive.
    """
    lines = []
    for raw in text.split("\n"):
        line = raw.strip()
        if not line:
            continue
        if skip_footer and FOOTER_LINE_RE.match(line):
            continue
        lines.append(line if strip else raw.rstrip("\r"))
    return lines


def tokenize(line: str) -> List[str]:
    """Split on any run of whitespace."""
    return line.split()


def detect_delimiter(line: str) -> str:
    """Pick the strongest delimiter present in *line*: tab, else 2+ spaces."""
    return TAB if TAB in line else MULTI_SPACE


def split_cells(line: str, delimiter: str) -> List[str]:
    """Split *line* on *delimiter* keeping cells verbatim.

    Tab splitting is exact (one tab, one boundary) so cells re-join to the
    source text.
    """
    return _SPLIT_PATTERNS[delimiter].split(line)


def split_strongest(line: str, min_tokens: int = 3) -> List[str]:
    """Split with progressively weaker delimiters until *min_tokens* cells result."""
    cells: List[str] = []
    for pattern in _FALLBACK_PATTERNS:
        cells = [c.strip() for c in pattern.split(line) if c.strip()]
        if len(cells) >= min_tokens:
            break
    return cells
