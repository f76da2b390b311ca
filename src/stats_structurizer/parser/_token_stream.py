"""Last-resort parser that ignores line breaks entirely.

The text is treated as one token stream. Header tuples may start anywhere;
after a header, every run of ``len(header)`` value tokens closes a row whose
metric name is whatever words were seen since the previous row. Values
with no metric name before them are read as part of the next name. When no
header ever shows up the words just pile into the metric buffer, so this
strategy only runs after everything else found nothing.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .._types import DataRow, Table
from ._tokens import tokenize
from ._vocab import FOOTER_TAIL_RE, STREAM_HEADER_TUPLES, STREAM_VALUE_RE

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Untitled Table"


class TokenStreamParser:
    """Two-mode consumer: accumulating a metric name or reading header/values."""

    def __init__(self, header_tuples: Sequence[Sequence[str]] = STREAM_HEADER_TUPLES) -> None:
        self.header_tuples = header_tuples
        self.tokens: List[str] = []
        self.tables: List[Table] = []
        self.current_headers: List[str] = []
        self.current_rows: List[DataRow] = []
        self.current_title_tokens: List[str] = []
        self.current_metric_tokens: List[str] = []

    @property
    def num_columns(self) -> int:
        return len(self.current_headers)

    def parse(self, text: str) -> List[Table]:
        cleaned = FOOTER_TAIL_RE.sub("", text).strip()
        self.tokens = tokenize(cleaned)

        i = 0
        while i < len(self.tokens):
            headers = self._match_header(i)
            if headers:
                self._open(headers)
                i += len(headers)
                continue

            # A value run only closes a row once a metric name has been read
            if (
                self.current_metric_tokens
                and self.current_headers
                and self._match_values(i, self.num_columns)
            ):
                self.current_rows.append(DataRow(
                    metric=" ".join(self.current_metric_tokens),
                    values=self.tokens[i:i + self.num_columns],
                ))
                self.current_metric_tokens = []
                i += self.num_columns
                continue

            self.current_metric_tokens.append(self.tokens[i])
            i += 1

        if self.current_headers:
            self._close()
        logger.debug("Token-stream parser produced %d tables", len(self.tables))
        return self.tables

    def _match_header(self, start: int) -> Optional[List[str]]:
        for candidate in self.header_tuples:
            end = start + len(candidate)
            if end > len(self.tokens):
                continue
            window = self.tokens[start:end]
            if all(t.lower() == h.lower() for t, h in zip(window, candidate)):
                return list(candidate)
        return None

    def _match_values(self, start: int, count: int) -> bool:
        if start + count > len(self.tokens):
            return False
        return all(STREAM_VALUE_RE.match(t) for t in self.tokens[start:start + count])

    def _open(self, headers: List[str]) -> None:
        if self.current_headers:
            self._close()
            # Words between the last row and this header name the next table
            self.current_title_tokens = list(self.current_metric_tokens)
        else:
            self.current_title_tokens = self.current_title_tokens + self.current_metric_tokens
        self.current_headers = headers
        self.current_rows = []
        self.current_metric_tokens = []

    def _close(self) -> None:
        self.tables.append(Table(
            title=" ".join(self.current_title_tokens) or DEFAULT_TITLE,
            first_column_header="",
            headers=self.current_headers,
            rows=list(self.current_rows),
        ))


def parse_token_stream_tables(text: str) -> List[Table]:
    """Parse header tuples and value runs out of an unstructured token stream."""
    return TokenStreamParser().parse(text)
