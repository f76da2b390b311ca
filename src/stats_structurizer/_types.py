"""Shared result types for the stats-structurizer library.

All parsing functions return Pydantic models. Field names are snake_case in
Python and camelCase in the JSON interchange (``model_dump(by_alias=True)``).
"""
from __future__ import annotations

import uuid
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _new_id(prefix: str = "table") -> str:
    """Generate a short unique ID with the given prefix."""
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


class _Model(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# -- Table types --

class DataRow(_Model):
    """One entity's record: the row key plus raw text values."""
    metric: str
    values: List[str] = Field(default_factory=list)


class ColumnGroup(_Model):
    """A labeled span over the header row."""
    title: str
    col_span: int
    offset: int = 0  # ungrouped columns skipped since the previous group


class Table(_Model):
    """One extracted table."""
    id: str = Field(default_factory=_new_id)
    title: str = "Stats Table"
    first_column_header: Optional[str] = None
    headers: List[str] = Field(default_factory=list)
    rows: List[DataRow] = Field(default_factory=list)
    column_groups: Optional[List[ColumnGroup]] = None


# -- Detection types --

class Signature(_Model):
    """Marker flags found in a block of pasted text."""
    has_entity_column: bool = False
    has_rank_marker: bool = False
    has_group_headers: bool = False
    has_flattened_headers: bool = False
    has_crest_marker: bool = False
