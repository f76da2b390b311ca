"""Stats Structurizer -- Deterministic table extraction from pasted sports stats.

Paste a league table, a grouped stats table, or a block of small titled
tables. Get structured tables back. No AI, no network.

Quick start::

    from stats_structurizer import parse, tables_to_json

    tables = parse(open("premier_league.txt").read())
    print(tables[0].title, len(tables[0].rows), "rows")
    print(tables_to_json(tables))
"""

__version__ = "1.0.0"

# Data model
from ._types import ColumnGroup, DataRow, Signature, Table

# Parser
from .parser import detect_signature, parse, select_strategy

# Export
from .export import (
    ENTITY_COLUMN_KEYWORDS,
    export_table,
    is_entity_column,
    table_to_dataframe,
    table_to_dict,
    table_to_html,
    table_to_tsv,
    tables_to_json,
)

# Samples
from .samples import SAMPLES, get_sample

__all__ = [
    "__version__",
    # Data model
    "Table",
    "DataRow",
    "ColumnGroup",
    "Signature",
    # Parser
    "parse",
    "detect_signature",
    "select_strategy",
    # Export
    "ENTITY_COLUMN_KEYWORDS",
    "export_table",
    "is_entity_column",
    "table_to_dataframe",
    "table_to_dict",
    "table_to_html",
    "table_to_tsv",
    "tables_to_json",
    # Samples
    "SAMPLES",
    "get_sample",
]
