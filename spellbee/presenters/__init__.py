from .table import render_table, table_lines
from .typist import type_words
from .io import write_csv, write_manifest, timestamp_id

__all__ = ["render_table", "table_lines", "type_words", "write_csv", "write_manifest", "timestamp_id"]
