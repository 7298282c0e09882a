"""File-format adapters for microsite records."""

from __future__ import annotations

from .json_store import parse_records, read_records, read_text, write_records
from .spreadsheet import write_workbook

__all__ = [
    "parse_records",
    "read_records",
    "read_text",
    "write_records",
    "write_workbook",
]
