"""Extraction and reconciliation of microsite records."""

from __future__ import annotations

from .extraction import (
    AuthoritativeEntry,
    AuthoritativeMapping,
    extract_authoritative_entries,
    parse_authoritative_source,
)
from .reconciliation import ReconciliationResult, reconcile_record, reconcile_records
from .records import MicrositeRecord, UpdateKind

__all__ = [
    "AuthoritativeEntry",
    "AuthoritativeMapping",
    "MicrositeRecord",
    "ReconciliationResult",
    "UpdateKind",
    "extract_authoritative_entries",
    "parse_authoritative_source",
    "reconcile_record",
    "reconcile_records",
]
