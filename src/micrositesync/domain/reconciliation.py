"""Apply authoritative ids and tokens to existing microsite records."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .records import UpdateKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .extraction import AuthoritativeEntry, AuthoritativeMapping
    from .records import MicrositeRecord

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReconciliationResult:
    """Corrected records plus the subsequence that changed."""

    records: tuple[MicrositeRecord, ...]
    changed: tuple[MicrositeRecord, ...]

    @property
    def updated_count(self) -> int:
        return len(self.changed)


def reconcile_record(
    record: MicrositeRecord,
    entry: AuthoritativeEntry | None,
) -> MicrositeRecord | None:
    """Return a corrected copy of ``record``, or ``None`` when nothing differs."""

    if entry is None:
        return None

    id_changed = record.location_id != entry.location_id
    token_changed = record.location_token != entry.location_token
    kind = UpdateKind.from_changes(id_changed=id_changed, token_changed=token_changed)
    if kind is None:
        return None

    if id_changed:
        log.info(
            "Updating ID for %s: %s -> %s",
            record.microsite_name,
            record.location_id,
            entry.location_id,
        )
    if token_changed:
        log.info(
            "Updating Token for %s: %s -> %s",
            record.microsite_name,
            record.location_token,
            entry.location_token,
        )
    return record.with_values(
        location_id=entry.location_id,
        location_token=entry.location_token,
        updated=kind,
    )


def _lookup(mapping: AuthoritativeMapping, record: MicrositeRecord) -> AuthoritativeEntry | None:
    # Authoritative names are always strings; other JSON values never match.
    name = record.microsite_name
    return mapping.get(name) if isinstance(name, str) else None


def reconcile_records(
    records: Iterable[MicrositeRecord],
    mapping: AuthoritativeMapping,
) -> ReconciliationResult:
    """Correct every record against ``mapping``, preserving input order.

    Records without an authoritative entry, or whose id and token already match,
    are passed through untouched. Input records are never mutated.
    """

    log.info("Found %d entries in authoritative source", len(mapping))

    corrected: list[MicrositeRecord] = []
    changed: list[MicrositeRecord] = []
    for record in records:
        updated = reconcile_record(record, _lookup(mapping, record))
        if updated is None:
            corrected.append(record)
            continue
        corrected.append(updated)
        changed.append(updated)

    result = ReconciliationResult(records=tuple(corrected), changed=tuple(changed))
    log.info("Updated %d entries in total", result.updated_count)
    return result
