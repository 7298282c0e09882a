"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from micrositesync.adapters.json_store import read_records, read_text, write_records
from micrositesync.adapters.spreadsheet import write_workbook
from micrositesync.domain.extraction import parse_authoritative_source
from micrositesync.domain.reconciliation import reconcile_records
from micrositesync.errors import SpreadsheetExportError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from micrositesync.config.paths import PathsConfig
    from micrositesync.domain.records import MicrositeRecord


log = getLogger(__name__)


@dataclass(slots=True)
class UpdateSummary:
    """Outcome of one sync run."""

    records_read: int
    authoritative_entries: int
    updated: int
    written: list[Path] = field(default_factory=list)
    spreadsheet_failures: list[Path] = field(default_factory=list)

    @property
    def spreadsheets_ok(self) -> bool:
        return not self.spreadsheet_failures


def _export_spreadsheet(
    path: Path,
    records: Sequence[MicrositeRecord],
    sheet_name: str,
    summary: UpdateSummary,
) -> None:
    try:
        summary.written.append(write_workbook(path, records, sheet_name=sheet_name))
    except SpreadsheetExportError as exc:
        log.error("Error creating Excel file: %s", exc)  # noqa: TRY400
        if exc.hint:
            log.error(exc.hint)  # noqa: TRY400
        summary.spreadsheet_failures.append(path)


def update_microsite_records(config: PathsConfig) -> UpdateSummary:
    """Reconcile the stored records against the authoritative source.

    Input errors propagate before anything is written. Spreadsheet failures are
    logged and recorded on the summary; JSON output is unaffected by them.
    """

    log.info("Reading files from %s", config.base_dir)
    source_text = read_text(config.source_path)
    records = read_records(config.records_path)

    mapping = parse_authoritative_source(source_text)
    log.info("Extracted data from source file (%d entries)", len(mapping))

    result = reconcile_records(records, mapping)
    summary = UpdateSummary(
        records_read=len(records),
        authoritative_entries=len(mapping),
        updated=result.updated_count,
    )

    config.ensure_output_dir()
    summary.written.append(write_records(config.output_json_path, result.records))
    _export_spreadsheet(config.output_xlsx_path, result.records, config.sheet_name, summary)

    if result.changed:
        summary.written.append(write_records(config.changed_json_path, result.changed))
        _export_spreadsheet(
            config.changed_xlsx_path, result.changed, config.sheet_name, summary
        )
    else:
        log.info("No entries were changed, so changed-entries files were not created.")

    log.info(
        "Finished microsite sync: read=%s, authoritative=%s, updated=%s",
        summary.records_read,
        summary.authoritative_entries,
        summary.updated,
    )
    return summary
