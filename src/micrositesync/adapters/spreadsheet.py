"""Export microsite records to an ``.xlsx`` workbook."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from micrositesync.config.paths import DEFAULT_SHEET_NAME
from micrositesync.errors import SpreadsheetExportError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from openpyxl import Workbook

    from micrositesync.domain.records import MicrositeRecord

log = logging.getLogger(__name__)

INSTALL_HINT = "Install the spreadsheet writer with: pip install openpyxl"


def _new_workbook() -> Workbook:
    try:
        from openpyxl import Workbook  # noqa: PLC0415
    except ImportError as exc:
        raise SpreadsheetExportError(
            f"Spreadsheet writer unavailable: {exc}",
            hint=INSTALL_HINT,
        ) from exc
    return Workbook()


def collect_columns(payloads: Sequence[dict[str, Any]]) -> list[str]:
    """Union of all keys, in the order they are first seen."""

    columns: dict[str, None] = {}
    for payload in payloads:
        for key in payload:
            columns.setdefault(key, None)
    return list(columns)


def _cell(value: Any) -> Any:
    if value is None or isinstance(value, str | int | float | bool):
        return value
    return json.dumps(value, ensure_ascii=False)


def write_workbook(
    path: Path,
    records: Sequence[MicrositeRecord],
    *,
    sheet_name: str = DEFAULT_SHEET_NAME,
) -> Path:
    """Write one worksheet with a header row and one row per record."""

    payloads = [record.to_payload() for record in records]
    columns = collect_columns(payloads)

    workbook = _new_workbook()
    try:
        sheet = workbook.active
        sheet.title = sheet_name
        sheet.append(columns)
        for payload in payloads:
            sheet.append([_cell(payload.get(column)) for column in columns])
        workbook.save(path)
    except Exception as exc:  # noqa: BLE001
        raise SpreadsheetExportError(f"Failed to write spreadsheet {path}: {exc}") from exc

    log.info("Successfully created Excel file at %s", path)
    return path
