"""Read and write microsite record lists as JSON."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from pydantic import ValidationError

from micrositesync.domain.records import MicrositeRecord
from micrositesync.errors import MalformedInputError, MissingInputError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

log = logging.getLogger(__name__)


def read_text(path: Path) -> str:
    """Return the UTF-8 content of an input file."""

    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise MissingInputError(f"Input file not found: {path}") from exc
    except UnicodeDecodeError as exc:
        raise MalformedInputError(f"{path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise MissingInputError(f"Could not read {path}: {exc}") from exc


def parse_records(content: str, *, origin: str = "<string>") -> list[MicrositeRecord]:
    try:
        document = json.loads(content)
    except json.JSONDecodeError as exc:
        raise MalformedInputError(f"Invalid JSON in {origin}: {exc}") from exc

    if not isinstance(document, list):
        raise MalformedInputError(f"Expected a JSON array in {origin}")

    records: list[MicrositeRecord] = []
    for index, item in enumerate(document):
        if not isinstance(item, Mapping):
            raise MalformedInputError(f"Entry {index} in {origin} is not an object")
        try:
            records.append(MicrositeRecord.from_payload(item))
        except ValidationError as exc:
            raise MalformedInputError(f"Entry {index} in {origin} is invalid: {exc}") from exc
    return records


def read_records(path: Path) -> list[MicrositeRecord]:
    """Load the record list stored at ``path``."""

    records = parse_records(read_text(path), origin=str(path))
    log.info("Successfully parsed JSON data with %d entries", len(records))
    return records


def write_records(path: Path, records: Sequence[MicrositeRecord]) -> Path:
    """Write ``records`` as a pretty-printed JSON array, replacing ``path``."""

    payload = [record.to_payload() for record in records]
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    log.info("Wrote %d records to %s", len(records), path)
    return path
