"""Pull authoritative location ids and tokens out of source text.

The authoritative source is usually a JavaScript module holding object
literals such as::

    {
      'Microsite Name': 'Acme',
      'Business': 'Acme Corp',
      'GHL Location ID': 'loc-123',
      'Location Token': 'tok-abc',
    }

Each literal contributes one entry. When the source is plain JSON the fields are
read structurally instead.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final, TypeAlias

from .records import LOCATION_ID_KEY, LOCATION_TOKEN_KEY, MICROSITE_NAME_KEY

log = logging.getLogger(__name__)

# ``[^}]+`` keeps a match inside one object literal.
ENTRY_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"'{MICROSITE_NAME_KEY}':\s+'(?P<name>[^']+)'"
    rf"[^}}]+'{LOCATION_ID_KEY}':\s+'(?P<location_id>[^']+)'"
    rf"[^}}]+'{LOCATION_TOKEN_KEY}':\s+'(?P<location_token>[^']+)'"
)


@dataclass(frozen=True, slots=True)
class AuthoritativeEntry:
    """Current id/token for one microsite."""

    location_id: str
    location_token: str


AuthoritativeMapping: TypeAlias = dict[str, AuthoritativeEntry]


def _store(mapping: AuthoritativeMapping, name: str, entry: AuthoritativeEntry) -> None:
    previous = mapping.get(name)
    if previous is not None and previous != entry:
        log.warning(
            "Duplicate authoritative entry for %s; keeping later values (%s, %s)",
            name,
            entry.location_id,
            entry.location_token,
        )
    mapping[name] = entry


def extract_authoritative_entries(text: str) -> AuthoritativeMapping:
    """Scan ``text`` for microsite object literals; later duplicates win."""

    mapping: AuthoritativeMapping = {}
    for match in ENTRY_PATTERN.finditer(text):
        entry = AuthoritativeEntry(
            location_id=match.group("location_id"),
            location_token=match.group("location_token"),
        )
        _store(mapping, match.group("name"), entry)
    log.debug("Extracted %d authoritative entries from text", len(mapping))
    return mapping


def _structured_items(document: object) -> list[object] | None:
    if isinstance(document, list):
        return document
    if isinstance(document, Mapping):
        return list(document.values())
    return None


def _entries_from_structured(items: list[object]) -> AuthoritativeMapping:
    mapping: AuthoritativeMapping = {}
    for index, item in enumerate(items):
        if not isinstance(item, Mapping):
            log.debug("Skipping non-object item %d in structured source", index)
            continue
        fields: Mapping[str, Any] = item
        values = (
            fields.get(MICROSITE_NAME_KEY),
            fields.get(LOCATION_ID_KEY),
            fields.get(LOCATION_TOKEN_KEY),
        )
        if not all(isinstance(value, str) for value in values):
            log.debug("Skipping item %d in structured source: incomplete fields", index)
            continue
        name, location_id, location_token = values
        _store(
            mapping,
            name,
            AuthoritativeEntry(location_id=location_id, location_token=location_token),
        )
    return mapping


def parse_authoritative_source(text: str) -> AuthoritativeMapping:
    """Build the authoritative mapping from ``text``.

    JSON documents (an array of objects, or an object of objects) are read
    field by field. Anything else, including JavaScript source, goes through
    :func:`extract_authoritative_entries`.
    """

    try:
        document = json.loads(text)
    except ValueError:
        return extract_authoritative_entries(text)

    items = _structured_items(document)
    if items is None:
        return extract_authoritative_entries(text)
    mapping = _entries_from_structured(items)
    log.debug("Read %d authoritative entries from structured source", len(mapping))
    return mapping
