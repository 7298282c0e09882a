from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from micrositesync.config import get_paths_config

if TYPE_CHECKING:
    from pathlib import Path

    from micrositesync.config import PathsConfig


SOURCE_TEXT = """\
const locations = [
  {
    'Microsite Name': 'Acme',
    'Business': 'Acme Corp',
    'GHL Location ID': 'new1',
    'Location Token': 'tokA',
  },
  {
    'Microsite Name': 'Globex',
    'GHL Location ID': 'glx-2',
    'Location Token': 'tokG-new',
  },
  {
    'Microsite Name': 'Initech',
    'GHL Location ID': 'ini-9',
    'Location Token': 'tokI-9',
  },
  {
    'Microsite Name': 'Umbrella',
    'GHL Location ID': 'umb-1',
    'Location Token': 'tokU',
  },
];

module.exports = locations;
"""


@pytest.fixture
def source_text() -> str:
    return SOURCE_TEXT


@pytest.fixture
def record_payloads() -> list[dict[str, Any]]:
    return [
        {
            "Microsite Name": "Acme",
            "GHL Location ID": "old1",
            "Location Token": "tokA",
            "City": "Springfield",
        },
        {
            "Microsite Name": "Globex",
            "GHL Location ID": "glx-2",
            "Location Token": "tokG-old",
        },
        {
            "Microsite Name": "Initech",
            "GHL Location ID": "ini-1",
            "Location Token": "tokI-1",
        },
        {
            "Microsite Name": "Umbrella",
            "GHL Location ID": "umb-1",
            "Location Token": "tokU",
        },
        {
            "Microsite Name": "Hooli",
            "GHL Location ID": "hoo-1",
            "Location Token": "tokH",
        },
    ]


@pytest.fixture
def workspace(tmp_path: Path, source_text: str, record_payloads: list[dict[str, Any]]) -> Path:
    (tmp_path / "ghl-connection.js").write_text(source_text, encoding="utf-8")
    (tmp_path / "old-data.json").write_text(json.dumps(record_payloads), encoding="utf-8")
    return tmp_path


@pytest.fixture
def paths_config(workspace: Path) -> PathsConfig:
    return get_paths_config(base_dir=workspace)
