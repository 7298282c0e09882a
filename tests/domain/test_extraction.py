from __future__ import annotations

import json
import logging

import pytest

from micrositesync.domain.extraction import (
    AuthoritativeEntry,
    extract_authoritative_entries,
    parse_authoritative_source,
)


def test_extracts_every_object_literal(source_text: str) -> None:
    mapping = extract_authoritative_entries(source_text)

    assert list(mapping) == ["Acme", "Globex", "Initech", "Umbrella"]
    assert mapping["Acme"] == AuthoritativeEntry(location_id="new1", location_token="tokA")
    assert mapping["Globex"] == AuthoritativeEntry(location_id="glx-2", location_token="tokG-new")


def test_empty_text_yields_empty_mapping() -> None:
    assert extract_authoritative_entries("") == {}
    assert extract_authoritative_entries("const nothing = [];") == {}


def test_later_duplicate_overwrites_earlier(caplog: pytest.LogCaptureFixture) -> None:
    text = """
    { 'Microsite Name': 'Acme', 'GHL Location ID': 'first', 'Location Token': 'tok1' },
    { 'Microsite Name': 'Acme', 'GHL Location ID': 'second', 'Location Token': 'tok2' },
    """

    with caplog.at_level(logging.WARNING):
        mapping = extract_authoritative_entries(text)

    assert mapping == {"Acme": AuthoritativeEntry(location_id="second", location_token="tok2")}
    assert "Duplicate authoritative entry for Acme" in caplog.text


def test_match_does_not_cross_record_boundary() -> None:
    text = """
    { 'Microsite Name': 'Orphan', 'Notes': 'no id here' },
    { 'GHL Location ID': 'loc-2', 'Location Token': 'tok-2' },
    """

    assert extract_authoritative_entries(text) == {}


def test_fields_must_appear_in_fixed_order() -> None:
    text = "{ 'Microsite Name': 'Acme', 'Location Token': 'tok', 'GHL Location ID': 'id' }"

    assert extract_authoritative_entries(text) == {}


def test_double_quoted_literals_are_ignored() -> None:
    text = '{ "Microsite Name": "Acme", "GHL Location ID": "id", "Location Token": "tok" }'

    assert extract_authoritative_entries(text) == {}


def test_values_are_taken_verbatim() -> None:
    text = "{ 'Microsite Name': 'Café Ünïcode', 'GHL Location ID': ' spaced ', 'Location Token': 'AbC' }"

    mapping = extract_authoritative_entries(text)

    assert mapping["Café Ünïcode"] == AuthoritativeEntry(
        location_id=" spaced ", location_token="AbC"
    )


def test_structured_array_is_read_directly() -> None:
    text = json.dumps(
        [
            {"Microsite Name": "Acme", "GHL Location ID": "id-1", "Location Token": "tok-1"},
            {"Microsite Name": "Broken", "GHL Location ID": "id-2"},
            "not an object",
            {"Microsite Name": "Acme", "GHL Location ID": "id-3", "Location Token": "tok-3"},
        ]
    )

    mapping = parse_authoritative_source(text)

    assert mapping == {"Acme": AuthoritativeEntry(location_id="id-3", location_token="tok-3")}


def test_structured_object_of_objects_is_read_directly() -> None:
    text = json.dumps(
        {
            "acme": {
                "Microsite Name": "Acme",
                "GHL Location ID": "id-1",
                "Location Token": "tok-1",
            }
        }
    )

    assert parse_authoritative_source(text) == {
        "Acme": AuthoritativeEntry(location_id="id-1", location_token="tok-1")
    }


def test_non_json_source_falls_back_to_pattern(source_text: str) -> None:
    assert parse_authoritative_source(source_text) == extract_authoritative_entries(source_text)


def test_json_scalar_falls_back_to_pattern() -> None:
    assert parse_authoritative_source('"just a string"') == {}
