"""Pydantic models describing microsite records."""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, JsonValue, PrivateAttr

MICROSITE_NAME_KEY: Final[str] = "Microsite Name"
LOCATION_ID_KEY: Final[str] = "GHL Location ID"
LOCATION_TOKEN_KEY: Final[str] = "Location Token"
UPDATED_KEY: Final[str] = "updated"


class UpdateKind(StrEnum):
    """Which authoritative fields were written onto a record."""

    ID = "ID"
    TOKEN = "Token"
    ID_AND_TOKEN = "ID/Token"

    @classmethod
    def from_changes(cls, *, id_changed: bool, token_changed: bool) -> UpdateKind | None:
        if id_changed and token_changed:
            return cls.ID_AND_TOKEN
        if id_changed:
            return cls.ID
        if token_changed:
            return cls.TOKEN
        return None


class MicrositeRecord(BaseModel):
    """One microsite row.

    Only the presence of the three identity fields is checked; their values and
    every other key of the input object are taken as-is and written back out in
    the order they were read.
    """

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    microsite_name: JsonValue = Field(alias=MICROSITE_NAME_KEY)
    location_id: JsonValue = Field(alias=LOCATION_ID_KEY)
    location_token: JsonValue = Field(alias=LOCATION_TOKEN_KEY)
    updated: JsonValue = Field(default=None, alias=UPDATED_KEY)

    _key_order: tuple[str, ...] = PrivateAttr(default=())

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> MicrositeRecord:
        record = cls.model_validate(dict(payload))
        record._key_order = tuple(payload)
        return record

    def _wire_values(self) -> dict[str, Any]:
        updated = self.updated
        if isinstance(updated, UpdateKind):
            updated = updated.value
        return {
            MICROSITE_NAME_KEY: self.microsite_name,
            LOCATION_ID_KEY: self.location_id,
            LOCATION_TOKEN_KEY: self.location_token,
            UPDATED_KEY: updated,
        }

    def to_payload(self) -> dict[str, Any]:
        """Return the record as a JSON-ready mapping keyed by wire names.

        Keys keep their input order. A marker added during reconciliation is
        appended last; an unset marker the input never had is omitted.
        """

        values = self._wire_values()
        values.update(self.model_extra or {})

        payload: dict[str, Any] = {}
        for key in self._key_order:
            if key in values:
                payload[key] = values[key]
        for key, value in values.items():
            if key not in payload and key != UPDATED_KEY:
                payload[key] = value
        if UPDATED_KEY not in payload and values[UPDATED_KEY] is not None:
            payload[UPDATED_KEY] = values[UPDATED_KEY]
        return payload

    def with_values(
        self,
        *,
        location_id: str,
        location_token: str,
        updated: UpdateKind,
    ) -> MicrositeRecord:
        return self.model_copy(
            update={
                "location_id": location_id,
                "location_token": location_token,
                "updated": updated,
            }
        )
