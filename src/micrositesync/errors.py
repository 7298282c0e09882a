"""Errors raised while syncing microsite records."""

from __future__ import annotations


class MicrositeSyncError(RuntimeError):
    """Base class for sync failures."""


class InputError(MicrositeSyncError):
    """An input file could not be used; the run stops before writing output."""


class MissingInputError(InputError):
    """An input file does not exist or cannot be read."""


class MalformedInputError(InputError):
    """An input file exists but its content is not usable."""


class SpreadsheetExportError(MicrositeSyncError):
    """Writing a spreadsheet failed.

    ``hint`` carries a remedy for the operator when one is known, such as the
    install command for a missing writer dependency.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint
