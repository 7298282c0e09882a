"""Input and output location configuration."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_env_var
from .errors import ConfigurationError

BASE_DIR_ENV_VAR: Final[str] = "MICROSITE_SYNC_DIR"

DEFAULT_RECORDS_FILENAME: Final[str] = "old-data.json"
DEFAULT_SOURCE_FILENAME: Final[str] = "ghl-connection.js"
DEFAULT_OUTPUT_STEM: Final[str] = "updated-data"
DEFAULT_CHANGED_STEM: Final[str] = "changed-entries"
DEFAULT_SHEET_NAME: Final[str] = "LocationData"

# Excel worksheet title rules.
MAX_SHEET_NAME_LENGTH: Final[int] = 31
INVALID_SHEET_NAME_CHARS: Final[re.Pattern[str]] = re.compile(r"[\\*?:/\[\]]")


@dataclass(frozen=True, slots=True)
class PathsConfig:
    """Where a sync run reads its inputs and writes its outputs."""

    base_dir: Path
    records_path: Path
    source_path: Path
    output_dir: Path
    output_stem: str = DEFAULT_OUTPUT_STEM
    changed_stem: str = DEFAULT_CHANGED_STEM
    sheet_name: str = DEFAULT_SHEET_NAME

    @property
    def output_json_path(self) -> Path:
        return self.output_dir / f"{self.output_stem}.json"

    @property
    def output_xlsx_path(self) -> Path:
        return self.output_dir / f"{self.output_stem}.xlsx"

    @property
    def changed_json_path(self) -> Path:
        return self.output_dir / f"{self.changed_stem}.json"

    @property
    def changed_xlsx_path(self) -> Path:
        return self.output_dir / f"{self.changed_stem}.xlsx"

    def ensure_output_dir(self) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        return self.output_dir


def _resolve_base_dir(base_dir: Path | None) -> Path:
    if base_dir is None:
        env_dir = optional_env_var(BASE_DIR_ENV_VAR)
        base_dir = Path(env_dir) if env_dir else Path.cwd()
    resolved = base_dir.expanduser().resolve()
    if not resolved.is_dir():
        raise ConfigurationError(f"Base directory does not exist: {resolved}")
    return resolved


def _within(base: Path, path: Path | None, default_name: str) -> Path:
    if path is None:
        return base / default_name
    path = path.expanduser()
    return path if path.is_absolute() else (base / path).resolve()


def validate_sheet_name(name: str) -> str:
    if not name.strip():
        raise ConfigurationError("Sheet name must not be blank")
    if len(name) > MAX_SHEET_NAME_LENGTH:
        raise ConfigurationError(
            f"Sheet name must be at most {MAX_SHEET_NAME_LENGTH} characters: {name!r}"
        )
    if INVALID_SHEET_NAME_CHARS.search(name):
        raise ConfigurationError(f"Sheet name contains a character Excel rejects: {name!r}")
    return name


def get_paths_config(
    *,
    base_dir: Path | None = None,
    records_path: Path | None = None,
    source_path: Path | None = None,
    output_dir: Path | None = None,
    sheet_name: str | None = None,
) -> PathsConfig:
    """Build a :class:`PathsConfig`.

    Explicit arguments win; otherwise the base directory comes from
    ``MICROSITE_SYNC_DIR`` and falls back to the current working directory.
    Relative paths are interpreted against the base directory.
    """

    base = _resolve_base_dir(base_dir)
    if sheet_name is not None:
        validate_sheet_name(sheet_name)
    return PathsConfig(
        base_dir=base,
        records_path=_within(base, records_path, DEFAULT_RECORDS_FILENAME),
        source_path=_within(base, source_path, DEFAULT_SOURCE_FILENAME),
        output_dir=base if output_dir is None else _within(base, output_dir, "."),
        sheet_name=sheet_name or DEFAULT_SHEET_NAME,
    )
