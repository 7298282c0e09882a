#!/usr/bin/env python3

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from micrositesync.app import update_microsite_records
from micrositesync.config import ConfigurationError, configure_logging, get_paths_config
from micrositesync.errors import InputError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Sync microsite location ids and tokens from the authoritative source",
    )
    parser.add_argument(
        "--base-dir",
        type=Path,
        help="Directory holding the input and output files "
        "(defaults to $MICROSITE_SYNC_DIR or the current directory)",
    )
    parser.add_argument(
        "--records",
        type=Path,
        help="Existing records JSON file (default: old-data.json in the base directory)",
    )
    parser.add_argument(
        "--source",
        type=Path,
        help="Authoritative source file (default: ghl-connection.js in the base directory)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Directory for the generated files (defaults to the base directory)",
    )
    parser.add_argument(
        "--sheet-name",
        type=str,
        help="Worksheet name used in the spreadsheet exports",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    if parsed_args.verbose:
        configure_logging(level=logging.DEBUG, force=True)

    try:
        config = get_paths_config(
            base_dir=parsed_args.base_dir,
            records_path=parsed_args.records,
            source_path=parsed_args.source,
            output_dir=parsed_args.output_dir,
            sheet_name=parsed_args.sheet_name,
        )
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)

    try:
        update_microsite_records(config)
    except InputError:
        log.exception("Error reading input")
        sys.exit(1)
    except Exception:
        log.exception("Fatal error during sync")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Stop on Ctrl+C; files already written are left in place."""
    log.info("Sync interrupted; outputs written so far are kept")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
