"""Console logging for the microsite sync command."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Send every module's records to stderr at ``level``.

    Per-field correction messages are emitted at INFO, so the default level
    shows the full audit trail of a run. ``--verbose`` calls this again with
    ``level=logging.DEBUG`` and ``force=True`` to add extraction details.
    """

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S", force=force)
